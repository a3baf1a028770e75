#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具类模块
Utility Module
"""

from .logger import setup_logging, get_logger

__all__ = [
    'setup_logging',
    'get_logger'
]
