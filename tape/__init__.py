#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
磁带驱动模块
Tape Drive Module
"""

from .errors import (
    TapeCommandError,
    CommandSetupError,
    CommandStartError,
    StdoutReadError,
    StderrReadError,
    CommandExitError,
    DriveOperationError
)
from .mt_command import MTCommandExecutor, run_mt_command
from .mt_drive import Drive, new_drive, new_drive_cmd
from .mt_options import MTVerb, CompressionState, STOption

__all__ = [
    'Drive',
    'new_drive',
    'new_drive_cmd',
    'MTCommandExecutor',
    'run_mt_command',
    'MTVerb',
    'CompressionState',
    'STOption',
    'TapeCommandError',
    'CommandSetupError',
    'CommandStartError',
    'StdoutReadError',
    'StderrReadError',
    'CommandExitError',
    'DriveOperationError'
]
