#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志管理模块
Logging Management Module
"""

import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Optional

from config.settings import Settings, get_settings


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(settings: Optional[Settings] = None, console: bool = True) -> logging.Logger:
    """设置日志系统

    Args:
        settings: 配置实例，默认使用全局配置
        console: 是否同时输出到控制台

    Returns:
        根日志器
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper())

    # 创建日志目录
    log_dir = Path(settings.LOG_FILE).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    # 配置根日志器
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 清除现有处理器（关闭文件句柄，避免重复初始化时泄漏）
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 详细格式器（用于错误日志）
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(pathname)s - %(message)s',
        datefmt=DATE_FORMAT
    )

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # 文件处理器（按大小轮转）
    file_handler = logging.handlers.RotatingFileHandler(
        filename=settings.LOG_FILE,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # 错误日志文件处理器：所有警告及以上级别的日志（如 mt 命令失败）都写入 error.log
    error_log_file = log_dir / 'error.log'
    error_handler = logging.handlers.RotatingFileHandler(
        filename=error_log_file,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.WARNING)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info(f"{settings.APP_NAME} - 日志系统初始化完成")
    logger.info(f"日志级别: {settings.LOG_LEVEL}")
    logger.info(f"日志文件: {settings.LOG_FILE}")
    logger.info(f"错误日志文件: {error_log_file} (警告及以上级别)")
    logger.info(f"启动时间: {datetime.now().strftime(DATE_FORMAT)}")
    logger.info("=" * 60)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """获取日志器"""
    return logging.getLogger(name)
