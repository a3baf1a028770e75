#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
系统配置管理模块
System Configuration Management Module
"""

import os
from typing import Optional
from pydantic import Field, field_validator

try:
    from pydantic_settings import BaseSettings
except ImportError:
    # 如果 pydantic-settings 没有安装，提供错误信息
    raise ImportError(
        "需要安装 pydantic-settings 包。请运行: pip install pydantic-settings\n"
        "Pydantic v2 将 BaseSettings 移动到了单独的包中。"
    )


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """系统配置类"""

    # 应用配置
    APP_NAME: str = "mt 磁带驱动控制库"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # 磁带设备配置
    TAPE_DEVICE_PATH: str = "/dev/nst0"  # 默认设备（非回卷设备，避免每次操作后自动倒带）
    MT_COMMAND: str = Field(default="mt", description="mt 可执行文件名或完整路径（兼容 mt-st-1.1）")
    MT_DEVICE_FLAG: str = "-f"  # 设备选择参数，必须紧接在设备路径之前

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/mt_drive.log"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 30

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """验证LOG_LEVEL，统一转换为大写"""
        if v is None or v == '':
            return "INFO"
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"不支持的日志级别: {v}（可选: {', '.join(_LOG_LEVELS)}）")
        return level

    @field_validator('MT_COMMAND', 'MT_DEVICE_FLAG')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """mt 命令与设备参数不能为空"""
        if not v or not v.strip():
            raise ValueError("不能为空")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "allow"  # 允许额外的字段


# 全局配置实例
settings = Settings()


def get_settings() -> Settings:
    """获取配置实例"""
    return settings


def reload_settings(env_file: Optional[str] = None) -> Settings:
    """重新加载配置

    Args:
        env_file: 可选的 .env 文件路径，默认使用当前目录下的 .env
    """
    global settings
    if env_file is not None and os.path.exists(env_file):
        settings = Settings(_env_file=env_file)
    else:
        settings = Settings()
    return settings
