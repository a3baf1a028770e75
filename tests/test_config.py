#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块测试
Configuration Module Tests
"""

import pytest
from pydantic import ValidationError

from config import settings as settings_module
from config.settings import Settings, get_settings, reload_settings


class TestSettings:
    """配置测试类"""

    def test_default_settings(self, monkeypatch):
        """测试默认配置"""
        monkeypatch.delenv('LOG_LEVEL', raising=False)
        settings = Settings(_env_file=None)

        assert settings.TAPE_DEVICE_PATH == "/dev/nst0"
        assert settings.MT_COMMAND == "mt"
        assert settings.MT_DEVICE_FLAG == "-f"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_BACKUP_COUNT == 30

    def test_environment_override(self, monkeypatch):
        """测试环境变量覆盖"""
        monkeypatch.setenv('MT_COMMAND', '/usr/local/bin/mt-st')
        monkeypatch.setenv('TAPE_DEVICE_PATH', '/dev/nst1')
        settings = Settings(_env_file=None)

        assert settings.MT_COMMAND == '/usr/local/bin/mt-st'
        assert settings.TAPE_DEVICE_PATH == '/dev/nst1'

    def test_log_level_normalized(self, monkeypatch):
        """测试日志级别统一为大写"""
        monkeypatch.setenv('LOG_LEVEL', 'warning')
        assert Settings(_env_file=None).LOG_LEVEL == "WARNING"

    def test_invalid_log_level(self, monkeypatch):
        """测试非法日志级别"""
        monkeypatch.setenv('LOG_LEVEL', 'CHATTY')
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_command_rejected(self):
        """测试 mt 命令不能为空"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MT_COMMAND="  ")

    def test_get_settings_singleton(self):
        """测试配置单例"""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_env_file_loading(self, tmp_path):
        """测试环境文件加载"""
        # 创建临时环境文件
        env_file = tmp_path / ".env"
        env_file.write_text("""
TAPE_DEVICE_PATH=/dev/nst2
MT_COMMAND=/opt/mt/bin/mt
""")

        settings = Settings(_env_file=str(env_file))
        assert settings.TAPE_DEVICE_PATH == "/dev/nst2"
        assert settings.MT_COMMAND == "/opt/mt/bin/mt"

    def test_reload_settings(self, tmp_path, monkeypatch):
        """测试重新加载配置"""
        previous = settings_module.settings
        monkeypatch.setattr(settings_module, "settings", previous)

        env_file = tmp_path / ".env"
        env_file.write_text("TAPE_DEVICE_PATH=/dev/nst5\n")

        reloaded = reload_settings(str(env_file))
        assert reloaded is get_settings()
        assert reloaded is not previous
        assert reloaded.TAPE_DEVICE_PATH == "/dev/nst5"
