#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志模块测试
Logging Module Tests
"""

import logging

import pytest

from config.settings import Settings
from tape import DriveOperationError, new_drive_cmd
from utils.logger import get_logger, setup_logging


@pytest.fixture
def log_settings(tmp_path):
    return Settings(_env_file=None, LOG_FILE=str(tmp_path / "logs" / "mt_drive.log"), LOG_LEVEL="DEBUG")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestLogging:
    """日志系统测试"""

    def test_setup_creates_log_files(self, log_settings, tmp_path, restore_root_logger):
        """测试初始化后创建日志文件"""
        root = setup_logging(log_settings, console=False)

        assert root.level == logging.DEBUG
        assert (tmp_path / "logs" / "mt_drive.log").exists()
        assert (tmp_path / "logs" / "error.log").exists()

    def test_failed_operation_logged_as_warning(self, log_settings, tmp_path, make_stub, restore_root_logger):
        """测试失败的 mt 操作写入 error.log"""
        setup_logging(log_settings, console=False)
        stub = make_stub("""
            sys.stderr.write("no medium\\n")
            sys.exit(1)
        """)
        with pytest.raises(DriveOperationError):
            new_drive_cmd("/dev/nst0", stub).rewind()

        for handler in logging.getLogger().handlers:
            handler.flush()
        error_log = (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")
        assert "rewind" in error_log
        assert "no medium" in error_log

    def test_setup_is_idempotent(self, log_settings, restore_root_logger):
        """测试重复初始化不会叠加处理器"""
        setup_logging(log_settings, console=False)
        setup_logging(log_settings, console=False)
        assert len(logging.getLogger().handlers) == 2

    def test_get_logger(self):
        """测试获取日志器"""
        assert get_logger("tape.mt_drive") is logging.getLogger("tape.mt_drive")
