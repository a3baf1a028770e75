#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mt 命令错误类型
mt Command Error Types

错误按执行阶段划分，消息逐层拼接（外层: 操作名; 中层: stderr 文本; 内层: 阶段说明），
例如: ``rewind: no medium: mt wait command: exit status 1``
"""

from typing import Optional


class TapeCommandError(Exception):
    """mt 命令执行失败的基类"""

    stage = "mt command"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.stage
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class CommandSetupError(TapeCommandError):
    """启动进程前准备输出管道失败"""

    stage = "mt command setup pipes"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.stage}: {reason}")


class CommandStartError(TapeCommandError):
    """mt 命令无法启动（可执行文件不存在、权限不足等）"""

    stage = "mt start command"

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"{self.stage}: {reason}")


class StdoutReadError(TapeCommandError):
    """读取标准输出失败"""

    stage = "mt read stdout output"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.stage}: {reason}")


class StderrReadError(TapeCommandError):
    """读取标准错误失败"""

    stage = "mt read stderr output"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.stage}: {reason}")


class CommandExitError(TapeCommandError):
    """mt 命令以非零状态退出或被信号终止，携带去掉末尾换行的 stderr 文本"""

    stage = "mt wait command"

    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr[:-1] if stderr.endswith("\n") else stderr
        if returncode < 0:
            status = f"signal: terminated by signal {-returncode}"
        else:
            status = f"exit status {returncode}"
        message = f"{self.stage}: {status}"
        if self.stderr:
            message = f"{self.stderr}: {message}"
        super().__init__(message)


class DriveOperationError(TapeCommandError):
    """磁带操作失败：以操作名（mt 动词）包装底层错误"""

    def __init__(self, operation: str, cause: TapeCommandError):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")

    @property
    def stderr(self) -> str:
        """底层 mt 命令输出的错误文本（仅非零退出时有值）"""
        return getattr(self.cause, "stderr", "")

    @property
    def returncode(self) -> Optional[int]:
        return getattr(self.cause, "returncode", None)
