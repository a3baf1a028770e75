#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mt 命令执行器
mt Command Executor

每次调用启动一个 mt 子进程，完整读取 stdout 与 stderr，等待退出并映射错误。
不重试、不设超时：命令阻塞多久，调用方就阻塞多久。
"""

import logging
import os
import subprocess
import threading
from typing import List, Optional, Union

from config.settings import get_settings
from .errors import (
    CommandExitError,
    CommandSetupError,
    CommandStartError,
    StderrReadError,
    StdoutReadError,
)
from .mt_options import MTVerb

logger = logging.getLogger(__name__)


def _read_all(fd: int) -> bytes:
    """读取管道直到 EOF"""
    chunks = []
    while True:
        chunk = os.read(fd, 65536)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


class _StreamDrainer(threading.Thread):
    """在后台线程中读取整个管道，避免子进程因管道写满而阻塞"""

    def __init__(self, fd: int):
        super().__init__(name="mt-stderr-drainer", daemon=True)
        self.fd = fd
        self.data = b""
        self.error: Optional[OSError] = None

    def run(self):
        try:
            self.data = _read_all(self.fd)
        except OSError as e:
            self.error = e


def _close_fds(*fds: int) -> None:
    for fd in fds:
        os.close(fd)


class MTCommandExecutor:
    """mt 命令执行器

    参数顺序固定为: ``[command, device_flag, device, verb, *args]``。
    设备路径原样传递，合法性由 mt 命令自行判断。
    """

    def __init__(self, device_flag: Optional[str] = None):
        self.device_flag = device_flag if device_flag is not None else get_settings().MT_DEVICE_FLAG

    def build_args(self, command: str, device: str, verb: Union[MTVerb, str], *args: str) -> List[str]:
        """构造完整的命令行参数列表"""
        return [command, self.device_flag, device, str(verb), *args]

    def invoke(self, command: str, device: str, verb: Union[MTVerb, str], *args: str) -> bytes:
        """执行一次 mt 命令

        Args:
            command: mt 可执行文件名或路径
            device: 磁带设备路径
            verb: mt 动词
            *args: 动词参数（已渲染为字符串）

        Returns:
            命令成功（退出码 0）时原样返回标准输出字节

        Raises:
            CommandSetupError: 创建输出管道失败
            CommandStartError: 进程无法启动
            StdoutReadError: 读取标准输出失败
            StderrReadError: 读取标准错误失败
            CommandExitError: 非零退出或被信号终止
        """
        cmd = self.build_args(command, device, verb, *args)
        logger.debug("[MT] 执行: %s", " ".join(cmd))

        # 1. 启动进程之前准备 stdout / stderr 管道
        try:
            out_r, out_w = os.pipe()
        except OSError as e:
            raise CommandSetupError(f"stdout pipe: {e}") from e
        try:
            err_r, err_w = os.pipe()
        except OSError as e:
            _close_fds(out_r, out_w)
            raise CommandSetupError(f"stderr pipe: {e}") from e

        # 2. 启动进程
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,  # 防止子进程等待输入导致阻塞
                stdout=out_w,
                stderr=err_w,
            )
        except (OSError, ValueError) as e:
            _close_fds(out_r, err_r)
            raise CommandStartError(command, str(e)) from e
        finally:
            # 父进程不再持有写端，子进程退出后读端才能读到 EOF
            _close_fds(out_w, err_w)

        # 3. 读完两个流：stderr 在后台线程读取，stdout 在当前线程读取
        stdout_data = b""
        stdout_error: Optional[OSError] = None
        drainer = _StreamDrainer(err_r)
        try:
            drainer.start()
            try:
                stdout_data = _read_all(out_r)
            except OSError as e:
                stdout_error = e
            finally:
                # 读失败时立即关闭，子进程再写 stdout 会收到 EPIPE 而不是阻塞
                os.close(out_r)
                out_r = None
            drainer.join()
        finally:
            _close_fds(*(fd for fd in (out_r, err_r) if fd is not None))
            # 4. 等待进程退出（任何路径都回收子进程）
            returncode = proc.wait()
        logger.debug("[MT] 退出码: %s", returncode)

        if stdout_error is not None:
            raise StdoutReadError(str(stdout_error)) from stdout_error
        if drainer.error is not None:
            raise StderrReadError(str(drainer.error)) from drainer.error

        # 5. 非零退出：附带 stderr 文本，丢弃 stdout
        if returncode != 0:
            err_text = drainer.data.decode("utf-8", errors="replace")
            if err_text.strip():
                logger.debug("[MT] 标准错误: %s", err_text.rstrip("\n"))
            raise CommandExitError(returncode, err_text)

        # 6. 成功：原样返回 stdout
        if stdout_data:
            logger.debug("[MT] 标准输出: %d 字节", len(stdout_data))
        return stdout_data


def run_mt_command(command: str, device: str, verb: Union[MTVerb, str], *args: str) -> bytes:
    """使用默认执行器执行一次 mt 命令"""
    return MTCommandExecutor().invoke(command, device, verb, *args)
