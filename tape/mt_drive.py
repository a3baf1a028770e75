#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
磁带驱动器会话
Tape Drive Session

封装 mt 命令（兼容 mt-st-1.1）。每个 Drive 绑定一个设备路径，
同一实例上的操作通过互斥锁串行执行；不同实例之间互不同步。
磁带位置、分区等状态只存在于设备中，需要时通过 status()/tell() 查询。
"""

import logging
import threading
from typing import Optional, Union

from config.settings import Settings, get_settings
from .errors import DriveOperationError, TapeCommandError
from .mt_command import MTCommandExecutor
from .mt_options import (
    CompressionState,
    MTVerb,
    STOption,
    render_int,
    render_option,
)

logger = logging.getLogger(__name__)


class Drive:
    """磁带驱动器会话"""

    def __init__(self, device: str, command: Optional[str] = None,
                 executor: Optional[MTCommandExecutor] = None):
        self._device = device
        self._command = command if command is not None else get_settings().MT_COMMAND
        self._executor = executor if executor is not None else MTCommandExecutor()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Drive":
        """按配置（TAPE_DEVICE_PATH / MT_COMMAND / MT_DEVICE_FLAG）创建会话"""
        settings = settings or get_settings()
        return cls(
            settings.TAPE_DEVICE_PATH,
            settings.MT_COMMAND,
            MTCommandExecutor(settings.MT_DEVICE_FLAG),
        )

    @property
    def device(self) -> str:
        return self._device

    @property
    def command(self) -> str:
        return self._command

    def __repr__(self) -> str:
        return f"Drive(device={self._device!r}, command={self._command!r})"

    def _run(self, verb: MTVerb, *args: str) -> bytes:
        """加锁执行一次 mt 命令，失败时以动词名包装错误"""
        with self._lock:
            try:
                return self._executor.invoke(self._command, self._device, verb, *args)
            except TapeCommandError as e:
                logger.warning(f"[MT] {self._device} {verb} 失败: {e}")
                raise DriveOperationError(verb.value, e) from e

    def _run_text(self, verb: MTVerb) -> str:
        # 无损解码，调用方拿到的是原始输出
        return self._run(verb).decode("utf-8", errors="surrogateescape")

    # ---------------------------------------------------------------
    # 定位
    # ---------------------------------------------------------------

    def forward_files(self, n: int) -> None:
        """向前跳过 n 个文件，磁带停在下一个文件的第一个块上"""
        self._run(MTVerb.FSF, render_int(n))

    def forward_file_marks(self, n: int) -> None:
        """向前越过 n 个文件标记，再后退一个记录

        磁带停在当前文件之后第 n-1 个文件的最后一个块上。
        """
        self._run(MTVerb.FSFM, render_int(n))

    def backward_files(self, n: int) -> None:
        """向后跳过 n 个文件，磁带停在上一个文件的最后一个块上"""
        self._run(MTVerb.BSF, render_int(n))

    def backward_file_marks(self, n: int) -> None:
        """向后越过 n 个文件标记，再前进一个记录

        磁带停在当前文件之前第 n-1 个文件的第一个块上。
        """
        self._run(MTVerb.BSFM, render_int(n))

    def position_to_file(self, n: int) -> None:
        """定位到第 n 个文件的开头（先倒带，再向前越过 n 个文件标记）"""
        self._run(MTVerb.ASF, render_int(n))

    def forward_records(self, n: int) -> None:
        self._run(MTVerb.FSR, render_int(n))

    def backward_records(self, n: int) -> None:
        self._run(MTVerb.BSR, render_int(n))

    def forward_set_marks(self, n: int) -> None:
        """(SCSI) 向前跳过 n 个 setmark"""
        self._run(MTVerb.FSS, render_int(n))

    def backward_set_marks(self, n: int) -> None:
        """(SCSI) 向后跳过 n 个 setmark"""
        self._run(MTVerb.BSS, render_int(n))

    def position_eod(self) -> None:
        """定位到有效数据末尾，用于在磁带逻辑末尾追加数据"""
        self._run(MTVerb.EOD)

    def seek_tape(self, n: int) -> None:
        """(SCSI) 定位到第 n 个块"""
        self._run(MTVerb.SEEK, render_int(n))

    def tell(self) -> str:
        """(SCSI) 查询当前块位置，返回 mt 的原始输出"""
        return self._run_text(MTVerb.TELL)

    # ---------------------------------------------------------------
    # 介质控制
    # ---------------------------------------------------------------

    def rewind(self) -> None:
        """倒带"""
        self._run(MTVerb.REWIND)

    def eject(self) -> None:
        """倒带，并在驱动器支持时卸载磁带"""
        self._run(MTVerb.EJECT)

    def retension(self) -> None:
        """倒带后卷到磁带末尾，再次倒带"""
        self._run(MTVerb.RETENSION)

    def erase(self) -> None:
        """擦除磁带"""
        self._run(MTVerb.ERASE)

    def write_eof_marks(self, n: int) -> None:
        """在当前位置写入 n 个 EOF 标记"""
        self._run(MTVerb.WEOF, render_int(n))

    def write_set_marks(self, n: int) -> None:
        """(SCSI) 在当前位置写入 n 个 setmark"""
        self._run(MTVerb.WSET, render_int(n))

    def status(self) -> str:
        """查询磁带设备状态，返回 mt 的原始输出（不做解析）"""
        return self._run_text(MTVerb.STATUS)

    # ---------------------------------------------------------------
    # 分区
    # ---------------------------------------------------------------

    def set_partition(self, n: int) -> None:
        """(SCSI) 切换到第 n 个分区

        默认数据分区编号为 0。仅当设备启用了分区支持、驱动器支持多分区
        且磁带已按多分区格式化时可用。
        """
        self._run(MTVerb.SETPARTITION, render_int(n))

    def seek_partition(self, n: int, part: int) -> None:
        """(SCSI) 定位到分区 part 中的第 n 个块"""
        self._run(MTVerb.PARTSEEK, render_int(n), render_int(part))

    def make_partition(self, n: int) -> None:
        """(SCSI) 格式化磁带

        n 为 0 时格式化为单分区；否则格式化为两个分区，n 为第二个分区的大小（MB）。
        驱动器须支持由发起方指定分区大小，且已启用分区支持。
        """
        self._run(MTVerb.MKPARTITION, render_int(n))

    # ---------------------------------------------------------------
    # 驱动器配置
    # ---------------------------------------------------------------

    def load(self) -> None:
        """(SCSI) 发送加载命令（插入新磁带时驱动器通常会自动加载）"""
        self._run(MTVerb.LOAD)

    def lock(self) -> None:
        """(SCSI) 锁定驱动器仓门"""
        self._run(MTVerb.LOCK)

    def unlock(self) -> None:
        """(SCSI) 解锁驱动器仓门"""
        self._run(MTVerb.UNLOCK)

    def set_block_size(self, n: int) -> None:
        """(SCSI) 设置块大小为 n 字节/记录（0 表示变长块）"""
        self._run(MTVerb.SETBLK, render_int(n))

    def set_density(self, n: int) -> None:
        """(SCSI) 设置密度代码，具体取值参见驱动器文档"""
        self._run(MTVerb.SETDENSITY, render_int(n))

    def set_drive_buffer(self, n: int) -> None:
        """(SCSI) 设置驱动器缓冲代码：0 为无缓冲，1 为普通缓冲"""
        self._run(MTVerb.DRVBUFFER, render_int(n))

    def set_compression(self, state: Union[CompressionState, bool]) -> None:
        """(SCSI) 开启或关闭驱动器压缩（并非所有支持压缩的驱动器都支持此操作）

        Args:
            state: True / CompressionState.ENABLED 开启，False / CompressionState.DISABLED 关闭
        """
        state = CompressionState.from_any(state)
        if state is CompressionState.DEVICE_DEFAULT:
            raise ValueError("compression 只接受开启或关闭，默认值请使用 set_default_compression")
        self._run(MTVerb.COMPRESSION, state.value)

    def st_set_options(self, *options: Union[STOption, str]) -> None:
        """(SCSI) 设置 st 驱动选项位

        可传入 STOption 关键字，也可传入 mtio.h 中选项位按位或后的数值字符串。
        """
        self._run(MTVerb.STOPTIONS, *(render_option(o) for o in options))

    def st_clear_options(self, *options: Union[STOption, str]) -> None:
        """(SCSI) 清除选定的 st 驱动选项位，参数格式同 st_set_options"""
        self._run(MTVerb.STCLEAROPTIONS, *(render_option(o) for o in options))

    def st_show_options(self) -> str:
        """(SCSI) 查询当前启用的驱动选项（需要内核 >= 2.6.26 且 sysfs 挂载于 /sys）"""
        return self._run_text(MTVerb.STSHOWOPT)

    def set_write_threshold(self, n: int) -> None:
        """(SCSI) 设置写阈值为 n KB，不能超过驱动缓冲区大小"""
        self._run(MTVerb.STWRTHRESHOLD, render_int(n))

    def set_default_block_size(self, n: int) -> None:
        """(SCSI) 设置默认块大小，-1 取消默认值

        set_block_size 设置的值在换新磁带之前优先于默认值。
        """
        self._run(MTVerb.DEFBLKSIZE, render_int(n))

    def set_default_density(self, n: int) -> None:
        """(SCSI) 设置默认密度代码，-1 取消默认值"""
        self._run(MTVerb.DEFDENSITY, render_int(n))

    def set_default_drive_buffer(self, n: int) -> None:
        """(SCSI) 设置默认驱动器缓冲代码，-1 取消默认值"""
        self._run(MTVerb.DEFDRVBUFFER, render_int(n))

    def set_default_compression(self, state: Union[CompressionState, bool]) -> None:
        """(SCSI) 设置默认压缩状态

        CompressionState.DEVICE_DEFAULT 取消默认值；set_compression 设置的状态
        在换新磁带之前优先于默认值。
        """
        state = CompressionState.from_any(state)
        self._run(MTVerb.DEFCOMPRESSION, state.value)

    def disable_default_compression(self) -> None:
        """(SCSI) 取消默认压缩状态"""
        self.set_default_compression(CompressionState.DEVICE_DEFAULT)

    def set_timeout(self, n: int) -> None:
        """设置设备普通超时（秒）"""
        self._run(MTVerb.STTIMEOUT, render_int(n))

    def set_long_timeout(self, n: int) -> None:
        """设置设备长操作超时（秒）"""
        self._run(MTVerb.STLONGTIMEOUT, render_int(n))

    def set_clean(self) -> None:
        """设置清洁请求的解析参数"""
        self._run(MTVerb.STSETCLN)


def new_drive(device: str) -> Drive:
    """使用默认 mt 命令创建会话"""
    return Drive(device)


def new_drive_cmd(device: str, command: str) -> Drive:
    """使用指定的 mt 命令创建会话"""
    return Drive(device, command)
