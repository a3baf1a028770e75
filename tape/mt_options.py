#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mt 命令参数定义
mt Command Vocabulary

动词与参数取值兼容 mt-st-1.1。
"""

import operator
from enum import Enum
from typing import Union


class MTVerb(str, Enum):
    """mt 动词"""

    # 定位
    FSF = "fsf"
    FSFM = "fsfm"
    BSF = "bsf"
    BSFM = "bsfm"
    ASF = "asf"
    FSR = "fsr"
    BSR = "bsr"
    FSS = "fss"
    BSS = "bss"
    EOD = "eod"
    SEEK = "seek"
    TELL = "tell"

    # 介质控制
    REWIND = "rewind"
    EJECT = "eject"
    RETENSION = "retension"
    WEOF = "weof"
    WSET = "wset"
    ERASE = "erase"
    STATUS = "status"

    # 分区
    SETPARTITION = "setpartition"
    PARTSEEK = "partseek"
    MKPARTITION = "mkpartition"

    # 驱动器配置
    LOAD = "load"
    LOCK = "lock"
    UNLOCK = "unlock"
    SETBLK = "setblk"
    SETDENSITY = "setdensity"
    DRVBUFFER = "drvbuffer"
    COMPRESSION = "compression"
    STOPTIONS = "stoptions"
    STCLEAROPTIONS = "stclearoptions"
    STSHOWOPT = "stshowopt"
    STWRTHRESHOLD = "stwrthreshold"
    DEFBLKSIZE = "defblksize"
    DEFDENSITY = "defdensity"
    DEFDRVBUFFER = "defdrvbuffer"
    DEFCOMPRESSION = "defcompression"
    STTIMEOUT = "sttimeout"
    STLONGTIMEOUT = "stlongtimeout"
    STSETCLN = "stsetcln"

    def __str__(self) -> str:
        return self.value


class CompressionState(Enum):
    """压缩状态（三态）"""
    ENABLED = "1"          # 开启
    DISABLED = "0"         # 关闭
    DEVICE_DEFAULT = "-1"  # 不设置默认值，由设备决定

    @classmethod
    def from_any(cls, value: Union["CompressionState", bool]) -> "CompressionState":
        if isinstance(value, CompressionState):
            return value
        if isinstance(value, bool):
            return cls.ENABLED if value else cls.DISABLED
        raise TypeError(f"无法识别的压缩状态: {value!r}")


class STOption(str, Enum):
    """st 驱动选项关键字（stoptions / stclearoptions）"""
    BUFFER_WRITES = "buffer-writes"    # 缓冲写
    ASYNC_WRITES = "async-writes"      # 异步写
    READ_AHEAD = "read-ahead"          # 固定块大小时预读
    DEBUG = "debug"                    # 调试（需驱动编译支持）
    TWO_FMS = "two-fms"                # 关闭文件时写两个文件标记
    FAST_EOD = "fast-eod"              # 直接定位到 EOD（丢失文件号）
    NO_WAIT = "no-wait"                # 倒带等操作不等待完成
    AUTO_LOCK = "auto-lock"            # 自动锁定/解锁仓门
    DEF_WRITES = "def-writes"          # 默认块大小与密度仅用于写
    CAN_BSR = "can-bsr"                # 驱动器支持反向定位
    NO_BLKLIMITS = "no-blklimits"      # 不支持读取块限制
    CAN_PARTITIONS = "can-partitions"  # 支持分区磁带
    SCSI2LOGICAL = "scsi2logical"      # seek/tell 使用 SCSI-2 逻辑块地址
    SILI = "sili"                      # 变长块读取时设置 SILI 位（内核 >= 2.6.26）
    SYSV = "sysv"                      # System V 语义

    def __str__(self) -> str:
        return self.value


def render_int(n: int) -> str:
    """整数参数按十进制渲染，不做范围检查（-1 -> "-1"）"""
    if isinstance(n, bool):
        raise TypeError("需要整数参数，而不是布尔值")
    return str(operator.index(n))


def render_option(option: Union[STOption, str]) -> str:
    """选项关键字或原始字符串（如按位或后的数值）原样传递"""
    if isinstance(option, STOption):
        return option.value
    if not isinstance(option, str):
        raise TypeError(f"选项必须是字符串或 STOption: {option!r}")
    return option
