#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pytest配置文件
pytest Configuration
"""

import json
import sys
import textwrap
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """设置测试环境"""
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    monkeypatch.setenv('DEBUG', 'true')
    yield


@pytest.fixture
def make_stub(tmp_path):
    """生成一个可执行的 mt 替身脚本（Python 实现）"""
    def _make(body: str, name: str = "mt") -> str:
        path = tmp_path / name
        path.write_text(f"#!{sys.executable}\nimport sys\n" + textwrap.dedent(body))
        path.chmod(0o755)
        return str(path)
    return _make


class CallLog:
    """读取替身脚本记录的调用参数"""

    def __init__(self, path: Path):
        self.path = path

    @property
    def calls(self):
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]


@pytest.fixture
def recording_stub(make_stub, tmp_path):
    """记录参数并以 0 退出的 mt 替身"""
    log_path = tmp_path / "calls.jsonl"
    stub = make_stub(f"""
        import json
        with open({str(log_path)!r}, "a", encoding="utf-8") as f:
            f.write(json.dumps(sys.argv[1:]) + "\\n")
    """)
    return stub, CallLog(log_path)


class FakeExecutor:
    """内存中的执行器替身，不启动子进程"""

    def __init__(self, output: bytes = b"", error: Exception = None):
        self.output = output
        self.error = error
        self.calls = []

    def invoke(self, command, device, verb, *args):
        self.calls.append((command, device, str(verb), list(args)))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def fake_executor():
    return FakeExecutor()
