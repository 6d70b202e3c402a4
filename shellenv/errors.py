#!/usr/bin/env python3
"""统一的异常类型。"""

from __future__ import annotations

from typing import List


class ShellEnvError(RuntimeError):
    """所有可恢复错误的基类，由界面层捕获并提示。"""


class EnvVarError(ShellEnvError):
    """环境变量名非法或变量不存在。"""


class SettingsError(ShellEnvError):
    """设置文件读写失败。"""


class ShellConfigError(ShellEnvError):
    """shell 配置文件处理失败。"""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ShellConfigOpenError(ShellConfigError):
    """文件不存在、不是普通文件或没有权限。"""


class ShellConfigReadError(ShellConfigError):
    """读取过程中出错，部分结果已丢弃。"""


class ShellConfigWriteError(ShellConfigError):
    """写回失败，原文件保持不变。"""


class MultilineFunctionError(ShellConfigError):
    """函数体跨多行，重排会拆散函数定义。"""

    def __init__(self, path: str, headers: List[str]) -> None:
        super().__init__(path, f"函数体跨多行，拒绝格式化 ({', '.join(headers)})")
        self.headers = headers
