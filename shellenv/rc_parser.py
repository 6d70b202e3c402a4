#!/usr/bin/env python3
"""shell 初始化文件（.bashrc / .zshrc）逐行分类。

每个非空行去掉首尾空白后，按 export → alias → 函数头 → 注释 → 其他
的顺序归入第一个匹配的类别。只看单行，不处理跨行结构。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from loguru import logger

from shellenv.errors import ShellConfigOpenError, ShellConfigReadError

EXPORT_RE = re.compile(r"^export\s+(\w+)=", re.ASCII)
ALIAS_RE = re.compile(r"^alias\s+(\w+)=", re.ASCII)
FUNCTION_RE = re.compile(r"^(\w+)\s*\(\)\s*\{", re.ASCII)
COMMENT_RE = re.compile(r"^#")

# 任意 ASCII 兼容编码的字节都能读入并原样写回
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# 先匹配先得
CATEGORY_RULES: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("exports", EXPORT_RE),
    ("aliases", ALIAS_RE),
    ("functions", FUNCTION_RE),
    ("comments", COMMENT_RE),
)


@dataclass
class ShellConfig:
    file_path: str = ""
    file_type: str = "unknown"
    lines: List[str] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
    functions: List[str] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)
    others: List[str] = field(default_factory=list)

    @property
    def multiline_functions(self) -> List[str]:
        """函数头所在行没有闭合的函数（函数体在后续行）。"""
        return [fn for fn in self.functions if fn.count("{") > fn.count("}")]

    def buckets(self) -> List[List[str]]:
        return [self.exports, self.aliases, self.functions, self.comments, self.others]


def detect_file_type(path: Union[str, Path]) -> str:
    name = str(path)
    if name.endswith(".bashrc"):
        return "bash"
    if name.endswith(".zshrc"):
        return "zsh"
    return "unknown"


def classify_line(line: str) -> str:
    """返回一行（已去空白）所属的类别字段名。"""
    for category, pattern in CATEGORY_RULES:
        if pattern.match(line):
            return category
    return "others"


def _classify_lines(raw_lines: Iterable[str], file_path: str) -> ShellConfig:
    config = ShellConfig(file_path=file_path, file_type=detect_file_type(file_path))
    for raw in raw_lines:
        line = raw.strip()
        if not line:
            continue
        config.lines.append(line)
        getattr(config, classify_line(line)).append(line)
    return config


def parse_shell_text(text: str, file_path: str = "") -> ShellConfig:
    # 只按 \n 分行，\r 等留给 strip 处理，与读文件时一致
    return _classify_lines(text.split("\n"), file_path)


def parse_shell_config(path: Union[str, Path]) -> ShellConfig:
    """读取并分类 shell 配置文件。

    非 UTF-8 字节用 surrogateescape 保留，写回时原样还原。
    打不开时抛出 ShellConfigOpenError；读到一半出错抛出 ShellConfigReadError，
    不返回部分结果。
    """
    file_path = str(path)
    if Path(file_path).is_dir():
        raise ShellConfigOpenError(file_path, "不是普通文件")
    try:
        f = open(file_path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n")
    except OSError as exc:
        raise ShellConfigOpenError(file_path, f"无法打开文件 ({exc.strerror or exc})") from exc

    with f:
        try:
            config = _classify_lines(f, file_path)
        except OSError as exc:
            raise ShellConfigReadError(file_path, f"读取失败 ({exc})") from exc

    logger.debug(
        "parsed {}: {} exports, {} aliases, {} functions, {} comments, {} others",
        file_path,
        len(config.exports),
        len(config.aliases),
        len(config.functions),
        len(config.comments),
        len(config.others),
    )
    return config
