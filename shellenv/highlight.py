#!/usr/bin/env python3
"""shell 配置单行语法高亮。

规则依次为：关键字前缀、注释整行、引号字符串、路径/变量。
tokenize_line 给出 (文本, 样式名) 片段，终端输出与 curses 预览共用同一套切分。
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from rich.color import ColorSystem
from rich.style import Style

KEYWORDS = ("export", "alias", "function")

STYLES: Dict[str, Style] = {
    "keyword": Style(bold=True, color="#FF79C6"),
    "string": Style(color="#50FA7B"),
    "path": Style(color="#8BE9FD"),
    "comment": Style(color="#6272A4"),
}

QUOTED_RE = re.compile(r"\"[^\"]*\"|'[^']*'")
PATH_RE = re.compile(r"\$[A-Z_][A-Z0-9_]*|/[^\"'\s]+", re.ASCII)
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

Span = Tuple[str, Optional[str]]


def _split(text: str, pattern: "re.Pattern[str]", style: str, rest_style: Optional[str] = None) -> List[Span]:
    spans: List[Span] = []
    pos = 0
    for m in pattern.finditer(text):
        if m.start() > pos:
            spans.append((text[pos:m.start()], rest_style))
        spans.append((m.group(0), style))
        pos = m.end()
    if pos < len(text):
        spans.append((text[pos:], rest_style))
    return spans


def tokenize_line(line: str) -> List[Span]:
    """把一行切成带样式名的片段，拼接后与原文完全一致。"""
    # 关键字不以 # 开头，注释行不会先被关键字规则截走
    if line.startswith("#"):
        return [(line, "comment")]

    spans: List[Span] = []
    rest = line
    for kw in KEYWORDS:
        if line.startswith(kw):
            spans.append((kw, "keyword"))
            rest = line[len(kw):]
            break

    # 字符串内的路径/变量同样着色，其余部分保持字符串样式
    for text, style in _split(rest, QUOTED_RE, "string"):
        spans.extend(_split(text, PATH_RE, "path", rest_style=style))
    return spans


def render_spans(spans: List[Span]) -> str:
    parts = []
    for text, style in spans:
        if style is None:
            parts.append(text)
        else:
            parts.append(STYLES[style].render(text, color_system=ColorSystem.TRUECOLOR))
    return "".join(parts)


def highlight_line(line: str) -> str:
    """返回带 ANSI 样式的同一行文本。"""
    return render_spans(tokenize_line(line))


def strip_styles(text: str) -> str:
    return ANSI_RE.sub("", text)
