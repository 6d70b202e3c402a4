#!/usr/bin/env python3
"""shell 配置规范化输出与写回模块。

输出顺序固定为 Comments / Exports / Aliases / Functions / Other：
- 前四个分区标题总是输出，Other 仅在非空时输出
- Exports / Aliases / Functions 排序，Comments / Other 保持原顺序
- 只有非空分区且后面还有非空分区时才插入一个空行

写入磁盘的是纯文本版本，带 ANSI 样式的版本只用于预览。
"""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from loguru import logger

from shellenv.errors import MultilineFunctionError, ShellConfigWriteError
from shellenv.highlight import highlight_line
from shellenv.rc_parser import ENCODING, ENCODING_ERRORS, ShellConfig, parse_shell_config

COMMENTS_HEADER = "# Comments"
EXPORTS_HEADER = "# Exports"
ALIASES_HEADER = "# Aliases"
FUNCTIONS_HEADER = "# Functions"
OTHER_HEADER = "# Other"

PREVIEW_LIMIT = 1500
FILE_MODE = 0o644


@dataclass
class FormatResult:
    config: ShellConfig
    plain: str
    styled: str
    written: bool = False
    backup_path: Optional[Path] = None


def _is_canonical(config: ShellConfig) -> bool:
    """文件本身就是本工具的输出（首行是 # Comments 且其余标题都在）。"""
    if not config.lines or config.lines[0] != COMMENTS_HEADER:
        return False
    return all(h in config.comments for h in (EXPORTS_HEADER, ALIASES_HEADER, FUNCTIONS_HEADER))


def _user_comments(config: ShellConfig) -> List[str]:
    """去掉上一次格式化生成的分区标题，保证重复格式化结果不变。

    生成的 # Comments 在第一行；其余标题都排在所有注释之后，取最后一次出现。
    """
    comments = list(config.comments)
    if not _is_canonical(config):
        return comments
    del comments[0]
    headers = [EXPORTS_HEADER, ALIASES_HEADER, FUNCTIONS_HEADER]
    if config.others:
        headers.append(OTHER_HEADER)
    for header in headers:
        if header in comments:
            idx = len(comments) - 1 - comments[::-1].index(header)
            del comments[idx]
    return comments


def _raw_bytes(line: str) -> bytes:
    return line.encode(ENCODING, ENCODING_ERRORS)


def format_shell_config(config: ShellConfig, highlight: bool = True) -> str:
    render: Callable[[str], str] = highlight_line if highlight else str
    sections = [
        (COMMENTS_HEADER, _user_comments(config)),
        (EXPORTS_HEADER, sorted(config.exports, key=_raw_bytes)),
        (ALIASES_HEADER, sorted(config.aliases, key=_raw_bytes)),
        (FUNCTIONS_HEADER, sorted(config.functions, key=_raw_bytes)),
    ]

    lines: List[str] = []
    for i, (header, entries) in enumerate(sections):
        lines.append(render(header))
        lines.extend(render(entry) for entry in entries)
        if entries and any(later for _, later in sections[i + 1:]):
            lines.append("")

    if config.others:
        if lines:
            lines.append("")
        lines.append(render(OTHER_HEADER))
        lines.extend(render(other) for other in config.others)

    return "\n".join(lines)


def render_plain(config: ShellConfig) -> str:
    return format_shell_config(config, highlight=False)


def render_preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "\n..."


def printable_text(text: str) -> str:
    """预览用：非 UTF-8 字节显示为 U+FFFD，写盘仍用原文。"""
    return text.encode(ENCODING, ENCODING_ERRORS).decode(ENCODING, "replace")


def ensure_reformat_safe(config: ShellConfig) -> None:
    """函数体跨多行时重排会把函数拆散，直接拒绝。"""
    headers = config.multiline_functions
    if headers:
        raise MultilineFunctionError(config.file_path, headers)


def create_backup(path: Path) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = path.with_name(f"{path.name}.bak.{timestamp}")
    shutil.copy2(path, backup_path)
    logger.info("backup of {} saved to {}", path, backup_path)
    return backup_path


def _replace_atomically(target: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            f.write(content)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


def write_formatted_config(
    path: Union[str, Path],
    content: str,
    backup: bool = False,
) -> Optional[Path]:
    """整文件替换：先写同目录临时文件，再 os.replace 覆盖。

    目录不可写但文件本身可写时退回原地覆盖写（保留原权限，不再是原子替换）。
    返回备份文件路径（未备份时为 None）。
    """
    # 软链接指向的真实文件才是要改的
    target = Path(path).resolve()
    backup_path: Optional[Path] = None
    try:
        if backup:
            backup_path = create_backup(target)
        try:
            _replace_atomically(target, content)
        except PermissionError:
            if not (target.is_file() and os.access(target, os.W_OK)):
                raise
            logger.warning("{} is not writable, rewriting {} in place", target.parent, target.name)
            with open(target, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                f.write(content)
    except OSError as exc:
        raise ShellConfigWriteError(str(path), f"写入失败 ({exc})") from exc

    logger.info("formatted config written to {}", target)
    return backup_path


def format_file(
    path: Union[str, Path],
    write: bool = False,
    backup: bool = False,
    force: bool = False,
) -> FormatResult:
    """解析 + 格式化，可选写回原路径。"""
    config = parse_shell_config(path)
    result = FormatResult(
        config=config,
        plain=render_plain(config),
        styled=format_shell_config(config),
    )
    if write:
        if not force:
            ensure_reformat_safe(config)
        result.backup_path = write_formatted_config(path, result.plain, backup=backup)
        result.written = True
    return result
