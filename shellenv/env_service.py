#!/usr/bin/env python3
"""环境变量与 PATH 处理模块。

只修改当前进程的环境，不写回任何文件；需要永久生效时给出 export 行提示。
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from loguru import logger

from shellenv.errors import EnvVarError


@dataclass(frozen=True)
class EnvVar:
    name: str
    value: str


def get_env_vars() -> List[EnvVar]:
    """返回当前进程的全部环境变量，按名称排序。"""
    return [EnvVar(k, v) for k, v in sorted(os.environ.items())]


def search_env_vars(term: str) -> List[EnvVar]:
    """名称或值包含关键字（忽略大小写）的变量。"""
    if not term:
        return []
    needle = term.lower()
    return [ev for ev in get_env_vars() if needle in ev.name.lower() or needle in ev.value.lower()]


def validate_name(name: str) -> None:
    if not name:
        raise EnvVarError("变量名不能为空")
    if "=" in name:
        raise EnvVarError("变量名不能包含 '='")


def set_env_var(name: str, value: str) -> None:
    validate_name(name)
    os.environ[name] = value
    logger.info("set {} in process environment", name)


def unset_env_var(name: str) -> None:
    if name not in os.environ:
        raise EnvVarError(f"变量不存在: {name}")
    del os.environ[name]
    logger.info("unset {} in process environment", name)


def display_value(value: str, width: int = 80) -> str:
    """单行展示用：换行转义，超长截断。"""
    if len(value) > width:
        value = value[:width] + "..."
    return value.replace("\n", "\\n")


def export_line(name: str, value: str) -> str:
    return f'export {name}="{value}"'


def build_export_lines(env_vars: Dict[str, str]) -> str:
    """构造 export 命令文本，多行。"""
    return "\n".join(export_line(k, v) for k, v in env_vars.items())


# ----------------- PATH -----------------
def get_path_entries() -> List[str]:
    path = os.environ.get("PATH", "")
    if not path:
        return []
    return path.split(os.pathsep)


def set_path_entries(entries: List[str]) -> None:
    os.environ["PATH"] = os.pathsep.join(entries)


def _check_index(entries: List[str], index: int) -> None:
    if index < 0 or index >= len(entries):
        raise EnvVarError(f"索引超出范围 (0~{len(entries) - 1})")


def remove_path_entry(index: int) -> str:
    """从 PATH 中删除一项，返回被删除的目录。"""
    entries = get_path_entries()
    _check_index(entries, index)
    removed = entries.pop(index)
    set_path_entries(entries)
    logger.info("removed PATH entry {}", removed)
    return removed


def move_path_entry(index: int, delta: int) -> int:
    """移动 PATH 中的一项，越界时停在边上，返回新位置。"""
    entries = get_path_entries()
    _check_index(entries, index)
    new_index = max(0, min(index + delta, len(entries) - 1))
    if new_index != index:
        entry = entries.pop(index)
        entries.insert(new_index, entry)
        set_path_entries(entries)
    return new_index


def duplicate_path_entries() -> List[str]:
    """重复出现的目录（保留首次出现的顺序）。"""
    seen: set = set()
    dups: List[str] = []
    for entry in get_path_entries():
        if entry in seen and entry not in dups:
            dups.append(entry)
        seen.add(entry)
    return dups


def missing_path_entries() -> List[str]:
    return [e for e in get_path_entries() if e and not Path(e).is_dir()]


# ----------------- shell 配置文件 -----------------
def shell_config_candidates() -> Dict[str, Path]:
    home = Path.home()
    return {"bash": home / ".bashrc", "zsh": home / ".zshrc"}


def determine_shell_config() -> Path:
    """返回首选的 shell 配置文件路径（zsh 优先）。"""
    candidates = shell_config_candidates()
    shell = os.environ.get("SHELL", "")
    if "zsh" in shell or shutil.which("zsh"):
        return candidates["zsh"]
    return candidates["bash"]
