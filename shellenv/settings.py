#!/usr/bin/env python3
"""用户设置与 .env 读取模块。

- 设置文件为 TOML，默认 ~/.shellenv.toml，可用 SHELLENV_SETTINGS 覆盖
- 文件缺失或格式错误时回退到默认值
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

from shellenv.errors import SettingsError

DEFAULT_SETTINGS: Dict[str, Any] = {
    "preview_limit": 1500,
    "backup": False,
    "value_width": 80,
    "color": True,
}


def settings_path() -> Path:
    custom = os.environ.get("SHELLENV_SETTINGS", "")
    if custom:
        return Path(custom).expanduser()
    return Path.home() / ".shellenv.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """加载用户设置。"""
    settings = dict(DEFAULT_SETTINGS)
    cfg_path = path or settings_path()
    if not cfg_path.exists():
        return settings
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("settings file {} ignored: {}", cfg_path, exc)
        return settings

    for key, default in DEFAULT_SETTINGS.items():
        if key not in data:
            continue
        value = data[key]
        # bool 是 int 的子类，单独判断
        if isinstance(default, bool) != isinstance(value, bool) or not isinstance(value, type(default)):
            logger.warning("settings key {} has wrong type, using default", key)
            continue
        settings[key] = value
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """保存用户设置。"""
    cfg_path = path or settings_path()
    try:
        cfg_path.parent.mkdir(parents=True, exist_ok=True)
        with cfg_path.open("w", encoding="utf-8") as f:
            toml.dump(settings, f)
    except OSError as exc:
        raise SettingsError(f"保存设置失败: {exc}") from exc
    return cfg_path


def load_dotenv(env_file: Path) -> int:
    """加载 .env 文件中的环境变量，返回新设置的数量。"""
    if not env_file.exists():
        return 0
    count = 0
    with env_file.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key and key not in os.environ:  # 不覆盖已有环境变量
                    os.environ[key] = value
                    count += 1
    logger.debug("loaded {} variables from {}", count, env_file)
    return count
