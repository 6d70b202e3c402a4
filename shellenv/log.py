"""日志配置。"""

from __future__ import annotations

import os
import sys
from typing import Literal, Optional

from loguru import logger

LogProfile = Literal["cli", "tui"]

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: Optional[LogProfile] = None


def configure_logging(*, profile: LogProfile = "cli") -> None:
    """配置进程级日志，只生效一次。

    - cli: 输出到 stderr
    - tui: 只写文件（curses 占用屏幕，stderr 会把界面打乱）
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    level = os.getenv("SHELLENV_LOG_LEVEL", "WARNING").upper()
    log_file = os.getenv("SHELLENV_LOG_FILE", "")

    logger.remove()
    if profile == "cli":
        logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)
    if log_file:
        logger.add(log_file, level=level, format=_FORMAT, backtrace=False, diagnose=False)
    _CONFIGURED_PROFILE = profile
