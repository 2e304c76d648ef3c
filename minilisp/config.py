from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HISTORY_FILE = Path("~/.minilisp_history")


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()).expanduser() for p in raw.split(os.pathsep) if p.strip()]


def get_recursion_limit() -> int:
    raw = os.environ.get("MINILISP_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit < 100:
        raise ValueError(f"MINILISP_RECURSION_LIMIT must be at least 100, got {limit}")
    return limit


def get_log_level() -> int:
    name = os.environ.get("MINILISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"MINILISP_LOG_LEVEL is not a logging level: {name!r}")
    return level


def get_prelude_paths() -> List[Path]:
    return paths_from_env("MINILISP_PRELUDE_PATH", [])


def get_history_file() -> Path:
    return paths_from_env("MINILISP_HISTORY_FILE", [_DEFAULT_HISTORY_FILE])[0].expanduser()
