from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_RECURSION_LIMIT = 5000
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_recursion_limit() -> int:
    return max(int_from_env('THETA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 100)


def get_log_level() -> str:
    raw = os.environ.get('THETA_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('THETA_PRELUDE_PATH')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
