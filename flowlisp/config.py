from __future__ import annotations
import os
from pathlib import Path


# Defaults
DEFAULT_MAX_DEPTH = 1000
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HISTORY_PATH = ".flow_history"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Maximum nesting of list evaluations before RecursionLimitExceeded."""
    return int_from_env('FLOW_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    raw = os.environ.get('FLOW_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else DEFAULT_LOG_LEVEL


def get_history_path() -> Path:
    raw = os.environ.get('FLOW_HISTORY_PATH')
    return Path(raw.strip()) if raw and raw.strip() else Path(DEFAULT_HISTORY_PATH)
