from __future__ import annotations

import os
from typing import Tuple

# Board size of the original analysis window.
FALLBACK_COLUMNS = 8
FALLBACK_ROWS = 10


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def default_size() -> Tuple[int, int]:
    """(columns, rows) of dots from DOTS_COLUMNS / DOTS_ROWS."""
    return _env_int('DOTS_COLUMNS', FALLBACK_COLUMNS), _env_int('DOTS_ROWS', FALLBACK_ROWS)


def debug_enabled() -> bool:
    """Set DOTS_DEBUG=1 to print the recommender trace."""
    return os.getenv('DOTS_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
