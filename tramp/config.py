from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


# Defaults
_DEFAULT_PROMPT = "scheme> "
_DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prompt() -> str:
    return os.environ.get('TRAMP_PROMPT', _DEFAULT_PROMPT)


def get_prelude_files() -> List[Path]:
    return paths_from_env('TRAMP_PRELUDE_PATH', [])


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('TRAMP_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"TRAMP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"TRAMP_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    name = os.environ.get('TRAMP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level <name>" for unknown names
    return level if isinstance(level, int) else logging.WARNING
