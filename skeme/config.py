from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = '-> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_prompt() -> str:
    return os.environ.get('SKEME_PROMPT', _DEFAULT_PROMPT)


def get_recursion_limit() -> int | None:
    """Host recursion limit for the REPL, or None to keep the interpreter default."""
    raw = os.environ.get('SKEME_RECURSION_LIMIT')
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw.strip())
    except ValueError:
        raise ValueError(f"SKEME_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"SKEME_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    name = os.environ.get('SKEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
