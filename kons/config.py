from __future__ import annotations
import logging
import os


# Defaults
DEFAULT_PROMPT = "lisp:> "
DEFAULT_RECURSION_LIMIT = 10_000
DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    """Positive integer from the environment; anything unusable means `default`."""
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_prompt() -> str:
    return os.environ.get("KONS_PROMPT", DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    return int_from_env("KONS_RECURSION_LIMIT", DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    name = os.environ.get("KONS_LOG_LEVEL", "").strip().upper()
    if name in logging.getLevelNamesMapping():
        return name
    return DEFAULT_LOG_LEVEL
