from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_PROMPT = "Lisp>>> "
_DEFAULT_QUIT = "quit"
_DEFAULT_LOG_LEVEL = "WARNING"


def setting_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    return setting_from_env('MINISCHEME_PROMPT', _DEFAULT_PROMPT)


def get_quit_command() -> str:
    return setting_from_env('MINISCHEME_QUIT', _DEFAULT_QUIT).strip()


def get_log_level() -> int:
    name = setting_from_env('MINISCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL)
    return parse_log_level(name)


def parse_log_level(name: str) -> int:
    # unknown names fall back to the default
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(_DEFAULT_LOG_LEVEL)
