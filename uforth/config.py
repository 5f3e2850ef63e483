from __future__ import annotations
import logging
import os
from dataclasses import dataclass

DEFAULT_PROMPT = "prompt> "
DEFAULT_LOG_LEVEL = "WARNING"

_FALSE_WORDS = {"0", "false", "no", "off"}


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw is not None else default


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_WORDS


def get_prompt() -> str:
    return str_from_env('UFORTH_PROMPT', DEFAULT_PROMPT)


def get_log_level() -> int:
    name = str_from_env('UFORTH_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a str for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_loop_cycle_check() -> bool:
    return flag_from_env('UFORTH_LOOP_CYCLE_CHECK', True)


@dataclass(frozen=True)
class Config:
    prompt: str = DEFAULT_PROMPT
    log_level: int = logging.WARNING
    loop_cycle_check: bool = True


def load_config() -> Config:
    return Config(
        prompt=get_prompt(),
        log_level=get_log_level(),
        loop_cycle_check=get_loop_cycle_check(),
    )
