import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class RunConfig:
    """Host settings for a single interpreter run."""
    step_limit: Optional[int] = None  # None runs until the source ends
    eof_value: int = 0  # stored by ',' once input is exhausted
    pause_on_exit: bool = True


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_config(dotenv: bool = True) -> RunConfig:
    """Build a RunConfig from BF_* environment variables, reading .env first if present."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    step_limit = _env_int("BF_STEP_LIMIT", 0)
    if step_limit < 0:
        raise ValueError(f"BF_STEP_LIMIT must not be negative, got {step_limit}")

    return RunConfig(
        step_limit=step_limit or None,
        eof_value=_env_int("BF_EOF_VALUE", 0),
        pause_on_exit=_env_bool("BF_PAUSE_ON_EXIT", True),
    )
