"""Runtime configuration read from the environment and an optional .env file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from dotenv import load_dotenv

__all__ = ["Config", "ConfigError", "load"]

_UINT32_MAX = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")


class ConfigError(ValueError):
    """Raised when the configuration cannot be loaded."""


@dataclass
class Config:
    """Settings for the monitor."""

    discord_token: str = ""
    postgresql_token: str = ""
    delay: int = 0
    keywords: list[str] = field(default_factory=list)
    linkedin_wh: str = ""
    glassdoor_wh: str = ""


def _parse_delay(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ConfigError(f"Invalid DELAY .env value: invalid syntax: {text!r}")
    value = int(text)
    if value > _UINT32_MAX:
        raise ConfigError(f"Invalid DELAY .env value: value out of range: {text!r}")
    return value


def load(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Load the configuration.

    Variables from ``env_file`` are added to the environment without
    overriding ones already set. ``DELAY`` must be an unsigned 32-bit integer.
    """
    load_dotenv(env_file, override=False)

    delay = _parse_delay(os.environ.get("DELAY", ""))
    keywords = os.environ.get("KEYWORDS", "").split(",")

    return Config(
        postgresql_token=os.environ.get("POSTGRESQL_TOKEN", ""),
        delay=delay,
        keywords=keywords,
        linkedin_wh=os.environ.get("LINKEDINWH", ""),
        glassdoor_wh=os.environ.get("GLASSDOORWH", ""),
    )