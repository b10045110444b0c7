# -*- coding: utf-8 -*-

"""
Runtime settings. Defaults mirror the wiki's tolerance; every value can be
overridden through the environment (BUSHO_* variables).
"""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from .errors import ConfigError

T = TypeVar("T")

# -----------------------------
# DEFAULTS
# -----------------------------

DEFAULT_BASE_URL = "https://wikiwiki.jp/sangokushi8r/"
DEFAULT_JSON_FILE = "characters.json"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 2.0      # seconds, multiplied by the attempt number
DEFAULT_REQUEST_DELAY = 0.5   # seconds between two successful pages
DEFAULT_HTTP_TIMEOUT = 30.0   # seconds

# 没年-13: the game's start-year convention for the derived year column
DEFAULT_DERIVED_YEAR_OFFSET = -13


@dataclass(frozen=True)
class Config:
    base_url: str = DEFAULT_BASE_URL
    default_json_file: str = DEFAULT_JSON_FILE
    user_agent: str = DEFAULT_USER_AGENT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    request_delay: float = DEFAULT_REQUEST_DELAY
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    derived_year_offset: int = DEFAULT_DERIVED_YEAR_OFFSET

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from BUSHO_* environment variables.
        Unset variables keep their defaults.
        """
        env = os.environ if env is None else env

        def get(key: str, conv: Callable[[str], T], default: T) -> T:
            raw = env.get(key)
            if raw is None or raw.strip() == "":
                return default
            try:
                return conv(raw.strip())
            except ValueError as e:
                raise ConfigError(f"invalid value {raw!r}", key=key, cause=e) from e

        cfg = cls(
            base_url=get("BUSHO_BASE_URL", str, DEFAULT_BASE_URL),
            default_json_file=get("BUSHO_JSON_FILE", str, DEFAULT_JSON_FILE),
            user_agent=get("BUSHO_USER_AGENT", str, DEFAULT_USER_AGENT),
            max_attempts=get("BUSHO_MAX_ATTEMPTS", int, DEFAULT_MAX_ATTEMPTS),
            base_delay=get("BUSHO_BASE_DELAY", float, DEFAULT_BASE_DELAY),
            request_delay=get("BUSHO_REQUEST_DELAY", float, DEFAULT_REQUEST_DELAY),
            http_timeout=get("BUSHO_HTTP_TIMEOUT", float, DEFAULT_HTTP_TIMEOUT),
            derived_year_offset=get("BUSHO_DERIVED_YEAR_OFFSET", int, DEFAULT_DERIVED_YEAR_OFFSET),
        )
        if cfg.max_attempts < 1:
            raise ConfigError("max attempts must be at least 1", key="BUSHO_MAX_ATTEMPTS")
        return cfg
