"""Defaults for the poker-hands runner, overridable from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_TIE_POLICY = "POKER_HANDS_TIE_POLICY"
ENV_ON_ERROR = "POKER_HANDS_ON_ERROR"
ENV_LOG_LEVEL = "POKER_HANDS_LOG_LEVEL"

LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runner settings. CLI flags override these; see settings_from_env()."""

    tie_policy: str = "both"  # "both" | "none"
    on_error: str = "abort"  # "abort" | "skip"
    log_level: str = "WARNING"


# Singleton defaults; override via env or explicit CLI flags
DEFAULT_SETTINGS = Settings()


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from POKER_HANDS_* variables, falling back to DEFAULT_SETTINGS."""
    env = os.environ if environ is None else environ
    return Settings(
        tie_policy=env.get(ENV_TIE_POLICY, DEFAULT_SETTINGS.tie_policy).strip().lower(),
        on_error=env.get(ENV_ON_ERROR, DEFAULT_SETTINGS.on_error).strip().lower(),
        log_level=env.get(ENV_LOG_LEVEL, DEFAULT_SETTINGS.log_level).strip().upper(),
    )
