"""
TASKNOTE - Settings
===================
Where the task file lives and how loud logging is. Values come from the
environment (TASKNOTE_FILE, TASKNOTE_LOG_LEVEL); CLI flags override them.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .storage import DEFAULT_FILE_PATH

ENV_FILE = "TASKNOTE_FILE"
ENV_LOG_LEVEL = "TASKNOTE_LOG_LEVEL"


class Settings(BaseModel):
    data_file: str = DEFAULT_FILE_PATH
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, ignoring empty ones"""
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ENV_FILE, "").strip():
            values["data_file"] = env[ENV_FILE].strip()
        if env.get(ENV_LOG_LEVEL, "").strip():
            values["log_level"] = env[ENV_LOG_LEVEL]
        return cls(**values)
