"""
CLI configuration from environment variables.

Variables (optionally loaded from .env.local, then .env, in the working
directory):
- LINERANK_TOP_K: default number of results (default: 10)
- LINERANK_ENCODING: input file encoding (default: utf-8)
- LINERANK_LOG_FILE: rotating log file path (default: no file logging)
- LOG_LEVEL: console level (default: WARNING)

The library functions never read configuration, only the CLI does.
"""

import codecs
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_FIELDS = {
    "top_k": "LINERANK_TOP_K",
    "encoding": "LINERANK_ENCODING",
    "log_file": "LINERANK_LOG_FILE",
    "log_level": "LOG_LEVEL",
}


class ConfigError(ValueError):
    """Invalid configuration value with the offending variable name"""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_k: int = Field(default=10, ge=0, description="Default results count")
    encoding: str = Field(default="utf-8", description="Input file encoding")
    log_file: Optional[str] = Field(default=None, description="Rotating log file path")
    log_level: str = Field(default="WARNING", description="Console log level")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def console_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_env_files(directory: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local (highest priority) or .env into os.environ.

    Existing environment variables are not overridden.

    Returns:
        Path of the loaded file, None when neither exists
    """
    directory = directory or Path.cwd()
    for name in (".env.local", ".env"):
        env_path = directory / name
        if env_path.exists():
            load_dotenv(env_path)
            logger.debug(f"Loaded environment from: {env_path}")
            return env_path
    return None


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        ConfigError: a variable has an invalid value
    """
    values = {}
    for field_name, env_name in ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    try:
        return Settings(**values)
    except ValidationError as e:
        error = e.errors()[0]
        field_name = str(error["loc"][0]) if error["loc"] else ""
        env_name = ENV_FIELDS.get(field_name, "environment")
        raise ConfigError(f"Invalid {env_name}: {error['msg']}") from e
