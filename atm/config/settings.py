"""
Tool-level settings loaded from the environment.

These settings tune atm itself rather than a particular repository. Every
field can be overridden with an ``ATM_`` prefixed environment variable, e.g.
``ATM_IMPLICIT_SAVE=true`` or ``ATM_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = "atm.json"


class AtmSettings(BaseSettings):
    """Settings for a single atm invocation."""

    model_config = SettingsConfigDict(env_prefix="ATM_", extra="ignore")

    log_level: str = Field(default="WARNING", description="Minimum structlog level")
    implicit_save: bool = Field(
        default=False,
        description="Treat an unrecognized first argument as a commit message ('atm fix bug' == 'atm s fix bug')",
    )
    default_branch: str = Field(default="main", description="Branch created and pushed by 'atm init'")
    config_filename: str = Field(default=CONFIG_FILENAME, description="Per-repository configuration file name")
