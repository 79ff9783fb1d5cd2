"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recurring.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class RecurringConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
