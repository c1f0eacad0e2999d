"""Runtime configuration read from ``ORDERPROC_*`` environment variables.

CLI options take precedence; these are only the defaults they fall
back to.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orderproc.domain.model.value_objects import DEFAULT_CURRENCY


class Settings(BaseSettings):
    catalog_path: Path | None = None  # ORDERPROC_CATALOG_PATH
    log_level: str = "WARNING"
    currency: str = DEFAULT_CURRENCY

    model_config = SettingsConfigDict(env_prefix="ORDERPROC_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @field_validator("currency")
    @classmethod
    def _currency_code(cls, value: str) -> str:
        value = value.strip().upper()
        if not value.isalpha():
            raise ValueError(f"Currency must be an alphabetic code, got {value!r}")
        return value

    def override(self, **changes: object) -> Settings:
        """Return a copy with every non-None value in *changes* applied."""
        return self.model_copy(update={k: v for k, v in changes.items() if v is not None})
