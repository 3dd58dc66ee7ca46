"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, daysleft.toml only contains
overrides. A fresh page needs only ``[countdown] deadline``.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from daysleft.domain.deadline import DEFAULT_TIMEZONE

# --- daysleft.toml sections ---


class CountdownConfig(BaseModel):
    """[countdown] section."""

    model_config = {"frozen": True}

    deadline: str | None = None
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("deadline")
    @classmethod
    def _blank_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class PageConfig(BaseModel):
    """[page] section."""

    model_config = {"frozen": True}

    document: str = "www/home.html"
    target: str = "days"
