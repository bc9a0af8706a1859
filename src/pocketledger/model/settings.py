"""
Application settings model.

Mirrors config/settings.yml. No I/O here (see settings_io.py).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pocketledger.config import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_LOCALE,
    DEFAULT_MAX_MONTHS,
    DEFAULT_OWNER_ID,
    MONTH_ABBREVIATIONS,
    NUMBER_SEPARATORS,
)


class Settings(BaseModel):
    """User-level settings for the ledger workspace."""

    owner_id: str = Field(default=DEFAULT_OWNER_ID, min_length=1, description="Owner of new records")
    locale: str = Field(default=DEFAULT_LOCALE, description="Locale for month labels and number separators")
    currency_symbol: str = Field(default=DEFAULT_CURRENCY_SYMBOL)
    dashboard_months: int = Field(
        default=DEFAULT_MAX_MONTHS, ge=1, description="Months shown on the dashboard"
    )

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        if value not in MONTH_ABBREVIATIONS or value not in NUMBER_SEPARATORS:
            known = ", ".join(sorted(MONTH_ABBREVIATIONS))
            raise ValueError(f"Unknown locale '{value}' (known: {known})")
        return value


__all__ = ["Settings"]
