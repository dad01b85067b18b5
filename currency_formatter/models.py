"""
Pydantic models for currency data and formatting requests.

Reference data is frozen once loaded; nothing in the package writes to a
CurrencyInfo after the table is built.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Format Styles ──────────────────────────────────────────────────


class FormatStyle(str, Enum):
    """Output style for a formatted amount."""

    STANDARD = "standard"  # $1,234.56
    COMPACT = "compact"  # $1.2K
    MINOR_UNITS = "minor_units"  # $1,234 56 cents
    DETAILED = "detailed"  # 1 thousand 234 dollars 56 cents


# ─── Currency Reference Data ────────────────────────────────────────


class CurrencyInfo(BaseModel):
    """Static metadata for one ISO 4217 currency."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=3, max_length=3)
    symbol: str
    name: str
    decimal_places: int = Field(default=2, ge=0)
    minor_unit_names: dict[str, str] = Field(default_factory=dict)
    major_unit_names: dict[str, str] = Field(default_factory=dict)
    countries: tuple[str, ...] = ()


# ─── Decomposition ──────────────────────────────────────────────────


class AmountDecomposition(BaseModel):
    """An amount split into magnitude groups plus rounded hundredths.

    millions * 1_000_000 + thousands * 1_000 + remainder is the major amount.
    """

    model_config = ConfigDict(frozen=True)

    millions: int = Field(default=0, ge=0)
    thousands: int = Field(default=0, ge=0, lt=1000)
    remainder: int = Field(default=0, ge=0, lt=1000)
    minor_units: int = Field(default=0, ge=0, le=99)
    is_negative: bool = False

    @property
    def major_amount(self) -> int:
        """The recombined major-unit amount."""
        return self.millions * 1_000_000 + self.thousands * 1_000 + self.remainder


# ─── Request / Result ───────────────────────────────────────────────


class FormatRequest(BaseModel):
    """A single formatting request."""

    amount: Decimal
    currency_code: str = Field(min_length=3, max_length=3)
    locale: Optional[str] = None
    style: FormatStyle = FormatStyle.STANDARD
    precision: int = Field(default=1, ge=0, le=10)  # compact style only


class FormatResult(BaseModel):
    """The formatted string plus the inputs that produced it."""

    formatted: str
    style: FormatStyle
    currency_code: str
    locale: str
