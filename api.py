"""
Currency Formatter — FastAPI Server
===================================

HTTP access to the formatters and the currency reference table.

Endpoints:
    POST /format                 Format an amount in any style
    GET  /currencies             List supported currencies (?country=DE filters)
    GET  /currencies/{code}      Reference data for one currency
    GET  /health                 Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from currency_formatter import __version__
from currency_formatter.currencies import (
    CURRENCIES,
    currencies_for_country,
    list_currencies,
    lookup_currency,
)
from currency_formatter.exceptions import InvalidFormatArgument
from currency_formatter.formatter import format_amount
from currency_formatter.locales import default_locale_tag
from currency_formatter.models import CurrencyInfo, FormatRequest, FormatResult

load_dotenv()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Currency Formatter API",
    description=(
        "Locale-aware currency formatting: standard, compact (K/M/B/T), "
        "major/minor unit breakdown and fully spelled-out detailed amounts."
    ),
    version=__version__,
)


# ─── Response Schemas ───────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str
    version: str
    currencies_loaded: int


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/format",
    summary="Format an amount",
    tags=["Formatting"],
    responses={422: {"model": ErrorResponse, "description": "Invalid currency, locale or amount"}},
)
def format_endpoint(request: FormatRequest) -> FormatResult:
    """Format `amount` in `currency_code` using the requested style.

    - **standard**: `$1,234.56`
    - **compact**: `$1.2K` (uses `precision`)
    - **minor_units**: `$1,234 56 cents`
    - **detailed**: `1 thousand 234 dollars 56 cents`
    """
    locale = request.locale or default_locale_tag()
    try:
        formatted = format_amount(
            request.amount,
            request.currency_code,
            locale,
            style=request.style,
            precision=request.precision,
        )
    except InvalidFormatArgument as exc:
        raise HTTPException(
            status_code=422,
            detail={"code": exc.code, "message": exc.message, "details": exc.details},
        ) from exc

    return FormatResult(
        formatted=formatted,
        style=request.style,
        currency_code=request.currency_code.upper(),
        locale=locale,
    )


@app.get("/currencies", summary="List supported currencies", tags=["Currencies"])
def currencies_endpoint(
    country: Optional[str] = Query(default=None, min_length=2, max_length=2),
) -> list[CurrencyInfo]:
    """All supported currencies, or only those used in `country`."""
    if country:
        return currencies_for_country(country)
    return list_currencies()


@app.get(
    "/currencies/{code}",
    summary="Currency reference data",
    tags=["Currencies"],
    responses={404: {"description": "Currency not supported"}},
)
def currency_endpoint(code: str) -> CurrencyInfo:
    info = lookup_currency(code)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Currency '{code}' is not supported")
    return info


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        currencies_loaded=len(CURRENCIES),
    )
