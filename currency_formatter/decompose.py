"""
Split amounts into the groups used when reading them out loud.

    decompose(10_123)            → 0 millions, 10 thousands, 123 remainder
    split_amount(Decimal("-5.5")) → 5 remainder, 50 minor units, negative

Minor units are always hundredths, whatever the currency's decimal places.
Half-way hundredths round away from zero (ROUND_HALF_UP on the absolute
value), so 0.125 reads as 13 minor units.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from .models import AmountDecomposition

_MILLION = 1_000_000
_THOUSAND = 1_000
_HUNDRED = Decimal(100)


def decompose(major_amount: int | Decimal) -> AmountDecomposition:
    """Split a non-negative whole amount into millions, thousands and remainder.

    Raises:
        ValueError: If the amount is negative or has a fractional part.
            Callers floor the amount first.
    """
    if major_amount < 0:
        raise ValueError(f"Cannot decompose a negative amount: {major_amount}")
    if major_amount != int(major_amount):
        raise ValueError(f"Cannot decompose a fractional amount: {major_amount}")

    major = int(major_amount)
    millions, rest = divmod(major, _MILLION)

    if rest >= _THOUSAND:
        thousands, remainder = divmod(rest, _THOUSAND)
    else:
        thousands, remainder = 0, rest

    return AmountDecomposition(
        millions=millions, thousands=thousands, remainder=remainder
    )


def split_amount(amount: Decimal) -> AmountDecomposition:
    """Decompose a signed decimal amount, including its rounded hundredths."""
    absolute = abs(amount)
    major = absolute.to_integral_value(rounding=ROUND_FLOOR)
    minor = int(((absolute - major) * _HUNDRED).quantize(Decimal(1), rounding=ROUND_HALF_UP))

    # 1.999 rounds to 200 hundredths: carry into the major part
    if minor == 100:
        major += 1
        minor = 0

    groups = decompose(major)
    return groups.model_copy(
        update={"minor_units": minor, "is_negative": amount < 0}
    )
