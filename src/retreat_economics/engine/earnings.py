"""Single-participant earnings estimate.

Answers "what would I make on a retreat like this?" for a host, venue,
co-host, chef or staff member considering one fee arrangement. Uses the same
formulas as the team calculator.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.team import FeeType
from retreat_economics.engine.fees import fee_for
from retreat_economics.engine.payouts import split_payout
from retreat_economics.engine.records import normalize_fee_type
from retreat_economics.models.results import EarningsEstimate

EarningsRole = Literal["host", "venue", "cohost", "chef", "staff"]

DEFAULT_FEES_BY_ROLE: dict[str, tuple[FeeType, Decimal]] = {
    "host": (FeeType.PERCENTAGE, Decimal("100")),
    "venue": (FeeType.PER_NIGHT, Decimal("1500")),
    "cohost": (FeeType.PERCENTAGE, Decimal("15")),
    "chef": (FeeType.PER_PERSON_PER_NIGHT, Decimal("75")),
    "staff": (FeeType.FLAT, Decimal("2000")),
}


def _money(value: Decimal) -> str:
    # 1500 → "$1,500", 12.5 → "$12.50"
    if value == value.to_integral_value():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def describe_fee(
    fee_type: str,
    fee_amount: Decimal,
    attendees: int,
    nights: int,
    total_revenue: Decimal,
) -> str:
    """One-line explanation of how a fee is computed."""
    if fee_type == FeeType.FLAT.value:
        return f"Flat fee of {_money(fee_amount)}"
    if fee_type == FeeType.PER_PERSON.value:
        return f"{_money(fee_amount)}/person × {attendees} attendees"
    if fee_type == FeeType.PER_NIGHT.value:
        return f"{_money(fee_amount)}/night × {nights} nights"
    if fee_type == FeeType.PER_PERSON_PER_NIGHT.value:
        return f"{_money(fee_amount)}/person/night × {attendees} attendees × {nights} nights"
    if fee_type == FeeType.PERCENTAGE.value:
        return f"{fee_amount.normalize():f}% of {_money(total_revenue)} total revenue"
    return ""


def estimate_earnings(
    role: EarningsRole,
    attendees: int,
    nights: int,
    price_per_person: Decimal,
    fee_type: str | None = None,
    fee_amount: Decimal | None = None,
    platform: PlatformConfig | None = None,
) -> EarningsEstimate:
    """Estimate one participant's earnings and their deposit/final split.

    Omitted ``fee_type``/``fee_amount`` fall back to the role's default
    agreement from ``DEFAULT_FEES_BY_ROLE``. Legacy spellings such as
    ``per_person_night`` are accepted.
    """
    platform = platform or PlatformConfig()
    default_type, default_amount = DEFAULT_FEES_BY_ROLE[role]
    fee_type = normalize_fee_type(fee_type) if fee_type is not None else default_type.value
    fee_amount = Decimal(fee_amount) if fee_amount is not None else default_amount
    price_per_person = Decimal(price_per_person)

    total_revenue = price_per_person * attendees
    earnings = fee_for(fee_type, fee_amount, price_per_person, attendees, nights, platform)
    deposit, final = split_payout(earnings, platform.deposit_pct)

    return EarningsEstimate(
        role=role,
        fee_type=fee_type,
        fee_amount=fee_amount,
        attendees=attendees,
        nights=nights,
        price_per_person=price_per_person,
        total_revenue=total_revenue,
        earnings=earnings,
        deposit_amount=deposit,
        final_amount=final,
        breakdown=describe_fee(fee_type, fee_amount, attendees, nights, total_revenue),
    )
