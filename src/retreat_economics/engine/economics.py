"""Retreat economics — revenue, team cost, platform fee and host profit.

Recomputed from scratch on every call; nothing is cached between calls.
"""

from __future__ import annotations

from decimal import Decimal

from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.config.team import FeeType
from retreat_economics.engine.fees import HUNDRED, ZERO, compute_member_fee
from retreat_economics.models.results import RetreatEconomicsResult


def compute_economics(inputs: RetreatEconomicsInput) -> RetreatEconomicsResult:
    """Turn a retreat snapshot into per-member fees and headline totals.

    Total over its domain: zero attendees, zero nights and an empty team all
    produce numbers, and a negative ``host_profit`` is a normal result.
    """
    per_member_fee = {
        index: compute_member_fee(member, inputs)
        for index, member in enumerate(inputs.team_members)
    }
    total_team_cost = sum(per_member_fee.values(), ZERO)

    rate = inputs.platform.platform_fee_rate
    total_revenue = inputs.price_per_person * inputs.max_attendees
    platform_fee = total_revenue * rate
    host_profit = total_revenue - total_team_cost - platform_fee

    return RetreatEconomicsResult(
        per_member_fee=per_member_fee,
        total_team_cost=total_team_cost,
        total_revenue=total_revenue,
        platform_fee=platform_fee,
        host_profit=host_profit,
        platform_fee_rate=rate,
    )


def total_percentage_share(inputs: RetreatEconomicsInput) -> Decimal:
    """Sum of all percentage-of-revenue agreements, in percent."""
    return sum(
        (m.fee_amount for m in inputs.team_members if m.known_fee_type is FeeType.PERCENTAGE),
        ZERO,
    )


def break_even_price(inputs: RetreatEconomicsInput) -> Decimal | None:
    """Lowest ticket price at which the host stops losing money.

    Team agreements stay fixed. Percentage fees and the platform fee grow
    with price; everything else does not:

        price × attendees × (1 − rate − Σpct/100) = fixed team cost

    Returns ``None`` when no price breaks even (no attendees, or the
    platform plus percentage shares take all of every ticket while fixed
    costs remain).
    """
    fixed_inputs = inputs.model_copy(update={"price_per_person": ZERO})
    fixed_cost = compute_economics(fixed_inputs).total_team_cost
    if fixed_cost == 0:
        return ZERO

    margin = 1 - inputs.platform.platform_fee_rate - total_percentage_share(inputs) / HUNDRED
    if inputs.max_attendees == 0 or margin <= 0:
        return None
    return fixed_cost / (inputs.max_attendees * margin)
