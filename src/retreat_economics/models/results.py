"""Result types — the contract between engine, API and dashboard.

Nothing here is persisted. Results are recomputed from a
``RetreatEconomicsInput`` whenever the inputs change.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Retreat economics
# ═══════════════════════════════════════════════════════════════════════════

class RetreatEconomicsResult(BaseModel):
    """Derived totals for one retreat."""

    per_member_fee: dict[int, Decimal]
    """Computed payout per team member, keyed by position in ``team_members``."""

    total_team_cost: Decimal
    """Sum of all member fees."""

    total_revenue: Decimal
    """price_per_person × max_attendees."""

    platform_fee: Decimal
    """total_revenue × platform_fee_rate."""

    host_profit: Decimal
    """total_revenue − total_team_cost − platform_fee. Negative when over-committed."""

    platform_fee_rate: Decimal
    """The take rate applied to get ``platform_fee``."""

    @property
    def is_profitable(self) -> bool:
        return self.host_profit >= 0


# ═══════════════════════════════════════════════════════════════════════════
# Payouts
# ═══════════════════════════════════════════════════════════════════════════

class ScheduledPayout(BaseModel):
    """One payout leg for one team member."""

    member_index: int
    payout_type: Literal["deposit", "final"]
    amount: Decimal
    scheduled_date: date


class MemberPayoutShare(BaseModel):
    """A team member's cut of a single confirmed booking."""

    member_index: int
    role: str
    total: Decimal
    """member fee ÷ max_attendees."""
    deposit_amount: Decimal
    final_amount: Decimal


# ═══════════════════════════════════════════════════════════════════════════
# Earnings estimate
# ═══════════════════════════════════════════════════════════════════════════

class EarningsEstimate(BaseModel):
    """What one participant earns from a retreat under a single fee agreement."""

    role: str
    fee_type: str
    fee_amount: Decimal
    attendees: int
    nights: int
    price_per_person: Decimal
    total_revenue: Decimal
    earnings: Decimal
    deposit_amount: Decimal
    """Paid on booking confirmation."""
    final_amount: Decimal
    """Paid before the retreat starts."""
    breakdown: str
    """Human-readable formula, e.g. '$50/person × 20 attendees'."""
