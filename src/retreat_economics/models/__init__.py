"""Result models — calculator output contracts."""

from retreat_economics.models.results import (
    EarningsEstimate,
    MemberPayoutShare,
    RetreatEconomicsResult,
    ScheduledPayout,
)

__all__ = [
    "EarningsEstimate",
    "MemberPayoutShare",
    "RetreatEconomicsResult",
    "ScheduledPayout",
]
