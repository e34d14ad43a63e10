"""Engine — deterministic retreat economics."""

from retreat_economics.engine.fees import compute_member_fee, fee_for
from retreat_economics.engine.economics import break_even_price, compute_economics
from retreat_economics.engine.payouts import build_payout_schedule, compute_booking_shares, split_payout
from retreat_economics.engine.earnings import DEFAULT_FEES_BY_ROLE, describe_fee, estimate_earnings
from retreat_economics.engine.team import RetreatTeam
from retreat_economics.engine.records import (
    count_nights,
    economics_input_from_records,
    member_from_row,
    team_change_payload,
)

__all__ = [
    "compute_member_fee",
    "fee_for",
    "compute_economics",
    "break_even_price",
    # Payouts
    "split_payout",
    "build_payout_schedule",
    "compute_booking_shares",
    # Earnings
    "DEFAULT_FEES_BY_ROLE",
    "describe_fee",
    "estimate_earnings",
    # Team list + records
    "RetreatTeam",
    "count_nights",
    "member_from_row",
    "economics_input_from_records",
    "team_change_payload",
]
