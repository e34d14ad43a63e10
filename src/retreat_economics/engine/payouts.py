"""Team payout schedule.

Team members are paid in two legs: a deposit as soon as a booking is
confirmed and the remainder a fixed number of days before the retreat
starts (50 % / 50 %, one week out, with the default ``PlatformConfig``).
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.engine.economics import compute_economics
from retreat_economics.engine.fees import ZERO
from retreat_economics.models.results import MemberPayoutShare, ScheduledPayout


def split_payout(amount: Decimal, deposit_pct: Decimal) -> tuple[Decimal, Decimal]:
    """Split ``amount`` into (deposit, final). The legs always sum to ``amount``."""
    deposit = amount * deposit_pct
    return deposit, amount - deposit


def final_payout_date(start_date: date, confirmed_on: date, days_before_start: int) -> date:
    """Date of the final leg.

    Normally ``start_date - days_before_start``. A booking confirmed inside
    that window gets its final leg on the confirmation date instead, so no
    leg is ever scheduled before the booking exists.
    """
    return max(start_date - timedelta(days=days_before_start), confirmed_on)


def build_payout_schedule(
    inputs: RetreatEconomicsInput,
    start_date: date,
    confirmed_on: date,
) -> list[ScheduledPayout]:
    """Deposit and final payouts for every team member with a positive fee.

    Zero-value legs are left out, as are members whose fee comes to zero.
    """
    platform = inputs.platform
    result = compute_economics(inputs)
    final_date = final_payout_date(start_date, confirmed_on, platform.final_payout_days_before_start)

    schedule: list[ScheduledPayout] = []
    for index, fee in result.per_member_fee.items():
        if fee <= 0:
            continue
        deposit, final = split_payout(fee, platform.deposit_pct)
        if deposit > 0:
            schedule.append(ScheduledPayout(
                member_index=index, payout_type="deposit",
                amount=deposit, scheduled_date=confirmed_on,
            ))
        if final > 0:
            schedule.append(ScheduledPayout(
                member_index=index, payout_type="final",
                amount=final, scheduled_date=final_date,
            ))
    return schedule


def compute_booking_shares(inputs: RetreatEconomicsInput) -> list[MemberPayoutShare]:
    """Each member's cut of one attendee's booking.

    The retreat-level fee is spread evenly over capacity, so a flat fee of
    500 with 20 places pays 25 per booking and a per-person fee pays its
    face value. Zero capacity yields zero shares.
    """
    result = compute_economics(inputs)
    attendees = inputs.max_attendees

    shares: list[MemberPayoutShare] = []
    for index, member in enumerate(inputs.team_members):
        fee = result.per_member_fee[index]
        per_booking = fee / attendees if attendees > 0 else ZERO
        deposit, final = split_payout(per_booking, inputs.platform.deposit_pct)
        shares.append(MemberPayoutShare(
            member_index=index,
            role=member.role.value,
            total=per_booking,
            deposit_amount=deposit,
            final_amount=final,
        ))
    return shares
