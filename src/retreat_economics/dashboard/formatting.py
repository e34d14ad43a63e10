"""Table and number formatting for the dashboard.

Kept free of Streamlit so it can be tested on its own.
"""

from __future__ import annotations

from decimal import Decimal

import pandas as pd

from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.models.results import RetreatEconomicsResult, ScheduledPayout

FEE_TYPE_LABELS = {
    "flat": "Flat Fee",
    "per_person": "Per Person",
    "per_night": "Per Night",
    "per_person_per_night": "Per Person/Night",
    "percentage": "Percentage of Total",
}

ROLE_LABELS = {
    "venue": "Venue",
    "cohost": "Co-host",
    "chef": "Chef",
    "staff": "Staff",
    "other": "Other",
}


def format_currency(value: Decimal | float) -> str:
    """'$1,234.50', with a leading minus for negatives. Whole amounts drop the cents."""
    value = Decimal(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    if value == value.to_integral_value():
        return f"{sign}${value:,.0f}"
    return f"{sign}${value:,.2f}"


def profit_color(host_profit: Decimal) -> str:
    """Streamlit colour name for the profit figure."""
    return "green" if host_profit >= 0 else "red"


def team_frame(inputs: RetreatEconomicsInput, result: RetreatEconomicsResult) -> pd.DataFrame:
    """One row per team member with its computed fee."""
    rows = []
    for index, member in enumerate(inputs.team_members):
        rows.append({
            "Role": ROLE_LABELS.get(member.role.value, member.role.value),
            "Fee Type": FEE_TYPE_LABELS.get(member.fee_type, member.fee_type),
            "Amount": float(member.fee_amount),
            "Description": member.description,
            "Fee": float(result.per_member_fee[index]),
        })
    return pd.DataFrame(rows, columns=["Role", "Fee Type", "Amount", "Description", "Fee"])


def payout_frame(schedule: list[ScheduledPayout], inputs: RetreatEconomicsInput) -> pd.DataFrame:
    """Payout schedule as a table, ordered by date then member."""
    rows = [
        {
            "Date": p.scheduled_date,
            "Member": inputs.team_members[p.member_index].description
                      or ROLE_LABELS.get(inputs.team_members[p.member_index].role.value, ""),
            "Leg": p.payout_type.capitalize(),
            "Amount": float(p.amount),
        }
        for p in schedule
    ]
    frame = pd.DataFrame(rows, columns=["Date", "Member", "Leg", "Amount"])
    if not frame.empty:
        frame = frame.sort_values(["Date", "Member"], kind="stable").reset_index(drop=True)
    return frame
