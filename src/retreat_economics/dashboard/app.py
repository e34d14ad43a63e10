"""Retreat Economics — Streamlit dashboard.

Layout: sidebar retreat inputs → main area with the revenue breakdown,
the editable team table and the payout schedule.

Run with:
    streamlit run src/retreat_economics/dashboard/app.py
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pandas as pd
import streamlit as st

from retreat_economics.config import FeeType, RetreatEconomicsInput, TeamMemberAgreement, TeamRole
from retreat_economics.engine.economics import break_even_price, compute_economics
from retreat_economics.engine.payouts import build_payout_schedule
from retreat_economics.engine.records import count_nights
from retreat_economics.dashboard.formatting import (
    FEE_TYPE_LABELS,
    ROLE_LABELS,
    format_currency,
    payout_frame,
    profit_color,
    team_frame,
)
from retreat_economics.settings import settings

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Retreat Economics", page_icon="🌿", layout="wide")

_PLATFORM = settings.platform_config()

# ---------------------------------------------------------------------------
# SIDEBAR — Retreat inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Retreat")

with st.sidebar.expander("Pricing & capacity", expanded=True):
    price = st.number_input("Price per person $", 0, 100_000, 1_000, 50)
    attendees = st.number_input("Max attendees", 0, 500, 20, 1)

with st.sidebar.expander("Dates", expanded=True):
    start = st.date_input("Start date", date.today() + timedelta(days=60))
    end = st.date_input("End date", date.today() + timedelta(days=65))
    nights = count_nights(start, end)
    st.caption(f"{nights} nights")

# ---------------------------------------------------------------------------
# Team table
# ---------------------------------------------------------------------------
st.title("Retreat Economics")
st.subheader("Team Members")

_STARTER_TEAM = pd.DataFrame(
    [{"Role": "venue", "Fee Type": "per_night", "Amount": 100.0, "Description": "Venue rental"}],
    columns=["Role", "Fee Type", "Amount", "Description"],
)

edited = st.data_editor(
    _STARTER_TEAM,
    num_rows="dynamic",
    use_container_width=True,
    column_config={
        "Role": st.column_config.SelectboxColumn(
            options=[r.value for r in TeamRole], required=True,
            help=", ".join(ROLE_LABELS.values()),
        ),
        "Fee Type": st.column_config.SelectboxColumn(
            options=[f.value for f in FeeType], required=True,
            help=", ".join(FEE_TYPE_LABELS.values()),
        ),
        "Amount": st.column_config.NumberColumn(min_value=0.0, step=1.0,
                                                help="Dollars, or percent for percentage fees"),
    },
    key="team",
)

members = [
    TeamMemberAgreement(
        role=row["Role"] or TeamRole.STAFF.value,
        fee_type=row["Fee Type"] or FeeType.FLAT.value,
        fee_amount=Decimal(str(row["Amount"])) if pd.notna(row["Amount"]) else Decimal("0"),
        description=row["Description"] if isinstance(row["Description"], str) else "",
    )
    for row in edited.to_dict("records")
]

inputs = RetreatEconomicsInput(
    price_per_person=Decimal(price),
    max_attendees=int(attendees),
    num_nights=nights,
    team_members=members,
    platform=_PLATFORM,
)
result = compute_economics(inputs)

# ---------------------------------------------------------------------------
# Revenue breakdown
# ---------------------------------------------------------------------------
st.subheader("Revenue Breakdown")
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Revenue", format_currency(result.total_revenue))
c2.metric("Team Costs", format_currency(-result.total_team_cost))
c3.metric(f"Platform Fee ({result.platform_fee_rate * 100:.0f}%)", format_currency(-result.platform_fee))
c4.markdown(
    f"**Your Profit**  \n:{profit_color(result.host_profit)}[{format_currency(result.host_profit)}]"
)

be = break_even_price(inputs)
if result.host_profit < 0:
    st.warning(
        f"Break-even ticket price: {format_currency(be)}" if be is not None
        else "No ticket price breaks even with these agreements."
    )

st.dataframe(team_frame(inputs, result), use_container_width=True, hide_index=True)

# ---------------------------------------------------------------------------
# Payout schedule
# ---------------------------------------------------------------------------
st.subheader("Payout Schedule")
deposit_pct = _PLATFORM.deposit_pct * 100
st.info(
    f"Team members receive {deposit_pct:.0f}% as a deposit immediately after a booking is "
    f"confirmed, and the remaining {100 - deposit_pct:.0f}% "
    f"{_PLATFORM.final_payout_days_before_start} days before the retreat starts."
)
schedule = build_payout_schedule(inputs, start, date.today())
st.dataframe(payout_frame(schedule, inputs), use_container_width=True, hide_index=True)
