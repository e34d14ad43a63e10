"""Tests for dashboard/formatting.py."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from retreat_economics.config import RetreatEconomicsInput
from retreat_economics.dashboard.formatting import (
    format_currency,
    payout_frame,
    profit_color,
    team_frame,
)
from retreat_economics.engine.economics import compute_economics
from retreat_economics.engine.payouts import build_payout_schedule


def test_format_currency():
    assert format_currency(Decimal("1500")) == "$1,500"
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-500")) == "-$500"
    assert format_currency(0) == "$0"


def test_profit_color():
    assert profit_color(Decimal("0")) == "green"
    assert profit_color(Decimal("-1")) == "red"


def test_team_frame(retreat_with_team: RetreatEconomicsInput):
    frame = team_frame(retreat_with_team, compute_economics(retreat_with_team))
    assert list(frame.columns) == ["Role", "Fee Type", "Amount", "Description", "Fee"]
    assert frame["Role"].tolist() == ["Venue", "Chef", "Co-host"]
    assert frame["Fee Type"].tolist() == ["Flat Fee", "Per Person", "Percentage of Total"]
    assert frame["Fee"].tolist() == [500.0, 1000.0, 2000.0]


def test_team_frame_empty(retreat: RetreatEconomicsInput):
    frame = team_frame(retreat, compute_economics(retreat))
    assert frame.empty
    assert "Fee" in frame.columns


def test_payout_frame_sorted_by_date(retreat_with_team: RetreatEconomicsInput):
    schedule = build_payout_schedule(retreat_with_team, date(2026, 3, 20), date(2026, 1, 10))
    frame = payout_frame(schedule, retreat_with_team)
    assert len(frame) == 6
    assert frame["Date"].tolist()[:3] == [date(2026, 1, 10)] * 3
    assert frame["Leg"].tolist()[:3] == ["Deposit"] * 3
    assert frame["Amount"].sum() == 3500.0
