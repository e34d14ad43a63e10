"""Tests for engine/economics.py — totals, platform fee, host profit, break-even."""

from __future__ import annotations

from decimal import Decimal

from retreat_economics.config import PlatformConfig, RetreatEconomicsInput, TeamMemberAgreement
from retreat_economics.engine.economics import (
    break_even_price,
    compute_economics,
    total_percentage_share,
)


# ═══════════════════════════════════════════════════════════════════════════
# compute_economics
# ═══════════════════════════════════════════════════════════════════════════

class TestComputeEconomics:

    def test_aggregate_example(self, retreat_with_team: RetreatEconomicsInput):
        r = compute_economics(retreat_with_team)
        # revenue = 1000 × 20
        assert r.total_revenue == 20_000
        # flat 500, per_person 50 × 20, 10% of 20,000
        assert r.per_member_fee == {0: 500, 1: 1000, 2: 2000}
        assert r.total_team_cost == 3_500
        assert r.platform_fee == 6_000
        # 20,000 − 3,500 − 6,000
        assert r.host_profit == 10_500
        assert r.platform_fee_rate == Decimal("0.30")
        assert r.is_profitable

    def test_idempotent(self, retreat_with_team: RetreatEconomicsInput):
        before = retreat_with_team.model_dump()
        first = compute_economics(retreat_with_team)
        second = compute_economics(retreat_with_team)
        assert first == second
        assert retreat_with_team.model_dump() == before

    def test_empty_team(self, retreat: RetreatEconomicsInput):
        r = compute_economics(retreat)
        assert r.per_member_fee == {}
        assert r.total_team_cost == 0
        assert r.host_profit == r.total_revenue * Decimal("0.70")

    def test_negative_profit_is_a_result(self, retreat: RetreatEconomicsInput):
        # Team cost 15,000 > 0.70 × 20,000 = 14,000
        expensive = retreat.model_copy(update={"team_members": [
            TeamMemberAgreement(fee_type="flat", fee_amount=Decimal("15000")),
        ]})
        r = compute_economics(expensive)
        assert r.host_profit == -1_000
        assert not r.is_profitable

    def test_zero_attendees(self, retreat_with_team: RetreatEconomicsInput):
        r = compute_economics(retreat_with_team.model_copy(update={"max_attendees": 0}))
        assert r.total_revenue == 0
        assert r.platform_fee == 0
        # Only the flat fee survives
        assert r.per_member_fee == {0: 500, 1: 0, 2: 0}
        assert r.host_profit == -500

    def test_zero_nights_zeroes_per_night_fees(self, retreat: RetreatEconomicsInput):
        inputs = retreat.model_copy(update={
            "num_nights": 0,
            "team_members": [
                TeamMemberAgreement(fee_type="per_night", fee_amount=Decimal("1500")),
                TeamMemberAgreement(fee_type="per_person_per_night", fee_amount=Decimal("75")),
            ],
        })
        assert compute_economics(inputs).total_team_cost == 0

    def test_unknown_fee_type_contributes_zero(self, retreat_with_team: RetreatEconomicsInput):
        members = retreat_with_team.team_members + [
            TeamMemberAgreement(fee_type="bartering", fee_amount=Decimal("400")),
        ]
        r = compute_economics(retreat_with_team.model_copy(update={"team_members": members}))
        assert r.per_member_fee[3] == 0
        assert r.total_team_cost == 3_500

    def test_platform_rate_is_configurable(self, retreat: RetreatEconomicsInput):
        inputs = retreat.model_copy(update={"platform": PlatformConfig(platform_fee_rate=Decimal("0.10"))})
        r = compute_economics(inputs)
        assert r.platform_fee == 2_000
        assert r.host_profit == 18_000

    def test_decimal_sums_exactly(self, retreat: RetreatEconomicsInput):
        # Ten 0.1 flat fees; binary floats would give 0.9999999999999999
        inputs = retreat.model_copy(update={"team_members": [
            TeamMemberAgreement(fee_type="flat", fee_amount=Decimal("0.1")) for _ in range(10)
        ]})
        assert compute_economics(inputs).total_team_cost == Decimal("1.0")


# ═══════════════════════════════════════════════════════════════════════════
# Break-even price
# ═══════════════════════════════════════════════════════════════════════════

class TestBreakEvenPrice:

    def test_host_profit_is_zero_at_break_even(self, retreat: RetreatEconomicsInput):
        inputs = retreat.model_copy(update={"team_members": [
            TeamMemberAgreement(fee_type="flat", fee_amount=Decimal("7000")),
            TeamMemberAgreement(fee_type="percentage", fee_amount=Decimal("20")),
        ]})
        price = break_even_price(inputs)
        # 7000 / (20 × (1 − 0.30 − 0.20)) = 700
        assert price == 700
        at_price = compute_economics(inputs.model_copy(update={"price_per_person": price}))
        assert at_price.host_profit == 0

    def test_no_fixed_costs_breaks_even_at_zero(self, retreat: RetreatEconomicsInput):
        assert break_even_price(retreat) == 0

    def test_none_when_shares_consume_the_ticket(self, retreat: RetreatEconomicsInput):
        inputs = retreat.model_copy(update={"team_members": [
            TeamMemberAgreement(fee_type="flat", fee_amount=Decimal("100")),
            TeamMemberAgreement(fee_type="percentage", fee_amount=Decimal("70")),
        ]})
        assert break_even_price(inputs) is None

    def test_none_without_attendees(self, retreat: RetreatEconomicsInput):
        inputs = retreat.model_copy(update={
            "max_attendees": 0,
            "team_members": [TeamMemberAgreement(fee_type="flat", fee_amount=Decimal("100"))],
        })
        assert break_even_price(inputs) is None

    def test_total_percentage_share(self, retreat_with_team: RetreatEconomicsInput):
        assert total_percentage_share(retreat_with_team) == 10
