"""Narrative generator — plain-English reading of a retreat's economics.

Turns a ``RetreatEconomicsResult`` into a sectioned text block a host (or an
LLM acting for one) can read without parsing the numbers.
"""

from __future__ import annotations

from decimal import Decimal

from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.config.team import FeeType
from retreat_economics.engine.economics import break_even_price, total_percentage_share
from retreat_economics.models.results import RetreatEconomicsResult


def _usd(value: Decimal) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _header(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_narrative(inputs: RetreatEconomicsInput, result: RetreatEconomicsResult) -> str:
    """Generate a plain-English narrative for one retreat.

    Sections:
      1. Retreat summary
      2. Revenue breakdown
      3. Team (largest fee first)
      4. Verdict and recommendations
    """
    sections: list[str] = []
    rate_pct = result.platform_fee_rate * 100

    # ── 1. Retreat summary ──
    sections += _header("RETREAT SUMMARY")
    sections.append(
        f"Ticket price: {_usd(inputs.price_per_person)} per person\n"
        f"Capacity: {inputs.max_attendees} attendees\n"
        f"Length: {inputs.num_nights} nights\n"
        f"Team members: {len(inputs.team_members)}"
    )

    # ── 2. Revenue breakdown ──
    sections.append("")
    sections += _header("REVENUE BREAKDOWN")
    sections.append(
        f"Total revenue:       {_usd(result.total_revenue)}\n"
        f"Team costs:          {_usd(-result.total_team_cost)}\n"
        f"Platform fee ({rate_pct:.0f}%):  {_usd(-result.platform_fee)}\n"
        f"Host profit:         {_usd(result.host_profit)}"
    )

    # ── 3. Team ──
    if inputs.team_members:
        sections.append("")
        sections += _header("TEAM")
        ranked = sorted(result.per_member_fee.items(), key=lambda kv: kv[1], reverse=True)
        for index, fee in ranked:
            member = inputs.team_members[index]
            label = member.name or member.description or member.role.value
            share = (fee / result.total_team_cost * 100) if result.total_team_cost > 0 else Decimal("0")
            sections.append(
                f"  {label:30s}  {member.fee_type:22s}  {_usd(fee):>14s}  ({share:5.1f}%)"
            )

    # ── 4. Verdict ──
    sections.append("")
    sections += _header("VERDICT")

    recs: list[str] = []
    if result.host_profit < 0:
        recs.append(
            f"The retreat is over-committed: team costs and the platform fee exceed revenue "
            f"by {_usd(-result.host_profit)}."
        )
        be = break_even_price(inputs)
        if be is not None and be > 0:
            recs.append(f"Raising the ticket price to at least {_usd(be)} would break even.")
        else:
            recs.append("No ticket price breaks even with the current agreements; renegotiate team fees.")
    else:
        recs.append(f"The host keeps {_usd(result.host_profit)} after team costs and the platform fee.")

    pct_total = total_percentage_share(inputs)
    if pct_total > 100:
        recs.append(f"Percentage agreements add up to {pct_total.normalize():f}% of revenue, more than the whole ticket.")

    unknown = [m.fee_type for m in inputs.team_members if m.known_fee_type is None]
    if unknown:
        recs.append(
            f"{len(unknown)} agreement(s) use an unrecognized fee type ({', '.join(sorted(set(unknown)))}) "
            f"and were counted as zero. Valid types: {', '.join(f.value for f in FeeType)}."
        )

    if inputs.max_attendees == 0:
        recs.append("Capacity is zero, so there is no revenue and no per-person fees.")

    for i, rec in enumerate(recs, 1):
        sections.append(f"  {i}. {rec}")

    return "\n".join(sections)
