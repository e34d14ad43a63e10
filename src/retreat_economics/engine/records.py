"""Mapping between persistence-service rows and calculator inputs.

The persistence service hands back plain records: a ``retreats`` row
(``price_per_person``, ``max_attendees``, ``start_date``, ``end_date``) and
its ``retreat_team`` rows (``role``, ``fee_type``, ``fee_amount``,
``description``, ``user_id``). No I/O happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.config.team import FeeType, TeamMemberAgreement, TeamRole

logger = logging.getLogger(__name__)

# Older rows and the public earnings widget spell this one differently
FEE_TYPE_ALIASES: dict[str, str] = {
    "per_person_night": FeeType.PER_PERSON_PER_NIGHT.value,
}


def parse_date_only(value: Any) -> date | None:
    """Parse a ``YYYY-MM-DD`` value as a calendar date (no timezone shift).

    Full ISO timestamps are accepted and truncated to their date part.
    Missing or unparseable values give ``None``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug("Ignoring non-string date %r", value)
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.debug("Ignoring unparseable date %r", value)
        return None


def count_nights(start_date: str | date | None, end_date: str | date | None) -> int:
    """Nights between check-in and check-out. Missing or reversed dates → 0."""
    start = parse_date_only(start_date)
    end = parse_date_only(end_date)
    if start is None or end is None:
        return 0
    return max(0, (end - start).days)


def normalize_fee_type(fee_type: str | None) -> str:
    if not fee_type:
        return FeeType.FLAT.value
    fee_type = fee_type.strip().lower()
    return FEE_TYPE_ALIASES.get(fee_type, fee_type)


def member_from_row(row: Mapping[str, Any]) -> TeamMemberAgreement:
    """Build an agreement from a ``retreat_team`` row."""
    role = getattr(row.get("role"), "value", row.get("role")) or TeamRole.OTHER.value
    if role not in {r.value for r in TeamRole}:
        role = TeamRole.OTHER.value
    amount = row.get("fee_amount")
    return TeamMemberAgreement(
        role=role,
        fee_type=normalize_fee_type(row.get("fee_type")),
        fee_amount=Decimal(str(amount)) if amount is not None else Decimal("0"),
        description=row.get("description") or "",
        user_id=row.get("user_id"),
        name=row.get("name"),
    )


def economics_input_from_records(
    retreat: Mapping[str, Any],
    team_rows: Iterable[Mapping[str, Any]] = (),
    platform: PlatformConfig | None = None,
) -> RetreatEconomicsInput:
    """Assemble calculator input from a retreat row and its team rows.

    Nulls in price or capacity count as zero.
    """
    price = retreat.get("price_per_person")
    return RetreatEconomicsInput(
        price_per_person=Decimal(str(price)) if price is not None else Decimal("0"),
        max_attendees=retreat.get("max_attendees") or 0,
        num_nights=count_nights(retreat.get("start_date"), retreat.get("end_date")),
        team_members=[member_from_row(row) for row in team_rows],
        platform=platform or PlatformConfig(),
    )


def team_change_payload(members: Iterable[TeamMemberAgreement], total_team_cost: Decimal) -> dict[str, Any]:
    """JSON-ready record of the team inputs plus the cached total cost.

    This is what the owning form persists on ``on_team_change``; derived
    per-member fees are not included.
    """
    return {
        "team": [
            member.model_dump(mode="json", include={"role", "fee_type", "fee_amount", "description", "user_id"})
            for member in members
        ],
        "total_team_cost": str(total_team_cost),
    }
