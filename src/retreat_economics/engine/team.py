"""Editable retreat team with change notification.

Holds the host's working list of team agreements. Every edit recomputes the
economics from scratch and notifies ``on_team_change`` with the current list
and total team cost so the owning form can persist both alongside the
retreat record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.config.team import TeamMemberAgreement
from retreat_economics.engine.economics import compute_economics
from retreat_economics.errors import TeamMemberNotFoundError
from retreat_economics.models.results import RetreatEconomicsResult

logger = logging.getLogger(__name__)

TeamChangeCallback = Callable[[list[TeamMemberAgreement], Decimal], Any]


class RetreatTeam:
    """The team list for one retreat plus the numbers it is priced against.

    ``on_team_change`` is fire-and-forget: it is called after each change,
    its return value is discarded and never awaited. Edits that leave both
    the member list and the total team cost unchanged do not notify, and an
    edit that fails validation or pricing leaves the team untouched.
    """

    def __init__(
        self,
        price_per_person: Decimal = Decimal("0"),
        max_attendees: int = 0,
        num_nights: int = 0,
        platform: PlatformConfig | None = None,
        members: list[TeamMemberAgreement] | None = None,
        on_team_change: TeamChangeCallback | None = None,
    ) -> None:
        self._inputs = RetreatEconomicsInput(
            price_per_person=price_per_person,
            max_attendees=max_attendees,
            num_nights=num_nights,
            team_members=list(members or []),
            platform=platform or PlatformConfig(),
        )
        self._total_team_cost = compute_economics(self._inputs).total_team_cost
        self._on_team_change = on_team_change

    # ── Read access ────────────────────────────────────────────────────

    @property
    def members(self) -> list[TeamMemberAgreement]:
        return list(self._inputs.team_members)

    @property
    def inputs(self) -> RetreatEconomicsInput:
        """Snapshot of the current inputs (a copy; edits go through this class)."""
        return self._inputs.model_copy(deep=True)

    def economics(self) -> RetreatEconomicsResult:
        return compute_economics(self._inputs)

    def __len__(self) -> int:
        return len(self._inputs.team_members)

    # ── Edits ──────────────────────────────────────────────────────────

    def add_member(self, member: TeamMemberAgreement | None = None) -> int:
        """Append a member (a blank flat-fee staff agreement by default). Returns its index."""
        members = self.members
        members.append(member if member is not None else TeamMemberAgreement())
        self._replace(team_members=members)
        return len(members) - 1

    def update_member(self, index: int, **changes: Any) -> TeamMemberAgreement:
        """Apply field changes to the member at ``index`` and return the new agreement."""
        members = self.members
        self._check_index(index, members)
        current = members[index].model_dump()
        current.update(changes)
        members[index] = TeamMemberAgreement(**current)
        self._replace(team_members=members)
        return members[index]

    def remove_member(self, index: int) -> TeamMemberAgreement:
        members = self.members
        self._check_index(index, members)
        removed = members.pop(index)
        self._replace(team_members=members)
        return removed

    def set_retreat(
        self,
        price_per_person: Decimal | None = None,
        max_attendees: int | None = None,
        num_nights: int | None = None,
    ) -> None:
        """Change the retreat numbers the team is priced against."""
        changes: dict[str, Any] = {}
        if price_per_person is not None:
            changes["price_per_person"] = price_per_person
        if max_attendees is not None:
            changes["max_attendees"] = max_attendees
        if num_nights is not None:
            changes["num_nights"] = num_nights
        if changes:
            self._replace(**changes)

    # ── Internals ──────────────────────────────────────────────────────

    @staticmethod
    def _check_index(index: int, members: list[TeamMemberAgreement]) -> None:
        if not 0 <= index < len(members):
            raise TeamMemberNotFoundError(index)

    def _replace(self, **changes: Any) -> None:
        data = self._inputs.model_dump()
        data.update(changes)
        # Re-validate so edits obey the same constraints as fresh input
        inputs = RetreatEconomicsInput(**data)
        total_team_cost = compute_economics(inputs).total_team_cost
        changed = (
            inputs.team_members != self._inputs.team_members
            or total_team_cost != self._total_team_cost
        )
        self._inputs = inputs
        self._total_team_cost = total_team_cost
        if changed:
            self._notify()

    def _notify(self) -> None:
        if self._on_team_change is None:
            return
        logger.debug(
            "Team changed: %d members, total team cost %s",
            len(self._inputs.team_members), self._total_team_cost,
        )
        self._on_team_change(self.members, self._total_team_cost)
