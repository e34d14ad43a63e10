"""Top-level calculator input — one retreat and its team."""

from decimal import Decimal

from pydantic import BaseModel, Field

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.team import TeamMemberAgreement


class RetreatEconomicsInput(BaseModel):
    """Snapshot of the numbers a host is editing.

    Built fresh from the current form state each time it changes; only the
    constituent fields are ever persisted.
    """

    price_per_person: Decimal = Field(default=Decimal("0"), ge=0, description="Attendee ticket price")
    max_attendees: int = Field(default=0, ge=0, description="Capacity used for revenue and per-person fees")
    num_nights: int = Field(default=0, ge=0, description="Night count used for per-night fees")
    team_members: list[TeamMemberAgreement] = Field(
        default_factory=list,
        description="Team agreements. Order only matters for display.",
    )
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
