"""Team member fee agreements."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class FeeType(str, Enum):
    """Recognized fee arrangements. Each one maps to exactly one payout formula."""

    FLAT = "flat"
    PER_PERSON = "per_person"
    PER_NIGHT = "per_night"
    PER_PERSON_PER_NIGHT = "per_person_per_night"
    PERCENTAGE = "percentage"


class TeamRole(str, Enum):
    """Who the agreement is with. Descriptive only; never changes the math."""

    VENUE = "venue"
    COHOST = "cohost"
    CHEF = "chef"
    STAFF = "staff"
    OTHER = "other"


class TeamMemberAgreement(BaseModel):
    """One venue, co-host, chef or staff agreement attached to a retreat."""

    role: TeamRole = Field(default=TeamRole.STAFF, description="Descriptive role label")
    fee_type: str = Field(
        default=FeeType.FLAT.value,
        description="One of flat, per_person, per_night, per_person_per_night, percentage. "
                    "Other values are accepted and contribute zero unless strict mode is on.",
    )
    fee_amount: Decimal = Field(
        default=Decimal("0"), ge=0,
        description="Currency amount, or a percentage value (e.g. 15 = 15%) "
                    "when fee_type is 'percentage'. Percentages above 100 are allowed.",
    )
    description: str = Field(default="", description="Free text, e.g. 'Venue rental'")
    user_id: str | None = Field(default=None, description="Profile id of the member, if known")
    name: str | None = Field(default=None, description="Display name, if known")

    @property
    def known_fee_type(self) -> FeeType | None:
        """The fee type as a ``FeeType``, or ``None`` if it is not recognized."""
        try:
            return FeeType(self.fee_type)
        except ValueError:
            return None
