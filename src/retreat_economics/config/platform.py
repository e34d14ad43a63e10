"""Platform economics — take rate and payout timing."""

from decimal import Decimal

from pydantic import BaseModel, Field


class PlatformConfig(BaseModel):
    """Marketplace-level terms applied to every retreat.

    The take rate used to be a literal inside the calculation; it lives here
    so it can be tested and changed without touching the formulas.
    """

    platform_fee_rate: Decimal = Field(
        default=Decimal("0.30"), ge=0, le=1,
        description="Share of gross ticket revenue retained by the platform (0–1).",
    )
    deposit_pct: Decimal = Field(
        default=Decimal("0.50"), ge=0, le=1,
        description="Share of each team member's fee paid as a deposit "
                    "when a booking is confirmed. The rest is the final payout.",
    )
    final_payout_days_before_start: int = Field(
        default=7, ge=0,
        description="Days before the retreat start date on which the final payout is scheduled.",
    )
    strict_fee_types: bool = Field(
        default=False,
        description="Raise on unrecognized fee types instead of counting them as zero.",
    )
