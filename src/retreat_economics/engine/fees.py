"""Team member fee formulas.

Pure arithmetic: one agreement + the retreat's price, capacity and nights →
what that member is owed for the whole retreat.

    flat                  fee_amount
    per_person            fee_amount × max_attendees
    per_night             fee_amount × num_nights
    per_person_per_night  fee_amount × max_attendees × num_nights
    percentage            fee_amount / 100 × price_per_person × max_attendees
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.retreat import RetreatEconomicsInput
from retreat_economics.config.team import FeeType, TeamMemberAgreement
from retreat_economics.errors import UnknownFeeTypeError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

FeeFormula = Callable[[Decimal, Decimal, int, int], Decimal]
"""(fee_amount, price_per_person, attendees, nights) → fee."""

FEE_FORMULAS: dict[FeeType, FeeFormula] = {
    FeeType.FLAT: lambda amount, price, attendees, nights: amount,
    FeeType.PER_PERSON: lambda amount, price, attendees, nights: amount * attendees,
    FeeType.PER_NIGHT: lambda amount, price, attendees, nights: amount * nights,
    FeeType.PER_PERSON_PER_NIGHT: lambda amount, price, attendees, nights: amount * attendees * nights,
    FeeType.PERCENTAGE: lambda amount, price, attendees, nights: (amount / HUNDRED) * price * attendees,
}


def fee_for(
    fee_type: str,
    fee_amount: Decimal,
    price_per_person: Decimal,
    attendees: int,
    nights: int,
    platform: PlatformConfig | None = None,
) -> Decimal:
    """Apply the formula for ``fee_type`` to raw numbers.

    Unrecognized fee types contribute zero, or raise ``UnknownFeeTypeError``
    when ``platform.strict_fee_types`` is set.
    """
    try:
        formula = FEE_FORMULAS[FeeType(fee_type)]
    except ValueError:
        if platform is not None and platform.strict_fee_types:
            raise UnknownFeeTypeError(fee_type) from None
        logger.warning("Unknown fee type %r counted as zero", fee_type)
        return ZERO
    return formula(Decimal(fee_amount), Decimal(price_per_person), attendees, nights)


def compute_member_fee(member: TeamMemberAgreement, inputs: RetreatEconomicsInput) -> Decimal:
    """Payout owed to one team member for the whole retreat. No rounding."""
    return fee_for(
        member.fee_type,
        member.fee_amount,
        inputs.price_per_person,
        inputs.max_attendees,
        inputs.num_nights,
        inputs.platform,
    )
