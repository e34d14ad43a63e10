"""Exceptions raised by the retreat economics engine."""

from __future__ import annotations


class RetreatEconomicsError(Exception):
    """Base class for all retreat economics errors."""


class UnknownFeeTypeError(RetreatEconomicsError, ValueError):
    """A team agreement carries a fee type the calculator has no formula for.

    Only raised when ``PlatformConfig.strict_fee_types`` is enabled; otherwise
    unknown fee types contribute zero.
    """

    def __init__(self, fee_type: str) -> None:
        self.fee_type = fee_type
        super().__init__(f"Unknown fee type: {fee_type!r}")


class TeamMemberNotFoundError(RetreatEconomicsError, IndexError):
    """No team member at the requested position."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"No team member at index {index}")
