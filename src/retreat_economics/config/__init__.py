"""Configuration models — calculator inputs."""

from retreat_economics.config.platform import PlatformConfig
from retreat_economics.config.team import FeeType, TeamMemberAgreement, TeamRole
from retreat_economics.config.retreat import RetreatEconomicsInput

__all__ = [
    "FeeType",
    "TeamRole",
    "TeamMemberAgreement",
    "PlatformConfig",
    "RetreatEconomicsInput",
]
