"""Context manifest — makes the calculator API self-describing.

Two detail levels:
  - ``compact``: parameter schemas + descriptions
  - ``full``:    adds the business model, formulas and example queries
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from retreat_economics.config import PlatformConfig, RetreatEconomicsInput, TeamMemberAgreement


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input section (retreat, team member, platform)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class CalculatorContext(BaseModel):
    """Self-describing context for API consumers."""
    name: str
    version: str
    description: str
    business_model: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    example_queries: list[dict[str, str]]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = str(meta_val)

        default = field_info.default
        if field_info.is_required() or field_info.default_factory is not None or default is None:
            default_val = None
        elif isinstance(default, Enum):
            default_val = default.value
        elif isinstance(default, (str, int, float, bool)):
            default_val = default
        else:
            # Decimal and friends
            default_val = str(default)

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    if hasattr(field_info, "metadata"):
        for m in field_info.metadata:
            if hasattr(m, attr):
                return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Static content
# ═══════════════════════════════════════════════════════════════════════════

_BUSINESS_MODEL = """
Retreat Economics Calculator

A host prices a retreat (ticket price, capacity, nights) and brings a team:
venue, co-hosts, chef, staff. Each team member has one fee agreement. The
platform keeps a fixed share of gross ticket revenue. Whatever is left after
team fees and the platform fee is the host's profit, which can be negative.

Team members are paid in two legs: a deposit when a booking is confirmed and
the remainder one week before the retreat starts.
"""

_KEY_FORMULAS = [
    {"name": "Total revenue", "formula": "price_per_person × max_attendees"},
    {"name": "Flat fee", "formula": "fee_amount"},
    {"name": "Per-person fee", "formula": "fee_amount × max_attendees"},
    {"name": "Per-night fee", "formula": "fee_amount × num_nights"},
    {"name": "Per-person-per-night fee", "formula": "fee_amount × max_attendees × num_nights"},
    {"name": "Percentage fee", "formula": "fee_amount / 100 × price_per_person × max_attendees"},
    {"name": "Platform fee", "formula": "total_revenue × platform_fee_rate (default 0.30)"},
    {"name": "Host profit", "formula": "total_revenue − total_team_cost − platform_fee"},
]

_EXAMPLE_QUERIES = [
    {
        "query": "What does the host keep on a 20-person, 5-night retreat at $1,000 with a $500 flat venue fee?",
        "action": "POST /economics with price_per_person=1000, max_attendees=20, num_nights=5, "
                  "team_members=[{fee_type: 'flat', fee_amount: 500}]",
    },
    {
        "query": "What would a chef earn at $75 per person per night?",
        "action": "POST /earnings with role='chef', fee_type='per_person_per_night', fee_amount=75",
    },
    {
        "query": "When does each team member get paid?",
        "action": "POST /economics/payouts with the retreat start_date",
    },
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest."),
    EndpointInfo(method="GET", path="/schema", description="JSON schema for RetreatEconomicsInput."),
    EndpointInfo(method="GET", path="/economics/defaults", description="Default input as JSON."),
    EndpointInfo(method="POST", path="/economics", description="Compute fees, totals and a narrative."),
    EndpointInfo(method="POST", path="/economics/member-fee", description="Fee for a single agreement."),
    EndpointInfo(method="POST", path="/economics/payouts", description="Deposit/final payout schedule and per-booking shares."),
    EndpointInfo(method="POST", path="/earnings", description="Single-role earnings estimate."),
]

_INPUT_SECTIONS = [
    ("retreat", RetreatEconomicsInput, "Retreat pricing, capacity and length"),
    ("team_members", TeamMemberAgreement, "One fee agreement per team member"),
    ("platform", PlatformConfig, "Platform take rate and payout timing"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> CalculatorContext:
    """Build the self-describing context manifest."""
    full = detail_level == "full"
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    return CalculatorContext(
        name="Retreat Economics Calculator",
        version="1.0",
        description=(
            "Computes team payouts, platform fee and host profit for a retreat, "
            "plus payout schedules and single-role earnings estimates."
        ),
        business_model=_BUSINESS_MODEL.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        input_sections=sections,
        endpoints=_ENDPOINTS,
        example_queries=_EXAMPLE_QUERIES if full else [],
    )


def get_input_schema() -> dict:
    """Return the full JSON Schema for RetreatEconomicsInput."""
    return RetreatEconomicsInput.model_json_schema()


def get_default_input() -> dict:
    """Return a default RetreatEconomicsInput as a JSON-serializable dict."""
    return RetreatEconomicsInput().model_dump(mode="json")
