"""FastAPI server — HTTP access to the retreat economics calculator.

Run with:
    uvicorn retreat_economics.api.server:app --reload --port 8000

Or:
    python -m retreat_economics.api.server

Endpoints:
    GET  /context              — self-describing manifest
    GET  /schema               — JSON Schema for RetreatEconomicsInput
    GET  /economics/defaults   — default input as JSON
    POST /economics            — fees, totals, narrative
    POST /economics/member-fee — fee for one agreement
    POST /economics/payouts    — payout schedule + per-booking shares
    POST /earnings             — single-role earnings estimate
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Literal

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from retreat_economics.config import RetreatEconomicsInput, TeamMemberAgreement
from retreat_economics.engine.economics import break_even_price, compute_economics
from retreat_economics.engine.earnings import EarningsRole, estimate_earnings
from retreat_economics.engine.fees import compute_member_fee
from retreat_economics.engine.payouts import build_payout_schedule, compute_booking_shares
from retreat_economics.errors import UnknownFeeTypeError
from retreat_economics.api.context import build_context, get_default_input, get_input_schema
from retreat_economics.api.narrative import generate_narrative
from retreat_economics.settings import settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Retreat Economics API",
    version="1.0",
    description=(
        "Team payouts, platform fee and host profit for retreat listings. "
        "Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnknownFeeTypeError)
async def unknown_fee_type_handler(request: Request, exc: UnknownFeeTypeError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "fee_type": exc.fee_type},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    # Merged partial inputs are validated inside the endpoints, not by FastAPI
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EconomicsRequest(BaseModel):
    """Request body for /economics. Missing fields use defaults."""
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full RetreatEconomicsInput JSON. "
                    "Example: {'price_per_person': 1000, 'max_attendees': 20, 'num_nights': 5, "
                    "'team_members': [{'fee_type': 'flat', 'fee_amount': 500}]}",
    )


class EconomicsResponse(BaseModel):
    """Response from /economics."""
    result: dict[str, Any]
    break_even_price: Decimal | None = None
    narrative: str = ""


class MemberFeeRequest(BaseModel):
    """Request body for /economics/member-fee."""
    member: TeamMemberAgreement
    price_per_person: Decimal = Field(default=Decimal("0"), ge=0)
    max_attendees: int = Field(default=0, ge=0)
    num_nights: int = Field(default=0, ge=0)


class PayoutsRequest(BaseModel):
    """Request body for /economics/payouts."""
    inputs: dict[str, Any] = Field(default_factory=dict)
    start_date: date = Field(description="Retreat start date (YYYY-MM-DD)")
    confirmed_on: date | None = Field(
        default=None,
        description="Booking confirmation date. Defaults to today.",
    )


class EarningsRequest(BaseModel):
    """Request body for /earnings."""
    role: EarningsRole = "cohost"
    attendees: int = Field(default=20, ge=0)
    nights: int = Field(default=7, ge=0)
    price_per_person: Decimal = Field(default=Decimal("2000"), ge=0)
    fee_type: str | None = Field(default=None, description="Defaults to the role's usual agreement")
    fee_amount: Decimal | None = Field(default=None, ge=0)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_inputs(overrides: dict[str, Any]) -> RetreatEconomicsInput:
    """Build calculator input from partial overrides merged onto defaults.

    The platform section starts from process settings rather than model defaults.
    """
    defaults = get_default_input()
    defaults["platform"] = settings.platform_config().model_dump(mode="json")
    _deep_merge(defaults, overrides)
    return RetreatEconomicsInput(**defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Retreat Economics API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds business model, formulas and examples",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """Full JSON Schema for RetreatEconomicsInput."""
    return get_input_schema()


@app.get("/economics/defaults")
def get_defaults():
    """Default RetreatEconomicsInput as JSON, with platform terms from settings."""
    return _build_inputs({}).model_dump(mode="json")


@app.post("/economics", response_model=EconomicsResponse)
def economics(req: EconomicsRequest):
    """Compute per-member fees, team cost, revenue, platform fee and host profit.

    Example minimal request:
    ```json
    {"inputs": {"price_per_person": 1000, "max_attendees": 20, "num_nights": 5,
                "team_members": [{"fee_type": "flat", "fee_amount": 500}]}}
    ```
    """
    inputs = _build_inputs(req.inputs)
    result = compute_economics(inputs)
    logger.debug(
        "Computed economics: revenue=%s team_cost=%s profit=%s",
        result.total_revenue, result.total_team_cost, result.host_profit,
    )
    return EconomicsResponse(
        result=result.model_dump(mode="json"),
        break_even_price=break_even_price(inputs),
        narrative=generate_narrative(inputs, result),
    )


@app.post("/economics/member-fee")
def member_fee(req: MemberFeeRequest):
    """Fee owed to one team member under the given retreat numbers."""
    inputs = RetreatEconomicsInput(
        price_per_person=req.price_per_person,
        max_attendees=req.max_attendees,
        num_nights=req.num_nights,
        platform=settings.platform_config(),
    )
    fee = compute_member_fee(req.member, inputs)
    return {"fee_type": req.member.fee_type, "fee": str(fee)}


@app.post("/economics/payouts")
def payouts(req: PayoutsRequest):
    """Deposit/final payout schedule for the whole retreat plus per-booking shares."""
    inputs = _build_inputs(req.inputs)
    confirmed_on = req.confirmed_on or date.today()
    schedule = build_payout_schedule(inputs, req.start_date, confirmed_on)
    shares = compute_booking_shares(inputs)
    return {
        "schedule": [p.model_dump(mode="json") for p in schedule],
        "booking_shares": [s.model_dump(mode="json") for s in shares],
    }


@app.post("/earnings")
def earnings(req: EarningsRequest):
    """Single-role earnings estimate with deposit/final split and breakdown text."""
    estimate = estimate_earnings(
        role=req.role,
        attendees=req.attendees,
        nights=req.nights,
        price_per_person=req.price_per_person,
        fee_type=req.fee_type,
        fee_amount=req.fee_amount,
        platform=settings.platform_config(),
    )
    return estimate.model_dump(mode="json")


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "retreat_economics.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
