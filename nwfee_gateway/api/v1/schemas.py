"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List

MAX_ORDER_AMOUNT = Decimal("9999999999999.99")


class AssessmentRequest(BaseModel):
    """Request body for POST /v1/fees/assess"""

    order_amount: Decimal = Field(
        ...,
        ge=0,
        le=MAX_ORDER_AMOUNT,
        decimal_places=2,
        description="Order amount in currency units with at most 2 decimal places, sent as a decimal string",
    )
    card_type: str = Field(..., min_length=1, description="Card network, e.g. VISA")
    card_entry_mode: str = Field(..., min_length=1, description="Card entry mode, e.g. SWIPED")
    debit: bool = False
    prepaid: bool = False
    international: bool = False
    opt_blue: bool = False
    refund: bool = False
    avs: bool = False
    cvc: bool = False


class FeeContributionSchema(BaseModel):
    """Fee charged by one matched fee definition"""

    fee_key: str
    fee_name: str
    criteria_index: int
    amount: str


class AssessmentResponse(BaseModel):
    """Response for POST /v1/fees/assess"""

    ruleset_id: str
    fee_total: str
    contributions: List[FeeContributionSchema]


class FeeSummary(BaseModel):
    """Single fee definition in the active ruleset"""

    key: str
    name: str
    description: str
    pct_rate: str
    auth_rate: str
    tx_rate: str
    criteria_count: int


class RulesetResponse(BaseModel):
    """Response for GET /v1/ruleset"""

    id: str
    name: str
    effective_date: str
    status: str
    fees: List[FeeSummary]
