"""POST /v1/fees/assess - network fee assessment endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from nwfee_gateway.api.v1.schemas import AssessmentRequest, AssessmentResponse, FeeContributionSchema
from nwfee_gateway.api.dependencies import get_request_id, get_ruleset
from nwfee_gateway.domain.models import Transaction, Ruleset
from nwfee_gateway.domain.engine import evaluate_all
from nwfee_gateway.infrastructure.observability.metrics import record_assessment
from nwfee_gateway.infrastructure.observability.logging import log_assessment
from nwfee_gateway.utils.money import format_fee

router = APIRouter()


@router.post("/fees/assess", response_model=AssessmentResponse)
def assess_fees(
    request_body: AssessmentRequest,
    request: Request,
    ruleset: Ruleset = Depends(get_ruleset),
):
    """
    Compute the network fee for a single card transaction.

    Flow:
    1. Build the transaction from the request body
    2. Run every fee definition of the active ruleset against it
    3. Record metrics and logs
    4. Return the total and per-definition contributions, rounded for display
    """
    start_time = time.time()
    request_id = get_request_id(request)

    transaction = Transaction(**request_body.model_dump())
    assessment = evaluate_all(transaction, ruleset.fees)

    fee_total = format_fee(assessment.total)

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(assessment.matched_keys, assessment.total)
    log_assessment(request_id, ruleset.id, transaction.card_type, assessment.matched_keys, fee_total, duration_ms)

    return AssessmentResponse(
        ruleset_id=ruleset.id,
        fee_total=fee_total,
        contributions=[
            FeeContributionSchema(
                fee_key=c.fee_key,
                fee_name=c.fee_name,
                criteria_index=c.criteria_index,
                amount=format_fee(c.amount),
            )
            for c in assessment.contributions
        ],
    )
