"""GET /v1/ruleset - Describe the active fee ruleset"""

from fastapi import APIRouter, Depends

from nwfee_gateway.api.v1.schemas import RulesetResponse, FeeSummary
from nwfee_gateway.api.dependencies import get_ruleset
from nwfee_gateway.domain.models import Ruleset

router = APIRouter()


@router.get("/ruleset", response_model=RulesetResponse)
def get_active_ruleset(ruleset: Ruleset = Depends(get_ruleset)):
    """
    Retrieve provenance and rates of the ruleset used for assessments.

    Returns:
        Ruleset metadata with fee definitions in evaluation order
    """
    return RulesetResponse(
        id=ruleset.id,
        name=ruleset.name,
        effective_date=ruleset.effective_date,
        status=ruleset.status,
        fees=[
            FeeSummary(
                key=fee.key,
                name=fee.name,
                description=fee.description,
                pct_rate=str(fee.rates.pct_rate),
                auth_rate=str(fee.rates.auth_rate),
                tx_rate=str(fee.rates.tx_rate),
                criteria_count=len(fee.criteria),
            )
            for fee in ruleset.fees
        ],
    )
