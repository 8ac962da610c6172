"""Fee engine - runs every fee definition of a ruleset against a transaction"""

import logging
from typing import Optional, Sequence
from nwfee_gateway.domain.models import (
    Transaction,
    FeeDefinition,
    FeeContribution,
    FeeAssessment,
)
from nwfee_gateway.domain.matching import first_match
from nwfee_gateway.domain.calculation import compute_fee
from nwfee_gateway.utils.money import exact_arithmetic


def evaluate_fee_definition(
    transaction: Transaction, fee_definition: FeeDefinition
) -> Optional[FeeContribution]:
    """
    Evaluate one fee definition in isolation.

    Only the first matching criteria entry counts, so a definition contributes
    at most once. Returns None when nothing matches. The transaction is left untouched.
    """
    index = first_match(transaction, fee_definition.criteria)
    if index is None:
        return None

    return FeeContribution(
        fee_key=fee_definition.key,
        fee_name=fee_definition.name,
        criteria_index=index,
        amount=compute_fee(transaction, fee_definition.rates),
    )


def evaluate_all(
    transaction: Transaction, fee_definitions: Sequence[FeeDefinition]
) -> FeeAssessment:
    """
    Main entry point: assess a transaction against all fee definitions.

    Flow:
    1. Walk fee definitions in configured order
    2. Match each definition's criteria (first match wins)
    3. Add each matched contribution onto transaction.fee_total

    Definitions without a match contribute nothing. An empty ruleset leaves the
    fee total unchanged.
    """
    contributions = []

    for fee_definition in fee_definitions:
        contribution = evaluate_fee_definition(transaction, fee_definition)
        if contribution is None:
            continue

        with exact_arithmetic():
            transaction.fee_total += contribution.amount
        contributions.append(contribution)

        logging.debug(
            "Fee definition matched",
            extra={
                "fee_key": contribution.fee_key,
                "criteria_index": contribution.criteria_index,
                "fee_amount": str(contribution.amount),
            },
        )

    return FeeAssessment(contributions=contributions, total=transaction.fee_total)
