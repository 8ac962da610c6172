"""Rule matcher - decides whether a transaction falls under a fee definition"""

from decimal import Decimal
from typing import Optional, Sequence
from nwfee_gateway.domain.models import Transaction, MatchCriteria

# Criteria fields compared by plain equality against the transaction attribute of the same name
EQUALITY_FIELDS = (
    "card_type",
    "card_entry_mode",
    "debit",
    "prepaid",
    "international",
    "opt_blue",
    "refund",
    "avs",
    "cvc",
)


def _at_least(amount: Decimal, minimum: Optional[Decimal]) -> bool:
    return minimum is None or amount >= minimum


def _at_most(amount: Decimal, maximum: Optional[Decimal]) -> bool:
    return maximum is None or amount <= maximum


def criteria_matches(transaction: Transaction, criteria: MatchCriteria) -> bool:
    """
    Check a single criteria entry against a transaction.

    Every present field must agree with the transaction; absent (None) fields
    match anything. Amount bounds are inclusive. An entry whose minimum exceeds
    its maximum can never match.
    """
    for name in EQUALITY_FIELDS:
        expected = getattr(criteria, name)
        if expected is not None and getattr(transaction, name) != expected:
            return False

    return _at_least(transaction.order_amount, criteria.min_tx_amount) and _at_most(
        transaction.order_amount, criteria.max_tx_amount
    )


def first_match(
    transaction: Transaction, criteria_list: Sequence[MatchCriteria]
) -> Optional[int]:
    """Index of the first criteria entry matching the transaction, or None"""
    for index, criteria in enumerate(criteria_list):
        if criteria_matches(transaction, criteria):
            return index
    return None


def matches(transaction: Transaction, criteria_list: Sequence[MatchCriteria]) -> bool:
    """True if any criteria entry matches. An empty list never matches."""
    return first_match(transaction, criteria_list) is not None
