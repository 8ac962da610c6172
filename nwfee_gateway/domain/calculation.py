"""Fee calculator - applies a fee definition's rate formula to a transaction"""

from decimal import Decimal
from nwfee_gateway.domain.models import Transaction, RateComponents
from nwfee_gateway.utils.money import exact_arithmetic

# Number of authorizations a card entry mode implies; unlisted modes authorize once
AUTHORIZATION_MULTIPLIERS = {
    "TOKENIZED": 3,
    "PRE_AUTHED": 3,
    "INCREMENTAL_PRE_AUTHED": 2,
}
DEFAULT_AUTHORIZATION_MULTIPLIER = 1


def authorization_multiplier(card_entry_mode: str) -> int:
    """Map card entry mode to the authorization count used for the per-auth rate"""
    return AUTHORIZATION_MULTIPLIERS.get(card_entry_mode, DEFAULT_AUTHORIZATION_MULTIPLIER)


def compute_fee(transaction: Transaction, rates: RateComponents) -> Decimal:
    """
    Calculate one fee definition's contribution for a transaction.

    Formula:
        pct_rate * order_amount + tx_rate + auth_rate * authorization_multiplier

    Example:
        pct 0.01, tx 0.10, auth 0.05 on a $10.00 swiped sale
        0.01 * 10.00 + 0.10 + 0.05 * 1 = 0.25

    The transaction is not modified; accumulation is left to the caller.
    """
    auth_count = Decimal(authorization_multiplier(transaction.card_entry_mode))

    with exact_arithmetic():
        return (
            rates.pct_rate * transaction.order_amount
            + rates.tx_rate
            + rates.auth_rate * auth_count
        )
