"""Domain models - pure Python dataclasses representing fee rules and transactions"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

ZERO = Decimal("0")


@dataclass
class Transaction:
    """Card payment being assessed for network fees"""

    order_amount: Decimal
    card_type: str  # card network, e.g. "VISA"
    card_entry_mode: str  # e.g. "SWIPED", "TOKENIZED"
    debit: bool
    prepaid: bool
    international: bool
    opt_blue: bool
    refund: bool = False
    avs: bool = False
    cvc: bool = False
    fee_total: Decimal = ZERO


@dataclass(frozen=True)
class MatchCriteria:
    """One candidate rule of a fee definition. None means "any value"."""

    min_tx_amount: Optional[Decimal] = None
    max_tx_amount: Optional[Decimal] = None
    card_type: Optional[str] = None
    card_entry_mode: Optional[str] = None
    debit: Optional[bool] = None
    prepaid: Optional[bool] = None
    international: Optional[bool] = None
    opt_blue: Optional[bool] = None
    refund: Optional[bool] = None
    avs: Optional[bool] = None
    cvc: Optional[bool] = None


@dataclass(frozen=True)
class RateComponents:
    """Rate formula of a fee definition"""

    pct_rate: Decimal = ZERO
    auth_rate: Decimal = ZERO
    tx_rate: Decimal = ZERO


@dataclass(frozen=True)
class FeeDefinition:
    """Named network fee with its rates and ordered match criteria"""

    key: str
    name: str = ""
    description: str = ""
    rates: RateComponents = field(default_factory=RateComponents)
    criteria: Tuple[MatchCriteria, ...] = ()


@dataclass(frozen=True)
class Ruleset:
    """Ordered fee definitions plus provenance metadata"""

    id: str
    name: str
    effective_date: str
    status: str
    fees: Tuple[FeeDefinition, ...] = ()


@dataclass(frozen=True)
class FeeContribution:
    """Fee charged by a single matched fee definition"""

    fee_key: str
    fee_name: str
    criteria_index: int
    amount: Decimal


@dataclass
class FeeAssessment:
    """Output of a full evaluation pass over a ruleset"""

    contributions: list[FeeContribution]
    total: Decimal

    @property
    def matched_keys(self) -> list[str]:
        return [c.fee_key for c in self.contributions]
