"""Decimal money helpers"""

from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN, localcontext
from typing import Optional
from nwfee_gateway.config import settings


def exact_arithmetic():
    """Decimal context in which additions and multiplications never round"""
    return localcontext(Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN))


def format_fee(value: Decimal, places: Optional[int] = None) -> str:
    """Round a fee for display with banker's rounding (never fed back into calculations)"""
    if places is None:
        places = settings.fee_display_places

    quantum = Decimal(1).scaleb(-places)
    # Enough digits for every integer digit plus the requested places
    context = Context(prec=max(28, value.adjusted() + places + 2))
    return str(value.quantize(quantum, rounding=ROUND_HALF_EVEN, context=context))
