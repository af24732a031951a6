"""Checkout pricing: security value, platform commission and total"""

import logging
import re

from tradesec_gateway.domain.models import PaymentSummary, PaymentTotals
from tradesec_gateway.utils.number_utils import format_fixed, format_grouped
from tradesec_gateway.validation.schemas import AMOUNT_PATTERN

COMMISSION_RATE = 0.01  # 1% platform fee, fixed

_AMOUNT = re.compile(AMOUNT_PATTERN)


def parse_security_value(total_value: str) -> float:
    """
    Parse a security's declared value.

    Only plain decimals with up to 2 places are accepted, the same rule the
    purchase schema applies on confirm. Anything else ("1e3", "1_000",
    "1000abc", " 1000") is treated as 0.0 and cannot be confirmed.
    Values too large for a float also count as 0.0.
    """
    if isinstance(total_value, str) and _AMOUNT.fullmatch(total_value):
        amount = float(total_value)
        if amount != float("inf"):
            return amount

    logging.warning(
        "Unparseable security value, treating as zero",
        extra={"step": "pricing", "total_value": repr(total_value)[:64]},
    )
    return 0.0


def compute_totals(total_value: str) -> PaymentTotals:
    """securityAmount -> commission (1%) -> total. No rounding is applied here."""
    security_amount = parse_security_value(total_value)
    commission_amount = security_amount * COMMISSION_RATE
    return PaymentTotals(
        security_amount=security_amount,
        commission_amount=commission_amount,
        total_amount=security_amount + commission_amount,
    )


def summarize_totals(totals: PaymentTotals, currency_symbol: str = "$") -> PaymentSummary:
    """Display strings: grouped value and total, commission to 2 decimal places"""
    total = f"{currency_symbol}{format_grouped(totals.total_amount)}"
    return PaymentSummary(
        security_value=f"{currency_symbol}{format_grouped(totals.security_amount)}",
        commission_label=f"Platform Commission ({COMMISSION_RATE:.0%})",
        commission=f"{currency_symbol}{format_fixed(totals.commission_amount, 2)}",
        total=total,
        pay_label=f"Pay {total}",
    )
