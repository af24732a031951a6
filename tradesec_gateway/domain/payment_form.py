"""Security checkout form: payment method selection, totals and purchase confirm"""

import logging
from dataclasses import asdict, replace
from typing import Callable, List, Optional

from tradesec_gateway.config import settings
from tradesec_gateway.domain import pricing
from tradesec_gateway.domain.exceptions import InvalidPaymentMethodError, PaymentDetailsNotApplicableError
from tradesec_gateway.domain.models import (
    BANK_TRANSFER,
    CREDIT_CARD,
    CRYPTO,
    DIGITAL_WALLET,
    PAYMENT_METHODS,
    CardDetails,
    FieldError,
    PaymentDetailsView,
    PaymentSubmission,
    PaymentSummary,
    PaymentTotals,
    Security,
    SecuritySummary,
)
from tradesec_gateway.utils.number_utils import format_grouped
from tradesec_gateway.validation.contract import validate_card_details, validate_purchase

PRIME_GRADES = ("A", "A-")

SubmitCallback = Callable[[PaymentSubmission], None]


class PaymentComputation:
    """
    Local state of one checkout form instance.

    The security record is read-only input. Totals are derived from it on
    every read, and the confirmed amount is always its total_value.
    """

    def __init__(
        self,
        security: Security,
        on_submit: SubmitCallback,
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        self.security = security
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._reset()

    def _reset(self) -> None:
        self.selected_payment_method = CREDIT_CARD
        self.card_details = CardDetails()
        self.entered_amount = self.security.total_value
        self.errors: List[FieldError] = []

    def select_method(self, method: str) -> None:
        """Switch payment method; a real switch starts the new sub-form from defaults"""
        if method not in PAYMENT_METHODS:
            raise InvalidPaymentMethodError(method)
        if method != self.selected_payment_method:
            self.card_details = CardDetails()
            self.errors = []
        self.selected_payment_method = method

    def update_card_details(self, **changes: str) -> None:
        if self.selected_payment_method != CREDIT_CARD:
            raise PaymentDetailsNotApplicableError(
                f"Card details do not apply to {self.selected_payment_method}"
            )
        self.card_details = replace(self.card_details, **changes)

    def set_amount(self, value: str) -> None:
        """Record a typed amount. It is never charged; see confirm()."""
        self.entered_amount = value

    def update_security(self, security: Security) -> None:
        self.security = security

    def compute_totals(self) -> PaymentTotals:
        return pricing.compute_totals(self.security.total_value)

    def summary(self) -> PaymentSummary:
        return pricing.summarize_totals(self.compute_totals(), settings.currency_symbol)

    def security_summary(self) -> SecuritySummary:
        security = self.security
        return SecuritySummary(
            title=security.title,
            security_value=f"{settings.currency_symbol}{format_grouped(self.compute_totals().security_amount)}",
            expected_return=f"{security.expected_return}%" if security.expected_return else "N/A",
            risk_grade=security.risk_grade,
            prime_grade=security.risk_grade in PRIME_GRADES,
            duration=security.duration,
        )

    def payment_details(self) -> PaymentDetailsView:
        """Sub-form for the selected method: card inputs or static instructions"""
        method = self.selected_payment_method
        if method == CREDIT_CARD:
            return PaymentDetailsView(
                method=method,
                title="Card Details",
                input_fields=tuple(asdict(CardDetails()).keys()),
            )
        if method == BANK_TRANSFER:
            return PaymentDetailsView(
                method=method,
                title="Bank Transfer Details",
                instructions={
                    "Account Name": settings.platform_account_name,
                    "Account Number": settings.platform_account_number,
                    "Routing Number": settings.platform_routing_number,
                    "Reference": f"SEC-{self.security.id[:8]}",
                },
                notice="Please transfer the amount to the following account:",
            )
        if method == CRYPTO:
            return PaymentDetailsView(
                method=method,
                title="Cryptocurrency Payment",
                instructions={
                    "Bitcoin Address": settings.bitcoin_address,
                    "Ethereum Address": settings.ethereum_address,
                    "USDC Address": settings.usdc_address,
                },
                notice="Send the equivalent amount in your preferred cryptocurrency:",
            )
        return PaymentDetailsView(
            method=DIGITAL_WALLET,
            title="Digital Wallet Payment",
            notice="You will be redirected to your selected digital wallet to complete the payment.",
        )

    def confirm(self) -> Optional[PaymentSubmission]:
        """
        Validate and emit {payment_method, amount} to the submit callback.

        Card fields are checked only when credit_card is selected. The amount
        is always security.total_value, whatever was typed into the form.
        Returns None and fills self.errors when validation fails.
        """
        method = self.selected_payment_method
        errors: List[FieldError] = []
        if method == CREDIT_CARD:
            errors.extend(validate_card_details(asdict(self.card_details)).errors)
        purchase = validate_purchase({"payment_method": method, "amount": self.security.total_value})
        errors.extend(purchase.errors)

        if errors:
            self.errors = errors
            logging.info(
                "Payment confirm rejected",
                extra={"step": "payment_rejected", "payment_method": method, "fields": [e.field for e in errors]},
            )
            return None

        self.errors = []
        submission = PaymentSubmission(payment_method=method, amount=self.security.total_value)
        self._on_submit(submission)
        return submission

    def cancel(self) -> None:
        """Discard local state and notify the cancel callback; nothing is submitted"""
        self._reset()
        if self._on_cancel is not None:
            self._on_cancel()
