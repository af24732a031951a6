"""Security checkout endpoints: payment methods, quotes and purchase confirms"""

from dataclasses import asdict
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request

from tradesec_gateway.api.v1.schemas import (
    PaymentMethodSchema,
    PurchaseRequest,
    PurchaseResponse,
    QuoteRequest,
    QuoteResponse,
    SecurityPayload,
)
from tradesec_gateway.api.dependencies import get_request_id, get_submission_sink
from tradesec_gateway.domain.exceptions import InvalidPaymentMethodError
from tradesec_gateway.domain.models import CREDIT_CARD, PAYMENT_METHOD_CATALOG, Security
from tradesec_gateway.domain.payment_form import PaymentComputation
from tradesec_gateway.infrastructure.observability.logging import log_confirm_rejected
from tradesec_gateway.infrastructure.observability.metrics import record_payment_rejection
from tradesec_gateway.infrastructure.submissions import LoggingSubmissionSink

router = APIRouter()


def _to_security(payload: SecurityPayload) -> Security:
    return Security(**payload.model_dump())


def _select_method(form: PaymentComputation, method: str) -> None:
    try:
        form.select_method(method)
    except InvalidPaymentMethodError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/payments/methods", response_model=List[PaymentMethodSchema])
def list_payment_methods():
    return [PaymentMethodSchema(**asdict(option)) for option in PAYMENT_METHOD_CATALOG]


@router.post("/payments/quote", response_model=QuoteResponse)
def quote_payment(request_body: QuoteRequest):
    """
    Price a security for checkout.

    Returns the 1% commission and total (full precision), the display
    strings and the payment details sub-form for the chosen method.
    """
    form = PaymentComputation(_to_security(request_body.security), on_submit=lambda submission: None)
    _select_method(form, request_body.payment_method)

    return QuoteResponse(
        payment_method=form.selected_payment_method,
        totals=asdict(form.compute_totals()),
        summary=asdict(form.summary()),
        security=asdict(form.security_summary()),
        payment_details=asdict(form.payment_details()),
    )


@router.post("/payments", response_model=PurchaseResponse, status_code=201)
def submit_payment(
    request_body: PurchaseRequest,
    request: Request,
    sink: LoggingSubmissionSink = Depends(get_submission_sink),
):
    """
    Confirm a security purchase.

    The charged amount is the security's total_value; any amount in the
    request body is ignored. Card details are only checked for credit_card.
    """
    request_id = get_request_id(request)
    form = PaymentComputation(_to_security(request_body.security), on_submit=sink)
    _select_method(form, request_body.payment_method)

    if request_body.amount is not None:
        form.set_amount(request_body.amount)
    if request_body.card_details is not None and form.selected_payment_method == CREDIT_CARD:
        form.update_card_details(**request_body.card_details.model_dump())

    submission = form.confirm()
    if submission is None:
        record_payment_rejection(form.selected_payment_method)
        log_confirm_rejected(request_id, "payment", [error.field for error in form.errors])
        raise HTTPException(status_code=422, detail=[asdict(error) for error in form.errors])

    return PurchaseResponse(**submission.to_payload())
