"""POST /v1/receivables - Assemble a receivable submission from form state"""

from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from tradesec_gateway.api.v1.schemas import (
    ReceivableFormRequest,
    ReceivableOptionsResponse,
    ReceivableSubmissionResponse,
)
from tradesec_gateway.api.dependencies import get_request_id, get_submission_sink
from tradesec_gateway.domain.models import CATEGORIES, CURRENCIES, RISK_LEVELS
from tradesec_gateway.domain.receivable_form import CORE_FIELD_DEFAULTS, ReceivableSubmissionAssembler
from tradesec_gateway.infrastructure.observability.logging import log_confirm_rejected
from tradesec_gateway.infrastructure.observability.metrics import record_receivable_rejection
from tradesec_gateway.infrastructure.submissions import LoggingSubmissionSink

router = APIRouter()


@router.get("/receivables/options", response_model=ReceivableOptionsResponse)
def get_receivable_options():
    """Selectable values and initial form state for the receivable form"""
    return ReceivableOptionsResponse(
        currencies=list(CURRENCIES),
        categories=list(CATEGORIES),
        risk_levels=list(RISK_LEVELS),
        defaults={name: value for name, value in CORE_FIELD_DEFAULTS.items() if value},
    )


@router.post(
    "/receivables",
    response_model=ReceivableSubmissionResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def submit_receivable(
    request_body: ReceivableFormRequest,
    request: Request,
    sink: LoggingSubmissionSink = Depends(get_submission_sink),
):
    """
    Confirm a receivable form.

    Flow:
    1. Replay the submitted form state onto a fresh form instance
    2. Validate core fields (422 with per-field errors on failure)
    3. Attach due-diligence sections whose anchor field is filled in
    4. Hand the submission to the sink and echo it back
    """
    request_id = get_request_id(request)
    form = ReceivableSubmissionAssembler(on_submit=sink)

    for name in CORE_FIELD_DEFAULTS:
        value = getattr(request_body, name)
        if value is not None:
            form.set_field(name, value)

    form.add_photos(request_body.order_photos)
    form.add_documents(request_body.legal_documents)
    if request_body.debtor_contact is not None:
        form.update_debtor_contact(**request_body.debtor_contact.model_dump())
    if request_body.order_details is not None:
        form.update_order_details(**request_body.order_details.model_dump())

    submission = form.confirm()
    if submission is None:
        fields = [error.field for error in form.errors]
        record_receivable_rejection(fields)
        log_confirm_rejected(request_id, "receivable", fields)
        raise HTTPException(status_code=422, detail=[asdict(error) for error in form.errors])

    return submission.to_payload()
