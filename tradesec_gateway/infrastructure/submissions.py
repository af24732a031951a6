"""Submit callbacks used at the HTTP boundary"""

from dataclasses import fields
from typing import Union

from tradesec_gateway.domain.models import PaymentSubmission, ReceivableSubmission
from tradesec_gateway.infrastructure.observability.logging import log_payment_submitted, log_receivable_submitted
from tradesec_gateway.infrastructure.observability.metrics import (
    record_payment_submission,
    record_receivable_submission,
)

Submission = Union[ReceivableSubmission, PaymentSubmission]


class LoggingSubmissionSink:
    """
    Takes ownership of confirmed submissions: logs and counts them.

    Nothing is stored; persistence is handled by downstream services.
    """

    def __init__(self, request_id: str = "unknown"):
        self.request_id = request_id

    def __call__(self, submission: Submission) -> None:
        if isinstance(submission, ReceivableSubmission):
            dd = submission.due_diligence
            sections = [f.name for f in fields(dd) if getattr(dd, f.name) is not None] if dd else []
            record_receivable_submission(bool(sections))
            log_receivable_submitted(self.request_id, submission.currency, submission.category, sections)
        else:
            record_payment_submission(submission.payment_method)
            log_payment_submitted(self.request_id, submission.payment_method, submission.amount)
