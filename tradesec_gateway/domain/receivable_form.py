"""Receivable creation form: core fields plus optional due-diligence evidence"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from tradesec_gateway.domain import due_diligence
from tradesec_gateway.domain.models import (
    DebtorContact,
    FieldError,
    OrderDetails,
    ReceivableSubmission,
    ValidationResult,
)
from tradesec_gateway.validation.contract import validate_receivable_fields

CORE_FIELD_DEFAULTS: Dict[str, str] = {
    "debtor_name": "",
    "amount": "",
    "currency": "USD",
    "due_date": "",
    "description": "",
    "category": "Services",
    "risk_level": "Medium",
}

SubmitCallback = Callable[[ReceivableSubmission], None]


class ReceivableSubmissionAssembler:
    """
    Local state of one receivable form instance.

    Core fields are validated strictly on confirm. Evidence sections (photos,
    documents, debtor contact, order details) are optional and never block.
    """

    def __init__(
        self,
        on_submit: SubmitCallback,
        on_cancel: Optional[Callable[[], None]] = None,
        validator: Callable[[Dict[str, Any]], ValidationResult] = validate_receivable_fields,
    ):
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._validator = validator
        self._reset()

    def _reset(self) -> None:
        self.fields: Dict[str, Any] = dict(CORE_FIELD_DEFAULTS)
        self.order_photos = due_diligence.ResourceList()
        self.legal_documents = due_diligence.ResourceList()
        self.debtor_contact = DebtorContact()
        self.order_details = OrderDetails()
        self.errors: List[FieldError] = []

    def set_field(self, name: str, value: Any) -> None:
        if name not in CORE_FIELD_DEFAULTS:
            raise KeyError(f"Unknown receivable field: {name}")
        self.fields[name] = value

    def add_photos(self, handles: Iterable[str]) -> None:
        self.order_photos.append_many(handles)

    def remove_photo(self, index: int) -> None:
        self.order_photos.remove_at(index)

    def add_documents(self, handles: Iterable[str]) -> None:
        self.legal_documents.append_many(handles)

    def remove_document(self, index: int) -> None:
        self.legal_documents.remove_at(index)

    def update_debtor_contact(self, **changes: str) -> None:
        self.debtor_contact = due_diligence.update_debtor_contact(self.debtor_contact, **changes)

    def update_order_details(self, **changes: Any) -> None:
        self.order_details = due_diligence.update_order_details(self.order_details, **changes)

    def confirm(self) -> Optional[ReceivableSubmission]:
        """
        Validate the core fields and hand the merged submission to the submit callback.

        Returns the submission, or None when validation fails. In that case the
        per-field errors are left on self.errors and the callback is not called.
        """
        result = self._validator(self.fields)
        if not result.ok:
            self.errors = list(result.errors)
            logging.info(
                "Receivable confirm rejected",
                extra={"step": "receivable_rejected", "fields": [e.field for e in self.errors]},
            )
            return None

        self.errors = []
        values = result.values
        submission = ReceivableSubmission(
            debtor_name=values["debtor_name"],
            amount=values["amount"],
            currency=values["currency"],
            due_date=values["due_date"],
            description=values["description"],
            category=values["category"],
            risk_level=values["risk_level"],
            due_diligence=due_diligence.build_due_diligence(
                self.order_photos.items,
                self.legal_documents.items,
                self.debtor_contact,
                self.order_details,
            ),
        )
        self._on_submit(submission)
        return submission

    def cancel(self) -> None:
        """Discard local state and notify the cancel callback; nothing is submitted"""
        self._reset()
        if self._on_cancel is not None:
            self._on_cancel()
