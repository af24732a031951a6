"""Due-diligence evidence: resource collections, lenient field coercion and block assembly"""

import logging
from dataclasses import replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from tradesec_gateway.domain.models import DebtorContact, DueDiligence, OrderDetails
from tradesec_gateway.utils.number_utils import parse_leading_float, parse_leading_int


class ResourceList:
    """Ordered collection of opaque resource references (photo or document handles)"""

    def __init__(self, items: Iterable[str] = ()):
        self._items: List[str] = [str(item) for item in items]

    def append_many(self, handles: Iterable[str]) -> None:
        """Append a batch after the existing entries, keeping arrival order"""
        self._items.extend(str(handle) for handle in handles)

    def remove_at(self, index: int) -> None:
        """Remove one entry; later entries shift down. Out-of-range indexes are ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]
        else:
            logging.debug("Ignoring removal at out-of-range index %s", index)

    @property
    def items(self) -> Tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)


# Lenient coercion: due-diligence typos never block a submission.


def coerce_quantity(value: Any) -> int:
    """Leading integer of value, or 0 when there is none"""
    return parse_leading_int(value) or 0


def coerce_unit_price(value: Any) -> float:
    """Leading decimal of value, or 0.0 when there is none"""
    return parse_leading_float(value) or 0.0


def update_debtor_contact(contact: DebtorContact, **changes: str) -> DebtorContact:
    """Merge changed fields into contact; unknown field names raise TypeError"""
    return replace(contact, **changes)


def update_order_details(details: OrderDetails, **changes: Any) -> OrderDetails:
    """
    Merge changed fields into details.

    quantity and unit_price are coerced leniently; total_amount is always
    recomputed as quantity * unit_price and cannot be set directly.
    """
    if "total_amount" in changes:
        raise TypeError("total_amount is derived from quantity and unit_price")
    if "quantity" in changes:
        changes["quantity"] = coerce_quantity(changes["quantity"])
    if "unit_price" in changes:
        changes["unit_price"] = coerce_unit_price(changes["unit_price"])
    updated = replace(details, **changes)
    return replace(updated, total_amount=updated.quantity * updated.unit_price)


# Anchor predicates: each optional sub-section is gated by a single field.


def has_order_photos(photos: Sequence[str]) -> bool:
    return len(photos) > 0


def has_legal_documents(documents: Sequence[str]) -> bool:
    return len(documents) > 0


def has_debtor_contact(contact: DebtorContact) -> bool:
    return contact.name != ""


def has_order_details(details: OrderDetails) -> bool:
    return details.order_number != ""


def build_due_diligence(
    order_photos: Sequence[str],
    legal_documents: Sequence[str],
    debtor_contact: DebtorContact,
    order_details: OrderDetails,
) -> Optional[DueDiligence]:
    """
    Assemble the due-diligence block from the form's evidence sections.

    Sub-sections whose anchor is empty are left out (None, not empty).
    Returns None when no sub-section qualifies.
    """
    block = DueDiligence(
        order_photos=tuple(order_photos) if has_order_photos(order_photos) else None,
        legal_documents=tuple(legal_documents) if has_legal_documents(legal_documents) else None,
        debtor_contact=debtor_contact if has_debtor_contact(debtor_contact) else None,
        order_details=order_details if has_order_details(order_details) else None,
    )
    if block == DueDiligence():
        return None
    return block
