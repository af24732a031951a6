"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel
from typing import Dict, List, Optional, Union


# Receivables


class DebtorContactSchema(BaseModel):
    """Debtor contact sub-form"""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class OrderDetailsInput(BaseModel):
    """Order details sub-form; numbers may arrive as raw text and are coerced leniently"""

    order_number: str = ""
    product_description: str = ""
    quantity: Union[int, float, str] = 1
    unit_price: Union[int, float, str] = 0
    delivery_date: str = ""


class ReceivableFormRequest(BaseModel):
    """Request body for POST /v1/receivables: the full form state"""

    debtor_name: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    due_date: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    risk_level: Optional[str] = None
    order_photos: List[str] = []
    legal_documents: List[str] = []
    debtor_contact: Optional[DebtorContactSchema] = None
    order_details: Optional[OrderDetailsInput] = None


class OrderDetailsSchema(BaseModel):
    order_number: str
    product_description: str
    quantity: int
    unit_price: float
    total_amount: float
    delivery_date: str


class DueDiligenceSchema(BaseModel):
    order_photos: Optional[List[str]] = None
    legal_documents: Optional[List[str]] = None
    debtor_contact: Optional[DebtorContactSchema] = None
    order_details: Optional[OrderDetailsSchema] = None


class ReceivableSubmissionResponse(BaseModel):
    """Response for POST /v1/receivables; absent sections are omitted"""

    debtor_name: str
    amount: str
    currency: str
    due_date: str
    description: str
    category: str
    risk_level: str
    due_diligence: Optional[DueDiligenceSchema] = None


class ReceivableOptionsResponse(BaseModel):
    """Response for GET /v1/receivables/options"""

    currencies: List[str]
    categories: List[str]
    risk_levels: List[str]
    defaults: Dict[str, str]


# Payments


class SecurityPayload(BaseModel):
    """Security record being purchased"""

    id: str
    title: str
    total_value: str
    risk_grade: str = ""
    duration: str = ""
    expected_return: Optional[str] = None


class CardDetailsInput(BaseModel):
    card_number: str = ""
    expiry_date: str = ""
    cvv: str = ""


class QuoteRequest(BaseModel):
    """Request body for POST /v1/payments/quote"""

    security: SecurityPayload
    payment_method: str = "credit_card"


class PurchaseRequest(BaseModel):
    """Request body for POST /v1/payments"""

    security: SecurityPayload
    payment_method: str = "credit_card"
    card_details: Optional[CardDetailsInput] = None
    amount: Optional[str] = None  # ignored; the security's total_value is charged


class PaymentMethodSchema(BaseModel):
    id: str
    name: str
    description: str
    processing_time: str


class TotalsSchema(BaseModel):
    security_amount: float
    commission_amount: float
    total_amount: float


class PaymentSummarySchema(BaseModel):
    security_value: str
    commission_label: str
    commission: str
    total: str
    pay_label: str


class SecuritySummarySchema(BaseModel):
    title: str
    security_value: str
    expected_return: str
    risk_grade: str
    prime_grade: bool
    duration: str


class PaymentDetailsSchema(BaseModel):
    method: str
    title: str
    input_fields: List[str]
    instructions: Dict[str, str]
    notice: str


class QuoteResponse(BaseModel):
    """Response for POST /v1/payments/quote"""

    payment_method: str
    totals: TotalsSchema
    summary: PaymentSummarySchema
    security: SecuritySummarySchema
    payment_details: PaymentDetailsSchema


class PurchaseResponse(BaseModel):
    """Response for POST /v1/payments"""

    payment_method: str
    amount: str
