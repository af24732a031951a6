"""Pydantic schemas forming the validation contract for form confirms"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator

AMOUNT_PATTERN = r"^\d+(\.\d{1,2})?$"

Currency = Literal["USD", "EUR", "GBP", "JPY"]
Category = Literal[
    "Manufacturing",
    "Retail",
    "Technology",
    "Services",
    "Healthcare",
    "Finance",
    "Construction",
    "Agriculture",
]
RiskLevel = Literal["Low", "Medium", "High"]
PaymentMethod = Literal["credit_card", "bank_transfer", "crypto", "digital_wallet"]


class CreateReceivableSchema(BaseModel):
    """Core receivable fields; every one is required"""

    debtor_name: str = Field(..., min_length=1)
    amount: str = Field(..., pattern=AMOUNT_PATTERN)
    currency: Currency
    due_date: date
    description: str = Field(..., min_length=1)
    category: Category
    risk_level: RiskLevel

    @field_validator("debtor_name", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("amount")
    @classmethod
    def positive_amount(cls, value: str) -> str:
        if float(value) <= 0:
            raise ValueError("Amount must be greater than zero")
        return value


class CardDetailsSchema(BaseModel):
    """Credit card sub-form (shape checks only)"""

    card_number: str = Field(..., pattern=r"^[\d ]+$")
    expiry_date: str = Field(..., pattern=r"^(0[1-9]|1[0-2])/\d{2}$")
    cvv: str = Field(..., pattern=r"^\d{3,4}$")

    @field_validator("card_number")
    @classmethod
    def card_number_length(cls, value: str) -> str:
        digits = value.replace(" ", "")
        if not 13 <= len(digits) <= 19:
            raise ValueError("Card number must have 13 to 19 digits")
        return value


class PurchaseSecuritySchema(BaseModel):
    """Purchase payload emitted by the checkout form"""

    payment_method: PaymentMethod
    amount: str = Field(..., pattern=AMOUNT_PATTERN)
