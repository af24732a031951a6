"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple


CURRENCIES = ("USD", "EUR", "GBP", "JPY")
CATEGORIES = (
    "Manufacturing",
    "Retail",
    "Technology",
    "Services",
    "Healthcare",
    "Finance",
    "Construction",
    "Agriculture",
)
RISK_LEVELS = ("Low", "Medium", "High")

CREDIT_CARD = "credit_card"
BANK_TRANSFER = "bank_transfer"
CRYPTO = "crypto"
DIGITAL_WALLET = "digital_wallet"
PAYMENT_METHODS = (CREDIT_CARD, BANK_TRANSFER, CRYPTO, DIGITAL_WALLET)


@dataclass(frozen=True)
class PaymentMethodOption:
    """Selectable payment method shown on the checkout form"""

    id: str
    name: str
    description: str
    processing_time: str


PAYMENT_METHOD_CATALOG: Tuple[PaymentMethodOption, ...] = (
    PaymentMethodOption(CREDIT_CARD, "Credit Card", "Visa, Mastercard, American Express", "Instant"),
    PaymentMethodOption(BANK_TRANSFER, "Bank Transfer", "Direct bank transfer", "1-3 business days"),
    PaymentMethodOption(CRYPTO, "Cryptocurrency", "Bitcoin, Ethereum, USDC", "5-30 minutes"),
    PaymentMethodOption(DIGITAL_WALLET, "Digital Wallet", "PayPal, Apple Pay, Google Pay", "Instant"),
)


@dataclass(frozen=True)
class DebtorContact:
    """Contact details for the debtor named on a receivable"""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


@dataclass(frozen=True)
class OrderDetails:
    """Order backing a receivable; total_amount is quantity * unit_price"""

    order_number: str = ""
    product_description: str = ""
    quantity: int = 1
    unit_price: float = 0.0
    total_amount: float = 0.0
    delivery_date: str = ""


@dataclass(frozen=True)
class DueDiligence:
    """Optional supporting evidence attached to a receivable"""

    order_photos: Optional[Tuple[str, ...]] = None
    legal_documents: Optional[Tuple[str, ...]] = None
    debtor_contact: Optional[DebtorContact] = None
    order_details: Optional[OrderDetails] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize, leaving out every sub-section that was not attached"""
        payload: Dict[str, Any] = {}
        if self.order_photos is not None:
            payload["order_photos"] = list(self.order_photos)
        if self.legal_documents is not None:
            payload["legal_documents"] = list(self.legal_documents)
        if self.debtor_contact is not None:
            payload["debtor_contact"] = asdict(self.debtor_contact)
        if self.order_details is not None:
            payload["order_details"] = asdict(self.order_details)
        return payload


@dataclass(frozen=True)
class ReceivableSubmission:
    """Validated receivable handed to the submit callback"""

    debtor_name: str
    amount: str
    currency: str
    due_date: date
    description: str
    category: str
    risk_level: str
    due_diligence: Optional[DueDiligence] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "debtor_name": self.debtor_name,
            "amount": self.amount,
            "currency": self.currency,
            "due_date": self.due_date.isoformat(),
            "description": self.description,
            "category": self.category,
            "risk_level": self.risk_level,
        }
        if self.due_diligence is not None:
            payload["due_diligence"] = self.due_diligence.to_payload()
        return payload


@dataclass(frozen=True)
class Security:
    """Tradable security record (read-only input to the checkout form)"""

    id: str
    title: str
    total_value: str
    risk_grade: str
    duration: str
    expected_return: Optional[str] = None


@dataclass(frozen=True)
class PaymentTotals:
    """Derived checkout amounts, full float precision"""

    security_amount: float
    commission_amount: float
    total_amount: float


@dataclass(frozen=True)
class CardDetails:
    """In-progress credit card sub-form"""

    card_number: str = ""
    expiry_date: str = ""
    cvv: str = ""


@dataclass(frozen=True)
class PaymentSubmission:
    """Confirmed purchase handed to the submit callback"""

    payment_method: str
    amount: str

    def to_payload(self) -> Dict[str, Any]:
        return {"payment_method": self.payment_method, "amount": self.amount}


@dataclass(frozen=True)
class PaymentDetailsView:
    """Sub-form for the selected method: input fields or static instructions"""

    method: str
    title: str
    input_fields: Tuple[str, ...] = ()
    instructions: Dict[str, str] = field(default_factory=dict)
    notice: str = ""


@dataclass(frozen=True)
class SecuritySummary:
    """Display values for the security being purchased"""

    title: str
    security_value: str
    expected_return: str
    risk_grade: str
    prime_grade: bool
    duration: str


@dataclass(frozen=True)
class PaymentSummary:
    """Display strings for the payment summary card"""

    security_value: str
    commission_label: str
    commission: str
    total: str
    pay_label: str


@dataclass(frozen=True)
class FieldError:
    """Single invalid field reported by the validation contract"""

    field: str
    message: str
    code: str = "invalid"


@dataclass
class ValidationResult:
    """Outcome of validating a field set against a schema"""

    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
