"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPaymentMethodError(DomainException):
    """Payment method is not one of the supported methods"""

    def __init__(self, method: object):
        self.method = method
        super().__init__(f"Unsupported payment method: {method!r}")


class PaymentDetailsNotApplicableError(DomainException):
    """Card details were edited while another payment method is selected"""

    pass
