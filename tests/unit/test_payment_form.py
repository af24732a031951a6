"""Unit tests for the security checkout form"""

import pytest
from dataclasses import replace
from tradesec_gateway.domain.exceptions import InvalidPaymentMethodError, PaymentDetailsNotApplicableError
from tradesec_gateway.domain.models import PAYMENT_METHODS, CardDetails, PaymentSubmission
from tradesec_gateway.domain.payment_form import PaymentComputation

VALID_CARD = {"card_number": "4242 4242 4242 4242", "expiry_date": "09/28", "cvv": "123"}


def test_defaults_to_credit_card(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)

    assert form.selected_payment_method == "credit_card"
    assert form.card_details == CardDetails()


def test_select_unknown_method_rejected(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)

    with pytest.raises(InvalidPaymentMethodError):
        form.select_method("paypal")
    assert form.selected_payment_method == "credit_card"


def test_any_method_reachable_from_any_other(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    for method in ("crypto", "bank_transfer", "digital_wallet", "crypto", "credit_card"):
        form.select_method(method)
        assert form.selected_payment_method == method


def test_totals_follow_security(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    assert form.compute_totals().total_amount == 1010

    form.update_security(replace(security, total_value="2000"))
    assert form.compute_totals().total_amount == 2020


@pytest.mark.parametrize("method", ["bank_transfer", "crypto", "digital_wallet"])
def test_non_card_methods_confirm_without_extra_fields(security, on_submit, method):
    form = PaymentComputation(security, on_submit=on_submit)
    form.select_method(method)

    submission = form.confirm()

    assert submission == PaymentSubmission(payment_method=method, amount="1000")
    assert on_submit.calls == [submission]


def test_credit_card_requires_card_fields(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)

    assert form.confirm() is None
    assert on_submit.count == 0
    assert {e.field for e in form.errors} == {"card_number", "expiry_date", "cvv"}


def test_credit_card_confirm_with_valid_card(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    form.update_card_details(**VALID_CARD)

    assert form.confirm() == PaymentSubmission(payment_method="credit_card", amount="1000")
    assert form.errors == []


def test_card_shape_errors(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    form.update_card_details(card_number="4242", expiry_date="13/28", cvv="12a")

    assert form.confirm() is None
    assert {e.field for e in form.errors} == {"card_number", "expiry_date", "cvv"}


def test_switching_methods_discards_card_fields(security, on_submit):
    """credit_card -> bank_transfer -> credit_card does not bring old card input back"""
    form = PaymentComputation(security, on_submit=on_submit)
    form.update_card_details(card_number="4242 4242", cvv="12")

    form.select_method("bank_transfer")
    form.select_method("credit_card")

    assert form.card_details == CardDetails()


def test_reselecting_same_method_keeps_card_fields(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    form.update_card_details(card_number="4242 4242 4242 4242")
    form.select_method("credit_card")

    assert form.card_details.card_number == "4242 4242 4242 4242"


def test_card_details_only_for_credit_card(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    form.select_method("crypto")

    with pytest.raises(PaymentDetailsNotApplicableError):
        form.update_card_details(card_number="4242 4242 4242 4242")


def test_submitted_amount_is_never_the_typed_amount(security, on_submit):
    """Each method in sequence: last selection wins, amount is security.total_value"""
    form = PaymentComputation(security, on_submit=on_submit)
    form.set_amount("1")

    for method in PAYMENT_METHODS:
        form.select_method(method)
        if method == "credit_card":
            form.update_card_details(**VALID_CARD)
        submission = form.confirm()
        assert submission.payment_method == method
        assert submission.amount == security.total_value

    assert form.entered_amount == "1"
    assert [s.amount for s in on_submit.calls] == ["1000"] * len(PAYMENT_METHODS)


def test_unparseable_security_value_renders_zero_but_cannot_confirm(security, on_submit):
    form = PaymentComputation(replace(security, total_value="n/a"), on_submit=on_submit)
    form.select_method("bank_transfer")

    assert form.summary().total == "$0"
    assert form.confirm() is None
    assert [e.field for e in form.errors] == ["amount"]
    assert on_submit.count == 0


@pytest.mark.parametrize("raw", ["1e3", "1000.125", " 1000", "1_000", "1000abc"])
def test_quote_and_confirm_agree_on_malformed_value(security, on_submit, raw):
    """A value the purchase schema would reject is quoted at zero, never at a real price"""
    form = PaymentComputation(replace(security, total_value=raw), on_submit=on_submit)
    form.select_method("bank_transfer")

    assert form.compute_totals().total_amount == 0.0
    assert form.summary().pay_label == "Pay $0"
    assert form.confirm() is None
    assert [e.field for e in form.errors] == ["amount"]
    assert on_submit.count == 0


def test_quote_and_confirm_agree_on_two_decimal_value(security, on_submit):
    form = PaymentComputation(replace(security, total_value="1000.12"), on_submit=on_submit)
    form.select_method("bank_transfer")

    assert form.compute_totals().total_amount == pytest.approx(1010.1212)
    assert form.confirm().amount == "1000.12"


def test_very_large_security_value_renders(security, on_submit):
    form = PaymentComputation(replace(security, total_value="1" + "0" * 70), on_submit=on_submit)

    assert form.summary().total.startswith("$10,100,000")
    assert form.security_summary().security_value.startswith("$10,000,000")


def test_payment_details_per_method(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    assert form.payment_details().input_fields == ("card_number", "expiry_date", "cvv")

    form.select_method("bank_transfer")
    bank = form.payment_details()
    assert bank.input_fields == ()
    assert bank.instructions["Reference"] == "SEC-3f9c2a71"
    assert bank.instructions["Account Name"] == "TradeSec Platform"

    form.select_method("crypto")
    assert set(form.payment_details().instructions) == {"Bitcoin Address", "Ethereum Address", "USDC Address"}

    form.select_method("digital_wallet")
    wallet = form.payment_details()
    assert wallet.instructions == {}
    assert "redirected" in wallet.notice


def test_security_summary(security, on_submit):
    form = PaymentComputation(security, on_submit=on_submit)
    summary = form.security_summary()

    assert summary.security_value == "$1,000"
    assert summary.expected_return == "8.5%"
    assert summary.prime_grade is True

    form.update_security(replace(security, expected_return=None, risk_grade="B+"))
    summary = form.security_summary()
    assert summary.expected_return == "N/A"
    assert summary.prime_grade is False


def test_summary_display(security, on_submit):
    summary = PaymentComputation(security, on_submit=on_submit).summary()

    assert summary.security_value == "$1,000"
    assert summary.commission == "$10.00"
    assert summary.pay_label == "Pay $1,010"


def test_cancel_resets_and_notifies(security, on_submit, on_cancel):
    form = PaymentComputation(security, on_submit=on_submit, on_cancel=on_cancel)
    form.select_method("crypto")

    form.cancel()

    assert on_cancel.count == 1
    assert on_submit.count == 0
    assert form.selected_payment_method == "credit_card"
