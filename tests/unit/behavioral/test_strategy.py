"""Tests for the payment Strategy pattern."""

import pytest

from pattern_catalog.behavioral.strategy import (
    CreditCardPayment,
    PaymentContext,
    PayPalPayment,
    mask_card_number,
    run_demo,
)
from pattern_catalog.domain.exceptions import ValidationError


class TestPaymentStrategies:
    """Test concrete strategies."""

    def test_credit_card_payment(self):
        """Test the credit card description."""
        strategy = CreditCardPayment("1234-5678-9876-5432", "John Doe")

        assert strategy.pay(100.0) == (
            "Processing credit card payment of $100 for card holder John Doe "
            "with card number 1234-5678-9876-5432."
        )
        assert strategy.get_strategy_name() == "credit_card"

    def test_paypal_payment(self):
        """Test the PayPal description."""
        strategy = PayPalPayment("john.doe@example.com")

        assert strategy.pay(19.99) == (
            "Processing PayPal payment of $19.99 for email address john.doe@example.com."
        )
        assert strategy.get_strategy_name() == "paypal"

    def test_mask_card_number(self):
        """Test that only the last four digits survive masking."""
        assert mask_card_number("1234-5678-9876-5432") == "****5432"
        assert mask_card_number("4111111111111111") == "****1111"


class TestPaymentContext:
    """Test the strategy context."""

    def test_without_strategy(self, recording_console):
        """Test paying with no strategy selected."""
        context = PaymentContext(console=recording_console)

        assert context.process_payment(50.0) is None
        assert recording_console.lines == ["No payment strategy set!"]

    def test_strategy_can_be_swapped(self, recording_console):
        """Test switching strategies at runtime."""
        context = PaymentContext(PayPalPayment("a@example.com"), console=recording_console)
        context.process_payment(10.0)

        context.set_strategy(CreditCardPayment("0000-0000-0000-0042", "Ada"))
        context.process_payment(10.0)

        assert recording_console.lines[0].startswith("Processing PayPal payment")
        assert recording_console.lines[1].startswith("Processing credit card payment")
        assert isinstance(context.strategy, CreditCardPayment)

    def test_negative_amount_rejected(self, recording_console):
        """Test that negative amounts raise a validation error."""
        context = PaymentContext(PayPalPayment("a@example.com"), console=recording_console)

        with pytest.raises(ValidationError) as exc_info:
            context.process_payment(-1.0)

        assert exc_info.value.details == {"amount": -1.0}
        assert recording_console.lines == []

    def test_zero_amount_allowed(self, recording_console):
        context = PaymentContext(PayPalPayment("a@example.com"), console=recording_console)

        assert context.process_payment(0) == "Processing PayPal payment of $0 for email address a@example.com."


def test_demo_output(recording_console):
    """Test the strategy demo."""
    run_demo(recording_console)

    assert recording_console.lines == [
        "Processing credit card payment of $100 for card holder John Doe "
        "with card number 1234-5678-9876-5432.",
        "Processing PayPal payment of $200 for email address john.doe@example.com.",
    ]
