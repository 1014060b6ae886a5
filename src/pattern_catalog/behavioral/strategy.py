"""Strategy pattern: interchangeable payment methods.

A family of algorithms is wrapped behind one interface so the client can pick
or swap the algorithm at runtime. ``PaymentContext`` only knows
``PaymentStrategy``; credit card and PayPal payments are plugged in as needed.

Participants:
    - PaymentStrategy: common interface for every payment method
    - CreditCardPayment, PayPalPayment: concrete strategies
    - PaymentContext: holds the selected strategy and delegates to it
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.exceptions import ValidationError
from pattern_catalog.domain.pattern import PatternCategory, PatternInfo
from pattern_catalog.infrastructure.console import Console, StdoutConsole, default_console
from pattern_catalog.infrastructure.logging import get_logger

logger = get_logger(__name__)


def format_amount(amount: float) -> str:
    return f"{amount:g}"


def mask_card_number(number: str) -> str:
    """Keep only the last four digits: '1234-5678-9876-5432' -> '****5432'."""
    digits = [c for c in number if c.isdigit()]
    return "****" + "".join(digits[-4:])


class PaymentStrategy(ABC):
    """Strategy interface for processing a payment."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Process the payment and return a description of it."""

    @abstractmethod
    def get_strategy_name(self) -> str:
        """Short name used in logs."""


class CreditCardPayment(PaymentStrategy):
    def __init__(self, card_number: str, card_holder: str):
        self.card_number = card_number
        self.card_holder = card_holder

    def pay(self, amount: float) -> str:
        logger.info(
            "Processing payment",
            strategy=self.get_strategy_name(),
            amount=amount,
            card=mask_card_number(self.card_number),
        )
        return (
            f"Processing credit card payment of ${format_amount(amount)} for card holder "
            f"{self.card_holder} with card number {self.card_number}."
        )

    def get_strategy_name(self) -> str:
        return "credit_card"


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str):
        self.email = email

    def pay(self, amount: float) -> str:
        logger.info("Processing payment", strategy=self.get_strategy_name(), amount=amount)
        return f"Processing PayPal payment of ${format_amount(amount)} for email address {self.email}."

    def get_strategy_name(self) -> str:
        return "paypal"


class PaymentContext:
    """Processes payments with whichever strategy is currently selected."""

    def __init__(self, strategy: Optional[PaymentStrategy] = None, console: Optional[Console] = None):
        self._strategy = strategy
        self._console = default_console(console)

    @property
    def strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def set_strategy(self, strategy: Optional[PaymentStrategy]) -> None:
        self._strategy = strategy

    def process_payment(self, amount: float) -> Optional[str]:
        """
        Pay ``amount`` with the current strategy.

        Returns:
            The strategy's description, or None when no strategy is set

        Raises:
            ValidationError: If the amount is negative
        """
        if amount < 0:
            raise ValidationError("Payment amount must not be negative", {"amount": amount})

        if self._strategy is None:
            self._console.write("No payment strategy set!")
            return None

        message = self._strategy.pay(amount)
        self._console.write(message)
        return message


PATTERN_INFO = PatternInfo(
    name="strategy",
    title="Strategy",
    category=PatternCategory.BEHAVIORAL,
    intent=(
        "Define a family of algorithms, encapsulate each one and make them "
        "interchangeable so the algorithm can vary independently of its clients."
    ),
    participants=[
        "PaymentStrategy: common algorithm interface",
        "CreditCardPayment / PayPalPayment: concrete strategies",
        "PaymentContext: uses and switches the selected strategy",
    ],
    advantages=[
        "Algorithms can be swapped at runtime",
        "Each algorithm has a single responsibility",
        "Strategies are reusable across contexts",
    ],
    examples=[
        "Choosing a sorting algorithm at runtime",
        "Text formatting modes in an editor",
    ],
    module=__name__,
)


def run_demo(console: Console) -> None:
    credit_card = CreditCardPayment("1234-5678-9876-5432", "John Doe")
    paypal = PayPalPayment("john.doe@example.com")

    context = PaymentContext(console=console)

    context.set_strategy(credit_card)
    context.process_payment(100.0)

    context.set_strategy(paypal)
    context.process_payment(200.0)


def main() -> None:
    run_demo(StdoutConsole())


if __name__ == "__main__":
    main()
