from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP


class PaymentProcessor(ABC):
    """Target interface the checkout code expects"""

    @abstractmethod
    def pay(self, amount: Decimal) -> str:
        pass


class ModernPaymentProcessor(PaymentProcessor):
    def pay(self, amount):
        return f"Paid {amount} via modern processor"


class LegacyPaymentGateway:
    """Adaptee: only understands integer cents"""

    def make_payment(self, cents: int) -> str:
        return f"LEGACY-OK {cents} cents"


class LegacyPaymentAdapter(PaymentProcessor):
    def __init__(self, gateway: LegacyPaymentGateway):
        self._gateway = gateway

    def pay(self, amount):
        amount = Decimal(amount)
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        cents = int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
        return self._gateway.make_payment(cents)


def checkout(processor: PaymentProcessor, amount: Decimal) -> str:
    return processor.pay(amount)


def main():
    print("=== Adapter Demo ===\n")
    print(checkout(ModernPaymentProcessor(), Decimal('19.99')))
    print(checkout(LegacyPaymentAdapter(LegacyPaymentGateway()), Decimal('19.99')))


if __name__ == "__main__":
    main()
