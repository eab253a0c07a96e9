from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple


# ==================== Single Responsibility ====================

@dataclass
class Invoice:
    """Holds invoice data and computes its total, nothing else"""
    customer: str
    items: List[Tuple[str, Decimal]] = field(default_factory=list)

    def add_item(self, name: str, price: Decimal):
        self.items.append((name, price))

    def total(self) -> Decimal:
        return sum((price for _, price in self.items), Decimal('0'))


class InvoicePrinter:
    """Formatting lives here so Invoice changes only for billing reasons"""

    def render(self, invoice: Invoice) -> str:
        lines = [f"Invoice for {invoice.customer}"]
        lines += [f"  {name}: {price}" for name, price in invoice.items]
        lines.append(f"  Total: {invoice.total()}")
        return "\n".join(lines)


# ==================== Open/Closed ====================

class DiscountPolicy(ABC):
    @abstractmethod
    def apply(self, amount: Decimal) -> Decimal:
        pass


class NoDiscount(DiscountPolicy):
    def apply(self, amount):
        return amount


class PercentageDiscount(DiscountPolicy):
    def __init__(self, percent: Decimal):
        self.percent = Decimal(percent)

    def apply(self, amount):
        return amount - amount * self.percent / Decimal('100')


class FlatDiscount(DiscountPolicy):
    def __init__(self, value: Decimal):
        self.value = Decimal(value)

    def apply(self, amount):
        return max(Decimal('0'), amount - self.value)


def checkout_total(invoice: Invoice, policy: DiscountPolicy) -> Decimal:
    # New discounts are new classes; this function never changes
    return policy.apply(invoice.total())


# ==================== Liskov Substitution ====================

class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass


class Rectangle(Shape):
    def __init__(self, width, height):
        self.width = width
        self.height = height

    def area(self):
        return self.width * self.height


class Square(Shape):
    # Not a Rectangle subclass: a square cannot honour independent width/height setters
    def __init__(self, side):
        self.side = side

    def area(self):
        return self.side * self.side


def total_area(shapes: List[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


# ==================== Interface Segregation ====================

class Printer(ABC):
    @abstractmethod
    def print_document(self, document: str) -> str:
        pass


class Scanner(ABC):
    @abstractmethod
    def scan(self, page: str) -> str:
        pass


class SimplePrinter(Printer):
    def print_document(self, document):
        return f"Printing: {document}"


class MultiFunctionDevice(Printer, Scanner):
    def print_document(self, document):
        return f"Printing: {document}"

    def scan(self, page):
        return f"Scanned: {page}"


# ==================== Dependency Inversion ====================

class MessageSender(ABC):
    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        pass


class EmailSender(MessageSender):
    def send(self, recipient, message):
        return f"Email to {recipient}: {message}"


class SmsSender(MessageSender):
    def send(self, recipient, message):
        return f"SMS to {recipient}: {message}"


class Notifier:
    """High-level policy depends only on the MessageSender abstraction"""

    def __init__(self, sender: MessageSender):
        self._sender = sender

    def notify(self, recipient: str, message: str) -> str:
        return self._sender.send(recipient, message)


def main():
    print("=== SOLID Principles Demo ===\n")

    print("--- Single Responsibility ---")
    invoice = Invoice("ACME")
    invoice.add_item("Widget", Decimal('40'))
    invoice.add_item("Gadget", Decimal('60'))
    print(InvoicePrinter().render(invoice))

    print("\n--- Open/Closed ---")
    for policy in (NoDiscount(), PercentageDiscount(10), FlatDiscount(25)):
        print(f"{type(policy).__name__}: {checkout_total(invoice, policy)}")

    print("\n--- Liskov Substitution ---")
    print(f"Total area: {total_area([Rectangle(2, 3), Square(4)])}")

    print("\n--- Interface Segregation ---")
    print(SimplePrinter().print_document("report.pdf"))
    device = MultiFunctionDevice()
    print(device.scan("contract page 1"))

    print("\n--- Dependency Inversion ---")
    for sender in (EmailSender(), SmsSender()):
        print(Notifier(sender).notify("alice", "Your order shipped"))


if __name__ == "__main__":
    main()
