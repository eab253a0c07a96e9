"""Tests for the SOLID principle illustrations."""

from decimal import Decimal

from solid_principles import (
    EmailSender,
    FlatDiscount,
    Invoice,
    InvoicePrinter,
    MultiFunctionDevice,
    NoDiscount,
    Notifier,
    PercentageDiscount,
    Printer,
    Rectangle,
    Scanner,
    SimplePrinter,
    SmsSender,
    Square,
    checkout_total,
    total_area,
)


def make_invoice():
    invoice = Invoice("ACME")
    invoice.add_item("Widget", Decimal("40"))
    invoice.add_item("Gadget", Decimal("60"))
    return invoice


def test_invoice_total_and_render():
    invoice = make_invoice()
    assert invoice.total() == Decimal("100")
    rendered = InvoicePrinter().render(invoice)
    assert rendered.splitlines()[0] == "Invoice for ACME"
    assert rendered.splitlines()[-1] == "  Total: 100"


def test_empty_invoice_total():
    assert Invoice("nobody").total() == Decimal("0")


def test_discount_policies():
    invoice = make_invoice()
    assert checkout_total(invoice, NoDiscount()) == Decimal("100")
    assert checkout_total(invoice, PercentageDiscount(10)) == Decimal("90")
    assert checkout_total(invoice, FlatDiscount(25)) == Decimal("75")
    assert checkout_total(invoice, FlatDiscount(250)) == Decimal("0")


def test_shapes_substitute():
    assert total_area([Rectangle(2, 3), Square(4)]) == 22


def test_segregated_interfaces():
    assert isinstance(SimplePrinter(), Printer)
    assert not isinstance(SimplePrinter(), Scanner)
    device = MultiFunctionDevice()
    assert isinstance(device, Printer) and isinstance(device, Scanner)
    assert device.scan("page") == "Scanned: page"


def test_notifier_depends_on_abstraction():
    assert Notifier(EmailSender()).notify("a", "m") == "Email to a: m"
    assert Notifier(SmsSender()).notify("a", "m") == "SMS to a: m"
