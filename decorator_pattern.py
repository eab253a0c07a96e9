from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator, Tuple, Union

import structlog

from catalogue_errors import InvalidConfigurationError


logger = structlog.get_logger(__name__)

Price = Union[Decimal, int, float, str]


def to_price(value: Price, label: str = "price") -> Decimal:
    """Convert a price-like value to a non-negative Decimal"""
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"Invalid {label}: {value!r}")
    try:
        # str() first so 1.5 becomes Decimal('1.5') rather than its binary expansion
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidConfigurationError(f"Invalid {label}: {value!r}") from None
    if not price.is_finite() or price < 0:
        raise InvalidConfigurationError(f"{label.capitalize()} must be a non-negative amount: {value!r}")
    return price


class PricedItem(ABC):
    """Anything with a cost: a BaseItem or an AddOn wrapping another item"""

    @abstractmethod
    def cost(self) -> Decimal:
        pass

    def with_addon(self, name: str, delta: Price) -> "AddOn":
        return wrap(self, name, delta)


@dataclass(frozen=True)
class BaseItem(PricedItem):
    name: str
    price: Decimal

    def cost(self) -> Decimal:
        return self.price


@dataclass(frozen=True)
class AddOn(PricedItem):
    name: str
    delta: Decimal
    inner: PricedItem

    def cost(self) -> Decimal:
        return self.inner.cost() + self.delta


def make_item(name: str, price: Price) -> BaseItem:
    return BaseItem(name=name, price=to_price(price))


def wrap(item: PricedItem, name: str, delta: Price) -> AddOn:
    """
    Wrap item with an add-on costing delta.

    The wrapped item is left as it is, so the same base can start
    any number of independent stacks.
    """
    if not isinstance(item, PricedItem):
        raise InvalidConfigurationError(f"Add-on '{name}' needs an item to wrap, got {item!r}")
    addon = AddOn(name=name, delta=to_price(delta, "delta"), inner=item)
    logger.debug("addon_wrapped", addon=name, delta=str(addon.delta))
    return addon


def build_stack(base_price: Price, deltas: Iterable[Tuple[str, Price]] = (),
                name: str = "Item") -> PricedItem:
    """Build a base item and apply each (name, delta) add-on in order"""
    item: PricedItem = make_item(name, base_price)
    for addon_name, delta in deltas:
        item = wrap(item, addon_name, delta)
    return item


def layers(item: PricedItem) -> Iterator[PricedItem]:
    """Yield every node, outermost wrapper first"""
    node = item
    while isinstance(node, AddOn):
        yield node
        node = node.inner
    yield node


def describe(item: PricedItem) -> str:
    return ", ".join(node.name for node in reversed(list(layers(item))))


def main():
    """Demo the cost decorator stack"""
    print("=== Decorator Demo ===\n")

    coffee = make_item("Coffee", "5.0")
    print(f"{describe(coffee)}: {coffee.cost()}")

    deluxe = coffee.with_addon("Milk", "1.5").with_addon("Sugar", "0.5").with_addon("Whipped Cream", "2.0")
    print(f"{describe(deluxe)}: {deluxe.cost()}")

    # Same base, independent stack
    sweet = build_stack("5.0", [("Sugar", "0.5"), ("Sugar", "0.5")], name="Coffee")
    print(f"{describe(sweet)}: {sweet.cost()}")

    print(f"\nBase coffee unchanged: {coffee.cost()}")
    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    from catalogue_logging import configure_logging

    configure_logging()
    main()
