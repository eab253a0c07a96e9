from dataclasses import dataclass, field
from typing import List, Optional


SIZES = ("small", "medium", "large")


@dataclass(frozen=True)
class Pizza:
    size: str
    crust: str
    toppings: tuple = ()
    extra_cheese: bool = False

    def describe(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "no toppings"
        cheese = " with extra cheese" if self.extra_cheese else ""
        return f"{self.size.capitalize()} {self.crust} crust pizza: {toppings}{cheese}"


@dataclass
class PizzaBuilder:
    """Fluent builder; build() returns the pizza and starts over"""
    _size: Optional[str] = None
    _crust: str = "regular"
    _toppings: List[str] = field(default_factory=list)
    _extra_cheese: bool = False

    def size(self, size: str) -> "PizzaBuilder":
        if size not in SIZES:
            raise ValueError(f"Unknown size '{size}', expected one of {SIZES}")
        self._size = size
        return self

    def crust(self, crust: str) -> "PizzaBuilder":
        self._crust = crust
        return self

    def add_topping(self, topping: str) -> "PizzaBuilder":
        self._toppings.append(topping)
        return self

    def extra_cheese(self) -> "PizzaBuilder":
        self._extra_cheese = True
        return self

    def reset(self):
        self._size = None
        self._crust = "regular"
        self._toppings = []
        self._extra_cheese = False

    def build(self) -> Pizza:
        if self._size is None:
            raise ValueError("Pizza size must be set before building")
        pizza = Pizza(self._size, self._crust, tuple(self._toppings), self._extra_cheese)
        self.reset()
        return pizza


class PizzaDirector:
    """Knows the recipes, not how pizzas are assembled"""

    def __init__(self, builder: PizzaBuilder):
        self.builder = builder

    def margherita(self, size: str = "medium") -> Pizza:
        return self.builder.size(size).crust("thin").add_topping("tomato").add_topping("basil").build()

    def pepperoni(self, size: str = "large") -> Pizza:
        return (self.builder.size(size).add_topping("tomato")
                .add_topping("pepperoni").extra_cheese().build())


def main():
    print("=== Builder Demo ===\n")

    director = PizzaDirector(PizzaBuilder())
    print(director.margherita().describe())
    print(director.pepperoni().describe())

    custom = PizzaBuilder().size("small").crust("stuffed").add_topping("mushroom").build()
    print(custom.describe())


if __name__ == "__main__":
    main()
