from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import structlog

from catalogue_errors import InvalidConfigurationError, InvalidInputError


logger = structlog.get_logger(__name__)

DEFAULT_DENOMINATIONS = (2000, 500, 200, 100)


# ==================== Models ====================

@dataclass(frozen=True)
class Handler:
    """One note-dispensing stage; next_index points at the successor in the chain"""
    denomination: int
    next_index: Optional[int] = None

    def split(self, amount: int) -> Tuple[int, int]:
        """Return (notes, remainder) for the given amount"""
        return divmod(amount, self.denomination)


@dataclass(frozen=True)
class DispenseResult:
    """Outcome of one pass through the chain"""
    dispensed: Tuple[Tuple[int, int], ...] = ()
    leftover: int = 0

    @property
    def fully_dispensed(self) -> bool:
        return self.leftover == 0

    @property
    def total_dispensed(self) -> int:
        return sum(denomination * count for denomination, count in self.dispensed)

    @property
    def requested(self) -> int:
        return self.total_dispensed + self.leftover

    def __repr__(self) -> str:
        return f"DispenseResult({list(self.dispensed)}, leftover={self.leftover})"


# ==================== Chain ====================

class DenominationChain:
    """
    Ordered, immutable sequence of handlers, largest denomination first.

    Each handler takes as many of its notes as fit and hands the remainder
    to the handler at its next_index. The chain never mutates after
    construction, so one instance can be queried from several threads.
    """

    def __init__(self, handlers: Tuple[Handler, ...] = ()):
        handlers = tuple(handlers)
        self._validate(handlers)
        self._handlers = handlers

    @staticmethod
    def _validate(handlers: Tuple[Handler, ...]) -> None:
        """Reject anything but a strictly decreasing, forward-linked sequence"""
        last = len(handlers) - 1
        for i, handler in enumerate(handlers):
            value = handler.denomination
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidConfigurationError(f"Denomination must be a positive integer: {value!r}")
            expected = i + 1 if i < last else None
            if handler.next_index != expected:
                raise InvalidConfigurationError(
                    f"Handler {i} ({value}) must link to {expected}, not {handler.next_index}"
                )
        for larger, smaller in zip(handlers, handlers[1:]):
            if smaller.denomination >= larger.denomination:
                raise InvalidConfigurationError(
                    f"Denominations must be strictly decreasing: "
                    f"{larger.denomination} then {smaller.denomination}"
                )

    @property
    def denominations(self) -> Tuple[int, ...]:
        return tuple(handler.denomination for handler in self._handlers)

    @property
    def smallest_denomination(self) -> Optional[int]:
        if not self._handlers:
            return None
        return self._handlers[-1].denomination

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Handler]:
        return iter(self._handlers)

    def handle(self, amount: int) -> DispenseResult:
        """Split amount into notes, reporting whatever the chain cannot cover as leftover"""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidInputError(f"Amount must be an integer, got {amount!r}")
        if amount < 0:
            raise InvalidInputError(f"Amount cannot be negative: {amount}")

        dispensed: List[Tuple[int, int]] = []
        remaining = amount
        index = 0 if self._handlers else None

        while index is not None and remaining > 0:
            handler = self._handlers[index]
            notes, remainder = handler.split(remaining)
            logger.debug(
                "dispense_step",
                denomination=handler.denomination,
                notes=notes,
                remainder=remainder,
            )
            if notes > 0:
                dispensed.append((handler.denomination, notes))
                remaining = remainder
            index = handler.next_index

        logger.debug("dispense_complete", amount=amount, leftover=remaining)
        return DispenseResult(dispensed=tuple(dispensed), leftover=remaining)

    def __repr__(self) -> str:
        return f"DenominationChain({list(self.denominations)})"


def build_chain(denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> DenominationChain:
    """Link handlers for denominations given in strictly decreasing order"""
    values = list(denominations)
    last = len(values) - 1
    handlers = tuple(
        Handler(denomination=value, next_index=i + 1 if i < last else None)
        for i, value in enumerate(values)
    )
    return DenominationChain(handlers)


# ==================== Presentation ====================

def format_dispense(result: DispenseResult, smallest: Optional[int]) -> List[str]:
    """Render a dispense result as console lines"""
    lines = [f"Dispensing {count} x {denomination} note(s)"
             for denomination, count in result.dispensed]
    if not result.fully_dispensed:
        if smallest is None:
            lines.append("No denominations configured")
        else:
            lines.append(f"Amount should be in multiples of {smallest}")
    return lines


def main():
    """Demo the denomination chain"""
    print("=== Chain of Responsibility Demo ===\n")

    chain = build_chain()
    print(f"Chain: {' -> '.join(str(d) for d in chain.denominations)}")

    for amount in (3700, 3750, 0):
        print(f"\n--- Withdraw {amount} ---")
        result = chain.handle(amount)
        for line in format_dispense(result, chain.smallest_denomination):
            print(line)
        print(f"Dispensed: {result.total_dispensed}, leftover: {result.leftover}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    from catalogue_logging import configure_logging

    configure_logging()
    main()
