"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class MoneyVND(ValueObject):
    """Whole-dong amount. VND has no minor unit."""

    amount: int

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"VND amount must be an integer: {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"VND amount cannot be negative: {self.amount}")

    @classmethod
    def coerce(cls, raw) -> "MoneyVND":
        """
        Build an amount from loosely typed input.

        Anything that is not a non-negative number becomes 0.

        Args:
            raw: Form value, string or number

        Returns:
            MoneyVND instance
        """
        try:
            value = int(float(raw))
        except (TypeError, ValueError, OverflowError):
            return cls(0)
        return cls(max(0, value))

    def format(self) -> str:
        """Format with dot thousands separators, e.g. ``100.000``."""
        return f"{self.amount:,}".replace(",", ".")

    def __str__(self) -> str:
        return f"{self.format()} ₫"


class OrderStatus(Enum):
    """Order payment status. Transitions PENDING -> PAID only."""

    PENDING = "PENDING"
    PAID = "PAID"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
