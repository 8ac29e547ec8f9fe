"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class OrderId:
    """Identifier shared by every booking of one checkout order."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Order ID cannot be blank")

    @classmethod
    def from_string(cls, value: str | None) -> Self:
        """Order ids are matched exactly as given; only blankness is checked."""
        return cls(value=value or "")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a TableBooking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class Money:
    """Signed amount; refunds and discounts are stored as negative values."""

    amount: Decimal

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    @classmethod
    def from_optional(cls, amount: Decimal | int | float | None) -> Self:
        """Money for a nullable column; a missing amount counts as zero."""
        if amount is None:
            return cls.zero()
        return cls(amount=Decimal(str(amount)))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
