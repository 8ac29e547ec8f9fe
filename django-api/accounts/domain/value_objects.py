"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class AccountId:
    """Unique identifier for an Account."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class InvitationId:
    """Unique identifier for an AdminInvitation."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class Email:
    """Case-insensitive e-mail address, stored lowercased."""

    value: str

    def __post_init__(self) -> None:
        if "@" not in self.value:
            raise ValueError("Invalid e-mail address")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip().lower())

    def __str__(self) -> str:
        return self.value
