"""Domain primitives that enforce validity at creation time."""

import uuid
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Opaque unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("EventId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    @classmethod
    def generate(cls) -> Self:
        return cls(value=str(uuid.uuid4()))


def new_event_id() -> str:
    """Default primary key for persisted events."""
    return EventId.generate().value
