"""Persistence service interface consumed by the application layer."""

from abc import ABC, abstractmethod

from events.domain import Event, EventCreate, EventUpdate


class EventService(ABC):
    """Interface for event persistence with a fixed error taxonomy.

    Implementations raise:
        EventNotCreatedError from create.
        EventNotFoundError from get_by_id and get_all.
        EventNotUpdatedError from update.
        EventNotDeletedError from delete.
    """

    @abstractmethod
    def create(self, data: EventCreate) -> Event: ...

    @abstractmethod
    def get_by_id(self, event_id: str) -> Event: ...

    @abstractmethod
    def get_all(self) -> list[Event]: ...

    @abstractmethod
    def update(self, event_id: str, changes: EventUpdate) -> Event: ...

    @abstractmethod
    def delete(self, event_id: str) -> Event: ...
