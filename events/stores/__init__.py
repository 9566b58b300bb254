from events.stores.interfaces import EventStore, IdGenerator, StoreError

__all__ = [
    "EventStore",
    "IdGenerator",
    "StoreError",
]
