from events.application.event_use_case import EventUseCase

__all__ = ["EventUseCase"]
