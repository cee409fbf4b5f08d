from __future__ import annotations


class ErrorEventsError(Exception):
    """Base class for errors raised by error_events adapters."""


class EventSinkError(ErrorEventsError):
    """An encoded event could not be handed to its sink."""
