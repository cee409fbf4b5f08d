from .capture_event import CaptureEventUseCase

__all__ = ["CaptureEventUseCase"]
