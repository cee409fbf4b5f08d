from .use_cases import CaptureEventUseCase

__all__ = ["CaptureEventUseCase"]
