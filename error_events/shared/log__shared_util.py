from __future__ import annotations

import logging

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "error_events.stream"


def resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    The package only installs a NullHandler on import; hosts that want to see
    diagnostics from error_events call this once at startup.
    """
    if level is None:
        from ..settings import settings

        level = settings.EVENTS_LOG_LEVEL

    logger = logging.getLogger("error_events")
    logger.setLevel(resolve_level(level))
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
