import logging
import sys

import structlog

from tubescout.config import Settings

LOGGER_NAME = "tubescout"


def configure_logging(settings: Settings) -> logging.Logger:
    """Route the tubescout loggers to stdout through a structlog console formatter."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_log_level(settings.log_level))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=_stream_supports_color(sys.stdout)),
            ],
        )
    )
    logger.addHandler(handler)
    return logger


def _resolve_log_level(raw_level: str) -> int:
    resolved = getattr(logging, raw_level.strip().upper(), None)
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def _stream_supports_color(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            return False
    return False
