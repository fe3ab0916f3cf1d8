"""structlog setup for processes hosting pools."""

import logging

import structlog


def configure_logging(level: str | int = "INFO") -> None:
    """Configure structlog with level filtering, ISO timestamps and console output.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or stdlib logging constant

    Raises:
        ValueError: If level is an unknown name
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
