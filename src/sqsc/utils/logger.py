"""
Module: logger.py
Description: Structured logging configuration for the queue client.

Configures structlog for JSON output so queue activity lands in the
same log stream as the host application. Provides a single
configure_logging() entry point plus the get_logger() helper used
by every module.

Key Components:
- JSON output with ISO 8601 UTC timestamps
- Opt-in: the host application calls configure_logging() itself
- get_logger() helper function

Dependencies: structlog, logging
"""

import logging

import structlog


def _add_log_level(logger, method_name, event_dict):
    """
    Add log level to event dictionary.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with level
    """
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog for JSON output.

    Safe to call more than once; the latest level wins because
    loggers are not cached on first use.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If log_level is not a known level name
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent to SQS", message_id="5fea7756")
        {"event": "Message sent to SQS", "message_id": "5fea7756", "timestamp": "2024-01-15T10:30:00.000000Z", "level": "INFO"}
    """
    return structlog.get_logger(name)
