"""FuzzMaster Structured Logging System

Provides structured logging with crash event tracking.
Uses structlog for consistent, analyzable log output.
"""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

#: Number of leading bytes shown when a payload is summarized
PAYLOAD_PREVIEW_BYTES = 16


def summarize_bytes(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor to replace raw byte payloads with a short summary.

    Args:
        logger: The wrapped logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary to process

    Returns:
        Event dictionary with bytes values replaced by "<N bytes: hex...>"

    """
    for key, value in event_dict.items():
        if isinstance(value, (bytes, bytearray)):
            preview = bytes(value[:PAYLOAD_PREVIEW_BYTES]).hex()
            suffix = "..." if len(value) > PAYLOAD_PREVIEW_BYTES else ""
            event_dict[key] = f"<{len(value)} bytes: {preview}{suffix}>"

    return event_dict


def add_timestamp(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor to add ISO-formatted timestamp to log entries.

    Args:
        logger: The wrapped logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary to process

    Returns:
        Event dictionary with timestamp added

    """
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def add_crash_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor to mark crash-related events.

    Args:
        logger: The wrapped logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary to process

    Returns:
        Event dictionary with crash context added

    """
    if event_dict.get("crash_event"):
        event_dict["event_category"] = "CRASH"
        if event_dict.get("severity") in ("critical", "high"):
            event_dict["requires_attention"] = True

    return event_dict


def configure_logging(
    log_level: str = "INFO", json_format: bool = True, log_file: Path | None = None
) -> None:
    """Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to output JSON format (True) or human-readable (False)
        log_file: Optional file path to write logs to

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
        >>> logger = structlog.get_logger("fuzzmaster")
        >>> logger.info("session_started", protocol="http")

    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        summarize_bytes,
        add_crash_context,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured structlog logger.

    Args:
        name: Logger name (typically module name using __name__)

    Returns:
        Configured structlog BoundLogger instance

    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


class CrashEventLogger:
    """Specialized logger for crash and session lifecycle events."""

    def __init__(self, logger: structlog.stdlib.BoundLogger):
        """Initialize crash event logger.

        Args:
            logger: Base structlog logger to use

        """
        self.logger = logger

    def log_crash(
        self,
        case_id: int,
        crash_type: str,
        severity: str,
        unique: bool,
        signal: int | None = None,
        reproducer: bytes = b"",
    ) -> None:
        """Log a recorded crash.

        Critical and high severity crashes are logged as warnings.

        Args:
            case_id: ID of the fuzz case that triggered the crash
            crash_type: Crash taxonomy value
            severity: Derived severity value
            unique: Whether the crash was new to the session
            signal: OS signal reported by the executor, if any
            reproducer: Triggering bytes (summarized by the processor chain)

        """
        log = (
            self.logger.warning
            if severity in ("critical", "high")
            else self.logger.info
        )
        log(
            "crash_recorded",
            crash_event=True,
            case_id=case_id,
            crash_type=crash_type,
            severity=severity,
            unique=unique,
            signal=signal,
            reproducer=reproducer,
        )

    def log_fuzzing_session(
        self, session_id: str, status: str, stats: dict[str, Any] | None = None
    ) -> None:
        """Log fuzzing session status.

        Args:
            session_id: Unique identifier for the session
            status: Session status (started, cancelled)
            stats: Session statistics

        """
        self.logger.info(
            "fuzzing_session",
            event_type="FUZZING_SESSION",
            session_id=session_id,
            status=status,
            stats=stats or {},
        )
