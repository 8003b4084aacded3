"""
Logging utilities for safe structured logging.

Keeps user-supplied text (chat messages, completions, uploaded fields)
short and on one line in log records, and formats provider failures with
their context.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

DEFAULT_MAX_LENGTH = 200


def safe_log_value(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Render a value for a log line.

    Collections are summarized by size, text is collapsed onto a single
    line and truncated so user input cannot forge or flood log records.

    Args:
        value: Value to render
        max_length: Character budget before truncation

    Returns:
        str: Single-line representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}[{len(value)}]"
    if isinstance(value, dict):
        return f"dict[{len(value)} keys]"

    try:
        text = " ".join(str(value).split())
    except Exception as e:
        return f"<unloggable {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    level: int = logging.ERROR,
    **context: Any,
) -> None:
    """
    Log an exception with its type and message plus key=value context.

    Args:
        logger: Logger instance
        message: Log message, already prefixed with module and function
        exc: Exception being reported
        level: Log level; degradation paths report at WARNING
        **context: Extra fields such as provider name
    """
    fields = {key: safe_log_value(val) for key, val in context.items()}
    fields["error_type"] = type(exc).__name__
    fields["error_msg"] = safe_log_value(str(exc)) or "<empty>"
    details = ", ".join(f"{key}={val}" for key, val in fields.items())
    logger.log(level, f"{message} ({details})")
