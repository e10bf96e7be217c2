"""
repofolio logging utilities.

Provides configurable logging for HTTP requests/responses and a diagnostic
channel for fetch failures that the projector degrades to an empty list.
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from repofolio.exceptions import FetchError

# Create package loggers
_root_logger = logging.getLogger("repofolio")
_http_logger = logging.getLogger("repofolio.http")
_pipeline_logger = logging.getLogger("repofolio.pipeline")

# Maximum number of characters of a response body preview
_BODY_PREVIEW_LENGTH = 200


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    pipeline_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure repofolio logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        pipeline_level: Log level for pipeline diagnostics (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from repofolio.logging import configure_logging

        # Show outbound requests while developing the page
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)

    _pipeline_logger.setLevel(pipeline_level if pipeline_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a repofolio logger.

    Args:
        name: Logger name suffix (e.g., "http", "pipeline"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"repofolio.{name}")


def preview_body(body: Any) -> str:
    """Render a decoded body as a short single-line preview."""
    if isinstance(body, list):
        return f"<list of {len(body)} items>"

    text = repr(body)
    if len(text) <= _BODY_PREVIEW_LENGTH:
        return text
    return f"{text[:_BODY_PREVIEW_LENGTH]}..."


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={params}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: Any = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        body: Decoded response body (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body is not None:
        log_parts.append(f"body={preview_body(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_discarded_failure(error: "FetchError") -> None:
    """
    Log a fetch failure that is about to be replaced by an empty project list.

    The page keeps rendering an empty section, so this is the only place an
    outage shows up.
    """
    log_parts = [f"Discarding fetch failure: {error}"]

    status_code = getattr(error, "status_code", None)
    if status_code is not None:
        log_parts.append(f"status={status_code}")

    if error.request_id:
        log_parts.append(f"request_id={error.request_id}")

    _pipeline_logger.warning(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "preview_body",
    "log_http_request",
    "log_http_response",
    "log_discarded_failure",
]
