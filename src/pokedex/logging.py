"""
Structured logging for the Pokedex API.

Every log line goes through structlog on top of the stdlib root logger. Lines
emitted while a request is being served carry that request's id, which the
middleware also returns in the ``X-Request-ID`` header.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor that stamps the current request id, if any."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def _select_renderer(debug: bool, json_output: bool) -> Any:
    if json_output or not debug:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    debug: bool = False,
    json_output: bool = False,
    level: str | None = None,
) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Console rendering and DEBUG level unless ``level`` says otherwise
        json_output: Force one JSON object per line, as wanted in production
        level: Explicit level name such as ``"WARNING"``
    """
    if level is not None:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _select_renderer(debug, json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Compact request id: microsecond timestamp plus two random bytes.

    The result is a 14-character url-safe base64 string (e.g. 'AAYBq2Xc9mF2xQ').
    """
    stamp = int(time.time() * 1_000_000).to_bytes(8, byteorder="big")
    return base64.urlsafe_b64encode(stamp + secrets.token_bytes(2)).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id (a fresh one when ``request_id`` is None) and return it."""
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
