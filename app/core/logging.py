from __future__ import annotations

import logging
import sys
import time
import uuid
from typing import IO, Any, Optional

import structlog
from fastapi import Request

REQUEST_ID_HEADER = "x-request-id"


PRE_CHAIN: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def build_log_handler(env: str, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Handler rendering stdlib and structlog records alike.

    Development renders colored lines; other environments emit JSON.
    """
    renderer: Any
    if env == "development":
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
    )

    return handler


def configure_logging(env: str = "development", debug: bool = False) -> None:
    """Send both structlog and stdlib `logging` records to stdout.

    Module loggers are plain `logging.getLogger(__name__)`, so their records
    go through the same processors and pick up the bound request_id.
    """
    root = logging.getLogger()
    root.handlers = [build_log_handler(env)]
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


async def request_id_middleware(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Bind a request_id for the duration of the request and log its outcome."""
    start = time.perf_counter()

    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.bind_contextvars(
        request_id=request_id, method=request.method, path=request.url.path
    )

    status = 500
    try:
        response = await call_next(request)
        status = response.status_code
    finally:
        structlog.get_logger("request").info(
            "request.completed",
            status=status,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        structlog.contextvars.clear_contextvars()

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
