"""Structured JSON logging for the bot and its HTTP transport.

Every event is one JSON object per line.  Events emitted while an HTTP
request is being served carry that request's id, so the router's
``command_received`` / ``command_failed`` lines can be tied back to the
``http_request`` line of the command event that caused them.
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from seabird_radio.config import LOG_LEVEL


LOG = logging.getLogger("seabird_radio")
if not LOG.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    LOG.addHandler(handler)
LOG.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def log_event(level: int, event: str, **fields: object) -> None:
    record = {"level": logging.getLevelName(level).lower(), "event": event}
    rid = request_id.get()
    if rid is not None:
        record["request_id"] = rid
    record.update(fields)
    LOG.log(level, json.dumps(record, default=str))


def log_info(event: str, **fields: object) -> None:
    log_event(logging.INFO, event, **fields)


def log_warning(event: str, **fields: object) -> None:
    log_event(logging.WARNING, event, **fields)


def log_error(event: str, **fields: object) -> None:
    log_event(logging.ERROR, event, **fields)


def summarize_command(body: bytes) -> dict:
    """Pick the command name and channel out of a posted command event.

    The argument text is left out; it is logged by the router once the
    event has been validated.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return {"command": None}
    if not isinstance(payload, dict):
        return {"command": None}
    source = payload.get("source") if isinstance(payload.get("source"), dict) else {}
    return {
        "command": payload.get("command"),
        "channel_id": source.get("channelId") or source.get("channel_id"),
        "from_user": bool(source.get("user")),
    }


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs one ``http_request`` line for it."""

    def __init__(self, app, command_path: str = "/api/commands") -> None:
        super().__init__(app)
        self.command_path = command_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        token = request_id.set(rid)
        start = time.perf_counter()
        try:
            fields = {}
            if request.method == "POST" and request.url.path == self.command_path:
                raw = await request.body()
                fields = summarize_command(raw)

                async def receive() -> dict:
                    return {"type": "http.request", "body": raw, "more_body": False}

                # Downstream handlers need to read the body again.
                request._receive = receive

            response = await call_next(request)
            log_info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
                **fields,
            )
        finally:
            request_id.reset(token)
        response.headers["x-request-id"] = rid
        return response
