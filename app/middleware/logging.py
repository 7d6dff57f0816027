import logging
import re
import time
import uuid
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.config import settings

logger = logging.getLogger(__name__)

SESSION_PATH = re.compile(r"^/user-tests/sessions/(?P<session_id>[0-9a-f]{32})(?:/|$)")


def session_id_from_path(path: str) -> Optional[str]:
    match = SESSION_PATH.match(path)
    return match.group("session_id") if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request, tagged with the test session it touches."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        path = request.url.path
        method = request.method
        session_id = session_id_from_path(path)
        session_msg = f" [SESSION: {session_id}]" if session_id else ""

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            logger.error(
                f"[{request_id}] {method} {path}{session_msg} - ERROR",
                extra={
                    "request_id": request_id,
                    "method": method,
                    "path": path,
                    "session_id": session_id,
                    "duration_ms": duration_ms,
                    "error": str(exc)
                }
            )
            raise

        duration_ms = round((time.time() - start_time) * 1000, 2)
        status_code = response.status_code
        slow = duration_ms >= settings.SLOW_REQUEST_THRESHOLD_MS
        slow_msg = " [SLOW]" if slow else ""

        log_level = logging.WARNING if status_code >= 400 or slow else logging.INFO
        logger.log(
            log_level,
            f"[{request_id}] {method} {path}{session_msg} - {status_code} ({duration_ms}ms){slow_msg}",
            extra={
                "request_id": request_id,
                "method": method,
                "path": path,
                "session_id": session_id,
                "status_code": status_code,
                "duration_ms": duration_ms
            }
        )

        response.headers["X-Request-ID"] = request_id
        return response
