"""Basic protection for the JSON API.

Requests under ``/api/`` are rejected when they carry an ``Origin`` that is
not on the allow-list, or when the ``User-Agent`` is missing or looks like a
crawler.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from ..config import ApiGuardConfig, get_config

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


def check_request(guard: ApiGuardConfig, path: str, origin: str, user_agent: str) -> str:
    """Return the reason a request must be blocked, or an empty string."""
    if not guard.enabled or not path.startswith(API_PREFIX):
        return ""
    if origin and origin not in guard.allowed_origins:
        return f"origin {origin}"
    if not user_agent:
        return "missing user agent"
    agent = user_agent.lower()
    for marker in guard.blocked_agent_markers:
        if marker.lower() in agent:
            return f"user agent {user_agent}"
    return ""


class ApiGuardMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        reason = check_request(
            get_config().api_guard,
            request.url.path,
            request.headers.get("origin", ""),
            request.headers.get("user-agent", ""),
        )
        if reason:
            logger.warning(f"[ApiGuard] Blocked {request.method} {request.url.path}: {reason}")
            return PlainTextResponse("Forbidden", status_code=403)
        return await call_next(request)


class ConfigCORSMiddleware(CORSMiddleware):
    """CORS that reads the same origin allow-list as the guard on every request."""

    def is_allowed_origin(self, origin: str) -> bool:
        return origin in get_config().api_guard.allowed_origins
