"""
AI Notes Backend — Request ID Middleware
========================================

What:  Gives every request a correlation id and returns it in X-Request-ID.
How:   Reuses the client's X-Request-ID when present (the frontend can tag a
       user action and find it in server logs), otherwise generates a short
       UUID prefix. The id lives in a ContextVar so the error handlers and
       the access log can read it without threading it through calls.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client-supplied ids longer than this are truncated before being logged
MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id, exposes it on request.state and the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]
        rid = rid[:MAX_REQUEST_ID_LENGTH]

        # Not reset afterwards: the catch-all 500 handler runs in Starlette's
        # outermost middleware, after this one has returned
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
