# Purpose: Browser cross-origin policy, applied to every request.
# Preflights from allowed origins get 204; rejected origins get no CORS
# headers at all (Starlette's bundled CORSMiddleware differs on both).

from dataclasses import dataclass
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from . import config


@dataclass(frozen=True)
class CORSPolicy:
    """
    Which origins, methods and headers browsers are allowed to use.

    Defaults to the hard-coded production allow-list.
    """

    allow_origins: Tuple[str, ...] = config.ALLOWED_ORIGINS
    allow_methods: Tuple[str, ...] = config.ALLOWED_METHODS
    allow_headers: Tuple[str, ...] = config.ALLOWED_HEADERS
    max_age: int = config.CORS_MAX_AGE

    def is_allowed_origin(self, origin: str) -> bool:
        # Exact string match only; no wildcards, no suffix matching.
        return origin in self.allow_origins


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Handles:
    - Preflight ``OPTIONS`` from an allowed origin: answered here with 204.
    - Any other request from an allowed origin: passed on, then tagged with
      ``Access-Control-Allow-Origin``.
    - No ``Origin`` header, or an origin not on the list: passed on untouched.
    """

    def __init__(self, app: ASGIApp, policy: Optional[CORSPolicy] = None) -> None:
        super().__init__(app)
        self.policy = policy or CORSPolicy()

    def _add_origin_headers(self, response: Response, origin: str) -> Response:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers.add_vary_header("Origin")
        return response

    def _preflight_response(self, origin: str) -> Response:
        policy = self.policy
        response = Response(status_code=204)
        self._add_origin_headers(response, origin)
        response.headers["Access-Control-Allow-Methods"] = ", ".join(policy.allow_methods)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(policy.allow_headers)
        response.headers["Access-Control-Max-Age"] = str(policy.max_age)
        return response

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")

        # Not a CORS request, or one we refuse: the browser does the blocking.
        if origin is None or not self.policy.is_allowed_origin(origin):
            return await call_next(request)

        if request.method == "OPTIONS":
            return self._preflight_response(origin)

        response = await call_next(request)
        return self._add_origin_headers(response, origin)
