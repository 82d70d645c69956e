from __future__ import annotations

import time
from collections import deque

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from concept_booster.core.config import settings
from concept_booster.core.errors import TooManyRequests


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client sliding window over tutor calls.

    Rejections carry `TooManyRequests`, not the upstream `RateLimited` copy.
    Buckets with no request inside the window are evicted on a periodic sweep.
    """

    def __init__(self, app, limit: int | None = None, window_seconds: int | None = None):
        super().__init__(app)
        self.limit = limit or settings.rate_limit_requests
        self.window_seconds = window_seconds or settings.rate_limit_window_seconds
        self.buckets: dict[str, deque[float]] = {}
        self._last_sweep = time.monotonic()

    def _sweep(self, now: float) -> None:
        stale = [key for key, bucket in self.buckets.items() if not bucket or now - bucket[-1] > self.window_seconds]
        for key in stale:
            del self.buckets[key]
        self._last_sweep = now

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path.endswith("/health"):
            return await call_next(request)

        now = time.monotonic()
        if now - self._last_sweep > self.window_seconds:
            self._sweep(now)

        client = request.client.host if request.client else "unknown"
        bucket = self.buckets.setdefault(client, deque())
        while bucket and now - bucket[0] > self.window_seconds:
            bucket.popleft()

        if len(bucket) >= self.limit:
            return JSONResponse(
                status_code=TooManyRequests.status_code,
                content={"error": TooManyRequests.default_message},
            )

        bucket.append(now)
        return await call_next(request)
