import logging
from collections import defaultdict
from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class SlidingWindowLimiter:
    """Per-key request counter over a sliding time window."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.max_requests = max(1, max_requests)
        self.window_seconds = max(1, window_seconds)
        self._clock = clock
        self._hits: dict[str, deque[float]] = defaultdict(deque)
        self._lock = RLock()
        self._last_sweep = clock()

    def acquire(self, key: str) -> int | None:
        """Record a hit for key.

        Returns None when the hit is allowed, otherwise the number of seconds
        the caller should wait before retrying.
        """

        now = self._clock()
        cutoff = now - self.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            hits = self._hits[key]
            while hits and hits[0] <= cutoff:
                hits.popleft()

            if len(hits) >= self.max_requests:
                return max(1, int(self.window_seconds - (now - hits[0])))

            hits.append(now)
            return None

    @property
    def tracked_keys(self) -> int:
        return len(self._hits)

    def _sweep(self, cutoff: float) -> None:
        # A key whose newest hit is expired holds nothing but expired hits.
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]


class CalendarRateLimitMiddleware(BaseHTTPMiddleware):
    """Rate limit calendar builds, which cost days x observations each."""

    def __init__(
        self,
        app,
        requests_per_window: int = 30,
        window_seconds: int = 60,
        path_prefix: str = "/heatmap/",
    ) -> None:
        super().__init__(app)
        self.limiter = SlidingWindowLimiter(requests_per_window, window_seconds)
        self.path_prefix = path_prefix

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method != "POST" or not request.url.path.startswith(
            self.path_prefix
        ):
            return await call_next(request)

        client = client_ip(request)
        retry_after = self.limiter.acquire(client)
        if retry_after is not None:
            logger.warning("Rate limit exceeded for %s on %s", client, request.url.path)
            return JSONResponse(
                status_code=429,
                content={"detail": "Too Many Requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)


def client_ip(request: Request) -> str:
    # Reverse proxies put the original client first in X-Forwarded-For.
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or "unknown"

    if request.client and request.client.host:
        return request.client.host

    return "unknown"
