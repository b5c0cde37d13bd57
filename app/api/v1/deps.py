"""API dependencies."""
from __future__ import annotations

import time
from dataclasses import dataclass

from cachetools import TTLCache
from fastapi import Request

from app.api.models.errors import ErrorCodes, api_error
from src.config.settings import settings


@dataclass(frozen=True)
class RateLimitState:
    """Where a client stands in the current window."""
    allowed: bool
    limit: int
    remaining: int
    reset_after: int

    def headers(self) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(int(time.time()) + self.reset_after),
        }


class APIRateLimiter:
    """Sliding-window limit on analyses per client IP.

    Timestamps live in a TTLCache, so idle clients drop out on their own and
    memory stays bounded by ``max_clients``.
    """

    def __init__(self, max_clients: int = 10000):
        window = settings.api.rate_limit_window
        self._requests: TTLCache[str, list[float]] = TTLCache(
            maxsize=max_clients, ttl=window * 2
        )

    @staticmethod
    def client_ip(request: Request) -> str:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def hit(self, client: str, now: float | None = None) -> RateLimitState:
        """Record a request from ``client`` unless it is over the limit."""
        limit = settings.api.rate_limit_requests
        window = settings.api.rate_limit_window
        now = time.time() if now is None else now

        recent = [t for t in self._requests.get(client, []) if t > now - window]
        if len(recent) >= limit:
            self._requests[client] = recent
            reset_after = max(1, int(min(recent) + window - now))
            return RateLimitState(False, limit, 0, reset_after)

        recent.append(now)
        self._requests[client] = recent
        return RateLimitState(True, limit, limit - len(recent), window)


# Global rate limiter instance
api_rate_limiter = APIRateLimiter()


async def check_rate_limit(request: Request) -> None:
    """Reject the request with 429 once the client used up its window.

    The state is kept on ``request.state`` so the response carries the
    X-RateLimit-* headers either way.
    """
    state = api_rate_limiter.hit(APIRateLimiter.client_ip(request))
    request.state.rate_limit = state

    if not state.allowed:
        raise api_error(
            429,
            ErrorCodes.RATE_LIMIT_EXCEEDED,
            "Too many requests. Please slow down.",
            headers={"Retry-After": str(state.reset_after), **state.headers()},
            retry_after=state.reset_after,
            limit=state.limit,
        )
