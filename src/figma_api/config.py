"""Client configuration types."""
from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """How FigmaClient retries rate limited and failed requests.

    A 429 with ``Retry-After`` waits as long as the API asks, up to
    *max_delay*. Other retryable failures back off exponentially from
    *base_delay*.
    """

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 60.0
    jitter: bool = True

    def backoff(self, attempt: int) -> float:
        delay = min(self.base_delay * 2 ** attempt, self.max_delay)
        if self.jitter:
            delay *= random.uniform(0.5, 1.5)
        return delay


@dataclass(frozen=True)
class ClientTimeout:
    """Timeout settings handed to httpx."""

    connect: float = 5.0
    request: float = 30.0
