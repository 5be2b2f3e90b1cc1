"""Sliding-window request counting for the JSON API.

The limiter is a plain object owned by the app (see `extensions.init_collaborators`)
so a shared store can replace it in a multi-instance deployment.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, Tuple


@dataclass
class _Bucket:
    window: float
    hits: Deque[float] = field(default_factory=deque)

    def trim(self, now: float) -> None:
        start = now - self.window
        while self.hits and self.hits[0] <= start:
            self.hits.popleft()


class RateLimiter:
    def __init__(self, max_keys: int = 1000, clock: Callable[[], float] = time.monotonic):
        self.max_keys = max_keys
        self.clock = clock
        self._buckets: Dict[str, _Bucket] = {}

    def __len__(self) -> int:
        return len(self._buckets)

    def hit(self, key: str, limit: int, window: float) -> bool:
        """Record one request for `key`; False when the quota is already used up.

        Rejected requests are not recorded.
        """
        now = self.clock()
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = _Bucket(window=window, hits=deque(maxlen=limit))
            self._buckets[key] = bucket
        bucket.trim(now)

        if len(bucket.hits) >= limit:
            return False

        bucket.hits.append(now)
        if len(self._buckets) > self.max_keys:
            self.prune(now)
        return True

    def prune(self, now: float | None = None) -> int:
        """Drop keys without any request inside their window. Returns the number dropped."""
        now = self.clock() if now is None else now
        stale = []
        for key, bucket in self._buckets.items():
            bucket.trim(now)
            if not bucket.hits:
                stale.append(key)
        for key in stale:
            del self._buckets[key]
        return len(stale)


def limit_for_path(path: str, config) -> Tuple[str, int, int]:
    """Pick (scope, limit, window) for an API path. Form posts get the stricter quota."""
    if path in ("/api/contact", "/api/quote"):
        limit, window = config["RATE_LIMIT_FORMS"]
        return "forms", limit, window
    limit, window = config["RATE_LIMIT_DEFAULT"]
    return "api", limit, window
