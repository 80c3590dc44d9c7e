import asyncio


class RateLimiter:
    """Minimum-interval rate limiter for a single async HTTP client.

    The agent talks to one API with one key from one client per run, so a
    per-client limiter already bounds the total request rate for that key.
    """

    def __init__(self, max_rps: float) -> None:
        self._min_interval = 1.0 / max_rps
        self._last_request = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            loop = asyncio.get_running_loop()
            wait = self._min_interval - (loop.time() - self._last_request)
            if wait > 0:
                await asyncio.sleep(wait)
            self._last_request = loop.time()
