"""httpx transport wrapper with retry, backoff, and rate-limit handling."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class RetryingTransport(httpx.BaseTransport):
    """Wraps an httpx transport with automatic retry on transient failures.

    - Retry with exponential backoff + jitter (up to *max_retries* retries)
    - Honour ``Retry-After`` on 429 / 502 / 503 / 504
    - Retry on transport-level errors (connection reset, timeout, etc.)

    The last response (or error) is handed back once retries are exhausted.
    """

    def __init__(
        self,
        *,
        transport: httpx.BaseTransport | None = None,
        max_retries: int = 3,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transport = transport or httpx.HTTPTransport()
        self._max_retries = max_retries
        self._sleep = sleep

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        for attempt in range(self._max_retries + 1):
            try:
                response = self._transport.handle_request(request)
            except httpx.TransportError:
                if attempt >= self._max_retries:
                    raise
                self._sleep_backoff(attempt)
                continue

            if response.status_code in _RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                retry_after = self._parse_retry_after(response)
                response.close()
                if retry_after > 0:
                    self._sleep(retry_after)
                self._sleep_backoff(attempt)
                continue

            return response

        raise httpx.TransportError("Request failed after retries")  # pragma: no cover

    def close(self) -> None:
        self._transport.close()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 0.0

    def _sleep_backoff(self, attempt: int) -> None:
        seconds = min(4.0, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying product request (attempt %d)", attempt + 1)
        self._sleep(seconds)
