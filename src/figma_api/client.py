"""Figma REST client used to fetch styles and nodes."""
from __future__ import annotations

import logging
import os
import time
from collections.abc import Sequence
from typing import Any

from figma_api._http import HttpClient, HttpResponse
from figma_api.config import ClientTimeout, RetryPolicy
from figma_api.errors import AuthenticationError, RateLimitError, TransportError
from figma_api.models import Node, Style, parse_nodes_response, parse_styles_response

log = logging.getLogger("figma_api")

DEFAULT_BASE_URL = "https://api.figma.com"
TOKEN_ENV_VAR = "FIGMA_PERSONAL_TOKEN"
NODE_BATCH_SIZE = 200


class FigmaClient:
    """Fetches styles and nodes of Figma files.

    Rate limited, timed out and 5xx requests are retried per *retry_policy*;
    everything else reaches the caller on the first failure.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: ClientTimeout | None = None,
        retry_policy: RetryPolicy | None = None,
        node_batch_size: int = NODE_BATCH_SIZE,
    ) -> None:
        self._http = HttpClient(
            base_url=base_url,
            headers={"X-Figma-Token": access_token},
            timeout=timeout,
        )
        self._retry_policy = retry_policy or RetryPolicy()
        self._node_batch_size = max(1, node_batch_size)

    @classmethod
    def from_env(cls, **kwargs: Any) -> FigmaClient:
        """Create a client using the FIGMA_PERSONAL_TOKEN environment variable."""
        token = os.environ.get(TOKEN_ENV_VAR)
        if not token:
            raise AuthenticationError(f"{TOKEN_ENV_VAR} is not set")
        return cls(token, **kwargs)

    def _retry_delay(self, exc: TransportError, attempt: int) -> float | None:
        """Seconds to wait before retrying *exc*, or None to give up."""
        policy = self._retry_policy
        if attempt >= policy.max_retries or not exc.retryable:
            return None
        # only a 429 carries a Retry-After Figma expects us to honour
        if isinstance(exc, RateLimitError) and exc.retry_after is not None:
            return exc.retry_after if exc.retry_after <= policy.max_delay else None
        return policy.backoff(attempt)

    def _get(self, path: str, params: dict[str, str] | None = None) -> HttpResponse:
        attempt = 0
        while True:
            log.info("Figma request: GET %s", path)
            start = time.monotonic()
            try:
                response = self._http.get(path, params=params)
            except TransportError as exc:
                delay = self._retry_delay(exc, attempt)
                if delay is None:
                    raise
                log.warning("GET %s failed (attempt %d): %s; retrying in %.1fs", path, attempt + 1, exc, delay)
                time.sleep(delay)
                attempt += 1
                continue
            log.info("Figma response: status=%d latency=%.2fs", response.status_code, time.monotonic() - start)
            return response

    def fetch_styles(self, file_id: str) -> list[Style]:
        """Return every published style of *file_id*."""
        response = self._get(f"/v1/files/{file_id}/styles")
        return parse_styles_response(response.body)

    def fetch_nodes(self, file_id: str, node_ids: Sequence[str]) -> dict[str, Node]:
        """Return a lookup of the requested nodes of *file_id*.

        Ids are requested in batches; missing nodes are absent from the result.
        """
        unique_ids = list(dict.fromkeys(node_ids))
        nodes: dict[str, Node] = {}
        for start in range(0, len(unique_ids), self._node_batch_size):
            batch = unique_ids[start:start + self._node_batch_size]
            response = self._get(f"/v1/files/{file_id}/nodes", params={"ids": ",".join(batch)})
            nodes.update(parse_nodes_response(response.body))
        return nodes

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
