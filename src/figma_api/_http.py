"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from figma_api.config import ClientTimeout
from figma_api.errors import NetworkError, RequestTimeoutError, error_from_status_code


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str]
    raw_text: str = ""


def _retry_after(headers: httpx.Headers) -> float | None:
    value = headers.get("retry-after")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _error_message(body: dict[str, Any], raw_text: str) -> str:
    # Figma uses {"status": 404, "err": "Not found"}; some endpoints use "message"
    for key in ("err", "message", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return raw_text


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into figma_api exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: ClientTimeout | None = None,
    ) -> None:
        t = timeout or ClientTimeout()
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(
                connect=t.connect,
                read=t.request,
                write=t.request,
                pool=t.connect,
            ),
        )

    def get(self, path: str, params: dict[str, str] | None = None) -> HttpResponse:
        """Send a GET request and return the parsed response.

        Raises a figma_api error on non-2xx status or transport failure.
        """
        try:
            resp = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        raw_text = resp.text
        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if resp.status_code >= 300:
            raise error_from_status_code(
                resp.status_code,
                _error_message(body, raw_text),
                raw=body,
                retry_after=_retry_after(resp.headers),
            )

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=dict(resp.headers),
            raw_text=raw_text,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
