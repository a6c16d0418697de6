"""Minimal Figma REST client: styles and nodes of a file."""
from __future__ import annotations

from figma_api.client import FigmaClient
from figma_api.config import ClientTimeout, RetryPolicy
from figma_api.errors import (
    AccessDeniedError,
    APIError,
    AuthenticationError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ResponseFormatError,
    ServerError,
    TransportError,
    error_from_status_code,
)
from figma_api.models import RGBA, Node, Paint, PaintType, Style, StyleType

__all__ = [
    "APIError",
    "AccessDeniedError",
    "AuthenticationError",
    "ClientTimeout",
    "FigmaClient",
    "InvalidRequestError",
    "NetworkError",
    "Node",
    "NotFoundError",
    "Paint",
    "PaintType",
    "RGBA",
    "RateLimitError",
    "RequestTimeoutError",
    "ResponseFormatError",
    "RetryPolicy",
    "ServerError",
    "Style",
    "StyleType",
    "TransportError",
    "error_from_status_code",
]
