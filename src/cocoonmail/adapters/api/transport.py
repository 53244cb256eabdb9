"""HTTP transport for request descriptors.

Executes a :class:`~cocoonmail.domain.requests.Request` with httpx and
returns the response untouched. Response status codes are not interpreted
here; only transport-level failures are raised.
"""

from __future__ import annotations

import logging
from typing import Final

import httpx

from cocoonmail.domain.errors import DeliveryError
from cocoonmail.domain.requests import Request

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 30.0

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "authorization",
        "bearer",
        "credential",
        "secret",
        "token",
        "key",
    }
)


def _sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Returns a generic message when the original exception text contains
    keywords suggesting sensitive data. The full exception is preserved in
    the chain for DEBUG-level logging.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(FakeExc("Bearer abc123 rejected"))
        'API request failed. Check the Cocoonmail client configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "API request failed. Check the Cocoonmail client configuration."
    return str(exc)


def send_request(
    request: Request,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Response:
    """Execute *request* and return the raw response.

    Args:
        request: Descriptor holding method, URL, headers, query params and body.
        timeout: Timeout in seconds applied to connect, read and write.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        The response as received, whatever its status code.

    Raises:
        DeliveryError: The request could not be completed (connection error,
            timeout, invalid URL).

    Side Effects:
        Performs one HTTP call. Logs the attempt at INFO level; the
        Authorization header is never logged.
    """
    logger.info(
        "Sending API request",
        extra={
            "method": request.method.value,
            "url": request.base_url,
            "body_bytes": len(request.body),
        },
    )

    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.request(
                request.method.value,
                request.base_url,
                headers=request.headers,
                params=request.query_params or None,
                content=request.body or None,
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("API request failed", exc_info=True)
        raise DeliveryError(_sanitize_exception_message(exc)) from exc

    logger.info(
        "API request completed",
        extra={"url": request.base_url, "status_code": response.status_code},
    )
    return response


__all__ = [
    "DEFAULT_TIMEOUT",
    "send_request",
]
