"""Request descriptor construction for the Cocoonmail HTTP API.

Builds the transport-agnostic :class:`Request` handed to the HTTP adapter:
Bearer authorization, host resolution, and the optional on-behalf-of header
for subuser delegation. Every public constructor funnels through
:func:`_create_request` so the subuser and non-subuser paths cannot drift.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .enums import HttpMethod
from .errors import ConfigurationError

DEFAULT_HOST: Final[str] = "https://webhook.cocoonmail.com"
MAIL_SEND_ENDPOINT: Final[str] = "/webhook/mail/send"
AUTHORIZATION_HEADER: Final[str] = "Authorization"
ON_BEHALF_OF_HEADER: Final[str] = "On-Behalf-Of"


@dataclass(slots=True)
class Request:
    """HTTP request descriptor handed to the transport.

    Attributes:
        method: HTTP method; defaults to GET.
        base_url: Scheme, host and path of the target.
        headers: Header mapping; always holds ``Authorization``.
        query_params: Query string parameters appended by the transport.
        body: Raw request body, typically the encoded mail payload.
    """

    base_url: str
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True, slots=True)
class CocoonmailOptions:
    """Inputs for building a :class:`Request`.

    Attributes:
        key: API key; must not be empty.
        endpoint: Path component starting with ``/``.
        host: Scheme and host; empty selects :data:`DEFAULT_HOST`.
        subuser: Subuser to act on behalf of; empty disables delegation.
    """

    key: str
    endpoint: str
    host: str = ""
    subuser: str = ""


def get_request(key: str, endpoint: str, host: str = "") -> Request:
    """Return a GET request for *endpoint* authorized with *key*.

    Example:
        >>> request = get_request("abc123", "/webhook/mail/send")
        >>> request.base_url
        'https://webhook.cocoonmail.com/webhook/mail/send'
        >>> request.headers
        {'Authorization': 'Bearer abc123'}
    """
    return _create_request(CocoonmailOptions(key, endpoint, host))


def get_request_subuser(key: str, endpoint: str, host: str, subuser: str) -> Request:
    """Like :func:`get_request` but acting on behalf of *subuser*.

    Example:
        >>> get_request_subuser("abc123", "/webhook/mail/send", "", "shop-eu").headers[ON_BEHALF_OF_HEADER]
        'shop-eu'
    """
    return _create_request(CocoonmailOptions(key, endpoint, host, subuser))


def new_send_request(key: str) -> Request:
    """Return a POST request for the mail-send endpoint on the default host.

    Example:
        >>> request = new_send_request("abc123")
        >>> request.method.value, request.base_url
        ('POST', 'https://webhook.cocoonmail.com/webhook/mail/send')
    """
    request = get_request(key, MAIL_SEND_ENDPOINT)
    request.method = HttpMethod.POST
    return request


def _create_request(options: CocoonmailOptions) -> Request:
    """Build a request from options.

    Raises:
        ConfigurationError: When the API key is empty.
    """
    if not options.key:
        raise ConfigurationError("API key must not be empty")

    host = options.host or DEFAULT_HOST
    headers = {AUTHORIZATION_HEADER: f"Bearer {options.key}"}
    if options.subuser:
        headers[ON_BEHALF_OF_HEADER] = options.subuser

    return Request(base_url=host + options.endpoint, headers=headers)


__all__ = [
    "AUTHORIZATION_HEADER",
    "DEFAULT_HOST",
    "MAIL_SEND_ENDPOINT",
    "ON_BEHALF_OF_HEADER",
    "CocoonmailOptions",
    "Request",
    "get_request",
    "get_request_subuser",
    "new_send_request",
]
