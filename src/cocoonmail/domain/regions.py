"""Data residency routing.

Rewrites a request so it is served by a region-specific API host while the
endpoint path stays the same. Only the ``eu`` and ``global`` regions exist
today; ``global`` is the default host.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Final
from urllib.parse import urlsplit

from .enums import Region
from .errors import MalformedURLError, UnsupportedRegionError
from .requests import DEFAULT_HOST, Request

REGION_HOSTS: Final[Mapping[str, str]] = MappingProxyType(
    {
        Region.EU.value: "https://api.eu.cocoonmail.com",
        Region.GLOBAL.value: DEFAULT_HOST,
    }
)


def set_data_residency(request: Request, region: str | Region) -> Request:
    """Return a copy of *request* pointed at the host for *region*.

    The path of ``request.base_url`` is kept; scheme, host, query and
    fragment are replaced by the regional host. Applying the same region
    twice gives the same result as applying it once. *request* itself is
    never modified.

    Args:
        request: Previously built request descriptor.
        region: ``"eu"`` or ``"global"`` (case-sensitive), or a :class:`Region`.

    Returns:
        New request whose ``base_url`` targets the regional host.

    Raises:
        UnsupportedRegionError: *region* is not a recognized identifier.
        MalformedURLError: ``request.base_url`` cannot be parsed.

    Both exceptions carry the untouched input on their ``request`` attribute.

    Example:
        >>> from cocoonmail.domain.requests import new_send_request
        >>> routed = set_data_residency(new_send_request("abc123"), "eu")
        >>> routed.base_url
        'https://api.eu.cocoonmail.com/webhook/mail/send'
        >>> set_data_residency(routed, "eu").base_url == routed.base_url
        True
    """
    region_key = region.value if isinstance(region, Region) else region
    regional_host = REGION_HOSTS.get(region_key)
    if regional_host is None:
        raise UnsupportedRegionError(region_key, tuple(REGION_HOSTS), request=request)

    try:
        endpoint = extract_endpoint(request.base_url)
    except ValueError as exc:
        raise MalformedURLError(request.base_url, str(exc), request=request) from exc

    return replace(
        request,
        base_url=regional_host + endpoint,
        headers=dict(request.headers),
        query_params=dict(request.query_params),
    )


def extract_endpoint(link: str) -> str:
    """Return the path component of *link*.

    Raises:
        ValueError: *link* contains control characters, an invalid IPv6
            host, or a non-numeric or out-of-range port.

    Example:
        >>> extract_endpoint("https://webhook.cocoonmail.com/webhook/mail/send?x=1#top")
        '/webhook/mail/send'
    """
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in link):
        raise ValueError("invalid control character in URL")
    parts = urlsplit(link)
    # Accessing the port validates it.
    _ = parts.port
    return parts.path


__all__ = [
    "REGION_HOSTS",
    "extract_endpoint",
    "set_data_residency",
]
