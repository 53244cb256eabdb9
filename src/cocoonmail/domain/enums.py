"""Type-safe domain enums for HTTP methods, regions, length limits and CLI choices."""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods a request descriptor can carry.

    Example:
        >>> HttpMethod.POST.value
        'POST'
        >>> HttpMethod.GET == "GET"
        True
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Region(str, Enum):
    """Data residency regions served by a dedicated API host.

    Identifiers are case-sensitive.

    Example:
        >>> Region("eu") is Region.EU
        True
    """

    EU = "eu"
    GLOBAL = "global"


class LengthLimit(str, Enum):
    """Which RFC 3696 length limit an address breached.

    Example:
        >>> LengthLimit.DOMAIN.label
        'Domain length'
    """

    TOTAL = "total"
    DOMAIN = "domain"
    LOCAL = "local"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return _LENGTH_LIMIT_LABELS[self]


_LENGTH_LIMIT_LABELS = {
    LengthLimit.TOTAL: "Total length",
    LengthLimit.DOMAIN: "Domain length",
    LengthLimit.LOCAL: "Local part length",
}


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "HttpMethod",
    "LengthLimit",
    "OutputFormat",
    "Region",
]
