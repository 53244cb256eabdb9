"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .enums import LengthLimit

if TYPE_CHECKING:
    from .requests import Request


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a required credential is absent or the settings are
    logically inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> err = ConfigurationError("API key must not be empty")
        >>> str(err)
        'API key must not be empty'
    """


class DeliveryError(Exception):
    """The HTTP transport failed before a response was received.

    Raised for connection failures, timeouts and other transport-level
    errors. HTTP error statuses are not delivery errors: the response is
    handed back to the caller as-is.

    Example:
        >>> err = DeliveryError("Connection refused by webhook.cocoonmail.com")
        >>> str(err)
        'Connection refused by webhook.cocoonmail.com'
    """


class InvalidRecipientError(ValueError):
    """Email address validation failure.

    Base class for :class:`ParseError` and :class:`LengthExceededError`.
    Inherits from ValueError so generic ``except ValueError`` handlers
    continue to catch it.

    Example:
        >>> err = InvalidRecipientError("Invalid recipient: not-an-email")
        >>> isinstance(err, ValueError)
        True
    """


class ParseError(InvalidRecipientError):
    """The address string is not a syntactically valid RFC 5322 address.

    Example:
        >>> str(ParseError("missing '@' in address"))
        "missing '@' in address"
    """


class LengthExceededError(InvalidRecipientError):
    """An address, its domain, or its local part is longer than allowed.

    Attributes:
        limit_kind: Which limit was breached.
        limit_value: The maximum permitted length for that limit.
        actual_value: The measured length.

    Example:
        >>> err = LengthExceededError(LengthLimit.LOCAL, 64, 65)
        >>> str(err)
        'Invalid email length. Local part length should not exceed 64 characters.'
        >>> err.actual_value
        65
    """

    def __init__(self, limit_kind: LengthLimit, limit_value: int, actual_value: int) -> None:
        self.limit_kind = limit_kind
        self.limit_value = limit_value
        self.actual_value = actual_value
        super().__init__(
            f"Invalid email length. {limit_kind.label} should not exceed {limit_value} characters."
        )


class RoutingError(ValueError):
    """A request could not be routed to a regional host.

    The request passed to the router is kept on :attr:`request` untouched,
    so callers that catch the error still hold a usable descriptor.
    """

    def __init__(self, message: str, *, request: Request | None = None) -> None:
        super().__init__(message)
        self.request = request


class UnsupportedRegionError(RoutingError):
    """The requested region is not one of the recognized identifiers.

    Example:
        >>> err = UnsupportedRegionError("us", ("eu", "global"))
        >>> str(err)
        "Unsupported region 'us': region can only be one of 'eu', 'global'"
        >>> err.requested
        'us'
    """

    def __init__(self, requested: str, allowed: Sequence[str], *, request: Request | None = None) -> None:
        self.requested = requested
        self.allowed = tuple(allowed)
        choices = ", ".join(repr(region) for region in self.allowed)
        super().__init__(f"Unsupported region {requested!r}: region can only be one of {choices}", request=request)


class MalformedURLError(RoutingError):
    """The request base URL could not be parsed.

    Example:
        >>> err = MalformedURLError("https://[::1/send")
        >>> err.url
        'https://[::1/send'
    """

    def __init__(self, url: str, reason: str = "", *, request: Request | None = None) -> None:
        self.url = url
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed base URL {url!r}{detail}", request=request)


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "InvalidRecipientError",
    "LengthExceededError",
    "MalformedURLError",
    "ParseError",
    "RoutingError",
    "UnsupportedRegionError",
]
