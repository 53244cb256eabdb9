"""Email address parsing and RFC 3696 length validation.

Accepts the address forms used in mail headers::

    local@domain
    local@domain (Display Name)
    Display Name <local@domain>

Parsing is delegated to the RFC 5322 header parser of :mod:`email`, which
decodes RFC 2047 encoded words in display names and unquotes quoted local
parts. Obsolete syntax is accepted, as RFC 5322 requires of parsers; any
other defect the parser reports rejects the address.

Length limits are enforced as hard limits on the unquoted address, checked
in a fixed order (total, then domain, then local) so the first violation
reported is deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence
from email import errors
from email.header import decode_header, make_header
from email.headerregistry import Address, HeaderRegistry
from email.utils import parseaddr
from typing import Final

from .enums import LengthLimit
from .errors import LengthExceededError, ParseError
from .mail import MailRecipient, new_mail_recipient

# RFC 3696 section 3
MAX_EMAIL_DOMAIN_LENGTH: Final[int] = 255
MAX_EMAIL_LOCAL_LENGTH: Final[int] = 64
MAX_EMAIL_LENGTH: Final[int] = MAX_EMAIL_DOMAIN_LENGTH + MAX_EMAIL_LOCAL_LENGTH + 1

_HEADERS: Final = HeaderRegistry()
# Obsolete forms ("John Q. Public") and UTF-8 local parts do not invalidate an address.
_TOLERATED_DEFECTS: Final = (errors.ObsoleteHeaderDefect, errors.NonASCIILocalPartDefect)


def parse_email(address: str) -> MailRecipient:
    r"""Parse and validate a single RFC 5322 address.

    Args:
        address: Bare ``local@domain`` or ``Name <local@domain>`` string. A
            comment after a bare address is taken as its display name.

    Returns:
        Recipient holding the decoded display name (empty when absent) and
        the normalized ``local@domain`` address. The local part is quoted
        only when it cannot be written as a dot-atom.

    Raises:
        ParseError: The string is not a syntactically valid address.
        LengthExceededError: The address, its domain, or its local part is
            longer than RFC 3696 allows.

    Example:
        >>> recipient = parse_email("Jane Doe <jane@example.com>")
        >>> recipient.name, recipient.email
        ('Jane Doe', 'jane@example.com')
        >>> parse_email("jane@example.com").name
        ''
        >>> parse_email("=?utf-8?q?J=C3=A9r=C3=B4me?= <jerome@example.com>").name
        'Jérôme'
        >>> parse_email('"jane"@example.com').email
        'jane@example.com'
        >>> parse_email('"Doe, Jane" <"jane@home"@example.com>').email
        '"jane@home"@example.com'
        >>> parse_email("jane.example.com")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: missing '@' in address
    """
    parsed = _parse_mailbox(address)
    _check_lengths(parsed.username, parsed.domain)
    name = parsed.display_name or _comment_name(address)
    return new_mail_recipient(name, parsed.addr_spec)


def parse_recipients(addresses: str | Sequence[str]) -> list[MailRecipient]:
    """Parse a single address or a sequence of addresses.

    Args:
        addresses: One address string, or a sequence of them.

    Returns:
        Parsed recipients in input order.

    Raises:
        ParseError: When any address is malformed.
        LengthExceededError: When any address breaches a length limit.

    Example:
        >>> [r.email for r in parse_recipients(["a@example.com", "B <b@example.com>"])]
        ['a@example.com', 'b@example.com']
    """
    address_list = [addresses] if isinstance(addresses, str) else list(addresses)
    return [parse_email(address) for address in address_list]


def _parse_mailbox(address: str) -> Address:
    """Return the single mailbox in *address*, rejecting lists and groups."""
    try:
        header = _HEADERS("to", address)
    except (errors.HeaderParseError, ValueError) as exc:
        raise ParseError(_describe_syntax_error(address)) from exc

    fatal = [defect for defect in header.defects if not isinstance(defect, _TOLERATED_DEFECTS)]
    if fatal or len(header.groups) != 1 or header.groups[0].display_name is not None:
        raise ParseError(_describe_syntax_error(address))
    (parsed,) = header.addresses
    if not parsed.domain:
        raise ParseError(_describe_syntax_error(address))
    return parsed


def _check_lengths(local: str, domain: str) -> None:
    """Raise on the first breached limit: total, then domain, then local."""
    checks = (
        (LengthLimit.TOTAL, MAX_EMAIL_LENGTH, len(local) + 1 + len(domain)),
        (LengthLimit.DOMAIN, MAX_EMAIL_DOMAIN_LENGTH, len(domain)),
        (LengthLimit.LOCAL, MAX_EMAIL_LOCAL_LENGTH, len(local)),
    )
    for kind, limit, actual in checks:
        if actual > limit:
            raise LengthExceededError(kind, limit, actual)


def _comment_name(address: str) -> str:
    """Return the decoded comment trailing a bare address, or ``""``.

    Example:
        >>> _comment_name("jane@example.com (Jane Doe)")
        'Jane Doe'
        >>> _comment_name("jane@example.com")
        ''
    """
    comment, _ = parseaddr(address)
    if not comment:
        return ""
    try:
        return str(make_header(decode_header(comment)))
    except (LookupError, UnicodeDecodeError) as exc:
        raise ParseError("undecodable comment in address") from exc


def _describe_syntax_error(address: str) -> str:
    """Return a short reason why *address* failed to parse.

    Example:
        >>> _describe_syntax_error("")
        'empty address'
        >>> _describe_syntax_error("Jane <jane@example.com")
        'unbalanced angle brackets in address'
        >>> _describe_syntax_error("a@b@example.com")
        'invalid address syntax'
    """
    if not address.strip():
        return "empty address"
    if "@" not in address:
        return "missing '@' in address"
    if address.count("<") != address.count(">"):
        return "unbalanced angle brackets in address"
    return "invalid address syntax"


__all__ = [
    "MAX_EMAIL_DOMAIN_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_EMAIL_LOCAL_LENGTH",
    "parse_email",
    "parse_recipients",
]
