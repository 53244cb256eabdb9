"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.addresses` - Address parsing and length validation
    * :mod:`.mail` - Mail-send payload model
    * :mod:`.requests` - Request descriptor construction
    * :mod:`.regions` - Data residency routing
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .addresses import (
    MAX_EMAIL_DOMAIN_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_EMAIL_LOCAL_LENGTH,
    parse_email,
    parse_recipients,
)
from .enums import DeployTarget, HttpMethod, LengthLimit, OutputFormat, Region
from .errors import (
    ConfigurationError,
    DeliveryError,
    InvalidRecipientError,
    LengthExceededError,
    MalformedURLError,
    ParseError,
    RoutingError,
    UnsupportedRegionError,
)
from .mail import (
    MailAttachment,
    MailAttachmentRemote,
    MailRecipient,
    MailSendRequest,
    new_mail_attachment,
    new_mail_attachment_remote,
    new_mail_recipient,
    new_mail_send_request,
)
from .regions import REGION_HOSTS, set_data_residency
from .requests import (
    DEFAULT_HOST,
    MAIL_SEND_ENDPOINT,
    ON_BEHALF_OF_HEADER,
    CocoonmailOptions,
    Request,
    get_request,
    get_request_subuser,
    new_send_request,
)

__all__ = [
    # Addresses
    "MAX_EMAIL_DOMAIN_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_EMAIL_LOCAL_LENGTH",
    "parse_email",
    "parse_recipients",
    # Payload
    "MailAttachment",
    "MailAttachmentRemote",
    "MailRecipient",
    "MailSendRequest",
    "new_mail_attachment",
    "new_mail_attachment_remote",
    "new_mail_recipient",
    "new_mail_send_request",
    # Requests
    "DEFAULT_HOST",
    "MAIL_SEND_ENDPOINT",
    "ON_BEHALF_OF_HEADER",
    "CocoonmailOptions",
    "Request",
    "get_request",
    "get_request_subuser",
    "new_send_request",
    # Regions
    "REGION_HOSTS",
    "set_data_residency",
    # Enums
    "DeployTarget",
    "HttpMethod",
    "LengthLimit",
    "OutputFormat",
    "Region",
    # Errors
    "ConfigurationError",
    "DeliveryError",
    "InvalidRecipientError",
    "LengthExceededError",
    "MalformedURLError",
    "ParseError",
    "RoutingError",
    "UnsupportedRegionError",
]
