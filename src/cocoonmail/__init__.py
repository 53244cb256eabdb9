"""Cocoonmail API client.

Public surface routed through the architectural layers:

- Domain: address validation, payload model, request descriptors, region
  routing, and the exceptions they raise.
- API adapter: the httpx-backed send client and its configuration model.
- Composition: layered configuration loading.
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# API adapter exports
from .adapters.api import (
    CocoonmailConfig,
    SendClient,
    build_send_client,
    new_send_client,
    send_mail,
)

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    DEFAULT_HOST,
    MAIL_SEND_ENDPOINT,
    MAX_EMAIL_DOMAIN_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_EMAIL_LOCAL_LENGTH,
    ConfigurationError,
    DeliveryError,
    InvalidRecipientError,
    LengthExceededError,
    LengthLimit,
    MailAttachment,
    MailAttachmentRemote,
    MailRecipient,
    MailSendRequest,
    MalformedURLError,
    ParseError,
    Region,
    Request,
    RoutingError,
    UnsupportedRegionError,
    get_request,
    get_request_subuser,
    new_mail_attachment,
    new_mail_attachment_remote,
    new_mail_recipient,
    new_mail_send_request,
    new_send_request,
    parse_email,
    parse_recipients,
    set_data_residency,
)

__all__ = [
    "DEFAULT_HOST",
    "MAIL_SEND_ENDPOINT",
    "MAX_EMAIL_DOMAIN_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_EMAIL_LOCAL_LENGTH",
    "CocoonmailConfig",
    "ConfigurationError",
    "DeliveryError",
    "InvalidRecipientError",
    "LengthExceededError",
    "LengthLimit",
    "MailAttachment",
    "MailAttachmentRemote",
    "MailRecipient",
    "MailSendRequest",
    "MalformedURLError",
    "ParseError",
    "Region",
    "Request",
    "RoutingError",
    "SendClient",
    "UnsupportedRegionError",
    "build_send_client",
    "get_config",
    "get_request",
    "get_request_subuser",
    "new_mail_attachment",
    "new_mail_attachment_remote",
    "new_mail_recipient",
    "new_mail_send_request",
    "new_send_client",
    "new_send_request",
    "parse_email",
    "parse_recipients",
    "print_info",
    "send_mail",
    "set_data_residency",
]
