"""Mail-send payload model.

Plain data classes describing the body of a mail-send call. Collection
fields always hold a container (never ``None``), and the fluent ``add_*`` /
``set_*`` methods return the instance so calls can be chained; repeated
``add_*`` calls accumulate.

Contents:
    * :class:`MailSendRequest` - the payload of one send call.
    * :class:`MailRecipient` - a recipient with optional contact attributes.
    * :class:`MailAttachment` - an inline (base64) attachment.
    * :class:`MailAttachmentRemote` - an attachment fetched from a URL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class MailRecipient:
    """Recipient details and contact attributes.

    Instances returned by :func:`cocoonmail.domain.addresses.parse_email`
    carry a validated ``email``.

    Example:
        >>> recipient = new_mail_recipient("Jane", "jane@example.com")
        >>> recipient.tags
        []
    """

    email: str = ""
    name: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    lists: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    gender: str = ""
    age: int = 0
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""
    designation: str = ""
    company: str = ""
    industry: str = ""
    description: str = ""
    anniversary_date: str = ""


@dataclass(slots=True)
class MailAttachment:
    """File attachment with base64-encoded ``data``."""

    filename: str = ""
    content_type: str = ""
    data: str = ""


@dataclass(slots=True)
class MailAttachmentRemote:
    """Attachment hosted externally and fetched by the API."""

    remote_link: str = ""


@dataclass(slots=True)
class MailSendRequest:
    """Payload for the mail-send endpoint.

    Example:
        >>> mail = (
        ...     new_mail_send_request()
        ...     .add_recipient(new_mail_recipient("Jane", "jane@example.com"))
        ...     .set_custom_parameter("order", 42)
        ...     .set_allow_open_tracking(True)
        ... )
        >>> len(mail.to), mail.custom_parameter, mail.allow_open_tracking
        (1, {'order': 42}, True)
    """

    transactional_id: str = ""
    to: list[MailRecipient] = field(default_factory=list)
    reply_to: str = ""
    custom_parameter: dict[str, Any] = field(default_factory=dict)
    attachments: list[MailAttachment] = field(default_factory=list)
    attachments_remote: list[MailAttachmentRemote] = field(default_factory=list)
    add_email_address_to_contact: bool = False
    scheduled_at: str = ""
    allow_click_tracking: bool = False
    allow_open_tracking: bool = False
    bypass_bounce_control: bool = False
    bypass_unsubscribe_list: bool = False
    enable_view_in_browser: bool = False

    def add_recipient(self, *recipients: MailRecipient) -> MailSendRequest:
        """Append one or more recipients."""
        self.to.extend(recipients)
        return self

    def add_attachment(self, *attachments: MailAttachment) -> MailSendRequest:
        """Append one or more file attachments."""
        self.attachments.extend(attachments)
        return self

    def add_remote_attachment(self, *attachments: MailAttachmentRemote) -> MailSendRequest:
        """Append one or more remote attachments."""
        self.attachments_remote.extend(attachments)
        return self

    def set_reply_to(self, reply_to: str) -> MailSendRequest:
        self.reply_to = reply_to
        return self

    def set_custom_parameter(self, key: str, value: Any) -> MailSendRequest:
        """Add or replace one custom template parameter."""
        self.custom_parameter[key] = value
        return self

    def set_scheduled_at(self, scheduled_at: str) -> MailSendRequest:
        """Schedule delivery; ``scheduled_at`` is an RFC 3339 timestamp string."""
        self.scheduled_at = scheduled_at
        return self

    def set_allow_click_tracking(self, enable: bool) -> MailSendRequest:
        self.allow_click_tracking = enable
        return self

    def set_allow_open_tracking(self, enable: bool) -> MailSendRequest:
        self.allow_open_tracking = enable
        return self

    def set_bypass_bounce_control(self, enable: bool) -> MailSendRequest:
        self.bypass_bounce_control = enable
        return self

    def set_bypass_unsubscribe_list(self, enable: bool) -> MailSendRequest:
        self.bypass_unsubscribe_list = enable
        return self

    def set_enable_view_in_browser(self, enable: bool) -> MailSendRequest:
        self.enable_view_in_browser = enable
        return self


def new_mail_send_request() -> MailSendRequest:
    """Return an empty payload with empty (not ``None``) collections.

    Example:
        >>> mail = new_mail_send_request()
        >>> mail.to, mail.attachments, mail.attachments_remote, mail.custom_parameter
        ([], [], [], {})
    """
    return MailSendRequest()


def new_mail_recipient(name: str, email: str) -> MailRecipient:
    """Return a recipient with empty attribute, list and tag collections."""
    return MailRecipient(email=email, name=name)


def new_mail_attachment(filename: str, content_type: str, data: str) -> MailAttachment:
    return MailAttachment(filename=filename, content_type=content_type, data=data)


def new_mail_attachment_remote(remote_link: str) -> MailAttachmentRemote:
    return MailAttachmentRemote(remote_link=remote_link)


__all__ = [
    "MailAttachment",
    "MailAttachmentRemote",
    "MailRecipient",
    "MailSendRequest",
    "new_mail_attachment",
    "new_mail_attachment_remote",
    "new_mail_recipient",
    "new_mail_send_request",
]
