"""JSON encoding of the mail-send payload.

Field names follow the API's wire format. Empty values (empty strings,
zero, ``False``, empty lists and mappings) are left out of each object, as
the API's reference client does; the contents of free-form mappings such as
``custom_parameter`` are sent exactly as given.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any

import orjson

from cocoonmail.domain.mail import MailSendRequest

# Payload attributes whose wire name differs from the Python attribute name.
_WIRE_NAMES = {
    "content_type": "contentType",
    "address1": "Address1",
    "address2": "Address2",
}


def payload_to_dict(payload: Any) -> dict[str, Any]:
    """Convert a payload dataclass to a JSON-ready dict, omitting empty values.

    Example:
        >>> from cocoonmail.domain.mail import new_mail_attachment, new_mail_send_request
        >>> mail = new_mail_send_request().add_attachment(new_mail_attachment("a.txt", "text/plain", "aGk="))
        >>> payload_to_dict(mail)
        {'attachments': [{'filename': 'a.txt', 'contentType': 'text/plain', 'data': 'aGk='}]}
    """
    result: dict[str, Any] = {}
    for field in fields(payload):
        value = getattr(payload, field.name)
        if not value:
            continue
        if isinstance(value, list):
            value = [payload_to_dict(item) if is_dataclass(item) else item for item in value]
        result[_WIRE_NAMES.get(field.name, field.name)] = value
    return result


def get_request_body(mail: MailSendRequest) -> bytes:
    """Serialize *mail* to the JSON request body.

    Raises:
        orjson.JSONEncodeError: A custom parameter or attribute value is not
            JSON serializable.

    Example:
        >>> from cocoonmail.domain.mail import new_mail_send_request
        >>> get_request_body(new_mail_send_request().set_reply_to("ops@example.com"))
        b'{"reply_to":"ops@example.com"}'
    """
    return orjson.dumps(payload_to_dict(mail))


__all__ = [
    "get_request_body",
    "payload_to_dict",
]
