"""API adapter - Cocoonmail HTTP API access.

Structure:
    * :mod:`.config` - Client configuration model and loader
    * :mod:`.payload` - JSON encoding of the mail-send payload
    * :mod:`.transport` - httpx execution of request descriptors
    * :mod:`.client` - Mail-send client and one-shot send function
"""

from __future__ import annotations

from .client import SendClient, build_send_client, new_send_client, send_mail
from .config import CocoonmailConfig, load_cocoonmail_config_from_dict
from .payload import get_request_body, payload_to_dict
from .transport import DEFAULT_TIMEOUT, send_request

__all__ = [
    "DEFAULT_TIMEOUT",
    "CocoonmailConfig",
    "SendClient",
    "build_send_client",
    "get_request_body",
    "load_cocoonmail_config_from_dict",
    "new_send_client",
    "payload_to_dict",
    "send_mail",
    "send_request",
]
