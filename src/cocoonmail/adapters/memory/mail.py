"""In-memory mail adapters for testing.

Contents:
    * :class:`MailSpy` - Captures send calls and answers with canned responses.
    * :func:`load_cocoonmail_config_from_dict_in_memory` - Config loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from ...domain.mail import MailSendRequest
from ...domain.requests import Request
from ..api.client import build_send_client
from ..api.config import CocoonmailConfig
from ..api.payload import get_request_body


@dataclass(slots=True)
class SentMail:
    """One captured send: the settings, the payload, and the built request."""

    config: CocoonmailConfig
    mail: MailSendRequest
    request: Request


def _empty_sent_list() -> list[SentMail]:
    return []


@dataclass
class MailSpy:
    """Records mail sends instead of calling the API.

    The request is built through the production client so tests observe the
    real URL, headers and body. Each test should use its own spy.

    Attributes:
        sent: Captured sends, oldest first.
        status_code: Status of the canned response.
        raise_exception: When set, raised after the send is recorded.

    Example:
        >>> from cocoonmail.domain.mail import new_mail_send_request
        >>> spy = MailSpy()
        >>> spy.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=new_mail_send_request()).status_code
        200
        >>> spy.sent[0].request.base_url
        'https://webhook.cocoonmail.com/webhook/mail/send'
    """

    sent: list[SentMail] = field(default_factory=_empty_sent_list)
    status_code: int = 200
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None

    def send_mail(self, *, config: CocoonmailConfig, mail: MailSendRequest) -> httpx.Response:
        """Record the send and return the canned response.

        Raises:
            ConfigurationError: No API key configured.
            Exception: ``raise_exception`` when set.
        """
        request = replace(build_send_client(config).request, body=get_request_body(mail))
        self.sent.append(SentMail(config=config, mail=mail, request=request))
        if self.raise_exception is not None:
            raise self.raise_exception
        return httpx.Response(
            self.status_code,
            json={"status": "queued"} if self.status_code < 400 else {"error": "rejected"},
            request=httpx.Request(request.method.value, request.base_url),
        )


def load_cocoonmail_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> CocoonmailConfig:
    """Parse the ``[cocoonmail]`` section with the real Pydantic model."""
    section = config_dict.get("cocoonmail", {})
    return CocoonmailConfig.model_validate(section if section else {})


__all__ = [
    "MailSpy",
    "SentMail",
    "load_cocoonmail_config_from_dict_in_memory",
]
