"""Mail-send client.

Combines the prepared mail-send request with payload encoding and the HTTP
transport.

Contents:
    * :class:`SendClient` - holds the prepared request and sends payloads.
    * :func:`new_send_client` - client for an API key on the default host.
    * :func:`build_send_client` - client built from :class:`CocoonmailConfig`.
    * :func:`send_mail` - one-shot send using configured settings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

import httpx

from cocoonmail.domain.enums import HttpMethod
from cocoonmail.domain.errors import ConfigurationError
from cocoonmail.domain.mail import MailSendRequest
from cocoonmail.domain.regions import set_data_residency
from cocoonmail.domain.requests import MAIL_SEND_ENDPOINT, Request, get_request_subuser, new_send_request

from .config import CocoonmailConfig
from .payload import get_request_body
from .transport import DEFAULT_TIMEOUT, send_request

logger = logging.getLogger(__name__)

RequestSender = Callable[..., httpx.Response]
"""Callable executing a :class:`Request`; :func:`send_request` in production."""


@dataclass(slots=True)
class SendClient:
    """Sends mail-send payloads through a prepared request.

    The stored request is treated as a template: each :meth:`send` works on
    a copy carrying the encoded payload, so one client can send many mails.

    Example:
        >>> client = new_send_client("abc123")
        >>> client.request.method.value, client.request.base_url
        ('POST', 'https://webhook.cocoonmail.com/webhook/mail/send')
    """

    request: Request
    timeout: float = DEFAULT_TIMEOUT
    sender: RequestSender = send_request

    def send(self, mail: MailSendRequest) -> httpx.Response:
        """Encode *mail* into the request body and send it.

        Returns:
            The API response, whatever its status code.

        Raises:
            DeliveryError: The transport failed.
        """
        request = replace(
            self.request,
            headers=dict(self.request.headers),
            query_params=dict(self.request.query_params),
            body=get_request_body(mail),
        )
        return self.sender(request, timeout=self.timeout)


def new_send_client(key: str) -> SendClient:
    """Return a client for the mail-send endpoint on the default host.

    Raises:
        ConfigurationError: When *key* is empty.
    """
    return SendClient(new_send_request(key))


def build_send_client(config: CocoonmailConfig, *, sender: RequestSender | None = None) -> SendClient:
    """Return a client configured from *config*.

    The request is built for ``config.host`` (default host when empty) and
    ``config.subuser``; when ``config.region`` is set, the request is then
    routed to that region's host, which takes precedence over ``host``.
    *sender* defaults to :func:`send_request`.

    Raises:
        ConfigurationError: No API key configured.

    Example:
        >>> client = build_send_client(CocoonmailConfig(api_key="abc123", region="eu", subuser="shop"))
        >>> client.request.base_url
        'https://api.eu.cocoonmail.com/webhook/mail/send'
        >>> client.request.headers["On-Behalf-Of"]
        'shop'
    """
    if not config.api_key:
        raise ConfigurationError("No API key configured (cocoonmail.api_key is empty)")

    request = get_request_subuser(config.api_key, MAIL_SEND_ENDPOINT, config.host, config.subuser)
    request.method = HttpMethod.POST
    if config.region is not None:
        request = set_data_residency(request, config.region)
    return SendClient(request, timeout=config.timeout, sender=sender or send_request)


def send_mail(*, config: CocoonmailConfig, mail: MailSendRequest) -> httpx.Response:
    """Send *mail* using the configured API settings.

    Args:
        config: Client settings (API key, host, subuser, region, timeout).
        mail: Payload to send.

    Returns:
        The API response, passed through unparsed.

    Raises:
        ConfigurationError: No API key configured.
        DeliveryError: The transport failed.

    Side Effects:
        Performs one HTTP call. Logs the attempt at INFO level.
    """
    client = build_send_client(config)
    logger.info(
        "Sending mail",
        extra={
            "transactional_id": mail.transactional_id,
            "recipient_count": len(mail.to),
            "attachment_count": len(mail.attachments) + len(mail.attachments_remote),
            "region": config.region.value if config.region is not None else None,
        },
    )
    response = client.send(mail)
    if response.is_success:
        logger.info("Mail accepted", extra={"status_code": response.status_code})
    else:
        logger.warning("Mail rejected by API", extra={"status_code": response.status_code})
    return response


__all__ = [
    "RequestSender",
    "SendClient",
    "build_send_client",
    "new_send_client",
    "send_mail",
]
