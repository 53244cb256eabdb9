"""Mail-send client: building from settings and sending payloads."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

import orjson
import pytest

from cocoonmail.adapters.api.client import SendClient, build_send_client, new_send_client, send_mail
from cocoonmail.adapters.api.config import CocoonmailConfig
from cocoonmail.adapters.api.transport import send_request
from cocoonmail.domain.enums import HttpMethod
from cocoonmail.domain.errors import ConfigurationError
from cocoonmail.domain.mail import MailSendRequest, new_mail_send_request
from cocoonmail.domain.requests import Request

if TYPE_CHECKING:
    from conftest import RecordingTransport


@pytest.mark.os_agnostic
def test_new_send_client_targets_mail_send_on_the_default_host() -> None:
    """The key is all a default client needs."""
    client = new_send_client("abc123")

    assert client.request.method is HttpMethod.POST
    assert client.request.base_url == "https://webhook.cocoonmail.com/webhook/mail/send"
    assert client.request.headers["Authorization"] == "Bearer abc123"


@pytest.mark.os_agnostic
def test_new_send_client_rejects_an_empty_key() -> None:
    """An empty key fails before any request exists."""
    with pytest.raises(ConfigurationError):
        new_send_client("")


@pytest.mark.os_agnostic
def test_build_send_client_requires_an_api_key() -> None:
    """Settings without a key are a configuration problem."""
    with pytest.raises(ConfigurationError, match="No API key configured"):
        build_send_client(CocoonmailConfig())


@pytest.mark.os_agnostic
def test_build_send_client_applies_host_subuser_and_timeout() -> None:
    """Custom host, subuser and timeout all reach the client."""
    client = build_send_client(
        CocoonmailConfig(api_key="abc123", host="https://sandbox.example.com", subuser="shop", timeout=5)
    )

    assert client.request.base_url == "https://sandbox.example.com/webhook/mail/send"
    assert client.request.headers["On-Behalf-Of"] == "shop"
    assert client.timeout == 5.0


@pytest.mark.os_agnostic
def test_region_takes_precedence_over_host() -> None:
    """A configured region routes to its host whatever host is set."""
    client = build_send_client(CocoonmailConfig(api_key="abc123", host="https://sandbox.example.com", region="eu"))

    assert client.request.base_url == "https://api.eu.cocoonmail.com/webhook/mail/send"


@pytest.mark.os_agnostic
def test_send_encodes_the_payload_into_a_copy_of_the_request(sample_mail: MailSendRequest) -> None:
    """The stored request stays a bodiless template."""
    seen: list[tuple[Request, float]] = []

    def _sender(request: Request, *, timeout: float) -> Any:
        seen.append((request, timeout))
        return "response"

    client = SendClient(new_send_client("abc123").request, timeout=7.0, sender=_sender)

    assert client.send(sample_mail) == "response"
    request, timeout = seen[0]
    assert orjson.loads(request.body)["custom_parameter"] == {"order_id": 42}
    assert timeout == 7.0
    assert client.request.body == b""


@pytest.mark.os_agnostic
def test_sender_changing_headers_leaves_the_template_untouched(sample_mail: MailSendRequest) -> None:
    """Headers and query parameters of a sent request are copies."""

    def _sender(request: Request, *, timeout: float) -> Any:
        request.headers["X-Trace"] = "1"
        request.query_params["debug"] = "1"
        return "response"

    client = SendClient(new_send_client("abc123").request, sender=_sender)
    client.send(sample_mail)

    assert client.request.headers == {"Authorization": "Bearer abc123"}
    assert client.request.query_params == {}


@pytest.mark.os_agnostic
def test_one_client_sends_many_mails(recording_transport: RecordingTransport) -> None:
    """Each send carries only its own payload."""
    sender = partial(send_request, transport=recording_transport.build())
    client = build_send_client(CocoonmailConfig(api_key="abc123"), sender=sender)

    client.send(new_mail_send_request().set_reply_to("a@example.com"))
    client.send(new_mail_send_request().set_reply_to("b@example.com"))

    assert recording_transport.requests is not None
    bodies = [orjson.loads(r.content) for r in recording_transport.requests]
    assert bodies == [{"reply_to": "a@example.com"}, {"reply_to": "b@example.com"}]


@pytest.mark.os_agnostic
def test_send_mail_returns_the_api_response(
    monkeypatch: pytest.MonkeyPatch,
    recording_transport: RecordingTransport,
    sample_mail: MailSendRequest,
) -> None:
    """send_mail performs one request and hands back the response."""
    import cocoonmail.adapters.api.client as client_mod

    recording_transport.status_code = 202
    recording_transport.json_body = {"status": "queued"}
    monkeypatch.setattr(client_mod, "send_request", partial(send_request, transport=recording_transport.build()))

    response = send_mail(config=CocoonmailConfig(api_key="abc123", region="eu"), mail=sample_mail)

    assert response.status_code == 202
    assert recording_transport.requests is not None
    assert str(recording_transport.requests[0].url) == "https://api.eu.cocoonmail.com/webhook/mail/send"
