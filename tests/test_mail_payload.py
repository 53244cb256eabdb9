"""Mail-send payload model and its JSON encoding."""

from __future__ import annotations

import orjson
import pytest

from cocoonmail.adapters.api.payload import get_request_body, payload_to_dict
from cocoonmail.domain.mail import (
    MailRecipient,
    MailSendRequest,
    new_mail_attachment,
    new_mail_attachment_remote,
    new_mail_recipient,
    new_mail_send_request,
)

# ======================== Model ========================


@pytest.mark.os_agnostic
def test_new_mail_send_request_has_empty_containers() -> None:
    """Every collection field holds an empty container, never None."""
    mail = new_mail_send_request()

    assert mail.to == []
    assert mail.attachments == []
    assert mail.attachments_remote == []
    assert mail.custom_parameter == {}


@pytest.mark.os_agnostic
def test_new_payloads_do_not_share_containers() -> None:
    """Two fresh payloads never alias each other's lists."""
    first = new_mail_send_request().add_recipient(new_mail_recipient("A", "a@example.com"))
    second = new_mail_send_request()

    assert len(first.to) == 1
    assert second.to == []


@pytest.mark.os_agnostic
def test_new_mail_recipient_has_empty_collections() -> None:
    """Recipients start with empty attributes, lists and tags."""
    recipient = new_mail_recipient("Jane", "jane@example.com")

    assert (recipient.name, recipient.email) == ("Jane", "jane@example.com")
    assert recipient.attributes == {}
    assert recipient.lists == []
    assert recipient.tags == []


@pytest.mark.os_agnostic
def test_repeated_add_calls_accumulate() -> None:
    """add_* calls append; they never replace earlier entries."""
    mail = (
        new_mail_send_request()
        .add_recipient(new_mail_recipient("A", "a@example.com"))
        .add_recipient(new_mail_recipient("B", "b@example.com"), new_mail_recipient("C", "c@example.com"))
        .add_attachment(new_mail_attachment("a.txt", "text/plain", "YQ=="))
        .add_attachment(new_mail_attachment("b.txt", "text/plain", "Yg=="))
        .add_remote_attachment(new_mail_attachment_remote("https://files.example.com/c.pdf"))
    )

    assert [r.email for r in mail.to] == ["a@example.com", "b@example.com", "c@example.com"]
    assert [a.filename for a in mail.attachments] == ["a.txt", "b.txt"]
    assert len(mail.attachments_remote) == 1


@pytest.mark.os_agnostic
def test_setters_return_the_same_instance() -> None:
    """Fluent setters mutate and return the payload itself."""
    mail = new_mail_send_request()

    assert mail.set_reply_to("ops@example.com") is mail
    assert mail.set_scheduled_at("2030-01-01T09:00:00Z") is mail
    assert mail.set_enable_view_in_browser(True) is mail
    assert (mail.reply_to, mail.scheduled_at, mail.enable_view_in_browser) == (
        "ops@example.com",
        "2030-01-01T09:00:00Z",
        True,
    )


@pytest.mark.os_agnostic
def test_set_custom_parameter_replaces_an_existing_key() -> None:
    """Setting the same key twice keeps the latest value."""
    mail = new_mail_send_request().set_custom_parameter("plan", "free").set_custom_parameter("plan", "pro")

    assert mail.custom_parameter == {"plan": "pro"}


@pytest.mark.os_agnostic
def test_tracking_setters_toggle_their_flags() -> None:
    """Each boolean setter drives its own field."""
    mail = (
        new_mail_send_request()
        .set_allow_click_tracking(True)
        .set_allow_open_tracking(True)
        .set_bypass_bounce_control(True)
        .set_bypass_unsubscribe_list(True)
    )

    assert mail.allow_click_tracking
    assert mail.allow_open_tracking
    assert mail.bypass_bounce_control
    assert mail.bypass_unsubscribe_list
    assert not mail.enable_view_in_browser


# ======================== Encoding ========================


@pytest.mark.os_agnostic
def test_empty_payload_encodes_to_empty_object() -> None:
    """Nothing set means nothing sent."""
    assert get_request_body(new_mail_send_request()) == b"{}"


@pytest.mark.os_agnostic
def test_payload_encoding_omits_empty_values(sample_mail: MailSendRequest) -> None:
    """Only populated fields appear, in recipients as well as at the top level."""
    decoded = orjson.loads(get_request_body(sample_mail.set_allow_open_tracking(True)))

    assert decoded == {
        "to": [{"email": "jane@example.com", "name": "Jane Doe"}],
        "custom_parameter": {"order_id": 42},
        "allow_open_tracking": True,
    }


@pytest.mark.os_agnostic
def test_attachment_content_type_uses_wire_name() -> None:
    """content_type is sent as contentType."""
    mail = new_mail_send_request().add_attachment(new_mail_attachment("r.pdf", "application/pdf", "JVBERi0="))

    assert payload_to_dict(mail)["attachments"] == [
        {"filename": "r.pdf", "contentType": "application/pdf", "data": "JVBERi0="}
    ]


@pytest.mark.os_agnostic
def test_recipient_address_lines_use_wire_names() -> None:
    """address1 and address2 are sent capitalised."""
    recipient = MailRecipient(email="jane@example.com", address1="1 Main St", address2="Apt 2", age=40)

    assert payload_to_dict(recipient) == {
        "email": "jane@example.com",
        "age": 40,
        "Address1": "1 Main St",
        "Address2": "Apt 2",
    }


@pytest.mark.os_agnostic
def test_remote_attachments_are_encoded_as_objects() -> None:
    """Remote attachments become objects holding remote_link."""
    mail = new_mail_send_request().add_remote_attachment(new_mail_attachment_remote("https://x.example/a.pdf"))

    assert payload_to_dict(mail) == {"attachments_remote": [{"remote_link": "https://x.example/a.pdf"}]}


@pytest.mark.os_agnostic
def test_custom_parameter_contents_are_sent_verbatim() -> None:
    """Falsy values inside custom parameters are kept; only the outer empty mapping is dropped."""
    mail = new_mail_send_request().set_custom_parameter("count", 0).set_custom_parameter("note", "")

    assert orjson.loads(get_request_body(mail)) == {"custom_parameter": {"count": 0, "note": ""}}


@pytest.mark.os_agnostic
def test_unserializable_custom_parameter_raises() -> None:
    """Values orjson cannot encode surface as JSONEncodeError."""
    mail = new_mail_send_request().set_custom_parameter("bad", object())

    with pytest.raises(orjson.JSONEncodeError):
        get_request_body(mail)
