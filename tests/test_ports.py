"""Port behavioral contract tests for the in-memory adapters.

Production adapters are exercised through the CLI and client tests; static
conformance is asserted in the composition and memory packages.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from lib_layered_config import Config

from cocoonmail.adapters.api.config import CocoonmailConfig
from cocoonmail.adapters.memory import (
    MailSpy,
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_cocoonmail_config_from_dict_in_memory,
)
from cocoonmail.composition import AppServices, build_production, build_testing
from cocoonmail.domain.enums import DeployTarget, Region
from cocoonmail.domain.errors import ConfigurationError, DeliveryError
from cocoonmail.domain.mail import MailSendRequest

# ======================== Configuration adapters ========================


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """The in-memory loader yields an empty Config for any profile."""
    config = get_config_in_memory(profile="staging")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_get_default_config_path_in_memory_returns_toml_path() -> None:
    """The synthetic default path names a TOML file."""
    path = get_default_config_path_in_memory()

    assert isinstance(path, Path)
    assert path.name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_deploy_configuration_in_memory_writes_nothing() -> None:
    """Deploying in memory reports no created files."""
    assert deploy_configuration_in_memory(targets=[DeployTarget.USER], force=True) == []


@pytest.mark.os_agnostic
def test_display_and_logging_in_memory_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """Neither no-op adapter prints."""
    display_config_in_memory(Config({"cocoonmail": {}}, {}))
    init_logging_in_memory(Config({}, {}))

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_load_config_in_memory_parses_section() -> None:
    """The section is validated with the real model."""
    config = load_cocoonmail_config_from_dict_in_memory({"cocoonmail": {"api_key": "abc123", "region": "eu"}})

    assert config.api_key == "abc123"
    assert config.region is Region.EU


@pytest.mark.os_agnostic
def test_load_config_in_memory_without_section_gives_defaults() -> None:
    """A missing section yields the model defaults."""
    assert load_cocoonmail_config_from_dict_in_memory({}) == CocoonmailConfig()


# ======================== MailSpy ========================


@pytest.mark.os_agnostic
def test_mail_spy_records_built_request(sample_mail: MailSendRequest) -> None:
    """The spy captures the request the production client would send."""
    spy = MailSpy()

    response = spy.send_mail(config=CocoonmailConfig(api_key="abc123", subuser="shop"), mail=sample_mail)

    assert response.status_code == 200
    assert response.json() == {"status": "queued"}
    sent = spy.sent[0]
    assert sent.mail is sample_mail
    assert sent.request.headers["Authorization"] == "Bearer abc123"
    assert sent.request.headers["On-Behalf-Of"] == "shop"
    assert b"jane@example.com" in sent.request.body


@pytest.mark.os_agnostic
def test_mail_spy_answers_with_configured_status(sample_mail: MailSendRequest) -> None:
    """An error status carries an error body."""
    spy = MailSpy(status_code=400)

    response = spy.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=sample_mail)

    assert response.status_code == 400
    assert response.json() == {"error": "rejected"}


@pytest.mark.os_agnostic
def test_mail_spy_raises_configured_exception_after_recording(sample_mail: MailSendRequest) -> None:
    """``raise_exception`` fires after the send is captured."""
    spy = MailSpy(raise_exception=DeliveryError("connection refused"))

    with pytest.raises(DeliveryError):
        spy.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=sample_mail)

    assert len(spy.sent) == 1


@pytest.mark.os_agnostic
def test_mail_spy_requires_api_key(sample_mail: MailSendRequest) -> None:
    """Like the real client, the spy refuses an empty key."""
    spy = MailSpy()

    with pytest.raises(ConfigurationError):
        spy.send_mail(config=CocoonmailConfig(), mail=sample_mail)

    assert spy.sent == []


@pytest.mark.os_agnostic
def test_mail_spy_clear_resets_state(sample_mail: MailSendRequest) -> None:
    """``clear`` drops captures and the pending exception."""
    spy = MailSpy(raise_exception=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        spy.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=sample_mail)

    spy.clear()

    assert spy.sent == []
    assert isinstance(spy.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=sample_mail), httpx.Response)


# ======================== Composition ========================


@pytest.mark.os_agnostic
def test_build_testing_wires_given_spy(sample_mail: MailSendRequest) -> None:
    """Sends through the services land on the supplied spy."""
    spy = MailSpy()
    services = build_testing(spy=spy)

    services.send_mail(config=CocoonmailConfig(api_key="abc123"), mail=sample_mail)

    assert isinstance(services, AppServices)
    assert len(spy.sent) == 1


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    """Production services use the httpx client and filesystem loader."""
    from cocoonmail.adapters.api.client import send_mail
    from cocoonmail.adapters.config.loader import get_config

    services = build_production()

    assert services.send_mail is send_mail
    assert services.get_config is get_config


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Services cannot be reassigned after wiring."""
    import dataclasses

    services = build_testing()

    with pytest.raises(dataclasses.FrozenInstanceError):
        services.send_mail = build_testing().send_mail  # type: ignore[misc]
