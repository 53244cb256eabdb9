"""Shared pytest fixtures for library and CLI tests.

Fixture names read as plain English; tests receive them through pytest's
conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from cocoonmail.domain.mail import MailSendRequest, new_mail_recipient, new_mail_send_request

if TYPE_CHECKING:
    from cocoonmail.adapters.memory.mail import MailSpy
    from cocoonmail.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g. JSON parsing) and
    ``result.stderr`` for error messages.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before: a test that monkeypatches ``get_config`` would lose
    the ``cache_clear`` attribute.
    """
    from cocoonmail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O.

    Example:
        def test_region(config_factory) -> None:
            config = config_factory({"cocoonmail": {"region": "eu"}})
            assert config.get("cocoonmail.region") == "eu"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Return the ``build_testing`` factory: in-memory adapters only."""
    from cocoonmail.composition import build_testing

    return build_testing


@pytest.fixture
def inject_services(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return a builder for a services factory with selected adapters replaced.

    Starts from ``build_testing`` and swaps in the keyword arguments given;
    ``config`` is shorthand for a ``get_config`` returning that Config.

    Example:
        def test_deploy(cli_runner, inject_services) -> None:
            calls = []
            factory = inject_services(deploy_configuration=lambda **kw: calls.append(kw) or [])
            cli_runner.invoke(cli, ["config-deploy", "--target", "user"], obj=factory)
            assert len(calls) == 1
    """
    from cocoonmail.composition import build_testing

    def _inject(*, config: Config | None = None, **replacements: Any) -> Callable[[], AppServices]:
        if config is not None:
            replacements["get_config"] = lambda **_kwargs: config
        services = replace(build_testing(), **replacements)
        return lambda: services

    return _inject


@dataclass
class MailCliContext:
    """Services factory plus the spy capturing what ``send-mail`` sent.

    Attributes:
        factory: Callable returning wired AppServices for ``obj=``.
        spy: MailSpy holding the captured requests.
    """

    factory: Callable[[], Any]
    spy: MailSpy


@pytest.fixture
def mail_cli_context(
    clear_config_cache: None,
) -> Callable[..., MailCliContext]:
    """Create a CLI test context whose ``[cocoonmail]`` section is *api_data*.

    Example:
        def test_send(cli_runner, mail_cli_context) -> None:
            ctx = mail_cli_context({"api_key": "abc123"})
            result = cli_runner.invoke(cli, ["send-mail", "--transactional-id", "t", "--to", "a@b.com"], obj=ctx.factory)
            assert ctx.spy.sent[0].request.base_url.endswith("/webhook/mail/send")
    """
    from cocoonmail.adapters.memory.mail import MailSpy as MailSpyImpl
    from cocoonmail.composition import build_testing

    def _create(api_data: dict[str, Any], *, status_code: int = 200) -> MailCliContext:
        spy = MailSpyImpl(status_code=status_code)
        config = Config({"cocoonmail": api_data}, {})
        services = replace(build_testing(spy=spy), get_config=lambda **_kwargs: config)
        return MailCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def sample_mail() -> MailSendRequest:
    """A small mail-send payload with one recipient and a custom parameter."""
    return (
        new_mail_send_request()
        .add_recipient(new_mail_recipient("Jane Doe", "jane@example.com"))
        .set_custom_parameter("order_id", 42)
    )


@dataclass
class RecordingTransport:
    """httpx transport double returning a canned response and keeping requests."""

    status_code: int = 202
    json_body: Any = None
    requests: list[httpx.Request] | None = None

    def build(self) -> httpx.MockTransport:
        self.requests = []

        def _handler(request: httpx.Request) -> httpx.Response:
            assert self.requests is not None
            self.requests.append(request)
            return httpx.Response(self.status_code, json=self.json_body if self.json_body is not None else {})

        return httpx.MockTransport(_handler)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Return a fresh RecordingTransport; call ``.build()`` for the httpx transport."""
    return RecordingTransport()
