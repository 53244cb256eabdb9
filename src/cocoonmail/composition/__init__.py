"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# API services
from ..adapters.api.client import send_mail
from ..adapters.api.config import load_cocoonmail_config_from_dict

# Configuration services
from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions checked by the type checker only.
if TYPE_CHECKING:
    from ..adapters.memory.mail import MailSpy
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadCocoonmailConfigFromDict,
        SendMail,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_send_mail: SendMail = send_mail
    _assert_load_cocoonmail_config_from_dict: LoadCocoonmailConfigFromDict = load_cocoonmail_config_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    send_mail: SendMail
    load_cocoonmail_config_from_dict: LoadCocoonmailConfigFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the filesystem, httpx and lib_log_rich adapters."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        send_mail=send_mail,
        load_cocoonmail_config_from_dict=load_cocoonmail_config_from_dict,
        init_logging=init_logging,
    )


def build_testing(*, spy: MailSpy | None = None) -> AppServices:
    """Wire in-memory adapters; nothing touches disk or network.

    Args:
        spy: MailSpy to capture sends on. A fresh one is created when
            omitted; pass your own to assert on what was sent.
    """
    from ..adapters.memory import (
        MailSpy,
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_cocoonmail_config_from_dict_in_memory,
    )

    mail_spy = spy if spy is not None else MailSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        send_mail=mail_spy.send_mail,
        load_cocoonmail_config_from_dict=load_cocoonmail_config_from_dict_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "deploy_configuration",
    "display_config",
    # API
    "send_mail",
    "load_cocoonmail_config_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
