"""Shared helpers for the mail commands.

Configuration loading with CLI overrides, option decorators, and the
exception-to-exit-code mapping used by ``send-mail``.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable
from typing import Any, NoReturn

import httpx
import orjson
import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from cocoonmail import __init__conf__
from cocoonmail.adapters.api.config import CocoonmailConfig
from cocoonmail.application.ports import LoadCocoonmailConfigFromDict
from cocoonmail.domain.enums import Region
from cocoonmail.domain.errors import ConfigurationError, DeliveryError

from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def filter_sentinels(**kwargs: Any) -> dict[str, Any]:
    """Drop options the user did not give (``None``).

    Example:
        >>> filter_sentinels(api_key=None, region="eu", timeout=None)
        {'region': 'eu'}
    """
    return {k: v for k, v in kwargs.items() if v is not None}


def apply_validated_overrides(base_config: CocoonmailConfig, overrides: dict[str, Any]) -> CocoonmailConfig:
    """Merge *overrides* into *base_config* and validate the result.

    ``model_validate`` on the merged dict runs every field validator, which
    ``model_copy(update=...)`` would skip.

    Raises:
        ValidationError: An override holds an invalid value.

    Example:
        >>> apply_validated_overrides(CocoonmailConfig(), {"region": "eu"}).region
        <Region.EU: 'eu'>
    """
    if not overrides:
        return base_config
    merged = {**base_config.model_dump(), **overrides}
    return CocoonmailConfig.model_validate(merged)


def api_config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add flags overriding every ``[cocoonmail]`` setting."""
    options = [
        click.option("--api-key", default=None, help="Override the API key (cocoonmail.api_key)"),
        click.option("--host", default=None, help="Override the API host (cocoonmail.host)"),
        click.option("--subuser", default=None, help="Send on behalf of this subuser (On-Behalf-Of header)"),
        click.option(
            "--region",
            type=click.Choice([r.value for r in Region], case_sensitive=False),
            default=None,
            help="Route the request to a data-residency region; takes precedence over --host",
        ),
        click.option("--timeout", type=float, default=None, help="Override the request timeout in seconds"),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def load_api_config(
    config: Config,
    loader: LoadCocoonmailConfigFromDict,
    overrides: dict[str, Any],
) -> CocoonmailConfig:
    """Build the effective :class:`CocoonmailConfig` for a command.

    Raises:
        SystemExit: CONFIG_ERROR for invalid configuration or a missing API
            key, INVALID_ARGUMENT for an invalid override.
    """
    try:
        api_config = loader(config.as_dict())
    except ValidationError as exc:
        fail(exc, "Invalid cocoonmail configuration", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    try:
        api_config = apply_validated_overrides(api_config, overrides)
    except ValidationError as exc:
        fail(exc, "Invalid configuration override", "Invalid option value", exit_code=ExitCode.INVALID_ARGUMENT)

    if not api_config.api_key:
        logger.error("No API key configured")
        click.echo("\nError: No API key configured. Set cocoonmail.api_key in your config file.", err=True)
        click.echo(f"See: {__init__conf__.shell_command} config-deploy --target user", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR)
    return api_config


def execute_with_mail_error_handling(*, operation: Callable[[], httpx.Response], transactional_id: str) -> None:
    """Run a send and map its outcome to output and exit codes.

    Exceptions are caught most specific first:

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. ValueError (bad address, region, parameter) -> INVALID_ARGUMENT (22)
    3. FileNotFoundError -> FILE_NOT_FOUND (2)
    4. DeliveryError -> DELIVERY_FAILURE (69)
    5. Exception -> GENERAL_ERROR (1), logged with traceback

    A response with a non-success status is printed to stderr and exits
    with DELIVERY_FAILURE.

    Set ``DEVELOPMENT_MODE`` to re-raise unexpected exceptions instead.
    """
    try:
        response = operation()
    except ConfigurationError as exc:
        fail(exc, "Mail configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    except ValueError as exc:
        fail(exc, "Invalid mail parameters", "Invalid mail parameters", exit_code=ExitCode.INVALID_ARGUMENT)
    except FileNotFoundError as exc:
        fail(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except DeliveryError as exc:
        fail(exc, "Mail delivery failed", "Failed to reach the Cocoonmail API", exit_code=ExitCode.DELIVERY_FAILURE)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        fail(
            exc,
            "Unexpected error sending mail",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )
    _handle_response(response, transactional_id)


def format_response_body(response: httpx.Response) -> str:
    """Return the body indented when it is JSON, as text otherwise.

    Example:
        >>> format_response_body(httpx.Response(200, json={"status": "queued"}))
        '{\\n  "status": "queued"\\n}'
        >>> format_response_body(httpx.Response(502, text="Bad Gateway"))
        'Bad Gateway'
    """
    try:
        return orjson.dumps(orjson.loads(response.content), option=orjson.OPT_INDENT_2).decode()
    except orjson.JSONDecodeError:
        return response.text


def _handle_response(response: httpx.Response, transactional_id: str) -> None:
    body = format_response_body(response)
    if response.is_success:
        click.echo(f"\nMail accepted (HTTP {response.status_code})")
        if body:
            click.echo(body)
        logger.info("Mail sent via CLI", extra={"transactional_id": transactional_id})
        return
    click.echo(f"\nMail rejected (HTTP {response.status_code})", err=True)
    if body:
        click.echo(body, err=True)
    raise SystemExit(ExitCode.DELIVERY_FAILURE)


def fail(
    exc: BaseException,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> NoReturn:
    """Log *exc*, print it to stderr and exit with *exit_code*."""
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code) from exc


__all__ = [
    "api_config_options",
    "apply_validated_overrides",
    "execute_with_mail_error_handling",
    "fail",
    "filter_sentinels",
    "format_response_body",
    "load_api_config",
]
