"""``send-mail`` command: send a transactional mail through the API."""

from __future__ import annotations

import base64
import functools
import logging
import mimetypes
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import lib_log_rich.runtime
import rich_click as click

from cocoonmail.adapters.api.payload import get_request_body
from cocoonmail.adapters.config.overrides import coerce_value
from cocoonmail.domain.addresses import parse_email, parse_recipients
from cocoonmail.domain.mail import (
    MailSendRequest,
    new_mail_attachment,
    new_mail_attachment_remote,
    new_mail_send_request,
)

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ...exit_codes import ExitCode
from ._common import (
    api_config_options,
    execute_with_mail_error_handling,
    fail,
    filter_sentinels,
    load_api_config,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _parse_params(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into custom parameters.

    Values are decoded as JSON where possible, so ``total=42`` yields an
    integer and ``name=Jane`` a string.
    """
    params: dict[str, Any] = {}
    for raw in value:
        key, sep, text = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"{raw!r} must look like KEY=VALUE", ctx=ctx, param=param)
        params[key] = coerce_value(text)
    return params


def read_attachment(path: Path) -> tuple[str, str, str]:
    """Return (filename, content type, base64 data) for a local file.

    The content type is guessed from the file extension.

    Raises:
        FileNotFoundError: *path* does not exist.
    """
    content_type = mimetypes.guess_type(path.name)[0] or _DEFAULT_CONTENT_TYPE
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return path.name, content_type, data


def build_mail(
    *,
    transactional_id: str,
    recipients: tuple[str, ...],
    reply_to: str | None,
    params: dict[str, Any],
    attachments: tuple[Path, ...],
    remote_attachments: tuple[str, ...],
    scheduled_at: str | None,
    flags: dict[str, bool],
) -> MailSendRequest:
    """Assemble the mail-send payload from command-line values.

    Raises:
        ParseError: A recipient or the reply-to address is malformed.
        LengthExceededError: An address exceeds a length limit.
        FileNotFoundError: An attachment file is missing.

    Example:
        >>> mail = build_mail(
        ...     transactional_id="welcome",
        ...     recipients=("Jane <jane@example.com>",),
        ...     reply_to=None,
        ...     params={"plan": "pro"},
        ...     attachments=(),
        ...     remote_attachments=(),
        ...     scheduled_at=None,
        ...     flags={"allow_open_tracking": True},
        ... )
        >>> mail.to[0].name, mail.custom_parameter, mail.allow_open_tracking
        ('Jane', {'plan': 'pro'}, True)
    """
    mail = new_mail_send_request()
    mail.transactional_id = transactional_id
    mail.add_recipient(*parse_recipients(recipients))
    if reply_to:
        mail.set_reply_to(parse_email(reply_to).email)
    for key, value in params.items():
        mail.set_custom_parameter(key, value)
    mail.add_attachment(*(new_mail_attachment(*read_attachment(path)) for path in attachments))
    mail.add_remote_attachment(*(new_mail_attachment_remote(link) for link in remote_attachments))
    if scheduled_at:
        mail.set_scheduled_at(scheduled_at)
    mail.add_email_address_to_contact = flags.get("add_email_address_to_contact", False)
    mail.set_allow_click_tracking(flags.get("allow_click_tracking", False))
    mail.set_allow_open_tracking(flags.get("allow_open_tracking", False))
    mail.set_bypass_bounce_control(flags.get("bypass_bounce_control", False))
    mail.set_bypass_unsubscribe_list(flags.get("bypass_unsubscribe_list", False))
    mail.set_enable_view_in_browser(flags.get("enable_view_in_browser", False))
    return mail


@click.command("send-mail", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--transactional-id", required=True, help="Identifier of the transactional template to send")
@click.option(
    "--to",
    "recipients",
    multiple=True,
    required=True,
    help="Recipient, bare or as 'Name <address>' (can specify multiple)",
)
@click.option("--reply-to", default=None, help="Reply-to address")
@click.option(
    "--param",
    "params",
    multiple=True,
    callback=_parse_params,
    metavar="KEY=VALUE",
    help="Custom template parameter; VALUE is decoded as JSON when possible (repeatable)",
)
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Local file to attach (can specify multiple)",
)
@click.option(
    "--remote-attachment",
    "remote_attachments",
    multiple=True,
    help="URL of a file the API fetches and attaches (can specify multiple)",
)
@click.option("--scheduled-at", default=None, help="Delivery time understood by the API, e.g. an ISO 8601 timestamp")
@click.option("--add-to-contact", is_flag=True, default=False, help="Add the recipients to the contact list")
@click.option("--click-tracking", is_flag=True, default=False, help="Enable click tracking")
@click.option("--open-tracking", is_flag=True, default=False, help="Enable open tracking")
@click.option("--bypass-bounce-control", is_flag=True, default=False, help="Send even to previously bounced addresses")
@click.option("--bypass-unsubscribe-list", is_flag=True, default=False, help="Send even to unsubscribed addresses")
@click.option("--view-in-browser", is_flag=True, default=False, help="Include a view-in-browser link")
@click.option("--dry-run", is_flag=True, default=False, help="Print the JSON payload instead of sending it")
@api_config_options
@click.pass_context
def cli_send_mail(
    ctx: click.Context,
    transactional_id: str,
    recipients: tuple[str, ...],
    reply_to: str | None,
    params: dict[str, Any],
    attachments: tuple[Path, ...],
    remote_attachments: tuple[str, ...],
    scheduled_at: str | None,
    add_to_contact: bool,
    click_tracking: bool,
    open_tracking: bool,
    bypass_bounce_control: bool,
    bypass_unsubscribe_list: bool,
    view_in_browser: bool,
    dry_run: bool,
    api_key: str | None,
    host: str | None,
    subuser: str | None,
    region: str | None,
    timeout: float | None,
) -> None:
    """Send a transactional mail using the configured API settings.

    Prints the API response. Exit codes: 22 for invalid addresses or
    options, 78 for missing configuration, 69 when the API is unreachable
    or rejects the mail.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-mail", "transactional_id": transactional_id, "recipient_count": len(recipients)}

    with lib_log_rich.runtime.bind(job_id="cli-send-mail", extra=extra):
        build = functools.partial(
            build_mail,
            transactional_id=transactional_id,
            recipients=recipients,
            reply_to=reply_to,
            params=params,
            attachments=attachments,
            remote_attachments=remote_attachments,
            scheduled_at=scheduled_at,
            flags={
                "add_email_address_to_contact": add_to_contact,
                "allow_click_tracking": click_tracking,
                "allow_open_tracking": open_tracking,
                "bypass_bounce_control": bypass_bounce_control,
                "bypass_unsubscribe_list": bypass_unsubscribe_list,
                "enable_view_in_browser": view_in_browser,
            },
        )
        if dry_run:
            _print_payload(build)
            return

        overrides = filter_sentinels(api_key=api_key, host=host, subuser=subuser, region=region, timeout=timeout)
        api_config = load_api_config(cli_ctx.config, cli_ctx.services.load_cocoonmail_config_from_dict, overrides)
        logger.info(
            "Sending mail",
            extra={"attachment_count": len(attachments) + len(remote_attachments)},
        )

        def operation() -> httpx.Response:
            return cli_ctx.services.send_mail(config=api_config, mail=build())

        execute_with_mail_error_handling(operation=operation, transactional_id=transactional_id)


def _print_payload(build: Callable[[], MailSendRequest]) -> None:
    """Print the encoded payload; bad input exits like a real send."""
    try:
        mail = build()
    except ValueError as exc:
        fail(exc, "Invalid mail parameters", "Invalid mail parameters", exit_code=ExitCode.INVALID_ARGUMENT)
    except FileNotFoundError as exc:
        fail(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    click.echo(get_request_body(mail).decode())


__all__ = ["build_mail", "cli_send_mail", "read_attachment"]
