"""``validate-address`` command: check one recipient address offline."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from cocoonmail.domain.addresses import parse_email
from cocoonmail.domain.enums import OutputFormat
from cocoonmail.domain.errors import InvalidRecipientError, LengthExceededError

from ...constants import CLICK_CONTEXT_SETTINGS
from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("validate-address", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("address")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
def cli_validate_address(address: str, output_format: str) -> None:
    """Parse ADDRESS and print its display name and address.

    ADDRESS may be bare (jane@example.com) or carry a display name
    ("Jane Doe <jane@example.com>"). Exits with 22 when the syntax is
    invalid or a length limit is exceeded.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_validate_address, ["Jane <jane@example.com>"])
        >>> result.exit_code
        0
    """
    with lib_log_rich.runtime.bind(job_id="cli-validate-address", extra={"command": "validate-address"}):
        try:
            recipient = parse_email(address)
        except InvalidRecipientError as exc:
            extra: dict[str, object] = {"error_type": type(exc).__name__}
            if isinstance(exc, LengthExceededError):
                extra.update(
                    limit_kind=exc.limit_kind.value,
                    limit_value=exc.limit_value,
                    actual_value=exc.actual_value,
                )
            logger.info("Address rejected", extra=extra)
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc

        if OutputFormat(output_format.lower()) is OutputFormat.JSON:
            click.echo(orjson.dumps({"name": recipient.name, "email": recipient.email}).decode())
        else:
            click.echo(f"Name:  {recipient.name}")
            click.echo(f"Email: {recipient.email}")


__all__ = ["cli_validate_address"]
