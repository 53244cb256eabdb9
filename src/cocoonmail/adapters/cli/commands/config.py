"""Configuration display and deployment commands.

Contents:
    * :func:`cli_config` - Display merged configuration.
    * :func:`cli_config_deploy` - Copy the default configuration into a layer.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from cocoonmail import __init__conf__
from cocoonmail.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_PROFILE_HELP = "Override profile from root command (e.g., 'production', 'test')"


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one section (e.g., 'cocoonmail' or 'lib_log_rich')",
)
@click.option("--profile", type=str, default=None, help=_PROFILE_HELP)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration with the API key masked.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    cli_ctx = get_cli_context(ctx)
    effective_config, effective_profile = cli_ctx.resolve_config(profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(
                effective_config, output_format=fmt, section=section, profile=effective_profile
            )
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Target configuration layer(s) to deploy to (can specify multiple)",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing configuration files")
@click.option("--profile", type=str, default=None, help=_PROFILE_HELP)
@click.pass_context
def cli_config_deploy(ctx: click.Context, targets: tuple[str, ...], force: bool, profile: str | None) -> None:
    r"""Deploy the default configuration to system or user directories.

    \b
    - app:  System-wide application config (requires privileges)
    - host: System-wide host config (requires privileges)
    - user: User-specific config, the usual place for the API key

    Existing files are kept unless --force is given.
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = profile or cli_ctx.profile
    deploy_targets = tuple(DeployTarget(t.lower()) for t in targets)
    target_values = tuple(t.value for t in deploy_targets)

    extra = {"command": "config-deploy", "targets": target_values, "force": force, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        logger.info("Deploying configuration")
        _execute_deploy(cli_ctx, deploy_targets, force, effective_profile)


def _execute_deploy(cli_ctx: CLIContext, targets: tuple[DeployTarget, ...], force: bool, profile: str | None) -> None:
    """Run the deployment and map failures to exit codes.

    Raises:
        SystemExit: PERMISSION_DENIED, INVALID_ARGUMENT or GENERAL_ERROR.
    """
    try:
        deployed_paths = cli_ctx.services.deploy_configuration(targets=targets, force=force, profile=profile)
    except PermissionError as exc:
        logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Permission denied. {exc}", err=True)
        click.echo("Hint: System-wide deployment (--target app/host) may require sudo.", err=True)
        raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
    except ValueError as exc:
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
    except Exception as exc:
        logger.error("Failed to deploy configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"\nError: Failed to deploy configuration: {exc}", err=True)
        raise SystemExit(ExitCode.GENERAL_ERROR) from exc
    _report_deployment_result(deployed_paths, profile)


def _report_deployment_result(deployed_paths: list[Path], profile: str | None) -> None:
    if deployed_paths:
        profile_msg = f" (profile: {profile})" if profile else ""
        click.echo(f"\nConfiguration deployed successfully{profile_msg}:")
        for path in deployed_paths:
            click.echo(f"  ✓ {path}")
        click.echo(f"\nSet cocoonmail.api_key there, then check it with: {__init__conf__.shell_command} config")
    else:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")


__all__ = ["cli_config", "cli_config_deploy"]
