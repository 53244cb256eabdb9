"""Render the merged configuration through lib_layered_config.

The ``cocoonmail.api_key`` value is masked before display so the command
can be used in shared terminals and CI logs.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from cocoonmail.domain.enums import OutputFormat

REDACTED = "***REDACTED***"


def redact_secrets(config: Config) -> Config:
    """Return *config* with a configured API key masked.

    The marker matches the one lib_layered_config uses for passwords and
    tokens.

    Example:
        >>> cfg = redact_secrets(Config({"cocoonmail": {"api_key": "abc123"}}, {}))
        >>> cfg["cocoonmail"]["api_key"]
        '***REDACTED***'
        >>> redact_secrets(Config({"cocoonmail": {"api_key": ""}}, {}))["cocoonmail"]["api_key"]
        ''
    """
    if not config.get("cocoonmail.api_key", default=""):
        return config
    return config.with_overrides({"cocoonmail": {"api_key": REDACTED}})


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print *config* as TOML-like text or JSON.

    Pending log records are flushed first so they do not interleave with
    the configuration output.

    Args:
        config: Loaded configuration.
        output_format: ``HUMAN`` or ``JSON``.
        section: Only show this top-level section.
        console: Rich console to print to; mainly for tests.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: The requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        redact_secrets(config),
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config", "redact_secrets"]
