"""CLI command implementations registered on the root group.

Contents:
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
    * Mail commands from :mod:`.mail` (subpackage)
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy
from .info import cli_info
from .mail import cli_send_mail, cli_validate_address

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_info",
    "cli_send_mail",
    "cli_validate_address",
]
