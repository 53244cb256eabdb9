"""Mail CLI commands.

Contents:
    * :func:`.validate_address.cli_validate_address` - Check one recipient address.
    * :func:`.send_mail.cli_send_mail` - Send a transactional mail through the API.
"""

from __future__ import annotations

from ._common import filter_sentinels
from .send_mail import cli_send_mail
from .validate_address import cli_validate_address

__all__ = ["cli_send_mail", "cli_validate_address", "filter_sentinels"]
