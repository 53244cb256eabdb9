"""Configuration adapter - loading, overrides, display, and deployment.

Contents:
    * :mod:`.loader` - Cached layered configuration loading
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.deploy` - Default configuration deployment
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
]
