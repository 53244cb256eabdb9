"""Copy the bundled default configuration into app/host/user layers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from cocoonmail import __init__conf__
from cocoonmail.domain.enums import DeployTarget

from .loader import get_default_config_path, validate_profile

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    r"""Deploy ``defaultconfig.toml`` to the requested layers.

    The user layer holds the API key, so it is written with private
    permissions (700/600) on POSIX systems; app and host layers are
    world-readable (755/644).

    Args:
        targets: Layers to write to.
        force: Overwrite files that already exist.
        profile: Deploy into ``profile/<name>/`` subdirectories.

    Returns:
        Paths that were created or overwritten; empty when every target
        already existed and *force* is False.

    Raises:
        PermissionError: Writing app/host layers without privileges.
        ValueError: Invalid profile name.

    Note:
        Typical Linux destinations:
        - app:  /etc/xdg/cocoonmail/config.toml
        - host: /etc/xdg/cocoonmail/hosts/{hostname}.toml
        - user: ~/.config/cocoonmail/config.toml
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
        set_permissions=True,
    )

    deployed: list[Path] = []
    for result in results:
        if result.action in _WRITTEN:
            deployed.append(result.destination)
        deployed.extend(extra.destination for extra in result.dot_d_results if extra.action in _WRITTEN)
    return deployed


__all__ = ["deploy_configuration"]
