"""``--set SECTION.KEY=VALUE`` overrides applied on top of loaded configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument: ``section.key_path[...]=value``."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The path ends at the first ``=``; the first dotted component names the
    section.

    Raises:
        ValueError: Missing ``=``, no dot in the path, or an empty component.

    Examples:
        >>> parse_override("cocoonmail.region=eu")
        ConfigOverride(section='cocoonmail', key_path=('region',), value='eu')
        >>> parse_override("cocoonmail.timeout=12.5").value
        12.5
    """
    path, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, *key_path = path.split(".")
    if not key_path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section or not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: empty section or key component")

    return ConfigOverride(section=section, key_path=tuple(key_path), value=coerce_value(text))


def coerce_value(text: str) -> OverrideValue:
    """Decode *text* as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("false"), coerce_value("30"), coerce_value("eu")
        (False, 30, 'eu')
        >>> coerce_value("")
        ''
    """
    if not text:
        return ""
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every override deep-merged in.

    Returns the same object when there is nothing to apply.

    Raises:
        ValueError: An override string is malformed, or it descends into a
            key that is not a table.

    Example:
        >>> cfg = Config({"cocoonmail": {"region": "global"}}, {})
        >>> apply_overrides(cfg, ("cocoonmail.region=eu",))["cocoonmail"]["region"]
        'eu'
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        node: dict[str, object] = merged.setdefault(override.section, {})
        for part in override.key_path[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ValueError(f"Invalid override {raw!r}: {part!r} is not a table")
            node = cast("dict[str, object]", child)
        node[override.key_path[-1]] = override.value

    return config.with_overrides(merged)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
