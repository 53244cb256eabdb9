"""``--set SECTION.KEY=VALUE`` parsing, coercion, and application."""

from __future__ import annotations

from typing import Any

import pytest
from lib_layered_config import Config

from cocoonmail.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    """SECTION.KEY=VALUE gives a one-element key path."""
    assert parse_override("cocoonmail.region=eu") == ConfigOverride(
        section="cocoonmail", key_path=("region",), value="eu"
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    """Further dots descend into nested tables."""
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.section == "lib_log_rich"
    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_value_containing_equals() -> None:
    """Only the first '=' separates path from value."""
    assert parse_override("cocoonmail.api_key=abc==").value == "abc=="


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("cocoonmail.region", "must contain '='"),
        ("cocoonmail=eu", "must contain at least one dot"),
        ("=eu", "must contain at least one dot"),
        (".region=eu", "empty section or key component"),
        ("cocoonmail..region=eu", "empty section or key component"),
        ("cocoonmail.region.=eu", "empty section or key component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed overrides raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("true", True),
        ("false", False),
        ("30", 30),
        ("12.5", 12.5),
        ("-3", -3),
        ("1e3", 1000.0),
        ("null", None),
        ('["a", "b"]', ["a", "b"]),
        ('{"plan": "pro"}', {"plan": "pro"}),
        ("eu", "eu"),
        ("", ""),
        ("hello world", "hello world"),
        ("Zürich", "Zürich"),
    ],
)
def test_coerce_value_decodes_json_or_keeps_the_string(text: str, expected: Any) -> None:
    """JSON literals are decoded; anything else stays a string."""
    assert coerce_value(text) == expected


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance() -> None:
    """Nothing to apply means no copy."""
    config = Config({"cocoonmail": {"region": "global"}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section() -> None:
    """Other keys of the section survive."""
    config = Config({"cocoonmail": {"region": "global", "subuser": "shop"}}, {})

    result = apply_overrides(config, ("cocoonmail.region=eu", "cocoonmail.timeout=5"))

    assert result["cocoonmail"]["region"] == "eu"
    assert result["cocoonmail"]["timeout"] == 5
    assert result["cocoonmail"]["subuser"] == "shop"


@pytest.mark.os_agnostic
def test_apply_overrides_preserves_other_sections() -> None:
    """Untouched sections are carried over."""
    config = Config({"cocoonmail": {}, "lib_log_rich": {"console_level": "WARNING"}}, {})

    result = apply_overrides(config, ("cocoonmail.api_key=abc123",))

    assert result["lib_log_rich"]["console_level"] == "WARNING"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_section() -> None:
    """Overrides may introduce a section the files do not have."""
    result = apply_overrides(Config({}, {}), ("cocoonmail.region=eu",))

    assert result["cocoonmail"]["region"] == "eu"


@pytest.mark.os_agnostic
def test_apply_overrides_does_not_mutate_original() -> None:
    """The source Config keeps its values."""
    config = Config({"cocoonmail": {"region": "global"}}, {})

    apply_overrides(config, ("cocoonmail.region=eu",))

    assert config["cocoonmail"]["region"] == "global"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_descending_into_a_scalar() -> None:
    """A path through a non-table value is an error."""
    with pytest.raises(ValueError, match="is not a table"):
        apply_overrides(Config({}, {}), ("cocoonmail.region=eu", "cocoonmail.region.code=x"))
