"""API client configuration model and loader.

Provides the CocoonmailConfig Pydantic model for validated, immutable
client settings and the loader function to create it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from cocoonmail.domain.enums import Region


class CocoonmailConfig(BaseModel):
    """Validated, immutable API client configuration.

    Example:
        >>> config = CocoonmailConfig(api_key="abc123", region="eu")
        >>> config.region
        <Region.EU: 'eu'>
        >>> config.host
        ''
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    host: str = ""
    region: Region | None = None
    subuser: str = ""
    timeout: float = 30.0

    @field_validator("api_key", "region", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Coerce empty or whitespace-only strings to None.

        Treats empty strings from config files as "not configured" rather
        than explicit empty values.
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("host", "subuser", mode="before")
    @classmethod
    def _strip_strings(cls, v: Any) -> Any:
        """Strip surrounding whitespace; ``None`` becomes an empty string.

        Examples:
            >>> CocoonmailConfig._strip_strings("  https://api.example.com/ ")
            'https://api.example.com/'
            >>> CocoonmailConfig._strip_strings(None)
            ''
        """
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("host")
    @classmethod
    def _normalize_host(cls, v: str) -> str:
        """Require an http(s) scheme and drop trailing slashes."""
        if not v:
            return v
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"host must start with http:// or https://, got {v!r}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def _validate_config(self) -> CocoonmailConfig:
        """Reject non-positive timeouts.

        Example:
            >>> CocoonmailConfig(timeout=-5.0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        return self

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> config = CocoonmailConfig(api_key="secret123")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"CocoonmailConfig({', '.join(fields)})"


def load_cocoonmail_config_from_dict(config_dict: Mapping[str, Any]) -> CocoonmailConfig:
    """Load CocoonmailConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    Reads the ``[cocoonmail]`` section; a missing section yields defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Validated client settings.

    Raises:
        pydantic.ValidationError: When a setting has an invalid value.

    Example:
        >>> config = load_cocoonmail_config_from_dict({"cocoonmail": {"api_key": "abc123", "region": "global"}})
        >>> config.region.value
        'global'
        >>> load_cocoonmail_config_from_dict({}).api_key is None
        True
    """
    return CocoonmailConfig.model_validate(config_dict.get("cocoonmail", {}))


__all__ = [
    "CocoonmailConfig",
    "load_cocoonmail_config_from_dict",
]
