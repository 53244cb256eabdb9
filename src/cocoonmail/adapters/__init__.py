"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.api` - Cocoonmail HTTP API access with httpx
    * :mod:`.config` - Configuration loading, deployment, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - rich_click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
