"""Adapters layer - infrastructure and framework integrations.

Connects the application to configuration files, credential files, the
process environment, logging and the command line.

Contents:
    * :mod:`.config` - Layered configuration, provider settings schema, display
    * :mod:`.credentials` - Credential file and JSON loading
    * :mod:`.environment` - Process environment and default endpoint snapshot
    * :mod:`.catalog` - Bundled operation registries
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
