"""``gcpconf`` console script.

The adapters layer never imports the composition root; this module wires the
production services in from the package level.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]
