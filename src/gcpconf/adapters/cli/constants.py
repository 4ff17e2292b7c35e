"""Values shared by the root group and its subcommands."""

from __future__ import annotations

from typing import Final

from gcpconf.domain.enums import OutputFormat

CLICK_CONTEXT_SETTINGS: Final[dict[str, object]] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

#: ``--format`` choices accepted by ``config`` and ``resolve``.
FORMAT_CHOICES: Final[tuple[str, ...]] = tuple(member.value for member in OutputFormat)

# Characters of traceback text lib_cli_exit_tools prints before truncating.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "FORMAT_CHOICES",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
