"""Process exit codes returned by ``gcpconf``.

``CONFIG_ERROR`` is sysexits' EX_CONFIG: every rejected provider setting,
failed credential load or universe mismatch ends with it so wrappers can
tell configuration problems from crashes.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes produced by the CLI.

    Example:
        >>> ExitCode.CONFIG_ERROR == 78
        True
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2  # click.UsageError and BadParameter
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
