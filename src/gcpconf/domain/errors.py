"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Sequence


class ConfigurationError(Exception):
    """Provider settings could not be turned into a runtime configuration.

    Base class for every terminal failure of a configure call. Typically
    caught at CLI boundaries and mapped to ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from gcpconf.domain.errors import ConfigurationError
        >>> err = ConfigurationError("no project configured")
        >>> str(err)
        'no project configured'
    """


class MalformedSettingError(ConfigurationError, ValueError):
    """A setting value could not be parsed (bad duration, unknown enum value).

    Inherits from ValueError so parsing helpers can be used wherever a
    plain ``except ValueError`` is expected.

    Example:
        >>> err = MalformedSettingError("request_timeout", "invalid duration 'soon'")
        >>> err.field
        'request_timeout'
        >>> str(err)
        "request_timeout: invalid duration 'soon'"
    """

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"{field}: {detail}")
        self.field = field
        self.detail = detail


class UniverseDomainMismatchError(ConfigurationError):
    """Declared universe domain disagrees with the credential-implied domain.

    Example:
        >>> err = UniverseDomainMismatchError(
        ...     "universe domain mismatch", declared="example.com", implied="googleapis.com"
        ... )
        >>> (err.declared, err.implied)
        ('example.com', 'googleapis.com')
    """

    def __init__(self, message: str, *, declared: str | None, implied: str) -> None:
        super().__init__(message)
        self.declared = declared
        self.implied = implied


class CredentialLoadError(ConfigurationError):
    """The credential material was rejected while loading it."""


class ConfigurationCancelledError(ConfigurationError):
    """The host cancelled the configure call while credentials were loading."""


class DuplicateOperationError(ValueError):
    """Two or more operation registries declared the same operation name.

    Returned as a diagnostic next to a still-usable merged registry; strict
    callers raise it.

    Example:
        >>> err = DuplicateOperationError(["google_compute_instance"])
        >>> err.duplicates
        ('google_compute_instance',)
        >>> str(err)
        'duplicate operation name(s): google_compute_instance'
    """

    def __init__(self, duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        super().__init__(f"duplicate operation name(s): {', '.join(self.duplicates)}")


__all__ = [
    "ConfigurationCancelledError",
    "ConfigurationError",
    "CredentialLoadError",
    "DuplicateOperationError",
    "MalformedSettingError",
    "UniverseDomainMismatchError",
]
