"""Type-safe domain enums for attribution strategies and output formats."""

from __future__ import annotations

from enum import Enum

from .errors import MalformedSettingError


class AttributionStrategy(str, Enum):
    """When the attribution label is added to managed resources.

    Inherits from str to allow direct string comparison with raw setting values.

    Attributes:
        CREATE_ONLY: Label only resources created by the provider.
        PROACTIVE: Also add the label to existing resources on update.

    Example:
        >>> AttributionStrategy.CREATE_ONLY.value
        'CREATION_ONLY'
        >>> AttributionStrategy.PROACTIVE == "PROACTIVE"
        True
    """

    CREATE_ONLY = "CREATION_ONLY"
    PROACTIVE = "PROACTIVE"

    @classmethod
    def parse(cls, raw: str) -> AttributionStrategy:
        """Return the member whose value equals ``raw``.

        Raises:
            MalformedSettingError: When ``raw`` names no strategy.

        Example:
            >>> AttributionStrategy.parse("PROACTIVE")
            <AttributionStrategy.PROACTIVE: 'PROACTIVE'>
            >>> AttributionStrategy.parse("bogus")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            MalformedSettingError: unrecognized terraform_attribution_label_addition_strategy 'bogus'
        """
        try:
            return cls(raw)
        except ValueError as exc:
            raise MalformedSettingError(
                "terraform_attribution_label_addition_strategy",
                f"unrecognized value {raw!r}, expected one of {', '.join(m.value for m in cls)}",
            ) from exc


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "AttributionStrategy",
    "OutputFormat",
]
