"""Parse duration strings such as ``"10s"``, ``"1m30s"`` or ``"250ms"``.

Accepted grammar: an optional sign followed by one or more ``<number><unit>``
pairs, where number is a decimal (``1``, ``1.5``, ``.5``) and unit is one of
``ns``, ``us``, ``µs``, ``ms``, ``s``, ``m``, ``h``. The bare string ``"0"``
is also accepted.
"""

from __future__ import annotations

import re
from datetime import timedelta

from .errors import MalformedSettingError

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(raw: str, *, field: str = "duration") -> timedelta:
    """Return the timedelta described by ``raw``.

    Args:
        raw: Duration text.
        field: Setting name used in the error message.

    Raises:
        MalformedSettingError: When ``raw`` is empty or does not match the grammar.

    Examples:
        >>> parse_duration("10s")
        datetime.timedelta(seconds=10)
        >>> parse_duration("1m30s")
        datetime.timedelta(seconds=90)
        >>> parse_duration("1.5h")
        datetime.timedelta(seconds=5400)
        >>> parse_duration("250ms")
        datetime.timedelta(microseconds=250000)
        >>> parse_duration("0")
        datetime.timedelta(0)
        >>> parse_duration("garbage")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        MalformedSettingError: duration: invalid duration 'garbage'
    """
    text = raw.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise MalformedSettingError(field, f"invalid duration {raw!r}")

    seconds = 0.0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise MalformedSettingError(field, f"invalid duration {raw!r}")
        number, unit = match.groups()
        seconds += float(number) * _UNIT_SECONDS[unit]
        pos = match.end()

    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError as exc:
        raise MalformedSettingError(field, f"invalid duration {raw!r}") from exc


__all__ = ["parse_duration"]
