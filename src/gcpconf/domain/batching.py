"""Expand the nested ``batching`` record into a normalized batching policy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .durations import parse_duration
from .settings import BatchingSettings


@dataclass(frozen=True, slots=True)
class BatchingPolicy:
    """Request batching policy consumed by the transport.

    Example:
        >>> BatchingPolicy.disabled()
        BatchingPolicy(enabled=False, send_after=datetime.timedelta(0))
    """

    enabled: bool
    send_after: timedelta

    @classmethod
    def disabled(cls) -> BatchingPolicy:
        """Return the zero policy used when no batching record is given."""
        return cls(enabled=False, send_after=timedelta(0))


def expand_batching(record: BatchingSettings | None) -> BatchingPolicy:
    """Turn an optional ``batching`` record into a :class:`BatchingPolicy`.

    Args:
        record: The nested record, or None when the block is absent.

    Returns:
        The normalized policy. Unset record fields keep the zero value.

    Raises:
        MalformedSettingError: When ``send_after`` is not a valid duration.

    Examples:
        >>> expand_batching(None).enabled
        False
        >>> policy = expand_batching(BatchingSettings(send_after="10s", enable_batching=True))
        >>> policy.send_after.total_seconds(), policy.enabled
        (10.0, True)
    """
    if record is None:
        return BatchingPolicy.disabled()

    send_after = timedelta(0)
    if record.send_after is not None:
        send_after = parse_duration(record.send_after, field="batching.send_after")

    enabled = record.enable_batching if record.enable_batching is not None else False
    return BatchingPolicy(enabled=enabled, send_after=send_after)


__all__ = [
    "BatchingPolicy",
    "expand_batching",
]
