"""Merge named-operation registries and report key collisions.

The provider catalog is assembled from several registries (generated
resources, handwritten resources, specialised subsets). A name declared
twice would silently shadow an operation, so every collision is recorded.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from .errors import DuplicateOperationError

T = TypeVar("T")


def merge_registries(registries: Iterable[Mapping[str, T]]) -> tuple[dict[str, T], DuplicateOperationError | None]:
    """Merge ``registries`` in order; later entries overwrite earlier ones.

    Each overwrite is recorded, in the order encountered. The merged map is
    usable even when duplicates exist; the caller decides whether the
    returned error is fatal.

    Args:
        registries: Ordered registries mapping operation name to descriptor.

    Returns:
        ``(merged, error)`` where ``error`` is None when no key repeated.

    Examples:
        >>> merged, err = merge_registries([{"a": 1}, {"a": 2, "b": 3}])
        >>> merged
        {'a': 2, 'b': 3}
        >>> err.duplicates
        ('a',)
        >>> merge_registries([{"a": 1}, {"b": 2}])
        ({'a': 1, 'b': 2}, None)
    """
    merged: dict[str, T] = {}
    duplicates: list[str] = []
    for registry in registries:
        for name, descriptor in registry.items():
            if name in merged:
                duplicates.append(name)
            merged[name] = descriptor

    if duplicates:
        return merged, DuplicateOperationError(duplicates)
    return merged, None


def merge_registries_strict(registries: Iterable[Mapping[str, T]]) -> dict[str, T]:
    """Merge ``registries`` and raise on any duplicate name.

    Raises:
        DuplicateOperationError: Listing every duplicate occurrence.
    """
    merged, error = merge_registries(registries)
    if error is not None:
        raise error
    return merged


__all__ = [
    "merge_registries",
    "merge_registries_strict",
]
