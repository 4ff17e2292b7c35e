"""Assemble the operation catalog handed to the host from ordered registries."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..domain.errors import DuplicateOperationError
from ..domain.operations import merge_registries

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CatalogResult(Generic[T]):
    """Merged catalog plus the duplicate diagnostic, if any."""

    operations: Mapping[str, T]
    duplicates: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.duplicates


def assemble_catalog(
    sources: Sequence[tuple[str, Mapping[str, T]]],
    *,
    strict: bool = False,
) -> CatalogResult[T]:
    """Merge named registries in order into one catalog.

    Args:
        sources: ``(source_name, registry)`` pairs, lowest precedence first.
        strict: Raise instead of reporting duplicates.

    Returns:
        The merged catalog with any duplicate names.

    Raises:
        DuplicateOperationError: When ``strict`` and a name repeats.

    Example:
        >>> result = assemble_catalog([("generated", {"a": 1}), ("handwritten", {"a": 2, "b": 3})])
        >>> dict(result.operations), result.duplicates
        ({'a': 2, 'b': 3}, ('a',))
    """
    merged, error = merge_registries(registry for _, registry in sources)
    extra = {"sources": [name for name, _ in sources], "operations": len(merged)}
    if error is None:
        logger.debug("Operation catalog assembled", extra=extra)
        return CatalogResult(operations=merged)

    if strict:
        logger.error("Duplicate operations in catalog", extra={**extra, "duplicates": list(error.duplicates)})
        raise error
    logger.warning("Duplicate operations in catalog", extra={**extra, "duplicates": list(error.duplicates)})
    return CatalogResult(operations=merged, duplicates=error.duplicates)


__all__ = [
    "CatalogResult",
    "DuplicateOperationError",
    "assemble_catalog",
]
