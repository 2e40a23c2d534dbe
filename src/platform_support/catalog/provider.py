# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read-only providers exposing the target catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Protocol, runtime_checkable

from ..errors import CatalogIntegrityError
from .io import CATALOG_DOCUMENT, data_resource, load_document
from .model_target import TargetInfo
from .schema import CatalogSchema
from .types import JSONValue
from .utils import expect_mapping, expect_sequence


@runtime_checkable
class TargetCatalog(Protocol):
    """Protocol describing a source of target metadata."""

    def targets(self) -> Sequence[TargetInfo]:
        """Return every known target.

        Returns:
            Sequence[TargetInfo]: Catalog entries in no particular order.
        """


@dataclass(frozen=True, slots=True)
class StaticTargetCatalog:
    """Catalog backed by an in-memory tuple of targets."""

    entries: tuple[TargetInfo, ...] = field(default=())

    @classmethod
    def of(cls, targets: Iterable[TargetInfo]) -> StaticTargetCatalog:
        """Build a catalog from ``targets``, rejecting duplicate identifiers.

        Raises:
            CatalogIntegrityError: If two targets share an identifier.
        """

        entries = tuple(targets)
        _ensure_unique(entries, context="catalog")
        return cls(entries=entries)

    def targets(self) -> Sequence[TargetInfo]:
        """Return the stored targets."""

        return self.entries


@dataclass(frozen=True, slots=True)
class BundledTargetCatalog:
    """Catalog shipped inside the package as ``catalog/data/targets.json``."""

    def targets(self) -> Sequence[TargetInfo]:
        """Return the validated targets from the packaged catalog document."""

        return _load_bundled_targets()


def parse_catalog_document(document: Mapping[str, JSONValue], *, source: str) -> tuple[TargetInfo, ...]:
    """Materialise target records from a schema-valid catalog document.

    Args:
        document: Parsed catalog document.
        source: Name of the document used in error messages.

    Returns:
        tuple[TargetInfo, ...]: Targets in document order.

    Raises:
        CatalogIntegrityError: If an entry is malformed or identifiers repeat.
    """

    entries = expect_sequence(document.get("targets"), key="targets", context=source)
    targets = tuple(
        TargetInfo.from_mapping(
            expect_mapping(entry, key=f"targets[{index}]", context=source),
            context=f"{source}.targets",
        )
        for index, entry in enumerate(entries)
    )
    _ensure_unique(targets, context=source)
    return targets


@lru_cache(maxsize=1)
def _load_bundled_targets() -> tuple[TargetInfo, ...]:
    resource = data_resource(CATALOG_DOCUMENT)
    document = load_document(resource)
    CatalogSchema.load().validate(document, source=resource.name)
    return parse_catalog_document(document, source=resource.name)


def _ensure_unique(targets: Sequence[TargetInfo], *, context: str) -> None:
    seen: set[str] = set()
    for target in targets:
        if target.identifier in seen:
            raise CatalogIntegrityError(f"{context}: duplicate target identifier '{target.identifier}'")
        seen.add(target.identifier)


__all__ = [
    "BundledTargetCatalog",
    "StaticTargetCatalog",
    "TargetCatalog",
    "parse_catalog_document",
]
