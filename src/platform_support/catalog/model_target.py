# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Target metadata records materialised from the catalog."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .types import JSONValue
from .utils import expect_string, optional_flag, optional_integer, optional_string


class Support(str, Enum):
    """Enumerate the tri-state support levels recorded for a target."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, flag: bool | None) -> Support:
        """Return the support level matching an optional boolean flag.

        Args:
            flag: ``True``/``False`` when the catalog states support, ``None`` otherwise.

        Returns:
            Support: Enumeration member describing ``flag``.
        """

        if flag is None:
            return cls.UNKNOWN
        return cls.SUPPORTED if flag else cls.UNSUPPORTED

    @property
    def symbol(self) -> str:
        """Return the table glyph used for this support level."""

        return _SUPPORT_SYMBOLS[self]


_SUPPORT_SYMBOLS: Final[dict[Support, str]] = {
    Support.SUPPORTED: "✓",
    Support.UNSUPPORTED: "*",
    Support.UNKNOWN: "?",
}


@dataclass(frozen=True, slots=True)
class TargetInfo:
    """Immutable description of one compilation target.

    Attributes:
        identifier: Target triple, unique across the catalog.
        tier: Support tier; valid values are 1, 2 and 3. Anything else is
            rejected when the catalog is classified.
        host_tools: Whether the toolchain itself runs on the target.
        std: Whether the standard library is available on the target.
        description: Optional free-text notes rendered in the tables.
        doc_page: Optional explicit documentation page slug.
    """

    identifier: str
    tier: int | None
    host_tools: Support = Support.UNKNOWN
    std: Support = Support.UNKNOWN
    description: str | None = None
    doc_page: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> TargetInfo:
        """Create a ``TargetInfo`` from a catalog JSON entry.

        Args:
            data: Mapping describing a single target.
            context: Human-readable context used in error messages.

        Returns:
            TargetInfo: Frozen target record.

        Raises:
            CatalogIntegrityError: If any field has an unexpected type.
        """

        identifier = expect_string(data.get("identifier"), key="identifier", context=context)
        entry_context = f"{context}[{identifier}]"
        return TargetInfo(
            identifier=identifier,
            tier=optional_integer(data.get("tier"), key="tier", context=entry_context),
            host_tools=Support.from_flag(
                optional_flag(data.get("hostTools"), key="hostTools", context=entry_context),
            ),
            std=Support.from_flag(optional_flag(data.get("std"), key="std", context=entry_context)),
            description=optional_string(data.get("description"), key="description", context=entry_context),
            doc_page=optional_string(data.get("docPage"), key="docPage", context=entry_context),
        )


__all__ = ["Support", "TargetInfo"]
