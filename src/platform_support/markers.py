# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Marker lines recognised inside the platform-support chapter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .rendering import TableShape
from .tiers import TierBucket

TIER_1_HOST_MARKER: Final[str] = "{{TIER_1_HOST_TABLE}}"
TIER_1_NOHOST_MARKER: Final[str] = "{{TIER_1_NOHOST_TABLE}}"
TIER_2_HOST_MARKER: Final[str] = "{{TIER_2_HOST_TABLE}}"
TIER_2_NOHOST_MARKER: Final[str] = "{{TIER_2_NOHOST_TABLE}}"
TIER_3_MARKER: Final[str] = "{{TIER_3_TABLE}}"

EMPTY_TIER_1_NOHOST_MSG: Final[str] = (
    "At this time, all Tier 1 targets are [Tier 1 with Host Tools](#tier-1-with-host-tools)."
)
EMPTY_TIER_2_NOHOST_MSG: Final[str] = (
    "At this time, all Tier 2 targets are [Tier 2 with Host Tools](#tier-2-with-host-tools)."
)


@dataclass(frozen=True, slots=True)
class MarkerSpec:
    """Describe what a marker line expands to.

    Attributes:
        bucket: Tier bucket whose targets fill the table.
        shape: Column layout of the generated table.
        empty_message: Sentence emitted instead of a table when the bucket is
            empty, or ``None`` to always emit the table.
    """

    bucket: TierBucket
    shape: TableShape
    empty_message: str | None = None


MARKERS: Final[Mapping[str, MarkerSpec]] = MappingProxyType(
    {
        TIER_1_HOST_MARKER: MarkerSpec(TierBucket.TIER1_HOST, TableShape.HOST),
        TIER_1_NOHOST_MARKER: MarkerSpec(
            TierBucket.TIER1_NOHOST,
            TableShape.NO_HOST,
            EMPTY_TIER_1_NOHOST_MSG,
        ),
        TIER_2_HOST_MARKER: MarkerSpec(TierBucket.TIER2_HOST, TableShape.HOST),
        TIER_2_NOHOST_MARKER: MarkerSpec(
            TierBucket.TIER2_NOHOST,
            TableShape.NO_HOST,
            EMPTY_TIER_2_NOHOST_MSG,
        ),
        TIER_3_MARKER: MarkerSpec(TierBucket.TIER3, TableShape.TIER3),
    },
)


def match_marker(line: str) -> MarkerSpec | None:
    """Return the marker spec for ``line`` when it is exactly a marker.

    Surrounding whitespace is ignored; any other text on the line disqualifies it.
    """

    return MARKERS.get(line.strip())


__all__ = [
    "EMPTY_TIER_1_NOHOST_MSG",
    "EMPTY_TIER_2_NOHOST_MSG",
    "MARKERS",
    "MarkerSpec",
    "TIER_1_HOST_MARKER",
    "TIER_1_NOHOST_MARKER",
    "TIER_2_HOST_MARKER",
    "TIER_2_NOHOST_MARKER",
    "TIER_3_MARKER",
    "match_marker",
]
