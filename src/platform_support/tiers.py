# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Partition the target catalog into tier buckets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .catalog.model_target import Support, TargetInfo
from .errors import CatalogIntegrityError


class TierBucket(str, Enum):
    """Enumerate the five disjoint groups a target can belong to."""

    TIER1_HOST = "tier1-host"
    TIER1_NOHOST = "tier1-nohost"
    TIER2_HOST = "tier2-host"
    TIER2_NOHOST = "tier2-nohost"
    TIER3 = "tier3"


@dataclass(frozen=True, slots=True)
class TargetBuckets:
    """Targets grouped by bucket, each group sorted by identifier."""

    groups: Mapping[TierBucket, tuple[TargetInfo, ...]]

    def __getitem__(self, bucket: TierBucket) -> tuple[TargetInfo, ...]:
        return self.groups[bucket]

    def __iter__(self) -> Iterator[TierBucket]:
        return iter(TierBucket)

    def target_count(self) -> int:
        """Return the number of targets across all buckets."""

        return sum(len(group) for group in self.groups.values())


def bucket_for(target: TargetInfo) -> TierBucket:
    """Return the bucket ``target`` belongs to.

    Only an explicit ``Support.SUPPORTED`` host-tools flag counts as host
    capable; unknown and unsupported both select the "no host" bucket.

    Args:
        target: Target to classify.

    Returns:
        TierBucket: Bucket matching the target's tier and host capability.

    Raises:
        CatalogIntegrityError: If the tier is not 1, 2 or 3.
    """

    host_tools = target.host_tools is Support.SUPPORTED
    match target.tier:
        case 1:
            return TierBucket.TIER1_HOST if host_tools else TierBucket.TIER1_NOHOST
        case 2:
            return TierBucket.TIER2_HOST if host_tools else TierBucket.TIER2_NOHOST
        case 3:
            return TierBucket.TIER3
        case tier:
            raise CatalogIntegrityError(f"unknown target tier: {tier} (target '{target.identifier}')")


def classify(targets: Iterable[TargetInfo]) -> TargetBuckets:
    """Partition ``targets`` into the five tier buckets.

    Args:
        targets: Every target from the catalog.

    Returns:
        TargetBuckets: Buckets sorted by identifier ascending.

    Raises:
        CatalogIntegrityError: If any target carries an unknown tier. No
            partial result is returned.
    """

    grouped: dict[TierBucket, list[TargetInfo]] = {bucket: [] for bucket in TierBucket}
    for target in targets:
        grouped[bucket_for(target)].append(target)
    return TargetBuckets(
        groups=MappingProxyType(
            {
                bucket: tuple(sorted(members, key=lambda target: target.identifier))
                for bucket, members in grouped.items()
            },
        ),
    )


__all__ = ["TargetBuckets", "TierBucket", "bucket_for", "classify"]
