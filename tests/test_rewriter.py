# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for marker substitution in chapter content."""

from __future__ import annotations

from textwrap import dedent

import pytest
from helpers.builders import make_target

from platform_support.catalog import StaticTargetCatalog
from platform_support.markers import (
    EMPTY_TIER_1_NOHOST_MSG,
    EMPTY_TIER_2_NOHOST_MSG,
    MARKERS,
    TIER_1_NOHOST_MARKER,
    TIER_2_HOST_MARKER,
    TIER_2_NOHOST_MARKER,
    TIER_3_MARKER,
    match_marker,
)
from platform_support.rendering import DocPageResolver
from platform_support.rewriter import documented_pages, rewrite_chapter
from platform_support.tiers import TierBucket, classify


def test_every_bucket_has_exactly_one_marker() -> None:
    assert sorted(spec.bucket for spec in MARKERS.values()) == sorted(TierBucket)


def test_match_marker_requires_whole_trimmed_line() -> None:
    assert match_marker(f"   {TIER_3_MARKER}\t\n") is MARKERS[TIER_3_MARKER]
    assert match_marker(f"See {TIER_3_MARKER} below") is None
    assert match_marker("{{TIER_4_TABLE}}") is None


def test_content_without_markers_is_unchanged(sample_catalog: StaticTargetCatalog) -> None:
    content = "# Platform Support\r\n\nSome prose.\n  indented | table\nno trailing newline"

    assert rewrite_chapter(content, classify(sample_catalog.targets()), set()) == content


def test_marker_line_is_replaced_with_table(sample_catalog: StaticTargetCatalog) -> None:
    content = f"## Tier 2 with Host Tools\n\n  {TIER_2_HOST_MARKER}  \n\nAfter.\n"

    result = rewrite_chapter(content, classify(sample_catalog.targets()), set())

    assert result == (
        "## Tier 2 with Host Tools\n"
        "\n"
        "target | notes\n"
        "-------|-------\n"
        "`riscv64gc-unknown-linux-gnu` | RISC-V Linux\n"
        "\n"
        "After.\n"
    )


def test_embedded_marker_is_left_alone(sample_catalog: StaticTargetCatalog) -> None:
    content = f"The {TIER_3_MARKER} marker expands to a table.\n"

    assert rewrite_chapter(content, classify(sample_catalog.targets()), set()) == content


@pytest.mark.parametrize("separator", ["\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_only_newline_separates_lines(sample_catalog: StaticTargetCatalog, separator: str) -> None:
    content = f"See{separator}{TIER_3_MARKER}\n"

    assert rewrite_chapter(content, classify(sample_catalog.targets()), set()) == content


def test_empty_tier1_nohost_bucket_yields_redirect_only(sample_catalog: StaticTargetCatalog) -> None:
    result = rewrite_chapter(f"{TIER_1_NOHOST_MARKER}\n", classify(sample_catalog.targets()), set())

    assert result == f"{EMPTY_TIER_1_NOHOST_MSG}\n"


def test_empty_tier2_nohost_bucket_yields_redirect_only() -> None:
    buckets = classify([make_target("only-host", 2, host_tools=True)])

    assert rewrite_chapter(TIER_2_NOHOST_MARKER, buckets, set()) == f"{EMPTY_TIER_2_NOHOST_MSG}\n"


def test_repeated_markers_expand_independently(sample_catalog: StaticTargetCatalog) -> None:
    buckets = classify(sample_catalog.targets())
    single = rewrite_chapter(f"{TIER_3_MARKER}\n", buckets, set())

    doubled = rewrite_chapter(f"{TIER_3_MARKER}\n{TIER_3_MARKER}\n", buckets, set())

    assert doubled == single * 2


def test_documented_pages_strip_prefix_and_extension() -> None:
    links = DocPageResolver()

    pages = documented_pages(
        ["platform-support/widget-unknown-unknown.md", None, "platform-support/apple-darwin.md"],
        links,
    )

    assert pages == frozenset({"widget-unknown-unknown", "apple-darwin"})


def test_rewrite_links_documented_targets(sample_catalog: StaticTargetCatalog) -> None:
    content = dedent(
        f"""\
        ## Tier 3

        {TIER_3_MARKER}
        """,
    )

    result = rewrite_chapter(content, classify(sample_catalog.targets()), {"avr-none"})

    assert result == (
        "## Tier 3\n"
        "\n"
        "target | std | host | notes\n"
        "-------|:---:|:----:|-------\n"
        "`aarch64-unknown-openbsd` | ✓ | ✓ | \n"
        "[`avr-none`](platform-support/avr-none.md) | * | * | AVR\n"
    )
