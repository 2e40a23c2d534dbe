# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for a complete preprocessor pass."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import pytest
from helpers.builders import chapter, make_target, payload

from platform_support.book import parse_input
from platform_support.catalog import CatalogIntegrityError, StaticTargetCatalog
from platform_support.errors import ConfigError
from platform_support.markers import EMPTY_TIER_1_NOHOST_MSG, TIER_1_NOHOST_MARKER, TIER_2_HOST_MARKER
from platform_support.preprocessor import check_mdbook_version, run_pass, transform_book

CONTENT = f"# Platform Support\n\n{TIER_2_HOST_MARKER}\n\n{TIER_1_NOHOST_MARKER}\n"


@dataclass
class RecordingLogger:
    warnings: list[str] = field(default_factory=list)
    debug_messages: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def debug(self, message: str) -> None:
        self.debug_messages.append(message)


def _widget_catalog() -> StaticTargetCatalog:
    return StaticTargetCatalog.of(
        [make_target("widget-unknown-unknown", 2, host_tools=True, std=True, description="Widget target")],
    )


def _platform_chapter(*sub_paths: str | None) -> dict[str, object]:
    return chapter(
        "Platform Support",
        CONTENT,
        path="platform-support.md",
        source_path="platform-support.md",
        sub_items=[chapter(f"page {index}", "", path=path) for index, path in enumerate(sub_paths)],
    )


def _content_of(encoded: str, index: int) -> str:
    return json.loads(encoded)["sections"][index]["Chapter"]["content"]


def test_pass_rewrites_designated_chapter() -> None:
    raw = payload([chapter("Intro", "intro\n", source_path="intro.md"), _platform_chapter()])

    encoded = run_pass(raw, catalog=_widget_catalog())

    assert _content_of(encoded, 0) == "intro\n"
    assert _content_of(encoded, 1) == (
        "# Platform Support\n"
        "\n"
        "target | notes\n"
        "-------|-------\n"
        "`widget-unknown-unknown` | Widget target\n"
        "\n"
        f"{EMPTY_TIER_1_NOHOST_MSG}\n"
    )


def test_pass_links_targets_with_sub_pages() -> None:
    raw = payload([_platform_chapter("platform-support/widget-unknown-unknown.md", None)])

    encoded = run_pass(raw, catalog=_widget_catalog())

    assert (
        "[`widget-unknown-unknown`](platform-support/widget-unknown-unknown.md) | Widget target\n"
        in _content_of(encoded, 0)
    )


def test_pass_without_designated_chapter_leaves_book_untouched() -> None:
    raw = payload([chapter("Other", CONTENT, source_path="other.md")])

    encoded = run_pass(raw, catalog=_widget_catalog())

    assert json.loads(encoded) == json.loads(raw)[1]


def test_pass_finds_nested_chapter() -> None:
    nested = chapter(
        "Platform Support",
        CONTENT,
        source_path="platform-support.md",
        sub_items=[chapter("widget", "", path="platform-support/widget-unknown-unknown.md")],
    )
    raw = payload([chapter("Reference", "", source_path="reference.md", sub_items=[nested])])

    context, book = parse_input(raw)
    result = transform_book(context, book, catalog=_widget_catalog())

    assert result.rewritten
    assert result.chapter is not None
    assert "platform-support/widget-unknown-unknown.md" in result.chapter.content


def test_pass_honours_configured_chapter_and_prefix() -> None:
    config = {"preprocessor": {"platform-support": {"chapter": "targets.md", "page-prefix": "targets"}}}
    raw = payload(
        [
            chapter(
                "Targets",
                f"{TIER_2_HOST_MARKER}\n",
                source_path="targets.md",
                sub_items=[chapter("widget", "", path="targets/widget-unknown-unknown.md")],
            ),
        ],
        config=config,
    )

    encoded = run_pass(raw, catalog=_widget_catalog())

    assert "[`widget-unknown-unknown`](targets/widget-unknown-unknown.md)" in _content_of(encoded, 0)


def test_unknown_tier_aborts_pass() -> None:
    catalog = StaticTargetCatalog.of([make_target("strange-target", 4, host_tools=True)])

    with pytest.raises(CatalogIntegrityError, match="unknown target tier: 4"):
        run_pass(payload([_platform_chapter()]), catalog=catalog)


def test_invalid_config_aborts_pass() -> None:
    raw = payload([_platform_chapter()], config={"preprocessor": {"platform-support": {"doc-page": 3}}})

    with pytest.raises(ConfigError):
        run_pass(raw, catalog=_widget_catalog())


def test_version_mismatch_warns() -> None:
    logger = RecordingLogger()
    context, _ = parse_input(payload([], mdbook_version="0.5.1"))

    check_mdbook_version(context, logger)

    assert logger.warnings == [
        "platform-support preprocessor targets mdBook 0.4.x but is being called from mdBook 0.5.1",
    ]


def test_matching_version_is_silent() -> None:
    logger = RecordingLogger()
    context, _ = parse_input(payload([]))

    check_mdbook_version(context, logger)

    assert logger.warnings == []


def test_debug_reports_missing_chapter() -> None:
    logger = RecordingLogger()

    run_pass(payload([chapter("Other", "", source_path="other.md")]), catalog=_widget_catalog(), logger=logger)

    assert logger.debug_messages == ["chapter=platform-support.md status=missing"]
