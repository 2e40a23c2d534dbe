# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Unit tests for catalog records, providers and the bundled catalog."""

from __future__ import annotations

import pytest
from helpers.builders import make_target

from platform_support.catalog import (
    BundledTargetCatalog,
    CatalogIntegrityError,
    CatalogValidationError,
    StaticTargetCatalog,
    Support,
    TargetCatalog,
    TargetInfo,
    parse_catalog_document,
)
from platform_support.catalog.schema import CatalogSchema


def test_support_from_flag_is_total() -> None:
    assert Support.from_flag(True) is Support.SUPPORTED
    assert Support.from_flag(False) is Support.UNSUPPORTED
    assert Support.from_flag(None) is Support.UNKNOWN


def test_support_symbols() -> None:
    assert Support.SUPPORTED.symbol == "✓"
    assert Support.UNSUPPORTED.symbol == "*"
    assert Support.UNKNOWN.symbol == "?"


def test_target_from_mapping_reads_optional_fields() -> None:
    target = TargetInfo.from_mapping(
        {
            "identifier": "widget-unknown-unknown",
            "tier": 2,
            "hostTools": True,
            "std": None,
            "description": "Widget target",
            "docPage": "widget",
        },
        context="catalog",
    )

    assert target == TargetInfo(
        identifier="widget-unknown-unknown",
        tier=2,
        host_tools=Support.SUPPORTED,
        std=Support.UNKNOWN,
        description="Widget target",
        doc_page="widget",
    )


def test_target_from_mapping_defaults_missing_flags_to_unknown() -> None:
    target = TargetInfo.from_mapping({"identifier": "bare-none", "tier": 3}, context="catalog")

    assert target.host_tools is Support.UNKNOWN
    assert target.std is Support.UNKNOWN
    assert target.description is None


def test_target_from_mapping_rejects_non_boolean_flag() -> None:
    with pytest.raises(CatalogIntegrityError, match=r"catalog\[bad-target\]: expected 'hostTools'"):
        TargetInfo.from_mapping({"identifier": "bad-target", "tier": 1, "hostTools": "yes"}, context="catalog")


def test_target_from_mapping_rejects_boolean_tier() -> None:
    with pytest.raises(CatalogIntegrityError, match="expected 'tier' to be an integer"):
        TargetInfo.from_mapping({"identifier": "bad-target", "tier": True}, context="catalog")


def test_static_catalog_rejects_duplicate_identifiers() -> None:
    with pytest.raises(CatalogIntegrityError, match="duplicate target identifier 'dup-target'"):
        StaticTargetCatalog.of([make_target("dup-target"), make_target("dup-target", 3)])


def test_static_catalog_satisfies_protocol() -> None:
    catalog = StaticTargetCatalog.of([make_target("one-target")])

    assert isinstance(catalog, TargetCatalog)
    assert [target.identifier for target in catalog.targets()] == ["one-target"]


def test_parse_catalog_document_keeps_document_order() -> None:
    targets = parse_catalog_document(
        {
            "schemaVersion": "1.0.0",
            "targets": [
                {"identifier": "b-target", "tier": 1},
                {"identifier": "a-target", "tier": 2},
            ],
        },
        source="inline.json",
    )

    assert [target.identifier for target in targets] == ["b-target", "a-target"]


def test_schema_rejects_unknown_keys() -> None:
    schema = CatalogSchema.load()

    with pytest.raises(CatalogValidationError, match="inline.json: targets/0"):
        schema.validate(
            {"schemaVersion": "1.0.0", "targets": [{"identifier": "x", "tier": 1, "color": "red"}]},
            source="inline.json",
        )


def test_schema_accepts_out_of_range_tier() -> None:
    # Tier values are judged by the classifier, not the schema.
    CatalogSchema.load().validate(
        {"schemaVersion": "1.0.0", "targets": [{"identifier": "x", "tier": 4}]},
        source="inline.json",
    )


def test_bundled_catalog_loads_valid_targets() -> None:
    targets = BundledTargetCatalog().targets()

    identifiers = [target.identifier for target in targets]
    assert "x86_64-unknown-linux-gnu" in identifiers
    assert len(identifiers) == len(set(identifiers))
    assert all(target.tier in {1, 2, 3} for target in targets)
