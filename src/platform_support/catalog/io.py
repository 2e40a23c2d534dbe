# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reading the catalog documents shipped as package data."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib.resources import files
from importlib.resources.abc import Traversable
from typing import Final, cast

from ..errors import CatalogIntegrityError
from .types import JSONValue

DATA_PACKAGE: Final[str] = "platform_support.catalog"
CATALOG_DOCUMENT: Final[str] = "targets.json"
CATALOG_SCHEMA: Final[str] = "targets.schema.json"


def data_resource(name: str) -> Traversable:
    """Return the packaged resource ``name`` under the catalog data directory."""

    return files(DATA_PACKAGE).joinpath("data", name)


def load_document(resource: Traversable) -> Mapping[str, JSONValue]:
    """Load a JSON object from ``resource``.

    Args:
        resource: Traversable pointing at a JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the resource does not exist.
        CatalogIntegrityError: If the document cannot be parsed or is not a JSON object.
    """
    if not resource.is_file():
        raise FileNotFoundError(str(resource))
    with resource.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{resource.name}: failed to parse catalog JSON") from exc
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{resource.name}: expected a JSON object at the document root")
    return payload


__all__ = ["CATALOG_DOCUMENT", "CATALOG_SCHEMA", "data_resource", "load_document"]
