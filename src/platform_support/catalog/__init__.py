# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Target catalog models and providers."""

from __future__ import annotations

from ..errors import CatalogIntegrityError, CatalogValidationError
from .model_target import Support, TargetInfo
from .provider import BundledTargetCatalog, StaticTargetCatalog, TargetCatalog, parse_catalog_document

__all__ = [
    "BundledTargetCatalog",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "StaticTargetCatalog",
    "Support",
    "TargetCatalog",
    "TargetInfo",
    "parse_catalog_document",
]
