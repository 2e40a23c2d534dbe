# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema validation for the target catalog document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..errors import CatalogValidationError
from .io import CATALOG_SCHEMA, data_resource, load_document
from .types import JSONValue


@dataclass(slots=True)
class CatalogSchema:
    """Validator bound to the packaged catalog JSON schema."""

    validator: Draft202012Validator

    @classmethod
    def load(cls) -> CatalogSchema:
        """Load the packaged schema and build a Draft 2020-12 validator."""

        schema = load_document(data_resource(CATALOG_SCHEMA))
        return cls(validator=Draft202012Validator(schema))

    def validate(self, document: Mapping[str, JSONValue], *, source: str) -> None:
        """Validate ``document`` against the catalog schema.

        Args:
            document: Parsed catalog document.
            source: Name of the document used in error messages.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        try:
            self.validator.validate(document)
        except ValidationError as exc:
            location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
            raise CatalogValidationError(f"{source}: {location}: {exc.message}") from exc


__all__ = ["CatalogSchema"]
