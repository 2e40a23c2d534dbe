# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration read from the ``[preprocessor.platform-support]`` table of book.toml."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .rendering import DEFAULT_PAGE_PREFIX, DocPageResolver, DocPageSource

PREPROCESSOR_NAME: Final[str] = "platform-support"
DEFAULT_CHAPTER: Final[str] = "platform-support.md"


class PreprocessorConfig(BaseModel):
    """Settings controlling which chapter is rewritten and how pages are linked."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    chapter: str = DEFAULT_CHAPTER
    page_prefix: str = Field(default=DEFAULT_PAGE_PREFIX, alias="page-prefix")
    doc_page: DocPageSource = Field(default=DocPageSource.IDENTIFIER, alias="doc-page")

    @field_validator("chapter", "page_prefix")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("page_prefix")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def links(self) -> DocPageResolver:
        """Return the page resolver described by this configuration."""

        return DocPageResolver(prefix=self.page_prefix, source=self.doc_page)

    @classmethod
    def from_book_config(cls, book_config: Mapping[str, Any]) -> PreprocessorConfig:
        """Extract the preprocessor table from the full book configuration.

        Args:
            book_config: ``config`` object of the preprocessor context.

        Returns:
            PreprocessorConfig: Parsed settings, defaults when the table is absent.

        Raises:
            ConfigError: If the table is not an object or holds invalid values.
        """

        preprocessors = book_config.get("preprocessor") or {}
        if not isinstance(preprocessors, Mapping):
            raise ConfigError("book.toml: expected 'preprocessor' to be a table")
        table = preprocessors.get(PREPROCESSOR_NAME) or {}
        if not isinstance(table, Mapping):
            raise ConfigError(f"book.toml: expected 'preprocessor.{PREPROCESSOR_NAME}' to be a table")
        try:
            return cls.model_validate(dict(table))
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
            )
            raise ConfigError(f"book.toml: invalid [preprocessor.{PREPROCESSOR_NAME}] table: {details}") from exc


__all__ = ["DEFAULT_CHAPTER", "PREPROCESSOR_NAME", "PreprocessorConfig"]
