# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models for the mdBook preprocessor JSON protocol.

mdBook writes ``[context, book]`` to the preprocessor's stdin and expects the
book back on stdout. Only the fields this preprocessor reads are modelled;
every other key is kept as an extra so it survives the round trip, and keys
missing from the input are not invented on output.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import BookFormatError


class Chapter(BaseModel):
    """A single chapter and its nested sub-items."""

    model_config = ConfigDict(extra="allow")

    name: str
    content: str
    number: list[int] | None = None
    sub_items: list[BookItem] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    def sub_chapters(self) -> Iterator[Chapter]:
        """Yield the direct sub-chapters, skipping separators and part titles."""

        yield from _chapters_of(self.sub_items)


class ChapterItem(BaseModel):
    """Book item wrapping a chapter (``{"Chapter": {...}}``)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    chapter: Chapter = Field(alias="Chapter")


class PartTitleItem(BaseModel):
    """Book item holding a part title (``{"PartTitle": "..."}``)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    part_title: str = Field(alias="PartTitle")


BookItem: TypeAlias = ChapterItem | PartTitleItem | Literal["Separator"]

Chapter.model_rebuild()
ChapterItem.model_rebuild()


class Book(BaseModel):
    """The book tree handed to preprocessors."""

    model_config = ConfigDict(extra="allow")

    sections: list[BookItem] = Field(default_factory=list)

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first, parents before their sub-chapters."""

        yield from _walk(self.sections)


class PreprocessorContext(BaseModel):
    """Context object mdBook sends alongside the book."""

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""


_PAYLOAD_ADAPTER: TypeAdapter[tuple[PreprocessorContext, Book]] = TypeAdapter(
    tuple[PreprocessorContext, Book],
)


def _chapters_of(items: Iterable[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, ChapterItem):
            yield item.chapter


def _walk(items: Iterable[BookItem]) -> Iterator[Chapter]:
    for chapter in _chapters_of(items):
        yield chapter
        yield from _walk(chapter.sub_items)


def parse_input(raw: str | bytes) -> tuple[PreprocessorContext, Book]:
    """Decode the ``[context, book]`` payload mdBook writes to stdin.

    Args:
        raw: Complete stdin contents.

    Returns:
        tuple[PreprocessorContext, Book]: Decoded context and book.

    Raises:
        BookFormatError: If the payload is not valid JSON or does not match
            the preprocessor protocol.
    """

    try:
        return _PAYLOAD_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise BookFormatError(f"unable to parse preprocessor input: {_first_error(exc)}") from exc


def dump_book(book: Book) -> str:
    """Encode ``book`` as the JSON mdBook expects on stdout.

    Raises:
        BookFormatError: If the book cannot be serialised.
    """

    try:
        return book.model_dump_json(by_alias=True, exclude_unset=True)
    except ValueError as exc:
        raise BookFormatError(f"unable to encode book: {exc}") from exc


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', 'invalid value')}"


__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "ChapterItem",
    "PartTitleItem",
    "PreprocessorContext",
    "dump_book",
    "parse_input",
]
