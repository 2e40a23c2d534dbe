# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive one preprocessor pass over the book.

The pass decodes the payload, classifies the catalog, rewrites the designated
chapter and encodes the book. Every step completes before anything is written,
so a failure never leaves a partial book on stdout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol

from .book import Book, Chapter, PreprocessorContext, dump_book, parse_input
from .catalog.provider import BundledTargetCatalog, TargetCatalog
from .config import PreprocessorConfig
from .rewriter import documented_pages, rewrite_chapter
from .tiers import classify

SUPPORTED_MDBOOK_SERIES: Final[tuple[int, int]] = (0, 4)


class PassLogger(Protocol):
    """Subset of the CLI logger used during a pass."""

    def warn(self, message: str) -> None:
        """Log a warning."""

    def debug(self, message: str) -> None:
        """Log a debug message."""


@dataclass(frozen=True, slots=True)
class PassResult:
    """Outcome of a preprocessor pass."""

    book: Book
    chapter: Chapter | None

    @property
    def rewritten(self) -> bool:
        """Return ``True`` when the designated chapter was found and rewritten."""

        return self.chapter is not None


def find_chapter(book: Book, source_path: str) -> Chapter | None:
    """Return the first chapter, depth-first, whose ``source_path`` matches."""

    for chapter in book.iter_chapters():
        if chapter.source_path == source_path:
            return chapter
    return None


def transform_book(
    context: PreprocessorContext,
    book: Book,
    *,
    catalog: TargetCatalog,
    logger: PassLogger | None = None,
) -> PassResult:
    """Rewrite the platform-support chapter of ``book`` in place.

    Args:
        context: Preprocessor context carrying the book configuration.
        book: Decoded book tree.
        catalog: Provider of target metadata.
        logger: Optional logger receiving debug output.

    Returns:
        PassResult: The book and the chapter that was rewritten, if any.

    Raises:
        ConfigError: If the preprocessor table of book.toml is invalid.
        CatalogIntegrityError: If the catalog holds a target with an unknown tier.
    """

    config = PreprocessorConfig.from_book_config(context.config)
    buckets = classify(catalog.targets())
    chapter = find_chapter(book, config.chapter)
    if chapter is None:
        if logger is not None:
            logger.debug(f"chapter={config.chapter} status=missing")
        return PassResult(book=book, chapter=None)

    links = config.links
    documented = documented_pages((item.path for item in chapter.sub_chapters()), links)
    chapter.content = rewrite_chapter(chapter.content, buckets, documented, links=links)
    if logger is not None:
        logger.debug(
            f"chapter={config.chapter} targets={buckets.target_count()} documented={len(documented)}",
        )
    return PassResult(book=book, chapter=chapter)


def check_mdbook_version(context: PreprocessorContext, logger: PassLogger) -> None:
    """Warn when mdBook's version differs from the supported release series."""

    parts = context.mdbook_version.split(".")
    try:
        series = (int(parts[0]), int(parts[1]))
    except (IndexError, ValueError):
        logger.debug(f"mdbook_version={context.mdbook_version or '<unset>'} status=unparsed")
        return
    if series != SUPPORTED_MDBOOK_SERIES:
        expected = ".".join(str(part) for part in SUPPORTED_MDBOOK_SERIES)
        logger.warn(
            f"platform-support preprocessor targets mdBook {expected}.x "
            f"but is being called from mdBook {context.mdbook_version}",
        )


def run_pass(
    raw: str | bytes,
    *,
    catalog: TargetCatalog | None = None,
    logger: PassLogger | None = None,
) -> str:
    """Run a complete pass from raw stdin contents to the encoded book.

    Args:
        raw: Complete preprocessor input.
        catalog: Target provider; defaults to the bundled catalog.
        logger: Optional logger for version warnings and debug output.

    Returns:
        str: JSON-encoded book.

    Raises:
        PlatformSupportError: On any decoding, configuration, catalog or
            encoding failure.
    """

    context, book = parse_input(raw)
    if logger is not None:
        check_mdbook_version(context, logger)
    result = transform_book(
        context,
        book,
        catalog=catalog if catalog is not None else BundledTargetCatalog(),
        logger=logger,
    )
    return dump_book(result.book)


__all__ = [
    "PassResult",
    "SUPPORTED_MDBOOK_SERIES",
    "check_mdbook_version",
    "find_chapter",
    "run_pass",
    "transform_book",
]
