# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Markdown table rendering for tier buckets.

Three table layouts exist. Host-capable buckets list ``target | notes``; buckets
without host tools add a centered ``std`` column; tier 3 adds both ``std`` and
``host`` columns. The identifier cell links to a per-target page whenever the
book already contains one.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .catalog.model_target import TargetInfo


class TableShape(Enum):
    """Enumerate the column layouts a bucket can be rendered with."""

    HOST = "host"
    NO_HOST = "no-host"
    TIER3 = "tier3"


class DocPageSource(str, Enum):
    """Enumerate how a target's documentation page slug is chosen."""

    IDENTIFIER = "identifier"
    METADATA = "metadata"


_HEADERS: Final[dict[TableShape, str]] = {
    TableShape.HOST: "target | notes\n-------|-------\n",
    TableShape.NO_HOST: "target | std | notes\n-------|:---:|-------\n",
    TableShape.TIER3: "target | std | host | notes\n-------|:---:|:----:|-------\n",
}

DEFAULT_PAGE_PREFIX: Final[str] = "platform-support"
PAGE_EXTENSION: Final[str] = ".md"


@dataclass(frozen=True, slots=True)
class DocPageResolver:
    """Map targets to the documentation pages that may describe them.

    Attributes:
        prefix: Book directory holding the per-target pages.
        source: Whether the slug is the identifier itself or the target's
            declared ``doc_page`` (falling back to the identifier).
    """

    prefix: str = DEFAULT_PAGE_PREFIX
    source: DocPageSource = DocPageSource.IDENTIFIER

    def slug(self, target: TargetInfo) -> str:
        """Return the page slug for ``target``."""

        if self.source is DocPageSource.METADATA and target.doc_page:
            return target.doc_page
        return target.identifier

    def link(self, slug: str) -> str:
        """Return the book-relative link to the page named ``slug``."""

        return f"{self.prefix}/{slug}{PAGE_EXTENSION}"

    def slug_from_path(self, path: str) -> str:
        """Strip every leading page directory and trailing extension from a chapter ``path``."""

        directory = f"{self.prefix}/"
        while path.startswith(directory):
            path = path[len(directory) :]
        while path.endswith(PAGE_EXTENSION):
            path = path[: -len(PAGE_EXTENSION)]
        return path


def target_cell(target: TargetInfo, documented: Collection[str], links: DocPageResolver) -> str:
    """Return the identifier cell, linked when a page for the target exists.

    Args:
        target: Target rendered in the row.
        documented: Page slugs that exist in the book.
        links: Resolver mapping targets to page slugs and links.

    Returns:
        str: Markdown link or inline code for the identifier.
    """

    slug = links.slug(target)
    if slug in documented:
        return f"[`{target.identifier}`]({links.link(slug)})"
    return f"`{target.identifier}`"


def _host_row(target: TargetInfo) -> str:
    return target.description or ""


def _no_host_row(target: TargetInfo) -> str:
    return f"{target.std.symbol} | {target.description or ''}"


def _tier3_row(target: TargetInfo) -> str:
    return f"{target.std.symbol} | {target.host_tools.symbol} | {target.description or ''}"


_ROW_WRITERS: Final[dict[TableShape, Callable[[TargetInfo], str]]] = {
    TableShape.HOST: _host_row,
    TableShape.NO_HOST: _no_host_row,
    TableShape.TIER3: _tier3_row,
}


def render_table(
    targets: Sequence[TargetInfo],
    documented: Collection[str],
    shape: TableShape,
    *,
    links: DocPageResolver | None = None,
) -> str:
    """Render ``targets`` as a pipe-delimited markdown table.

    Args:
        targets: Bucket contents, already sorted.
        documented: Page slugs that exist in the book.
        shape: Column layout to use.
        links: Optional resolver; defaults to identifier slugs under
            ``platform-support/``.

    Returns:
        str: Header, separator and one row per target, each ending in a newline.
    """

    resolver = links or DocPageResolver()
    write_row = _ROW_WRITERS[shape]
    lines = [_HEADERS[shape]]
    for target in targets:
        lines.append(f"{target_cell(target, documented, resolver)} | {write_row(target)}\n")
    return "".join(lines)


def render_bucket(
    targets: Sequence[TargetInfo],
    documented: Collection[str],
    shape: TableShape,
    *,
    empty_message: str | None = None,
    links: DocPageResolver | None = None,
) -> str:
    """Render a bucket, substituting ``empty_message`` when it has no targets.

    Args:
        targets: Bucket contents, already sorted.
        documented: Page slugs that exist in the book.
        shape: Column layout to use.
        empty_message: Text emitted instead of a table for an empty bucket.
            ``None`` renders the header even when the bucket is empty.
        links: Optional resolver for page slugs and links.

    Returns:
        str: Markdown text ending in a newline.
    """

    if not targets and empty_message is not None:
        return f"{empty_message}\n"
    return render_table(targets, documented, shape, links=links)


__all__ = [
    "DEFAULT_PAGE_PREFIX",
    "DocPageResolver",
    "DocPageSource",
    "TableShape",
    "render_bucket",
    "render_table",
    "target_cell",
]
