# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Replace marker lines in chapter content with generated tables."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable

from .markers import match_marker
from .rendering import DocPageResolver, render_bucket
from .tiers import TargetBuckets

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def documented_pages(paths: Iterable[str | None], links: DocPageResolver) -> frozenset[str]:
    """Return the page slugs for the sub-chapter ``paths`` that are set.

    Args:
        paths: ``path`` values of the chapter's sub-items; draft chapters have none.
        links: Resolver knowing the page directory and extension to strip.

    Returns:
        frozenset[str]: Slugs of the per-target pages present in the book.
    """

    return frozenset(links.slug_from_path(path) for path in paths if path is not None)


def rewrite_chapter(
    content: str,
    buckets: TargetBuckets,
    documented: Collection[str],
    *,
    links: DocPageResolver | None = None,
) -> str:
    """Expand every marker line in ``content``.

    Lines that are not exactly a marker once stripped are copied verbatim,
    line endings included, so content without markers comes back unchanged.
    Only ``\\n`` ends a line; form feeds and Unicode separators stay inside it.

    Args:
        content: Markdown source of the chapter.
        buckets: Classified catalog.
        documented: Page slugs that exist in the book.
        links: Optional resolver for page slugs and links.

    Returns:
        str: Rewritten chapter content.
    """

    resolver = links or DocPageResolver()
    output: list[str] = []
    for line in _LINE_RE.findall(content):
        spec = match_marker(line)
        if spec is None:
            output.append(line)
            continue
        output.append(
            render_bucket(
                buckets[spec.bucket],
                documented,
                spec.shape,
                empty_message=spec.empty_message,
                links=resolver,
            ),
        )
    return "".join(output)


__all__ = ["documented_pages", "rewrite_chapter"]
