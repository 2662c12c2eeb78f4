"""Context snippets around a span of note content."""

from __future__ import annotations

import re

from ..config.constants import DEFAULT_SNIPPET_WORDS, SNIPPET_ELLIPSIS

_WORD_RE = re.compile(r"\S+")


def extract_snippet(
    content: str,
    start_index: int,
    end_index: int,
    words_around: int = DEFAULT_SNIPPET_WORDS,
) -> str:
    """Return the words overlapping ``[start_index, end_index)`` with context.

    Up to ``words_around`` whitespace-delimited words are kept on each side.
    An ellipsis marks each side where the window stops short of the content.
    Out-of-range indices are clamped; a span that touches no word anchors
    between its neighbours.
    """
    words = [(m.start(), m.end()) for m in _WORD_RE.finditer(content)]
    words_around = max(words_around, 0)
    start_index = min(max(start_index, 0), len(content))
    end_index = min(max(end_index, start_index), len(content))

    hits = [i for i, (start, end) in enumerate(words) if start < end_index and end > start_index]
    if hits:
        first, last = hits[0], hits[-1]
    else:
        first = next((i for i, (start, _) in enumerate(words) if start >= end_index), len(words))
        last = first - 1

    low = max(0, first - words_around)
    high = min(len(words), last + 1 + words_around)

    snippet = " ".join(content[start:end] for start, end in words[low:high])
    if not snippet:
        return ""
    if low > 0:
        snippet = SNIPPET_ELLIPSIS + snippet
    if high < len(words):
        snippet += SNIPPET_ELLIPSIS
    return snippet
