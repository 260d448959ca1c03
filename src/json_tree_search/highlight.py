"""Split displayed text into plain and matching spans for highlighting."""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_search.search import SearchTerm

__all__ = ["HighlightSpan", "split_highlights"]


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    text: str
    is_match: bool


def split_highlights(text: str, term: SearchTerm | None) -> list[HighlightSpan]:
    """Split ``text`` into consecutive spans, marking occurrences of ``term``.

    Concatenating the span texts gives back ``text`` unchanged (original case
    is kept). Empty spans are never produced, except a single plain span for
    empty ``text``.
    """
    if term is None:
        return [HighlightSpan(text, False)]

    spans: list[HighlightSpan] = []
    cursor = 0
    for start in term.find_match_indices_in(text):
        if start > cursor:
            spans.append(HighlightSpan(text[cursor:start], False))
        end = start + len(term)
        spans.append(HighlightSpan(text[start:end], True))
        cursor = end
    if cursor < len(text) or not spans:
        spans.append(HighlightSpan(text[cursor:], False))
    return spans
