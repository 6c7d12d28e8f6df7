# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Query normalization ahead of grammar dispatch."""

from __future__ import annotations

# Applied in order after lower-casing and trimming
_REPLACEMENTS = (
    ("(", ""),
    (")", ""),
    ("%", ""),
    ("-", ","),
)


def sanitize(query: str) -> str:
    """
    Normalize raw query text.

    Lower-cases, trims surrounding whitespace, strips parentheses and
    percent signs, and turns dashes into commas so ``rgb 10-20-30`` splits
    like ``rgb 10,20,30``. Never fails; may return an empty string.

    Example:
        >>> sanitize("  RGBA(255, 0, 0, 50%) ")
        'rgba255, 0, 0, 50'
    """
    text = query.lower().strip()
    for old, new in _REPLACEMENTS:
        text = text.replace(old, new)
    return text
