# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Plain text table serializer for terminals."""

from __future__ import annotations

from typing import Iterable

from chromaquery.schema import Representation


def to_text_table(representations: Iterable[Representation]) -> str:
    """Serialize representations as a two-column table.

    The left column is the representation kind, padded to a common width;
    the right column is the representation text.

    Example::

        ColorLiteral  #colorLiteral(red: 1.0, green: 0.0, blue: 0.0, alpha: 1.0)
        Hex           #FF0000
        RGB           RGB(255, 0, 0)
        ...

    Returns:
        The table, or "No results" when there are no representations.
    """
    reps = list(representations)
    if not reps:
        return "No results"
    width = max(len(rep.subtitle) for rep in reps)
    return "\n".join(f"{rep.subtitle:<{width}}  {rep.text}" for rep in reps)
