# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Main query API.

raw text → sanitize → select grammar → parse channels → resolve color
→ render representations
"""

from __future__ import annotations

import logging
from typing import Optional

from chromaquery.interpret.components import parse_components
from chromaquery.interpret.grammar import select_grammar
from chromaquery.interpret.resolve import resolve_color
from chromaquery.interpret.sanitize import sanitize
from chromaquery.render import render
from chromaquery.schema import Interpretation, Representation

logger = logging.getLogger(__name__)

# A fourth parsed channel marks an explicit alpha
_ALPHA_POSITION = 3


def interpret(query: str) -> Optional[Interpretation]:
    """
    Interpret a color query without rendering it.

    Args:
        query: Raw text as typed, e.g. ``"rgb(255, 0, 0, 50%)"``.

    Returns:
        The parsed state, or None if no grammar prefix matched.

    Example:
        >>> result = interpret("#FF0000")
        >>> result.grammar
        <InputGrammar.HEX: '#'>
        >>> result.color.rgb
        (1.0, 0.0, 0.0)
    """
    selected = select_grammar(sanitize(query))
    if selected is None:
        return None
    grammar, remainder = selected

    channels = parse_components(grammar, remainder)
    color = resolve_color(grammar, channels)
    uses_alpha = len(channels) > _ALPHA_POSITION
    logger.debug(
        "Resolved %r as %s: channels=%s alpha=%s",
        query, grammar.name, channels, uses_alpha,
    )
    return Interpretation(
        grammar=grammar,
        channels=channels,
        color=color,
        uses_alpha=uses_alpha,
    )


def convert(query: str) -> tuple[Representation, ...]:
    """
    Convert a color query into all of its representations.

    Unrecognized queries give an empty tuple, not an error. Within a
    recognized grammar, malformed channels fall back to defaults.

    Args:
        query: Raw text as typed.

    Returns:
        Six representations in fixed order (source literal, hex, integer
        RGB, fractional RGB, integer HSB, fractional HSB), or ``()``.

    Example:
        >>> [r.text for r in convert("#FF0000")][1:3]
        ['#FF0000', 'RGB(255, 0, 0)']
    """
    interpretation = interpret(query)
    if interpretation is None:
        return ()
    return render(interpretation.color, uses_alpha=interpretation.uses_alpha)
