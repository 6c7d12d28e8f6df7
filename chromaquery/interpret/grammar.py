# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Prefix-based grammar selection."""

from __future__ import annotations

import logging
from typing import Optional

from chromaquery.schema import InputGrammar

logger = logging.getLogger(__name__)


def select_grammar(text: str) -> Optional[tuple[InputGrammar, str]]:
    """
    Pick the grammar for a sanitized query.

    Grammars are tried in declaration order and the first whose prefix
    the text starts with wins. Its prefix is stripped from the text.

    Args:
        text: Output of ``sanitize``.

    Returns:
        ``(grammar, remainder)``, or None when no prefix matches.
    """
    for grammar in InputGrammar:
        if text.startswith(grammar.prefix):
            remainder = text[len(grammar.prefix):]
            logger.debug("Matched %s grammar, remainder %r", grammar.name, remainder)
            return grammar, remainder
    logger.debug("No grammar prefix matched %r", text)
    return None
