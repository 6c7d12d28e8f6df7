# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Interpretation core for Chromaquery.

This module turns typed color queries into a CanonicalColor.
All operations are pure text and numeric computation.
"""

from chromaquery.interpret.components import parse_components
from chromaquery.interpret.grammar import select_grammar
from chromaquery.interpret.pipeline import convert, interpret
from chromaquery.interpret.resolve import resolve_color
from chromaquery.interpret.sanitize import sanitize

__all__ = [
    "convert",
    "interpret",
    "sanitize",
    "select_grammar",
    "parse_components",
    "resolve_color",
]
