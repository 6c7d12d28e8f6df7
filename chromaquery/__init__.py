# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Chromaquery -- Color query interpreter for launcher workflows.

Reads a color typed as hex, RGB, HSB or grayscale and renders it back as
every supported textual representation.

Quick start::

    from chromaquery import convert

    for rep in convert("rgb(255, 0, 0, 50%)"):
        print(rep.subtitle, rep.text)
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromaquery.interpret import convert, interpret
from chromaquery.render import render
from chromaquery.schema import (
    CanonicalColor,
    InputGrammar,
    Interpretation,
    Representation,
    RepresentationKind,
)

__all__ = [
    # Core API
    "convert",
    "interpret",
    "render",
    # Types
    "CanonicalColor",
    "InputGrammar",
    "Interpretation",
    "Representation",
    "RepresentationKind",
    # Version
    "__version__",
]
