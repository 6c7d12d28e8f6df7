# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Schema definitions for color queries.

All types in this module are immutable (frozen dataclasses or enums).
A resolved color is constructed once per query and never altered.
"""

from chromaquery.schema.color_value import (
    CanonicalColor,
    ChannelModel,
    InputGrammar,
    Interpretation,
    Representation,
    RepresentationKind,
)

__all__ = [
    # Input side
    "InputGrammar",
    "ChannelModel",
    # Core types
    "CanonicalColor",
    "Interpretation",
    # Output side
    "Representation",
    "RepresentationKind",
]
