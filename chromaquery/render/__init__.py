# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Rendering of a CanonicalColor into its textual representations.

Rendering is pure: no I/O, no shared state.
"""

from chromaquery.render.representations import (
    COLOR_LITERAL_LABEL,
    format_representation,
    render,
    round_half_away,
)

__all__ = [
    "render",
    "format_representation",
    "round_half_away",
    "COLOR_LITERAL_LABEL",
]
