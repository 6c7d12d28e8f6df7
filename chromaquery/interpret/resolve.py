# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Channel resolution into a CanonicalColor.

Missing channels default to 0 and missing alpha to 1. Values are clamped
into [0, 1] and hue wraps at a full turn, so resolution never fails.

The sRGB and Display P3 grammars are read as pass-through: their channels
become the working RGB values unchanged.
"""

from __future__ import annotations

from chromaquery.schema import CanonicalColor, ChannelModel, InputGrammar


def _channel(channels: tuple[float, ...], index: int, default: float) -> float:
    """Channel at ``index`` clamped to [0, 1], or ``default`` if absent."""
    if index >= len(channels):
        return default
    return min(max(channels[index], 0.0), 1.0)


def resolve_color(grammar: InputGrammar, channels: tuple[float, ...]) -> CanonicalColor:
    """
    Build the canonical color for parsed channels.

    Args:
        grammar: The grammar the channels were parsed with.
        channels: Output of ``parse_components``.

    Returns:
        The resolved color. Empty input resolves to opaque black.
    """
    model = grammar.model
    alpha = _channel(channels, grammar.alpha_index, 1.0)

    if model is ChannelModel.HSB:
        hue = max(channels[0], 0.0) % 1.0 if channels else 0.0
        return CanonicalColor.from_hsb(
            hue,
            _channel(channels, 1, 0.0),
            _channel(channels, 2, 0.0),
            alpha,
        )

    if model is ChannelModel.GRAY:
        gray = _channel(channels, 0, 0.0)
        return CanonicalColor(red=gray, green=gray, blue=gray, alpha=alpha)

    return CanonicalColor(
        red=_channel(channels, 0, 0.0),
        green=_channel(channels, 1, 0.0),
        blue=_channel(channels, 2, 0.0),
        alpha=alpha,
    )
