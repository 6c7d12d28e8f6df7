# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Representation renderers.

Each RepresentationKind has one formatting function. Every function reads
the same immutable CanonicalColor, so the six renderings are independent
of each other and of their order.

Integer outputs round half away from zero (127.5 → 128), unlike Python's
built-in ``round``, which rounds half to even.
"""

from __future__ import annotations

import math
from typing import Callable

from chromaquery.schema import CanonicalColor, Representation, RepresentationKind

COLOR_LITERAL_LABEL = "Swift Color Literal"
SEPARATOR = ", "

_RGB_SCALES = (255.0, 255.0, 255.0, 100.0)
_HSB_SCALES = (360.0, 100.0, 100.0, 100.0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_fraction(value: float) -> str:
    """Shortest text that reads back as the same float (``1.0``, ``0.5``)."""
    return repr(float(value))


def _with_alpha(base: tuple[float, ...], color: CanonicalColor, uses_alpha: bool) -> tuple[float, ...]:
    return base + (color.alpha,) if uses_alpha else base


def _scaled(values: tuple[float, ...], scales: tuple[float, ...]) -> str:
    return SEPARATOR.join(
        str(round_half_away(value * scale)) for value, scale in zip(values, scales)
    )


def _fractions(values: tuple[float, ...]) -> str:
    return SEPARATOR.join(format_fraction(value) for value in values)


# =============================================================================
# Formatters (one per kind)
# =============================================================================


def _color_literal(color: CanonicalColor, uses_alpha: bool) -> Representation:
    # Always fractional and always carries alpha
    text = (
        f"#colorLiteral(red: {format_fraction(color.red)}, "
        f"green: {format_fraction(color.green)}, "
        f"blue: {format_fraction(color.blue)}, "
        f"alpha: {format_fraction(color.alpha)})"
    )
    return Representation(
        kind=RepresentationKind.COLOR_LITERAL,
        label=COLOR_LITERAL_LABEL,
        text=text,
        components=text,
        color=color,
    )


def _hex(color: CanonicalColor, uses_alpha: bool) -> Representation:
    values = _with_alpha(color.rgb, color, uses_alpha)
    components = "".join(f"{round_half_away(v * 255.0):02X}" for v in values)
    text = f"#{components}"
    return Representation(
        kind=RepresentationKind.HEX,
        label=text,
        text=text,
        components=components,
        color=color,
    )


def _wrapped(
    kind: RepresentationKind,
    name: str,
    components: str,
    color: CanonicalColor,
    uses_alpha: bool,
) -> Representation:
    wrapper = f"{name}A" if uses_alpha else name
    text = f"{wrapper}({components})"
    return Representation(
        kind=kind,
        label=text,
        text=text,
        components=components,
        color=color,
    )


def _rgb(color: CanonicalColor, uses_alpha: bool) -> Representation:
    values = _with_alpha(color.rgb, color, uses_alpha)
    return _wrapped(
        RepresentationKind.RGB, "RGB", _scaled(values, _RGB_SCALES), color, uses_alpha,
    )


def _rgb_fraction(color: CanonicalColor, uses_alpha: bool) -> Representation:
    values = _with_alpha(color.rgb, color, uses_alpha)
    return _wrapped(
        RepresentationKind.RGB_FRACTION, "RGB", _fractions(values), color, uses_alpha,
    )


def _hsb(color: CanonicalColor, uses_alpha: bool) -> Representation:
    values = _with_alpha(color.hsb, color, uses_alpha)
    return _wrapped(
        RepresentationKind.HSB, "HSB", _scaled(values, _HSB_SCALES), color, uses_alpha,
    )


def _hsb_fraction(color: CanonicalColor, uses_alpha: bool) -> Representation:
    values = _with_alpha(color.hsb, color, uses_alpha)
    return _wrapped(
        RepresentationKind.HSB_FRACTION, "HSB", _fractions(values), color, uses_alpha,
    )


_FORMATTERS: dict[RepresentationKind, Callable[[CanonicalColor, bool], Representation]] = {
    RepresentationKind.COLOR_LITERAL: _color_literal,
    RepresentationKind.HEX: _hex,
    RepresentationKind.RGB: _rgb,
    RepresentationKind.RGB_FRACTION: _rgb_fraction,
    RepresentationKind.HSB: _hsb,
    RepresentationKind.HSB_FRACTION: _hsb_fraction,
}


# =============================================================================
# Public API
# =============================================================================


def format_representation(
    kind: RepresentationKind,
    color: CanonicalColor,
    *,
    uses_alpha: bool = False,
) -> Representation:
    """
    Render a color as a single representation.

    Args:
        kind: Which representation to produce.
        color: The color to render.
        uses_alpha: Append the alpha channel and use the ``RGBA``/``HSBA``
            wrappers. Ignored by the color literal, which always has alpha.

    Returns:
        The rendered Representation.
    """
    return _FORMATTERS[kind](color, uses_alpha)


def render(color: CanonicalColor, *, uses_alpha: bool = False) -> tuple[Representation, ...]:
    """
    Render a color as every representation, in RepresentationKind order.

    Example:
        >>> [r.text for r in render(CanonicalColor(1.0, 0.0, 0.0))][1:]
        ['#FF0000', 'RGB(255, 0, 0)', 'RGB(1.0, 0.0, 0.0)', 'HSB(0, 100, 100)', 'HSB(0.0, 1.0, 1.0)']
    """
    return tuple(
        format_representation(kind, color, uses_alpha=uses_alpha)
        for kind in RepresentationKind
    )
