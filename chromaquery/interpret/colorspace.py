# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
RGB ↔ HSB conversions.

HSB (also called HSV) is the cylindrical form of RGB:
- H (Hue): fraction of a full turn [0, 1), 0=red, 1/3=green, 2/3=blue
- S (Saturation): 0 = gray, 1 = fully saturated
- B (Brightness): the largest RGB channel

HSL and HSV queries are read as HSB; no separate lightness model exists.

All conversions are pure NumPy and operate on arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def rgb_to_hsb(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB [0,1] to HSB.

    Achromatic colors (all channels equal) get hue 0 and saturation 0.
    Black additionally gets saturation 0 regardless of hue.

    Args:
        rgb: Array of shape (..., 3) with RGB values [0, 1]

    Returns:
        Array of shape (..., 3) with (hue, saturation, brightness)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    maxc = rgb.max(axis=-1)
    minc = rgb.min(axis=-1)
    delta = maxc - minc

    saturation = np.divide(
        delta, maxc, out=np.zeros_like(maxc), where=maxc > 0.0
    )

    # Avoid 0/0 for grays; their hue is masked to 0 below
    safe_delta = np.where(delta > 0.0, delta, 1.0)
    sector = np.where(
        maxc == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            maxc == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    hue = (sector / 6.0) % 1.0
    # A tiny negative sector wraps to exactly 1.0
    hue = np.where((delta > 0.0) & (hue < 1.0), hue, 0.0)

    return np.stack([hue, saturation, maxc], axis=-1)


def hsb_to_rgb(hsb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSB to RGB [0,1].

    Hue is taken modulo 1, so a hue of 1.0 (360 degrees) is red.

    Args:
        hsb: Array of shape (..., 3) with (hue, saturation, brightness)

    Returns:
        Array of shape (..., 3) with RGB values, clipped to [0, 1]
    """
    hsb = np.asarray(hsb, dtype=np.float64)
    h = hsb[..., 0] % 1.0
    s = hsb[..., 1]
    v = hsb[..., 2]

    h6 = h * 6.0
    sector = np.floor(h6)
    f = h6 - sector
    sector = sector.astype(np.int64) % 6

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    return np.clip(np.stack([r, g, b], axis=-1), 0.0, 1.0)


# =============================================================================
# Convenience: single colors as plain floats
# =============================================================================


def rgb_tuple_to_hsb(rgb: tuple[float, float, float]) -> tuple[float, float, float]:
    """Convert one RGB triple to an HSB triple of Python floats."""
    h, s, b = rgb_to_hsb(np.array(rgb, dtype=np.float64))
    return float(h), float(s), float(b)


def hsb_tuple_to_rgb(hsb: tuple[float, float, float]) -> tuple[float, float, float]:
    """Convert one HSB triple to an RGB triple of Python floats."""
    r, g, b = hsb_to_rgb(np.array(hsb, dtype=np.float64))
    return float(r), float(g), float(b)
