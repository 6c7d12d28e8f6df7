# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Swatch icon cache.

Renders a solid square image of a color for use as a result icon and
keeps it on disk, named by the color's RGBA bytes so each color is drawn
once. The cache directory is always passed in by the caller.

JPEG has no alpha channel, so translucent colors are composited over
white before encoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from chromaquery.render import round_half_away
from chromaquery.schema import CanonicalColor

logger = logging.getLogger(__name__)

SWATCH_SUFFIX = ".jpg"


def swatch_name(color: CanonicalColor) -> str:
    """Cache key for a color: ``RRGGBBAA`` in uppercase hex."""
    return "".join(f"{round_half_away(v * 255.0):02X}" for v in color.rgba)


def swatch_pixels(color: CanonicalColor, size: int = 64) -> NDArray[np.uint8]:
    """
    Build the pixel array for a swatch.

    Args:
        color: Color to fill with.
        size: Edge length in pixels.

    Returns:
        Array of shape (size, size, 3), uint8 sRGB, alpha flattened
        over white.
    """
    rgb = np.array(color.rgb, dtype=np.float64)
    flattened = rgb * color.alpha + (1.0 - color.alpha)
    values = np.floor(flattened * 255.0 + 0.5).astype(np.uint8)
    return np.full((size, size, 3), values, dtype=np.uint8)


@dataclass(frozen=True)
class SwatchCache:
    """
    On-disk cache of swatch images.

    Attributes:
        cache_dir: Directory holding swatch files. Created on first write.
        size: Edge length of generated swatches in pixels.
        quality: JPEG quality (1-95).
    """
    cache_dir: Path
    size: int = 64
    quality: int = 95

    def __post_init__(self) -> None:
        """Validate swatch parameters."""
        if self.size < 1:
            raise ValueError(f"Swatch size must be >= 1, got {self.size}")
        if not 1 <= self.quality <= 95:
            raise ValueError(f"JPEG quality must be 1-95, got {self.quality}")

    @classmethod
    def at(cls, cache_dir: Union[str, Path], **kwargs) -> SwatchCache:
        """Create a cache rooted at ``cache_dir`` (str or Path)."""
        return cls(cache_dir=Path(cache_dir), **kwargs)

    def path_for(self, color: CanonicalColor) -> Path:
        """Where the swatch for ``color`` lives, whether or not it exists yet."""
        return self.cache_dir / f"{swatch_name(color)}{SWATCH_SUFFIX}"

    def icon_path(self, color: CanonicalColor) -> Optional[Path]:
        """
        Path to the swatch for ``color``, rendering it if needed.

        Write failures are logged and reported as None so a broken cache
        never prevents results from being shown.
        """
        path = self.path_for(color)
        if path.exists():
            return path

        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            image = Image.fromarray(swatch_pixels(color, self.size))
            image.save(path, format="JPEG", quality=self.quality)
        except OSError as e:
            logger.warning("Could not write swatch %s: %s", path, e)
            return None

        logger.debug("Rendered swatch %s", path)
        return path
