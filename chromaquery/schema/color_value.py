# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Canonical types for color query interpretation.

Design principles:
- Immutable: All types are frozen dataclasses or enums
- Permissive upstream, strict here: parsers clamp and default, so the
  schema only ever sees valid values
- One color, many texts: every representation is derived from a single
  CanonicalColor

Channel conventions:
- red, green, blue, alpha: 0.0-1.0
- hue: 0.0-1.0 (fraction of a full turn, 0.5 = 180 degrees)
- saturation, brightness: 0.0-1.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Input Grammars
# =============================================================================


class ChannelModel(Enum):
    """How a grammar's parsed channels map onto a color."""
    RGB = "rgb"
    HSB = "hsb"
    GRAY = "gray"


class InputGrammar(Enum):
    """
    Recognized input syntaxes, keyed by their prefix token.

    Declaration order is match order: the first grammar whose prefix the
    sanitized query starts with wins.
    """
    HEX = "#"
    DEVICE_RGB = "rgb"
    STANDARD_RGB = "srgb"
    WIDE_GAMUT_RGB = "p3"
    HSL = "hsl"
    HSV = "hsv"
    HSB = "hsb"
    GRAYSCALE = "grayscale"

    @property
    def prefix(self) -> str:
        return self.value

    @property
    def model(self) -> ChannelModel:
        if self in (InputGrammar.HSL, InputGrammar.HSV, InputGrammar.HSB):
            return ChannelModel.HSB
        if self is InputGrammar.GRAYSCALE:
            return ChannelModel.GRAY
        return ChannelModel.RGB

    @property
    def multipliers(self) -> tuple[float, ...]:
        """
        Scale applied to integer tokens, indexed by token position.

        The hex grammar has no table: every pair is a byte over 255.
        """
        return _MULTIPLIERS[self]

    @property
    def color_space(self) -> str:
        """Named space the RGB channels are expressed in."""
        return _COLOR_SPACES.get(self, "device")

    @property
    def alpha_index(self) -> int:
        """Position of the alpha channel in the parsed sequence."""
        return 1 if self is InputGrammar.GRAYSCALE else 3


_MULTIPLIERS = {
    InputGrammar.HEX: (),
    InputGrammar.DEVICE_RGB: (255.0, 255.0, 255.0, 100.0),
    InputGrammar.STANDARD_RGB: (255.0, 255.0, 255.0, 100.0),
    InputGrammar.WIDE_GAMUT_RGB: (255.0, 255.0, 255.0, 100.0),
    InputGrammar.HSL: (360.0, 100.0, 100.0, 100.0),
    InputGrammar.HSV: (360.0, 100.0, 100.0, 100.0),
    InputGrammar.HSB: (360.0, 100.0, 100.0, 100.0),
    InputGrammar.GRAYSCALE: (255.0, 100.0),
}

_COLOR_SPACES = {
    InputGrammar.STANDARD_RGB: "srgb",
    InputGrammar.WIDE_GAMUT_RGB: "display-p3",
}


# =============================================================================
# Canonical Color
# =============================================================================


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be 0-1, got {value}")


@dataclass(frozen=True, slots=True)
class CanonicalColor:
    """
    The single resolved color every representation is rendered from.

    RGB is always stored. When the color was resolved from an HSB-family
    grammar, the HSB triple it came from is kept as well and is returned
    by ``hsb`` unchanged, so a gray typed as ``hsb(120, 0, 50)`` keeps its
    hue of 120 degrees. Equality ignores the stored HSB triple.

    Attributes:
        red, green, blue: Color channels (0.0-1.0)
        alpha: Opacity (0.0 = transparent, 1.0 = opaque)
        source_hsb: Authoritative (hue, saturation, brightness), if any
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0
    source_hsb: Optional[tuple[float, float, float]] = field(
        default=None, compare=False, repr=False,
    )

    def __post_init__(self) -> None:
        """Validate channel values are within range."""
        _check_unit("red", self.red)
        _check_unit("green", self.green)
        _check_unit("blue", self.blue)
        _check_unit("alpha", self.alpha)
        if self.source_hsb is not None:
            hue, saturation, brightness = self.source_hsb
            if not 0.0 <= hue < 1.0:
                raise ValueError(f"hue must be in [0, 1), got {hue}")
            _check_unit("saturation", saturation)
            _check_unit("brightness", brightness)

    @classmethod
    def from_hsb(
        cls,
        hue: float,
        saturation: float,
        brightness: float,
        alpha: float = 1.0,
    ) -> CanonicalColor:
        """
        Build a color from hue/saturation/brightness.

        Hue wraps at a full turn, so 1.0 (360 degrees) becomes 0.0.
        """
        from chromaquery.interpret.colorspace import hsb_tuple_to_rgb

        hue = hue % 1.0
        if hue >= 1.0:
            hue = 0.0
        r, g, b = hsb_tuple_to_rgb((hue, saturation, brightness))
        return cls(
            red=r,
            green=g,
            blue=b,
            alpha=alpha,
            source_hsb=(hue, saturation, brightness),
        )

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def hsb(self) -> tuple[float, float, float]:
        """(hue, saturation, brightness), derived from RGB unless stored."""
        if self.source_hsb is not None:
            return self.source_hsb
        from chromaquery.interpret.colorspace import rgb_tuple_to_hsb
        return rgb_tuple_to_hsb(self.rgb)

    @property
    def hue(self) -> float:
        return self.hsb[0]

    @property
    def saturation(self) -> float:
        return self.hsb[1]

    @property
    def brightness(self) -> float:
        return self.hsb[2]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        hue, saturation, brightness = self.hsb
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
            "hue": hue,
            "saturation": saturation,
            "brightness": brightness,
        }


# =============================================================================
# Interpretation (parsed query state)
# =============================================================================


@dataclass(frozen=True, slots=True)
class Interpretation:
    """
    Everything learned from one query before rendering.

    Attributes:
        grammar: The grammar whose prefix matched
        channels: Normalized channel values, in parse order
        color: The resolved color
        uses_alpha: Whether the query supplied an explicit alpha channel
    """
    grammar: InputGrammar
    channels: tuple[float, ...]
    color: CanonicalColor
    uses_alpha: bool


# =============================================================================
# Representations
# =============================================================================


class RepresentationKind(Enum):
    """
    The six fixed renderings of a color, in output order.

    ``subtitle`` is the kind name shown next to each result; the integer
    and fractional variants of RGB and HSB share one.
    """
    COLOR_LITERAL = "color_literal"
    HEX = "hex"
    RGB = "rgb"
    RGB_FRACTION = "rgb_fraction"
    HSB = "hsb"
    HSB_FRACTION = "hsb_fraction"

    @property
    def subtitle(self) -> str:
        return _SUBTITLES[self]

    @property
    def uses_fraction(self) -> bool:
        return self in (
            RepresentationKind.COLOR_LITERAL,
            RepresentationKind.RGB_FRACTION,
            RepresentationKind.HSB_FRACTION,
        )


_SUBTITLES = {
    RepresentationKind.COLOR_LITERAL: "ColorLiteral",
    RepresentationKind.HEX: "Hex",
    RepresentationKind.RGB: "RGB",
    RepresentationKind.RGB_FRACTION: "RGB",
    RepresentationKind.HSB: "HSB",
    RepresentationKind.HSB_FRACTION: "HSB",
}


@dataclass(frozen=True, slots=True)
class Representation:
    """
    One textual rendering of a color.

    Attributes:
        kind: Which renderer produced it
        label: Human-readable description (e.g. "RGBA(255, 0, 0, 50)")
        text: The representation itself, as it should be copied or pasted
        components: Bare channel text without prefix or wrapper
            (e.g. "255, 0, 0, 50", "FF0000")
        color: The color this was rendered from
    """
    kind: RepresentationKind
    label: str
    text: str
    components: str
    color: CanonicalColor

    @property
    def subtitle(self) -> str:
        return self.kind.subtitle

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "label": self.label,
            "text": self.text,
            "components": self.components,
        }
