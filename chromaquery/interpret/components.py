# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Channel parsing.

Turns the text after a grammar prefix into normalized channel values.
Parsing is permissive: nothing here raises on user input.

Two families:
- Hex: byte pairs, each divided by 255
- Numeric: whitespace/comma separated tokens. A token with a decimal
  point is already normalized; any other token is scaled by the
  grammar's multiplier for its position
"""

from __future__ import annotations

import math
import re

from chromaquery.schema import InputGrammar

_HEX_BYTE_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_components(grammar: InputGrammar, text: str) -> tuple[float, ...]:
    """
    Parse the remainder of a query into channel values.

    Args:
        grammar: The grammar selected for the query.
        text: Query text with the grammar prefix removed.

    Returns:
        Tuple of channel values, in input order. May be empty and may
        hold more channels than the grammar uses.
    """
    if grammar is InputGrammar.HEX:
        return parse_hex_components(text)
    return parse_numeric_components(text, grammar.multipliers)


# =============================================================================
# Hex family
# =============================================================================


def _hex_byte(pair: str) -> int:
    """Parse a two-character run as base 16, or 0 if it isn't one."""
    if not _HEX_BYTE_RE.fullmatch(pair):
        return 0
    return int(pair, 16)


def parse_hex_components(text: str) -> tuple[float, ...]:
    """
    Parse hex digits as consecutive byte pairs.

    Spaces are ignored. A trailing single digit is right-padded with
    ``0`` (``"f"`` reads as ``"f0"``). Pairs that are not valid hex read
    as 0.

    Example:
        >>> parse_hex_components("ff 80 0")
        (1.0, 0.5019607843137255, 0.0)
    """
    digits = text.replace(" ", "")
    pairs = [digits[i:i + 2].ljust(2, "0") for i in range(0, len(digits), 2)]
    return tuple(_hex_byte(pair) / 255.0 for pair in pairs)


# =============================================================================
# Numeric family
# =============================================================================


def _parse_number(token: str) -> float | None:
    if not _NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    # Exponents can overflow to inf
    if not math.isfinite(value):
        return None
    return value


def parse_numeric_components(
    text: str,
    multipliers: tuple[float, ...],
) -> tuple[float, ...]:
    """
    Parse separated numeric tokens into normalized channels.

    Commas and whitespace both separate tokens. Tokens that don't parse as
    numbers are dropped. A dropped token still occupies its position, so
    the tokens after it keep the multiplier of their own position while
    moving one channel forward: ``"x 128 255"`` under an RGB table gives
    ``(128/255, 255/255)``, read back as red and green.

    Integer tokens beyond the end of the multiplier table have no scale
    and are dropped; decimal tokens are kept wherever they appear.

    Args:
        text: Query text with the grammar prefix removed.
        multipliers: Per-position scale for integer tokens.

    Returns:
        Tuple of channel values.
    """
    channels = []
    for position, token in enumerate(text.replace(",", " ").split()):
        value = _parse_number(token)
        if value is None:
            continue
        if "." in token:
            channels.append(value)
        elif position < len(multipliers):
            channels.append(value / multipliers[position])
    return tuple(channels)
