# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Script Filter serializer for launcher workflows.

Formats representations as the JSON item list a launcher (Alfred) reads
from a Script Filter's stdout. Each representation becomes one selectable
row: title is the human label, subtitle the representation kind, and arg
the text copied or pasted when the row is actioned.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterable, Optional

from chromaquery.runtime.serializers.base import SerializerFormat
from chromaquery.schema import CanonicalColor, Representation

IconProvider = Callable[[CanonicalColor], Optional[Path]]


def to_script_filter(
    representations: Iterable[Representation],
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    icon_for: Optional[IconProvider] = None,
) -> str:
    """Serialize representations as Script Filter output.

    Args:
        representations: Output of ``convert`` or ``render``. May be empty,
            which serializes as an empty item list.
        format: JSON, JSON_PRETTY, or NATURAL (one tab-separated
            ``subtitle<TAB>text`` line per item).
        icon_for: Optional callable returning a swatch image path for a
            color. Items get no icon when it is absent or returns None.

    Returns:
        The serialized payload.

    Example (JSON_PRETTY)::

        {
          "items": [
            {
              "title": "#FF0000",
              "subtitle": "Hex",
              "arg": "#FF0000",
              "text": {"copy": "#FF0000", "largetype": "#FF0000"},
              "icon": {"path": "/cache/FF0000FF.jpg"}
            }
          ]
        }
    """
    items = [_build_item(rep, icon_for) for rep in representations]

    if format == SerializerFormat.NATURAL:
        return "\n".join(f"{item['subtitle']}\t{item['arg']}" for item in items)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps({"items": items}, indent=2)
    return json.dumps({"items": items}, separators=(",", ":"))


def _build_item(rep: Representation, icon_for: Optional[IconProvider]) -> dict:
    """Build one result item."""
    item: dict = {
        "title": rep.label,
        "subtitle": rep.subtitle,
        "arg": rep.text,
        "text": {"copy": rep.text, "largetype": rep.text},
    }
    if icon_for is not None:
        path = icon_for(rep.color)
        if path is not None:
            item["icon"] = {"path": str(path)}
    return item
