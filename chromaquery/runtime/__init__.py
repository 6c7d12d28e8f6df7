# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Chromaquery.

Everything that sits outside the pure conversion core:

1. Script Filter output -- JSON item list for launcher workflows
2. Text table -- aligned output for terminals
3. Swatch cache -- on-disk color icons for result rows

The delivery layer never modifies representation content.
"""

from chromaquery.runtime.serializers import (
    SerializerFormat,
    to_script_filter,
    to_text_table,
)
from chromaquery.runtime.swatch import SwatchCache, swatch_name

__all__ = [
    "to_script_filter",
    "to_text_table",
    "SerializerFormat",
    "SwatchCache",
    "swatch_name",
]
