# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""
Serializers for representation delivery to a host launcher or terminal.

Serializers only format; they never change representation text.
"""

from chromaquery.runtime.serializers.base import SerializerFormat
from chromaquery.runtime.serializers.script_filter import to_script_filter
from chromaquery.runtime.serializers.table import to_text_table

__all__ = [
    "SerializerFormat",
    "to_script_filter",
    "to_text_table",
]
