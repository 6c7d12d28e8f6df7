# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (script filter, text table)."""

import json
from pathlib import Path

import pytest

from chromaquery import convert
from chromaquery.runtime import SerializerFormat, to_script_filter, to_text_table


@pytest.fixture
def red_reps():
    return convert("#FF0000")


@pytest.fixture
def translucent_reps():
    return convert("rgb(255, 0, 0, 50)")


# ---------------------------------------------------------------------------
# to_script_filter
# ---------------------------------------------------------------------------

class TestScriptFilterJSON:

    def test_six_items(self, red_reps):
        data = json.loads(to_script_filter(red_reps))
        assert len(data["items"]) == 6

    def test_item_fields(self, red_reps):
        items = json.loads(to_script_filter(red_reps))["items"]
        assert items[1] == {
            "title": "#FF0000",
            "subtitle": "Hex",
            "arg": "#FF0000",
            "text": {"copy": "#FF0000", "largetype": "#FF0000"},
        }

    def test_color_literal_item(self, red_reps):
        item = json.loads(to_script_filter(red_reps))["items"][0]
        assert item["title"] == "Swift Color Literal"
        assert item["subtitle"] == "ColorLiteral"
        assert item["arg"] == "#colorLiteral(red: 1.0, green: 0.0, blue: 0.0, alpha: 1.0)"

    def test_titles_with_alpha(self, translucent_reps):
        items = json.loads(to_script_filter(translucent_reps))["items"]
        assert [item["title"] for item in items][1:3] == ["#FF000080", "RGBA(255, 0, 0, 50)"]
        assert [item["subtitle"] for item in items] == [
            "ColorLiteral", "Hex", "RGB", "RGB", "HSB", "HSB",
        ]

    def test_empty(self):
        assert to_script_filter(()) == '{"items":[]}'

    def test_compact_by_default(self, red_reps):
        assert "\n" not in to_script_filter(red_reps)

    def test_pretty(self, red_reps):
        output = to_script_filter(red_reps, format=SerializerFormat.JSON_PRETTY)
        assert "\n" in output
        assert json.loads(output) == json.loads(to_script_filter(red_reps))


class TestScriptFilterIcons:

    def test_no_icon_by_default(self, red_reps):
        items = json.loads(to_script_filter(red_reps))["items"]
        assert all("icon" not in item for item in items)

    def test_icon_path(self, red_reps):
        seen = []

        def icon_for(color):
            seen.append(color)
            return Path("/cache/FF0000FF.jpg")

        items = json.loads(to_script_filter(red_reps, icon_for=icon_for))["items"]
        assert all(item["icon"] == {"path": "/cache/FF0000FF.jpg"} for item in items)
        assert all(color.rgb == (1.0, 0.0, 0.0) for color in seen)

    def test_missing_icon_omitted(self, red_reps):
        items = json.loads(to_script_filter(red_reps, icon_for=lambda color: None))["items"]
        assert all("icon" not in item for item in items)


class TestScriptFilterNatural:

    def test_lines(self, red_reps):
        lines = to_script_filter(red_reps, format=SerializerFormat.NATURAL).splitlines()
        assert len(lines) == 6
        assert lines[1] == "Hex\t#FF0000"
        assert lines[2] == "RGB\tRGB(255, 0, 0)"

    def test_empty(self):
        assert to_script_filter((), format=SerializerFormat.NATURAL) == ""


# ---------------------------------------------------------------------------
# to_text_table
# ---------------------------------------------------------------------------

class TestTextTable:

    def test_rows(self, red_reps):
        lines = to_text_table(red_reps).splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("ColorLiteral  #colorLiteral(")
        assert lines[1].split() == ["Hex", "#FF0000"]

    def test_aligned(self, red_reps):
        lines = to_text_table(red_reps).splitlines()
        starts = {line.index(rep.text) for line, rep in zip(lines, red_reps)}
        assert starts == {len("ColorLiteral") + 2}

    def test_empty(self):
        assert to_text_table([]) == "No results"
