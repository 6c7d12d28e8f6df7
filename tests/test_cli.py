# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

"""Tests for the command line entry point."""

import json

import pytest

from chromaquery.cli import CACHE_DIR_ENV, main


@pytest.fixture(autouse=True)
def no_cache_env(monkeypatch):
    monkeypatch.delenv(CACHE_DIR_ENV, raising=False)


def _items(capsys):
    return json.loads(capsys.readouterr().out)["items"]


class TestMain:

    def test_json_output(self, capsys):
        assert main(["#FF0000"]) == 0
        items = _items(capsys)
        assert [item["arg"] for item in items][1:3] == ["#FF0000", "RGB(255, 0, 0)"]
        assert all("icon" not in item for item in items)

    def test_unrecognized_is_empty_not_error(self, capsys):
        assert main(["notacolor"]) == 0
        assert _items(capsys) == []

    def test_table_format(self, capsys):
        main(["hsb 120 100 100", "--format", "table"])
        out = capsys.readouterr().out
        assert "RGB(0, 255, 0)" in out
        assert out.splitlines()[0].startswith("ColorLiteral")

    def test_natural_format(self, capsys):
        main(["grayscale(128)", "--format", "natural"])
        assert "RGB\tRGB(128, 128, 128)" in capsys.readouterr().out.splitlines()

    def test_pretty_format(self, capsys):
        main(["#FF0000", "--format", "json_pretty"])
        out = capsys.readouterr().out
        assert out.startswith("{\n")
        assert len(json.loads(out)["items"]) == 6

    def test_cache_dir_adds_icons(self, capsys, tmp_path):
        main(["#FF0000", "--cache-dir", str(tmp_path)])
        items = _items(capsys)
        expected = str(tmp_path / "FF0000FF.jpg")
        assert all(item["icon"] == {"path": expected} for item in items)
        assert (tmp_path / "FF0000FF.jpg").exists()

    def test_cache_dir_from_environment(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv(CACHE_DIR_ENV, str(tmp_path))
        main(["rgb(0, 0, 255, 50)"])
        items = _items(capsys)
        assert items[0]["icon"]["path"] == str(tmp_path / "0000FF80.jpg")

    def test_no_icons_flag(self, capsys, tmp_path):
        main(["#FF0000", "--cache-dir", str(tmp_path), "--no-icons"])
        assert all("icon" not in item for item in _items(capsys))
        assert list(tmp_path.iterdir()) == []

    def test_missing_query_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
