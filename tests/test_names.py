# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""Tests for the named-color table and its lazy reverse map."""

import logging
import re
import threading

import pytest

from hexbridge.names import NAMED_COLORS, hex_to_name, name_to_hex, reverse_name_table
from hexbridge.names import table
from hexbridge.schema import HexColor, MissingInputError, UnrecognizedNotationError


class TestForwardTable:
    """The keyword -> hex table is fixed and read-only."""

    def test_size(self):
        assert len(NAMED_COLORS) == 148

    def test_entries_are_canonical(self):
        for name, hex_value in NAMED_COLORS.items():
            assert name == name.lower()
            assert re.fullmatch(r"#[0-9a-f]{6}", hex_value), name

    def test_read_only(self):
        with pytest.raises(TypeError):
            NAMED_COLORS["newcolor"] = "#123456"

    @pytest.mark.parametrize("name, expected", [
        ("red", "#ff0000"),
        ("REBECCAPURPLE", "#663399"),
        ("  CornflowerBlue ", "#6495ed"),
        ("grey", "#808080"),
    ])
    def test_lookup(self, name, expected):
        assert name_to_hex(name) == expected

    def test_unknown_name(self):
        with pytest.raises(UnrecognizedNotationError):
            name_to_hex("not-a-color")

    @pytest.mark.parametrize("name", ["", "  ", None])
    def test_missing_name(self, name):
        with pytest.raises(MissingInputError):
            name_to_hex(name)


class TestReverseTable:
    """The hex -> keyword table is built lazily and deterministically."""

    def test_shared_values_resolve_to_last_keyword(self):
        reverse = reverse_name_table()
        assert reverse["#808080"] == "grey"
        assert reverse["#00ffff"] == "cyan"
        assert reverse["#ff00ff"] == "magenta"

    def test_deterministic_across_builds(self):
        first = table._build_reverse_table()
        second = table._build_reverse_table()
        assert dict(first) == dict(second)
        assert first["#808080"] == second["#808080"]

    def test_every_hex_has_a_name(self):
        reverse = reverse_name_table()
        assert set(reverse) == set(NAMED_COLORS.values())
        for hex_value, name in reverse.items():
            assert NAMED_COLORS[name] == hex_value

    def test_cached(self):
        assert reverse_name_table() is reverse_name_table()

    def test_read_only(self):
        with pytest.raises(TypeError):
            reverse_name_table()["#123456"] = "nope"

    def test_built_once_under_contention(self, monkeypatch):
        monkeypatch.setattr(table, "_reverse_table", None)
        calls = []
        original = table._build_reverse_table

        def counting_build():
            calls.append(1)
            return original()

        monkeypatch.setattr(table, "_build_reverse_table", counting_build)

        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(reverse_name_table())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_build_is_logged(self, monkeypatch, caplog):
        monkeypatch.setattr(table, "_reverse_table", None)
        with caplog.at_level(logging.DEBUG, logger="hexbridge.names.table"):
            reverse_name_table()
        assert "Built reverse color-name table" in caplog.text


class TestHexToName:
    """Reverse lookups fall back to canonical hex."""

    def test_named(self):
        assert hex_to_name("#ff0000") == "red"

    def test_shorthand_expanded(self):
        assert hex_to_name("#F00") == "red"

    def test_accepts_hex_color(self):
        assert hex_to_name(HexColor(0x66, 0x33, 0x99)) == "rebeccapurple"

    def test_unnamed_passes_through(self):
        assert hex_to_name("#123456") == "#123456"

    def test_unnamed_shorthand_is_expanded(self):
        assert hex_to_name("#ABC") == "#aabbcc"

    def test_invalid_hex(self):
        with pytest.raises(UnrecognizedNotationError):
            hex_to_name("#12")
