# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""Tests for the conversion engine (to_hex / from_hex and friends)."""

import re

import numpy as np
import pytest

from hexbridge import (
    HexColor,
    MalformedNumericPayloadError,
    MissingInputError,
    Notation,
    UnknownTargetFormatError,
    UnrecognizedNotationError,
    convert,
    format_notation,
    from_hex,
    parse_notation,
    resolve_target,
    to_hex,
)


def _random_hexes(n=200, seed=42):
    channels = np.random.RandomState(seed).randint(0, 256, size=(n, 3))
    return [HexColor(int(r), int(g), int(b)).hex for r, g, b in channels]


def _numbers(text):
    return [float(v) for v in re.findall(r"\d+(?:\.\d+)?", text)]


def _max_channel_diff(a, b):
    ca, cb = HexColor.parse(a), HexColor.parse(b)
    return max(abs(ca.r - cb.r), abs(ca.g - cb.g), abs(ca.b - cb.b))


# ---------------------------------------------------------------------------
# to_hex
# ---------------------------------------------------------------------------

class TestToHex:
    """Every notation normalizes to lowercase #rrggbb."""

    @pytest.mark.parametrize("text, expected", [
        ("red", "#ff0000"),
        ("REBECCAPURPLE", "#663399"),
        ("  red  ", "#ff0000"),
        ("#ABC", "#aabbcc"),
        ("#FF8800", "#ff8800"),
        ("rgb(0, 255, 0)", "#00ff00"),
        ("rgb(0 128 255)", "#0080ff"),
        ("rgba(255, 0, 0, 0.5)", "#ff0000"),
        ("rgb(100%, 0%, 50%)", "#ff0080"),
        ("rgb(300, -5, 0)", "#ff0000"),
        ("rgb(127.5, 0, 0)", "#800000"),
        ("hsl(120, 100%, 50%)", "#00ff00"),
        ("hsl(240deg, 100%, 50%)", "#0000ff"),
        ("hsl(0, 0%, 20%)", "#333333"),
        ("hsla(0, 100%, 50%, 0.5)", "#ff0000"),
        ("hsl(-120, 100%, 50%)", "#0000ff"),
        ("hwb(0 0% 0%)", "#ff0000"),
        ("hwb(0 20% 20%)", "#cc3333"),
        ("hwb(0 50% 50%)", "#808080"),
        ("hwb(200 60% 60%)", "#808080"),
        ("hwb(0 0% 100%)", "#000000"),
        ("lch(0% 0 0)", "#000000"),
        ("lch(100% 0 0)", "#ffffff"),
        ("oklch(0 0 0)", "#000000"),
        ("oklch(1 0 0)", "#ffffff"),
        ("fff", "#ffffff"),
        ("bad", "#bbaadd"),
        ("tan", "#d2b48c"),
    ])
    def test_conversions(self, text, expected):
        assert to_hex(text) == expected

    def test_lch_red(self):
        assert _max_channel_diff(to_hex("lch(53.24% 104.55 40)"), "#ff0000") <= 1

    def test_oklch_red(self):
        assert _max_channel_diff(to_hex("oklch(0.628 0.258 29.23)"), "#ff0000") <= 1

    def test_oklch_percent_lightness_is_scaled(self):
        assert to_hex("oklch(62.8% 0.258 29.23)") == to_hex("oklch(0.628 0.258 29.23)")
        assert to_hex("oklch(100% 0 0)") == "#ffffff"

    def test_lch_percent_sign_optional(self):
        assert to_hex("lch(50 30 120)") == to_hex("lch(50% 30 120)")

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_missing_input(self, text):
        with pytest.raises(MissingInputError):
            to_hex(text)

    @pytest.mark.parametrize("text", ["not-a-color", "#abcd", "#ggg", "rgb 1 2 3", "lchfoo(1 2 3)"])
    def test_unrecognized(self, text):
        with pytest.raises(UnrecognizedNotationError):
            to_hex(text)

    @pytest.mark.parametrize("text", [
        "rgb(1,2)",
        "rgb()",
        "rgb(red, 0, 0)",
        "hsl(10, 20%)",
        "hwb(1.2.3 0% 0%)",
        "oklch(0.5 0.1)",
        "lch(50% 30 1rad)",
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedNumericPayloadError):
            to_hex(text)

    @pytest.mark.parametrize("text", [
        "rgb(" + "9" * 400 + ", 0, 0)",
        "hsl(" + "9" * 400 + ", 100%, 50%)",
        "oklch(0.5 0.1 " + "9" * 400 + ")",
    ])
    def test_overflowing_number(self, text):
        with pytest.raises(MalformedNumericPayloadError):
            to_hex(text)


# ---------------------------------------------------------------------------
# from_hex
# ---------------------------------------------------------------------------

class TestFromHex:
    """Canonical hex expands into every notation."""

    @pytest.mark.parametrize("hex_value, target, expected", [
        ("#ffffff", "rgb", "rgb(255, 255, 255)"),
        ("#ff0000", "hsl", "hsl(0, 100%, 50%)"),
        ("#000000", "hwb", "hwb(0 0% 100%)"),
        ("#ff0000", "hwb", "hwb(0 0% 0%)"),
        ("#00ff00", "hsl", "hsl(120, 100%, 50%)"),
        ("#0000ff", "hsl", "hsl(240, 100%, 50%)"),
        ("#808080", "hsl", "hsl(0, 0%, 50%)"),
        ("#808080", "hwb", "hwb(0 50% 50%)"),
        ("#ff0080", "hsl", "hsl(330, 100%, 50%)"),
        ("#000000", "lch", "lch(0.00% 0.000 0.00)"),
        ("#000000", "oklch", "oklch(0.000 0.000 0.00)"),
        ("#ff0000", "name", "red"),
        ("#F00", "name", "red"),
        ("#808080", "name", "grey"),
        ("#123456", "name", "#123456"),
        ("#ABCDEF", "hex", "#abcdef"),
        ("#abc", "hex", "#aabbcc"),
        ("#abc", "rgb", "rgb(170, 187, 204)"),
    ])
    def test_conversions(self, hex_value, target, expected):
        assert from_hex(hex_value, target) == expected

    def test_notation_member_target(self):
        assert from_hex("#ff0000", Notation.RGB) == "rgb(255, 0, 0)"

    def test_target_case_insensitive(self):
        assert from_hex("#ff0000", "HSL") == "hsl(0, 100%, 50%)"

    def test_white_lch(self):
        assert from_hex("#ffffff", "lch").startswith("lch(100.00% 0.000 ")

    def test_white_oklch(self):
        assert from_hex("#ffffff", "oklch").startswith("oklch(1.000 0.000 ")

    def test_lch_format(self):
        out = from_hex("#ff0000", "lch")
        assert re.fullmatch(r"lch\(\d+\.\d{2}% \d+\.\d{3} \d+\.\d{2}\)", out)
        L, C, H = _numbers(out)
        assert L == pytest.approx(53.24, abs=0.05)
        assert C == pytest.approx(104.55, abs=0.5)
        assert H == pytest.approx(40.0, abs=0.5)

    def test_oklch_format(self):
        out = from_hex("#ff0000", "oklch")
        assert re.fullmatch(r"oklch\(\d\.\d{3} \d\.\d{3} \d+\.\d{2}\)", out)
        L, C, H = _numbers(out)
        assert L == pytest.approx(0.628, abs=0.002)
        assert C == pytest.approx(0.258, abs=0.002)
        assert H == pytest.approx(29.23, abs=0.05)

    @pytest.mark.parametrize("target", [None, ""])
    def test_absent_target_is_identity(self, target):
        assert from_hex("#ABC", target) == "#ABC"

    @pytest.mark.parametrize("target", ["cmyk", "lab", "hsv"])
    def test_unknown_target(self, target):
        with pytest.raises(UnknownTargetFormatError):
            from_hex("#ff0000", target)

    @pytest.mark.parametrize("hex_value", ["", None])
    def test_missing_hex(self, hex_value):
        with pytest.raises(MissingInputError):
            from_hex(hex_value, "rgb")

    def test_invalid_hex(self):
        with pytest.raises(UnrecognizedNotationError):
            from_hex("#xyz", "rgb")

    @pytest.mark.parametrize("target", [None, ""])
    def test_invalid_hex_without_target(self, target):
        with pytest.raises(UnrecognizedNotationError):
            from_hex("garbage", target)

    @pytest.mark.parametrize("hex_value, target", [
        ("#1f030d", "lch"),
        ("#300115", "oklch"),
    ])
    def test_hue_rounding_wraps_below_360(self, hex_value, target):
        out = from_hex(hex_value, target)
        assert "360.00" not in out
        assert _numbers(out)[-1] < 360


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

class TestRoundTrip:
    """to_hex(from_hex(H, F)) recovers H, exactly or within a few steps."""

    @pytest.mark.parametrize("target", ["hex", "rgb", "name"])
    def test_exact(self, target):
        for hex_value in _random_hexes():
            assert to_hex(from_hex(hex_value, target)) == hex_value

    # Three-decimal OKLCH chroma can move a saturated color near the gamut
    # edge by several 8-bit steps; CIELCH stays within one.
    @pytest.mark.parametrize("target, max_steps", [("lch", 1), ("oklch", 6)])
    def test_perceptual_within_bound(self, target, max_steps):
        for hex_value in _random_hexes():
            back = to_hex(from_hex(hex_value, target))
            assert _max_channel_diff(back, hex_value) <= max_steps, (hex_value, back)

    @pytest.mark.parametrize("target", ["lch", "oklch"])
    def test_perceptual_named_colors(self, target):
        for hex_value in ["#ff0000", "#00ff00", "#0000ff", "#ffffff", "#000000", "#663399"]:
            back = to_hex(from_hex(hex_value, target))
            assert _max_channel_diff(back, hex_value) <= 1, (hex_value, back)

    @pytest.mark.parametrize("target", ["hsl", "hwb"])
    @pytest.mark.parametrize("hex_value", [
        "#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff", "#ff00ff",
        "#000000", "#ffffff", "#808080", "#333333",
    ])
    def test_cylindrical_exact_for_primaries_and_grays(self, target, hex_value):
        assert to_hex(from_hex(hex_value, target)) == hex_value

    def test_hsl_hue_preserved(self):
        for h in range(360):
            back = from_hex(to_hex(f"hsl({h}, 100%, 50%)"), "hsl")
            hue = _numbers(back)[0]
            diff = abs(hue - h) % 360
            assert min(diff, 360 - diff) <= 1, (h, back)


# ---------------------------------------------------------------------------
# Supplementary operations
# ---------------------------------------------------------------------------

class TestConvert:
    """convert() re-expresses any color string in another notation."""

    def test_name_to_hsl(self):
        assert convert("red", "hsl") == "hsl(0, 100%, 50%)"

    def test_hsl_to_name(self):
        assert convert("hsl(0, 100%, 50%)", "name") == "red"

    def test_rgb_to_hwb(self):
        assert convert("rgb(0, 0, 0)", "hwb") == "hwb(0 0% 100%)"

    def test_no_target_gives_hex(self):
        assert convert("rebeccapurple", None) == "#663399"

    def test_invalid_value(self):
        with pytest.raises(UnrecognizedNotationError):
            convert("not-a-color", "rgb")


class TestResolveTarget:
    """Explicit colorspace wins; otherwise the previous value's notation."""

    def test_explicit_colorspace(self):
        assert resolve_target("hsl", "#ffffff") is Notation.HSL

    def test_explicit_member(self):
        assert resolve_target(Notation.LCH, "red") is Notation.LCH

    def test_inferred_from_previous(self):
        assert resolve_target(None, "oklch(0.5 0.1 10)") is Notation.OKLCH
        assert resolve_target("", "rebeccapurple") is Notation.NAME

    def test_nothing_known_is_hex(self):
        assert resolve_target(None, None) is Notation.HEX

    def test_unknown_colorspace(self):
        with pytest.raises(UnknownTargetFormatError):
            resolve_target("cmyk")

    def test_picker_flow(self):
        """A picked hex is re-expressed in the notation last shown."""
        target = resolve_target(None, "hsl(10, 50%, 50%)")
        assert from_hex("#00ff00", target) == "hsl(120, 100%, 50%)"


class TestDirectAccess:
    """parse_notation / format_notation skip detection."""

    def test_parse(self):
        assert parse_notation("hwb(0 0% 0%)", "hwb") == HexColor(255, 0, 0)

    def test_parse_wrong_notation(self):
        with pytest.raises(UnrecognizedNotationError):
            parse_notation("rgb(1, 2, 3)", Notation.HSL)

    def test_format(self):
        assert format_notation(HexColor(0, 0, 0), "rgb") == "rgb(0, 0, 0)"

    def test_format_unknown(self):
        with pytest.raises(UnknownTargetFormatError):
            format_notation(HexColor(0, 0, 0), "cmyk")
