"""Tests for specifier resolution into Color values."""

import pytest

from vtcolor.core.color import (
    ColorType,
    HexSpec,
    IndexSpec,
    TripletSpec,
    build,
    empty,
    from_hex,
    from_index,
    from_name,
    from_rgb,
    parse_specifier,
    resolve,
)
from vtcolor.core.deficiency import Deficiency, DeficiencyConfig
from vtcolor.core.errors import ColorSeqError, InvalidSpecifier
from vtcolor.core.luminance import classify_brightness, get_luma

PROTAN_FULL = DeficiencyConfig(transform_enabled=True, deficiency=Deficiency.PROTAN, severity=1.0)


def test_palette_id_above_system_range():
    color = resolve("18")
    assert color.kind is ColorType.INDEXED255
    assert color.rgb == (0, 0, 135)
    assert color.hex == "#000087"
    assert color.plain_sequence == "18"
    assert color.plain_sequence_enclosed == "18"
    assert color.foreground_escape == "\x1b[38;5;18m"
    assert color.background_escape == "\x1b[48;5;18m"
    assert color.indexed255_id == 18
    assert color.index16_id is None
    assert color.color_id == 18
    assert color.is_bright is True
    assert color.is_dark is False
    assert str(color) == "18"


def test_system_color():
    color = resolve("13")
    assert color.kind is ColorType.INDEXED16
    assert color.hex == "#FF00FF"
    assert color.index16_id == 13
    assert color.indexed255_id is None
    assert color.foreground_escape == "\x1b[38;5;13m"
    assert color.is_bright is True


def test_integer_specifier():
    assert resolve(18) == resolve("18")


def test_triplet():
    color = resolve("94;0;63")
    assert color.kind is ColorType.TRUE_COLOR
    assert color.rgb == (94, 0, 63)
    assert color.hex == "#5E003F"
    assert color.plain_sequence == "94;0;63"
    assert color.plain_sequence_enclosed == '"94;0;63"'
    assert color.foreground_escape == "\x1b[38;2;94;0;63m"
    assert color.background_escape == "\x1b[48;2;94;0;63m"
    assert color.color_id is None
    assert color.is_bright is True


def test_hex():
    color = resolve("#0F0F0F")
    assert color.kind is ColorType.TRUE_COLOR
    assert color.plain_sequence == "15;15;15"
    assert color.is_dark is True
    assert color.is_bright is False
    assert resolve("#0f0f0f") == color


def test_name():
    color = resolve("DarkBlue")
    assert color.kind is ColorType.INDEXED255
    assert color.indexed255_id == 18


@pytest.mark.parametrize("raw", ['"94;0;63"', "  94;0;63  ", '"#5E003F"'])
def test_quotes_and_whitespace_are_ignored(raw):
    assert resolve(raw).rgb == (94, 0, 63)


def test_parse_shapes():
    assert isinstance(parse_specifier("1;2;3"), TripletSpec)
    assert isinstance(parse_specifier("200"), IndexSpec)
    assert isinstance(parse_specifier("Grey93"), IndexSpec)
    assert parse_specifier("#010203") == HexSpec(1, 2, 3)


@pytest.mark.parametrize(
    "raw",
    ["256", "1;2", "1;2;3;4", "1;2;256", "-1;0;0", "a;b;c", "#ZZZZZZ", "#12345", "", '""', "NotAColor", True, None, 1.5],
)
def test_invalid_specifiers(raw):
    with pytest.raises(InvalidSpecifier):
        resolve(raw)


def test_invalid_specifier_is_a_value_error():
    with pytest.raises(ValueError):
        resolve("nope")
    assert issubclass(InvalidSpecifier, ColorSeqError)


def test_error_message_names_the_input():
    with pytest.raises(InvalidSpecifier) as excinfo:
        resolve("1;2")
    assert "1;2" in str(excinfo.value)
    assert excinfo.value.specifier == "1;2"


def test_simulation_forces_true_color():
    color = resolve("18", PROTAN_FULL)
    assert color.kind is ColorType.TRUE_COLOR
    assert color.rgb == (0, 24, 135)
    assert color.hex == "#001887"
    assert color.plain_sequence == "0;24;135"
    assert color.foreground_escape == "\x1b[38;2;0;24;135m"
    assert color.indexed255_id is None
    assert color.index16_id is None


@pytest.mark.parametrize("raw, color_id", [("13", 13), ("DarkBlue", 18), ("231", 231)])
def test_simulation_drops_palette_back_references(raw, color_id):
    assert resolve(raw).color_id == color_id
    color = resolve(raw, PROTAN_FULL)
    assert color.kind is ColorType.TRUE_COLOR
    assert color.index16_id is None
    assert color.indexed255_id is None
    assert color.color_id is None
    assert color.plain_sequence == ";".join(str(v) for v in color.rgb)


def test_build_reuses_parsed_specifier():
    spec = parse_specifier("DarkBlue")
    assert build(spec) == resolve("DarkBlue")
    assert build(spec, PROTAN_FULL).rgb == (0, 24, 135)


def test_disabled_transform_ignores_deficiency_settings():
    config = PROTAN_FULL.with_changes(transform_enabled=False)
    assert resolve("18", config) == resolve("18")


def test_simple_algorithm():
    config = PROTAN_FULL.with_changes(use_simple_algorithm=True)
    assert resolve("255;0;0", config).rgb == (94, 94, 12)


def test_weighted_brightness_model():
    config = DeficiencyConfig(brightness_model="weighted")
    color = resolve("18", config)
    assert color.is_dark is True
    assert color.is_bright is False
    assert resolve("18").is_bright is True


def test_luma_models():
    assert get_luma(0, 0, 0) == pytest.approx(1.0)
    assert get_luma(94, 0, 63) == pytest.approx(158.0)
    assert get_luma(255, 255, 255, "weighted") == pytest.approx(255.0)
    assert classify_brightness(255, 255, 255, "weighted") == (True, False)
    assert classify_brightness(0, 0, 0, "weighted") == (False, True)


def test_constructors():
    assert from_rgb(94, 0, 63) == resolve("94;0;63")
    assert from_index(18) == resolve("18")
    assert from_name("darkblue") == resolve("18")
    assert from_hex("5E003F") == resolve("#5E003F")
    assert from_hex("#5E003F").rgb == (94, 0, 63)


def test_constructors_reject_bad_input():
    with pytest.raises(InvalidSpecifier):
        from_rgb(300, 0, 0)
    with pytest.raises(InvalidSpecifier):
        from_rgb(1.0, 0, 0)
    with pytest.raises(InvalidSpecifier):
        from_index(256)
    with pytest.raises(InvalidSpecifier):
        from_name("nope")
    with pytest.raises(InvalidSpecifier):
        from_hex("12;34;56")


def test_empty_is_shared_black():
    first = empty()
    assert first is empty()
    assert first.rgb == (0, 0, 0)
    assert first.kind is ColorType.INDEXED16
