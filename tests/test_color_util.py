import re

import numpy as np
import pytest

from hexsplash.color_util import (
    canon_hex,
    hex_to_rgb,
    is_color_dark,
    luma,
    random_hex,
    text_color,
)

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


@pytest.mark.parametrize(
    "hex_str",
    ["#FFFFFF", "#CCCCCC", "#FFFF00", "#00FFFF", "#00FF00", "#FFC0CB", "#BBDEFB", "#ffc107"],
)
def test_light_colors_are_not_dark(hex_str):
    assert is_color_dark(hex_str) is False


@pytest.mark.parametrize(
    "hex_str",
    ["#000000", "#333333", "#0000FF", "#FF0000", "#008000", "#000080", "#1976D2", "#0d6efd"],
)
def test_dark_colors(hex_str):
    assert is_color_dark(hex_str) is True


def test_threshold_boundary():
    # luma of #808080 is exactly 128 -> not dark
    assert luma("#808080") == 128.0
    assert is_color_dark("#808080") is False
    assert is_color_dark("#787878") is True


def test_case_and_hash_insensitive():
    assert is_color_dark("#ffffff") == is_color_dark("#FFFFFF")
    assert is_color_dark("1976d2") == is_color_dark("#1976D2")


def test_canon_hex():
    assert canon_hex("ff00aa") == "#FF00AA"
    assert canon_hex("  #abc ") == "#AABBCC"


@pytest.mark.parametrize(
    "bad", ["", "#12", "#1234567", "#GGGGGG", "blue", None, 123456, ["#000000"]]
)
def test_malformed_hex_raises(bad):
    with pytest.raises(ValueError):
        canon_hex(bad)
    with pytest.raises(ValueError):
        is_color_dark(bad)


def test_hex_to_rgb():
    assert hex_to_rgb("#2563eb") == (37, 99, 235)
    assert hex_to_rgb("#FFFFFF") == (255, 255, 255)


def test_text_color():
    assert text_color("#000000") == "white"
    assert text_color("#FFFFFF") == "black"


def test_random_hex_shape():
    for _ in range(200):
        assert HEX_RE.match(random_hex())


def test_random_hex_seeded_is_reproducible():
    a = [random_hex(np.random.default_rng(42)) for _ in range(3)]
    b = [random_hex(np.random.default_rng(42)) for _ in range(3)]
    assert a == b
    rng = np.random.default_rng(1)
    seq = [random_hex(rng) for _ in range(5)]
    assert all(HEX_RE.match(h) for h in seq)


def test_random_hex_uses_whole_alphabet():
    rng = np.random.default_rng(0)
    digits = set("".join(random_hex(rng)[1:] for _ in range(500)))
    assert digits == set("0123456789ABCDEF")
