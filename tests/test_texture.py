"""Yarn texture resources."""

import xml.etree.ElementTree as ET

from engine.palette import resolve_body_palette
from engine.texture import GRADIENT_ID, PATTERN_ID, build_texture


def test_texture_ids():
    texture = build_texture(resolve_body_palette("blue"))

    assert texture.pattern_id == PATTERN_ID == "yarn_pattern"
    assert texture.gradient_id == GRADIENT_ID == "yarn_pattern_gradient"
    assert texture.pattern["id"] == PATTERN_ID
    assert texture.gradient["id"] == GRADIENT_ID


def test_pattern_tile_uses_palette():
    palette = resolve_body_palette("vanilla")
    tile = ET.fromstring(build_texture(palette).pattern.tostring())

    assert tile.get("patternUnits") == "userSpaceOnUse"
    assert tile.get("width") == "10"
    rect = tile.find("rect")
    assert rect.get("fill") == palette.main

    strokes = [path.get("stroke") for path in tile.findall("path")]
    assert strokes == [palette.light, palette.dark, palette.highlight]
    for path in tile.findall("path"):
        assert float(path.get("opacity")) < 1

    dots = tile.findall("circle")
    assert len(dots) == 3
    assert all(dot.get("fill") == palette.highlight for dot in dots)


def test_gradient_fades_shadow_to_highlight():
    palette = resolve_body_palette("chocolate")
    gradient = ET.fromstring(build_texture(palette).gradient.tostring())

    assert gradient.get("x2") == "100%"
    assert gradient.get("y2") == "0%"

    stops = gradient.findall("stop")
    assert [stop.get("stop-color") for stop in stops] == [
        palette.shadow, palette.main, palette.main, palette.highlight,
    ]
    assert [float(stop.get("stop-opacity")) for stop in stops] == [0.4, 0, 0, 0.3]


def test_texture_is_deterministic():
    palette = resolve_body_palette("chocolate")
    first, second = build_texture(palette), build_texture(palette)

    assert first.pattern.tostring() == second.pattern.tostring()
    assert first.gradient.tostring() == second.gradient.tostring()
