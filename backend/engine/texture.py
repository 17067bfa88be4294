"""
Yarn texture definitions.
Builds the tiled stitch pattern and the sideways sheen gradient that every
body-colored shape references by id.
"""

from dataclasses import dataclass

from svgwrite.gradients import LinearGradient
from svgwrite.path import Path
from svgwrite.pattern import Pattern
from svgwrite.shapes import Circle, Rect

from .palette import Palette

PATTERN_ID = "yarn_pattern"
GRADIENT_ID = f"{PATTERN_ID}_gradient"
PATTERN_FILL = f"url(#{PATTERN_ID})"
GRADIENT_FILL = f"url(#{GRADIENT_ID})"
TILE_SIZE = 10

# (y at the tile edges, y of the control point, palette slot, stroke width, opacity)
_STRANDS = (
    (3, 1, "light", 1.2, 0.7),
    (6, 4, "dark", 1.2, 0.6),
    (9, 7, "highlight", 0.8, 0.5),
)

_FLECKS = ((2, 5), (7, 2), (7, 8))


@dataclass(frozen=True)
class TextureDefs:
    """Pattern and gradient resources plus the ids used to reference them."""
    pattern_id: str
    pattern: Pattern
    gradient_id: str
    gradient: LinearGradient


def build_texture(palette: Palette) -> TextureDefs:
    """
    Build the yarn pattern tile and the directional sheen gradient.

    Args:
        palette: Resolved body palette

    Returns:
        TextureDefs holding both resources
    """
    pattern = Pattern(
        id=PATTERN_ID,
        size=(TILE_SIZE, TILE_SIZE),
        patternUnits="userSpaceOnUse",
    )
    pattern.add(Rect(size=(TILE_SIZE, TILE_SIZE), fill=palette.main))

    # Woven strands across the tile
    for edge_y, control_y, slot, width, opacity in _STRANDS:
        pattern.add(Path(
            d=f"M 0 {edge_y} Q {TILE_SIZE // 2} {control_y} {TILE_SIZE} {edge_y}",
            stroke=getattr(palette, slot),
            stroke_width=width,
            fill="none",
            opacity=opacity,
        ))

    for cx, cy in _FLECKS:
        pattern.add(Circle(center=(cx, cy), r=0.8, fill=palette.highlight, opacity=0.3))

    gradient = LinearGradient(id=GRADIENT_ID, start=("0%", "0%"), end=("100%", "0%"))
    gradient.add_stop_color(offset="0%", color=palette.shadow, opacity=0.4)
    gradient.add_stop_color(offset="30%", color=palette.main, opacity=0)
    gradient.add_stop_color(offset="70%", color=palette.main, opacity=0)
    gradient.add_stop_color(offset="100%", color=palette.highlight, opacity=0.3)

    return TextureDefs(
        pattern_id=PATTERN_ID,
        pattern=pattern,
        gradient_id=GRADIENT_ID,
        gradient=gradient,
    )
