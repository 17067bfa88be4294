"""
Primitive renderers for the crochet figure.

Each renderer turns anchor/scale data and a palette into one svgwrite group.
Renderers never depend on each other's output and never validate input;
counts and names are normalized before they get here.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from svgwrite.container import Group
from svgwrite.path import Path
from svgwrite.shapes import Circle, Ellipse, Polygon

from .configuration import MAX_EYES, MIN_EYES, MouthStyle, clamp
from .geometry import BaseAnchor, FaceAnchor, Layer, LimbAnchor, SwirlAnchor
from .palette import Palette
from .texture import GRADIENT_FILL, PATTERN_FILL

Number = Union[int, float]

OUTLINE = "#333"
TONGUE = "#FF6B6B"
TONGUE_SHINE = "#FF8585"
MOUTH_CAVITY = "#2a0a0a"
TOOTH = "white"
TOOTH_EDGE = "#ddd"
BLUSH = "#FFB6C1"

# Hand-tuned eye arrangements per eye count. Horizontal offsets are scaled
# with the face, vertical offsets are absolute.
EYE_LAYOUTS: Dict[int, Tuple[Tuple[float, float], ...]] = {
    1: ((0, 0),),
    2: ((-25, 0), (25, 0)),
    3: ((-35, 5), (0, -5), (35, 5)),
    4: ((-35, -5), (-12, 5), (12, 5), (35, -5)),
    5: ((-40, 0), (-20, -10), (0, 0), (20, -10), (40, 0)),
    6: ((-42, 5), (-22, -8), (-5, 5), (10, 5), (28, -8), (45, 5)),
}

MIN_EYE_RADIUS = 8


def _r(value: Number) -> float:
    return round(value, 2)


def _d(*parts) -> str:
    """Join path commands and coordinates into a path data string."""
    return " ".join(
        part if isinstance(part, str) else format(_r(part), "g")
        for part in parts
    )


def _outlined(palette: Palette, width: float = 2) -> dict:
    return {"stroke": palette.dark, "stroke_width": width}


def coil_layer(layer: Layer, palette: Palette, index: int) -> Group:
    """
    Render one coil layer: soft shadow, textured ellipse, sheen overlay and
    two rim accent strokes.

    Args:
        layer: Layer geometry
        palette: Body palette
        index: Layer index, 0 = bottom

    Returns:
        Group element for the layer
    """
    cx, cy = layer.center_x, layer.center_y
    rx, ry = layer.width / 2, layer.height / 2

    group = Group(class_=f"coil-layer coil-layer-{index}")
    group.add(Ellipse(center=(_r(cx + 3), _r(cy + 4)), r=(_r(rx), _r(ry)),
                      fill=palette.shadow, opacity=0.3))
    group.add(Ellipse(center=(_r(cx), _r(cy)), r=(_r(rx), _r(ry)),
                      fill=PATTERN_FILL, **_outlined(palette)))
    group.add(Ellipse(center=(_r(cx), _r(cy)), r=(_r(rx), _r(ry)),
                      fill=GRADIENT_FILL, opacity=0.5))

    # Upper rim highlight
    group.add(Path(
        d=_d("M", cx - rx + 10, cy - ry / 2,
             "Q", cx, cy - ry - 5, cx + rx - 10, cy - ry / 2),
        stroke=palette.highlight, stroke_width=2, fill="none",
        opacity=0.4, stroke_linecap="round",
    ))
    # Lower rim shadow
    group.add(Path(
        d=_d("M", cx - rx + 15, cy + ry / 2,
             "Q", cx, cy + ry + 3, cx + rx - 15, cy + ry / 2),
        stroke=palette.shadow, stroke_width=2, fill="none",
        opacity=0.3, stroke_linecap="round",
    ))
    return group


def _swirl_outline(cx: float, cy: float, w: float) -> str:
    return _d(
        "M", cx - w / 3, cy,
        "C", cx - w / 4, cy - 18, cx + w / 6, cy - 28, cx + w / 6, cy - 38,
        "C", cx + w / 6, cy - 53, cx - w / 8, cy - 58, cx, cy - 48,
        "C", cx + w / 8, cy - 43, cx + w / 5, cy - 53, cx + w / 10, cy - 63,
        "C", cx, cy - 73, cx - w / 10, cy - 68, cx + w / 20, cy - 58,
        "L", cx, cy - 48,
        "C", cx + w / 12, cy - 43, cx + w / 10, cy - 33, cx, cy - 23,
        "C", cx - w / 8, cy - 13, cx - w / 5, cy - 3, cx + w / 3, cy,
        "Z",
    )


def swirl_cap(anchor: SwirlAnchor, palette: Palette) -> Group:
    """
    Render the curled tip that sits on top of the stack.

    Args:
        anchor: Swirl anchor (base center and width)
        palette: Body palette

    Returns:
        Group element for the swirl cap
    """
    cx, cy, w = anchor.x, anchor.y, anchor.width

    group = Group(class_="swirl-cap")

    # The shadow copy sits 3 units lower before its own offset
    shadow = Path(d=_swirl_outline(cx, cy + 3, w), fill=palette.shadow, opacity=0.3)
    shadow.translate(3, 3)
    group.add(shadow)

    group.add(Path(d=_swirl_outline(cx, cy, w), fill=PATTERN_FILL, **_outlined(palette)))
    group.add(Path(
        d=_d("M", cx, cy - 48,
             "C", cx + w / 12, cy - 53, cx + w / 8, cy - 58, cx + w / 12, cy - 63),
        stroke=palette.highlight, stroke_width=2.5, fill="none",
        opacity=0.5, stroke_linecap="round",
    ))
    group.add(Circle(center=(_r(cx + w / 20), _r(cy - 68)), r=4,
                     fill=palette.highlight, opacity=0.4))
    return group


def eye(cx: float, cy: float, color: str, radius: float = 12) -> Group:
    """
    Render a single button eye.

    Args:
        cx: Center X coordinate
        cy: Center Y coordinate
        color: Resolved iris color
        radius: Eye radius

    Returns:
        Group element for the eye
    """
    group = Group(class_="eye")
    group.add(Circle(center=(_r(cx), _r(cy)), r=_r(radius), fill=color,
                     stroke=OUTLINE, stroke_width=1.5))
    group.add(Circle(center=(_r(cx - radius * 0.3), _r(cy - radius * 0.2)),
                     r=_r(radius * 0.15), fill="white", opacity=0.8))
    group.add(Circle(center=(_r(cx + radius * 0.2), _r(cy - radius * 0.3)),
                     r=_r(radius * 0.1), fill="white", opacity=0.6))
    group.add(Circle(center=(_r(cx), _r(cy)), r=_r(radius * 0.4), fill="#000"))
    group.add(Circle(center=(_r(cx - radius * 0.15), _r(cy - radius * 0.15)),
                     r=_r(radius * 0.15), fill="white", opacity=0.9))
    return group


def eyes(num_eyes: int, color: str, face: FaceAnchor) -> Sequence[Group]:
    """
    Render the eyes for the given count using the fixed layout table.

    Radii alternate between two sizes for a hand-made look.

    Args:
        num_eyes: Eye count, clamped to [1, 6]
        color: Resolved iris color
        face: Face anchor

    Returns:
        One group per eye, left to right
    """
    scale = face.scale
    layout = EYE_LAYOUTS[clamp(num_eyes, MIN_EYES, MAX_EYES)]

    return [
        eye(
            face.x + dx * scale,
            face.y + dy,
            color,
            max(MIN_EYE_RADIUS, (9 + (i % 2) * 2) * scale),
        )
        for i, (dx, dy) in enumerate(layout)
    ]


def _smile_curve(cx: float, y: float, half_width: float, scale: float) -> Path:
    return Path(
        d=_d("M", cx - half_width, y, "Q", cx, y + 20 * scale, cx + half_width, y),
        stroke=OUTLINE, stroke_width=3, fill="none", stroke_linecap="round",
    )


def _smile(cx: float, y: float, half_width: float, scale: float) -> Group:
    group = Group(class_="mouth mouth-smile")
    group.add(_smile_curve(cx, y, half_width, scale))
    return group


def _frown(cx: float, y: float, half_width: float, scale: float) -> Group:
    group = Group(class_="mouth mouth-frown")
    group.add(Path(
        d=_d("M", cx - half_width, y + 12 * scale,
             "Q", cx, y - 8 * scale, cx + half_width, y + 12 * scale),
        stroke=OUTLINE, stroke_width=3, fill="none", stroke_linecap="round",
    ))
    return group


def _tongue(cx: float, y: float, half_width: float, scale: float) -> Group:
    group = Group(class_="mouth mouth-tongue")
    group.add(_smile_curve(cx, y, half_width, scale))
    group.add(Ellipse(center=(_r(cx), _r(y + 12 * scale)),
                      r=(_r(10 * scale), _r(7 * scale)), fill=TONGUE))
    group.add(Ellipse(center=(_r(cx), _r(y + 10 * scale)),
                      r=(_r(8 * scale), _r(4 * scale)), fill=TONGUE_SHINE, opacity=0.6))
    return group


def _shark(cx: float, y: float, half_width: float, scale: float) -> Group:
    tooth = 6 * scale
    lip = y - 2
    group = Group(class_="mouth mouth-shark")
    group.add(Path(
        d=_d("M", cx - half_width - 10, lip,
             "Q", cx, y + 25 * scale, cx + half_width + 10, lip,
             "Q", cx, y + 12 * scale, cx - half_width - 10, lip),
        fill=MOUTH_CAVITY, stroke=OUTLINE, stroke_width=2,
    ))

    teeth = (
        ((cx - half_width, lip), (cx - half_width + tooth, y + 10 * scale),
         (cx - half_width + tooth * 2, lip)),
        ((cx - tooth * 1.5, lip), (cx - tooth * 0.5, y + 12 * scale), (cx + tooth * 0.5, lip)),
        ((cx + tooth, lip), (cx + tooth * 2, y + 10 * scale), (cx + half_width, lip)),
        ((cx - tooth, y + 18 * scale), (cx, y + 8 * scale), (cx + tooth, y + 18 * scale)),
    )
    for points in teeth:
        group.add(Polygon(
            points=[(_r(x), _r(py)) for x, py in points],
            fill=TOOTH, stroke=TOOTH_EDGE, stroke_width=0.5,
        ))
    return group


MouthRenderer = Callable[[float, float, float, float], Group]

MOUTH_RENDERERS: Dict[MouthStyle, MouthRenderer] = {
    MouthStyle.SMILE: _smile,
    MouthStyle.FROWN: _frown,
    MouthStyle.TONGUE: _tongue,
    MouthStyle.SHARK: _shark,
}


def mouth(style: Union[str, MouthStyle], face: FaceAnchor) -> Optional[Group]:
    """
    Render the mouth for a style.

    Args:
        style: Mouth style; unknown values render as a smile
        face: Face anchor

    Returns:
        Group element, or None for MouthStyle.NONE
    """
    style = MouthStyle.parse(style)
    if style is MouthStyle.NONE:
        return None

    scale = face.scale
    renderer = MOUTH_RENDERERS.get(style, _smile)
    return renderer(face.x, face.y + 25, 30 * scale, scale)


def arms(anchor: LimbAnchor, palette: Palette) -> Group:
    """
    Render a mirrored pair of arms hanging from the body's sides.

    Args:
        anchor: Limb anchor between the top two layers
        palette: Body palette

    Returns:
        Group element with both arms
    """
    y = anchor.y
    edge = anchor.width / 2

    group = Group(class_="arms")
    for side in (-1, 1):
        x = anchor.x + side * (edge - 5)
        group.add(Path(
            d=_d("M", x, y,
                 "C", x + side * 20, y + 5, x + side * 35, y + 15, x + side * 30, y + 30,
                 "C", x + side * 25, y + 45, x + side * 10, y + 40, x + side * 5, y + 30),
            fill=PATTERN_FILL, **_outlined(palette),
        ))
        group.add(Ellipse(center=(_r(x + side * 28), _r(y + 33)), r=(10, 8),
                          fill=palette.main, **_outlined(palette, 1.5)))
    return group


def legs(anchor: BaseAnchor, palette: Palette) -> Group:
    """
    Render a mirrored pair of legs below the bottom layer.

    Args:
        anchor: Base anchor at the bottom edge of the body
        palette: Body palette

    Returns:
        Group element with both legs
    """
    cx, y = anchor.x, anchor.y

    group = Group(class_="legs")
    for side in (-1, 1):
        group.add(Path(
            d=_d("M", cx + side * 30, y,
                 "C", cx + side * 35, y + 15, cx + side * 40, y + 35, cx + side * 35, y + 50,
                 "C", cx + side * 30, y + 60, cx + side * 15, y + 60, cx + side * 10, y + 50),
            fill=PATTERN_FILL, **_outlined(palette),
        ))
        group.add(Ellipse(center=(_r(cx + side * 23), _r(y + 55)), r=(15, 8),
                          fill=palette.main, **_outlined(palette, 1.5)))
    return group


def blush(face: FaceAnchor) -> Group:
    """
    Render the two cheek blush marks.

    Args:
        face: Face anchor

    Returns:
        Group element with both cheeks
    """
    scale = face.scale
    offset = 40 * scale
    y = face.y + 18 * scale

    group = Group(class_="blush")
    for side in (-1, 1):
        group.add(Ellipse(center=(_r(face.x + side * offset), _r(y)),
                          r=(_r(10 * scale), _r(6 * scale)), fill=BLUSH, opacity=0.5))
    return group
