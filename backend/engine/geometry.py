"""
Stacked-coil geometry.

Computes the position and size of every coil layer, then derives the anchor
points that the face, limbs and swirl cap are placed from. Geometry depends
only on the layer count; the palette never affects it.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .configuration import MAX_LAYERS, MIN_LAYERS, clamp

CENTER_X = 115
BASE_Y = 180
BASE_WIDTH = 180
LAYER_HEIGHT = 45
TAPER_RATIO = 0.72
VERTICAL_STEP = LAYER_HEIGHT * 0.7

# Multiplicative jitter per layer index, cycled every five layers
WIDTH_VARIATIONS = (1.0, 0.96, 1.03, 0.97, 0.99)

FACE_LIFT = 10
FACE_REFERENCE_WIDTH = 160
SWIRL_LIFT = LAYER_HEIGHT * 0.4
SWIRL_WIDTH_RATIO = 0.8


@dataclass(frozen=True)
class Layer:
    """One horizontal coil band."""
    center_x: float
    center_y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.center_y + self.height / 2


LayerGeometry = Tuple[Layer, ...]


@dataclass(frozen=True)
class FaceAnchor:
    """Where the face sits and how wide it is."""
    x: float
    y: float
    width: float

    @property
    def scale(self) -> float:
        """Feature scale factor relative to the reference face width."""
        return self.width / FACE_REFERENCE_WIDTH


@dataclass(frozen=True)
class LimbAnchor:
    x: float
    y: float
    width: float


@dataclass(frozen=True)
class BaseAnchor:
    x: float
    y: float


@dataclass(frozen=True)
class SwirlAnchor:
    x: float
    y: float
    width: float


@dataclass(frozen=True)
class Anchors:
    """Read-only reference points derived from the layer stack."""
    face: FaceAnchor
    limb: LimbAnchor
    base: BaseAnchor
    swirl: SwirlAnchor


def layer_width(index: int) -> float:
    """Tapered width of the layer at the given index (0 = bottom)."""
    variation = WIDTH_VARIATIONS[index % len(WIDTH_VARIATIONS)]
    return BASE_WIDTH * TAPER_RATIO ** index * variation


def derive_anchors(layers: Sequence[Layer]) -> Anchors:
    """
    Derive face, limb, base and swirl anchors from computed layers.

    Args:
        layers: Layers ordered bottom to top, at least one

    Returns:
        Anchors for downstream renderers
    """
    top = layers[-1]
    bottom = layers[0]

    face = FaceAnchor(x=top.center_x, y=top.center_y - FACE_LIFT, width=top.width)

    swirl = SwirlAnchor(
        x=top.center_x,
        y=top.center_y - SWIRL_LIFT,
        width=top.width * SWIRL_WIDTH_RATIO,
    )

    # Arms attach between the top two layers
    if len(layers) >= 2:
        below = layers[-2]
        limb = LimbAnchor(
            x=top.center_x,
            y=(top.center_y + below.center_y) / 2,
            width=(top.width + below.width) / 2,
        )
    else:
        limb = LimbAnchor(x=top.center_x, y=top.center_y, width=top.width)

    base = BaseAnchor(x=bottom.center_x, y=bottom.bottom)

    return Anchors(face=face, limb=limb, base=base, swirl=swirl)


def compute_layers(num_layers: int) -> Tuple[LayerGeometry, Anchors]:
    """
    Compute the stacked-coil layers and their anchors.

    Args:
        num_layers: Requested layer count, clamped to [2, 5]

    Returns:
        Tuple of (layers ordered bottom to top, anchors)
    """
    count = clamp(num_layers, MIN_LAYERS, MAX_LAYERS)

    layers = tuple(
        Layer(
            center_x=CENTER_X,
            center_y=BASE_Y - i * VERTICAL_STEP,
            width=layer_width(i),
            height=LAYER_HEIGHT,
        )
        for i in range(count)
    )

    return layers, derive_anchors(layers)
