"""
Figure composer.

Resolves the palette, builds the texture, computes layer geometry and runs the
renderers as an explicit ordered list of render steps. A step's position in the
list is its z-order: earlier steps are drawn behind later ones.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

import svgwrite
from svgwrite.base import BaseElement
from svgwrite.shapes import Rect

from . import renderers
from .configuration import Configuration
from .geometry import Anchors, LayerGeometry, compute_layers
from .palette import resolve_body_palette, resolve_eye_color
from .texture import TextureDefs, build_texture

logger = logging.getLogger(__name__)

VIEWPORT_WIDTH = 230
LEG_MARGIN = 80
BODY_MARGIN = 20


@dataclass(frozen=True)
class RenderStep:
    """One fragment and the name of the step that produced it."""
    name: str
    fragment: BaseElement


@dataclass(frozen=True)
class Document:
    """A composed figure, ready to serialize."""
    configuration: Configuration
    width: int
    height: int
    texture: TextureDefs
    layers: LayerGeometry
    anchors: Anchors
    steps: Tuple[RenderStep, ...]

    def fragments(self, name: str) -> List[BaseElement]:
        """Return the fragments produced by steps with the given name."""
        return [step.fragment for step in self.steps if step.name == name]

    def to_drawing(self) -> svgwrite.Drawing:
        """Build an svgwrite drawing with the texture defs and all steps in order."""
        drawing = svgwrite.Drawing(size=(self.width, self.height), profile="full")
        drawing.viewbox(0, 0, self.width, self.height)
        drawing.defs.add(self.texture.pattern)
        drawing.defs.add(self.texture.gradient)
        for step in self.steps:
            drawing.add(step.fragment)
        return drawing

    def to_svg(self) -> str:
        """Serialize the document to SVG markup."""
        return self.to_drawing().tostring()


def viewport_height(anchors: Anchors, has_legs: bool) -> int:
    """Document height: legs hang below the body, otherwise a small margin."""
    margin = LEG_MARGIN if has_legs else BODY_MARGIN
    # Halves round up, not to even
    return math.floor(anchors.base.y + margin + 0.5)


def compose(config: Configuration) -> Document:
    """
    Compose a complete figure from a configuration.

    Draw order: background, legs, arms, coil layers bottom to top, swirl cap,
    eyes, mouth, blush. The blush step is a single group holding both cheek
    ellipses.

    Args:
        config: Render configuration; out-of-range values are normalized

    Returns:
        Document holding the ordered render steps
    """
    config = config.normalized()

    palette = resolve_body_palette(config.body_color)
    eye_color = resolve_eye_color(config.eye_color)
    texture = build_texture(palette)
    layers, anchors = compute_layers(config.num_layers)

    steps: List[RenderStep] = [
        RenderStep("background", Rect(size=("100%", "100%"), fill="none")),
    ]

    # Limbs go behind the body
    if config.has_legs:
        steps.append(RenderStep("legs", renderers.legs(anchors.base, palette)))
    if config.has_arms:
        steps.append(RenderStep("arms", renderers.arms(anchors.limb, palette)))

    for index, layer in enumerate(layers):
        steps.append(RenderStep("coil_layer", renderers.coil_layer(layer, palette, index)))
    steps.append(RenderStep("swirl_cap", renderers.swirl_cap(anchors.swirl, palette)))

    for fragment in renderers.eyes(config.num_eyes, eye_color, anchors.face):
        steps.append(RenderStep("eye", fragment))

    mouth = renderers.mouth(config.mouth_style, anchors.face)
    if mouth is not None:
        steps.append(RenderStep("mouth", mouth))

    steps.append(RenderStep("blush", renderers.blush(anchors.face)))

    height = viewport_height(anchors, config.has_legs)
    logger.debug(
        "Composed figure: %d layers, %d steps, %dx%d",
        len(layers), len(steps), VIEWPORT_WIDTH, height,
    )

    return Document(
        configuration=config,
        width=VIEWPORT_WIDTH,
        height=height,
        texture=texture,
        layers=layers,
        anchors=anchors,
        steps=tuple(steps),
    )
