"""
Parametric geometry and composition engine for the crochet figure.
Pure functions only: no I/O and no state shared between calls.
"""

from .configuration import Configuration, MouthStyle
from .composer import Document, RenderStep, compose
from .palette import Palette, resolve_body_palette, resolve_eye_color
from .geometry import Anchors, Layer, compute_layers
from .texture import TextureDefs, build_texture

__all__ = [
    "Configuration",
    "MouthStyle",
    "Document",
    "RenderStep",
    "compose",
    "Palette",
    "resolve_body_palette",
    "resolve_eye_color",
    "Anchors",
    "Layer",
    "compute_layers",
    "TextureDefs",
    "build_texture",
]
