"""
Palette resolution for the crochet figure.
Maps body-color and eye-color names to concrete hex values.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Palette:
    """Six-slot color set that defines a body's yarn appearance."""
    main: str
    light: str
    dark: str
    highlight: str
    yarn_base: str
    shadow: str


DEFAULT_BODY_COLOR = "chocolate"
DEFAULT_EYE_COLOR = "black"

BODY_PALETTES: Dict[str, Palette] = {
    "chocolate": Palette(
        main="#5C3317",
        light="#7B4B2A",
        dark="#3D210F",
        highlight="#8B5A2B",
        yarn_base="#4A2511",
        shadow="#2E1A0D",
    ),
    "vanilla": Palette(
        main="#F5DEB3",
        light="#FFF8DC",
        dark="#D4A574",
        highlight="#FFFACD",
        yarn_base="#E8D4A8",
        shadow="#C4A67C",
    ),
    "blue": Palette(
        main="#4169E1",
        light="#6495ED",
        dark="#27408B",
        highlight="#87CEEB",
        yarn_base="#2B4F8C",
        shadow="#1a2d5e",
    ),
}

EYE_COLORS: Dict[str, str] = {
    "black": "#1a1a1a",
    "blue": "#1E90FF",
    "green": "#228B22",
    "brown": "#8B4513",
    "red": "#DC143C",
    "purple": "#9932CC",
    "orange": "#FF8C00",
}


def resolve_body_palette(name: str) -> Palette:
    """
    Look up a body palette by name.
    
    Args:
        name: Palette name, e.g. "vanilla"
        
    Returns:
        The named palette, or the chocolate palette for unknown names
    """
    return BODY_PALETTES.get(name, BODY_PALETTES[DEFAULT_BODY_COLOR])


def resolve_eye_color(name: str) -> str:
    """
    Look up an eye color by name.
    
    Args:
        name: Eye color name, e.g. "blue"
        
    Returns:
        Hex color value, "#1a1a1a" for unknown names
    """
    return EYE_COLORS.get(name, EYE_COLORS[DEFAULT_EYE_COLOR])
