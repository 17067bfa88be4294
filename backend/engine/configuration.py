"""
Render configuration for the crochet figure.
A Configuration is an immutable value passed into every compose call.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .palette import BODY_PALETTES, DEFAULT_BODY_COLOR, DEFAULT_EYE_COLOR, EYE_COLORS

MIN_LAYERS = 2
MAX_LAYERS = 5
MIN_EYES = 1
MAX_EYES = 6

DEFAULT_LAYERS = 3
DEFAULT_EYES = 2


class MouthStyle(str, Enum):
    """Mouth style variants."""
    SMILE = "smile"
    FROWN = "frown"
    TONGUE = "tongue"
    SHARK = "shark"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union[str, "MouthStyle"]) -> "MouthStyle":
        """Return the matching style, falling back to SMILE for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.SMILE


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp an integer to the inclusive range [lower, upper]."""
    return max(lower, min(upper, int(value)))


@dataclass(frozen=True)
class Configuration:
    """
    Everything needed to render one figure.

    Values are stored as given; normalized() returns the clamped form
    that the engine actually draws.
    """
    body_color: str = DEFAULT_BODY_COLOR
    num_layers: int = DEFAULT_LAYERS
    num_eyes: int = DEFAULT_EYES
    eye_color: str = DEFAULT_EYE_COLOR
    has_arms: bool = False
    has_legs: bool = False
    mouth_style: Union[str, MouthStyle] = MouthStyle.SMILE

    def normalized(self) -> "Configuration":
        """
        Clamp counts into their supported ranges and replace unknown names
        with their defaults.

        Returns:
            New Configuration with num_layers in [2, 5], num_eyes in [1, 6],
            known color names and mouth_style as a MouthStyle member
        """
        return replace(
            self,
            body_color=self.body_color if self.body_color in BODY_PALETTES else DEFAULT_BODY_COLOR,
            eye_color=self.eye_color if self.eye_color in EYE_COLORS else DEFAULT_EYE_COLOR,
            num_layers=clamp(self.num_layers, MIN_LAYERS, MAX_LAYERS),
            num_eyes=clamp(self.num_eyes, MIN_EYES, MAX_EYES),
            has_arms=bool(self.has_arms),
            has_legs=bool(self.has_legs),
            mouth_style=MouthStyle.parse(self.mouth_style),
        )
