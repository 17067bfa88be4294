"""
Pydantic models for API request/response validation.
These models define the schema for data transfer between frontend and backend.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime

from engine import Configuration
from engine.configuration import DEFAULT_EYES, DEFAULT_LAYERS
from engine.palette import DEFAULT_BODY_COLOR, DEFAULT_EYE_COLOR


# ============================================
# Figure Configuration Models
# ============================================

class FigureRequest(BaseModel):
    """
    Request model for figure rendering.

    Counts outside their ranges are clamped and unknown names fall back to
    defaults, so only the field types are validated here.
    """
    body_color: str = Field(DEFAULT_BODY_COLOR, max_length=50, description="Body palette name")
    num_layers: int = Field(DEFAULT_LAYERS, description="Number of coil layers (2-5)")
    num_eyes: int = Field(DEFAULT_EYES, description="Number of eyes (1-6)")
    eye_color: str = Field(DEFAULT_EYE_COLOR, max_length=50, description="Eye color name")
    has_arms: bool = Field(False, description="Draw arms")
    has_legs: bool = Field(False, description="Draw legs")
    mouth_style: str = Field("smile", max_length=20, description="smile, frown, tongue, shark or none")

    class Config:
        json_schema_extra = {
            "example": {
                "body_color": "vanilla",
                "num_layers": 3,
                "num_eyes": 2,
                "eye_color": "blue",
                "has_arms": False,
                "has_legs": False,
                "mouth_style": "smile",
            }
        }

    def to_configuration(self) -> Configuration:
        """Convert the request into an engine Configuration."""
        return Configuration(
            body_color=self.body_color,
            num_layers=self.num_layers,
            num_eyes=self.num_eyes,
            eye_color=self.eye_color,
            has_arms=self.has_arms,
            has_legs=self.has_legs,
            mouth_style=self.mouth_style,
        )


class FigureSettings(BaseModel):
    """Normalized configuration as actually rendered."""
    body_color: str
    num_layers: int
    num_eyes: int
    eye_color: str
    has_arms: bool
    has_legs: bool
    mouth_style: str

    @classmethod
    def from_configuration(cls, config: Configuration) -> "FigureSettings":
        config = config.normalized()
        return cls(
            body_color=config.body_color,
            num_layers=config.num_layers,
            num_eyes=config.num_eyes,
            eye_color=config.eye_color,
            has_arms=config.has_arms,
            has_legs=config.has_legs,
            mouth_style=config.mouth_style.value,
        )


class FigureResponse(BaseModel):
    """Response model for a rendered figure."""
    settings: FigureSettings
    width: int
    height: int
    svg: str
    filename: str
    description: str
    sound_url: Optional[str] = None


class PaletteOption(BaseModel):
    """A selectable body palette and its colors."""
    name: str
    colors: Dict[str, str]


class OptionsResponse(BaseModel):
    """Response model listing every selectable option."""
    body_colors: List[PaletteOption]
    eye_colors: Dict[str, str]
    mouth_styles: List[str]
    layers: Dict[str, int]
    eyes: Dict[str, int]
    defaults: FigureSettings


# ============================================
# Gallery Models
# ============================================

class SaveFigureRequest(FigureRequest):
    """Request model for saving a figure to the gallery."""
    name: Optional[str] = Field(None, max_length=255, description="Optional custom name")


class GalleryItemResponse(BaseModel):
    """Response model for gallery items."""
    id: int
    name: str
    body_color: str
    num_layers: int
    num_eyes: int
    eye_color: str
    has_arms: bool
    has_legs: bool
    mouth_style: str
    width: int
    height: int
    svg_path: Optional[str] = None
    png_path: Optional[str] = None
    svg_url: Optional[str] = None
    png_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GalleryListResponse(BaseModel):
    """Response model for gallery list."""
    items: List[GalleryItemResponse]
    total: int
    skip: int
    limit: int


# ============================================
# Generic Response Models
# ============================================

class SuccessResponse(BaseModel):
    """Generic success response."""
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Generic error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
