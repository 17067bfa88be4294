"""
Models package for the Crochet Poop Generator.
"""

from .figure import *

__all__ = [
    "FigureRequest",
    "FigureSettings",
    "FigureResponse",
    "PaletteOption",
    "OptionsResponse",
    "SaveFigureRequest",
    "GalleryItemResponse",
    "GalleryListResponse",
    "SuccessResponse",
    "ErrorResponse",
]
