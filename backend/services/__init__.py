"""
Services package for the Crochet Poop Generator.
"""

from .export_service import get_export_service, ExportService
from .raster_service import get_raster_service, RasterService
from .sound_service import get_sound_service, SoundService
from .storage_service import get_storage_service, StorageService
from .figure_service import get_figure_service, FigureService

__all__ = [
    "get_export_service",
    "ExportService",
    "get_raster_service",
    "RasterService",
    "get_sound_service",
    "SoundService",
    "get_storage_service",
    "StorageService",
    "get_figure_service",
    "FigureService",
]
