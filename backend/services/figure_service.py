"""
Figure Service.
Composes crochet figures from configurations and writes SVG/PNG exports
to storage. All geometry lives in the engine; this module is the glue
between the engine and the export, raster and storage services.
"""

import logging
import uuid
from typing import Optional, Tuple

from engine import Configuration, Document, compose

from .export_service import ExportService, get_export_service
from .raster_service import RasterService, get_raster_service
from .storage_service import StorageService, get_storage_service

logger = logging.getLogger(__name__)


class FigureService:
    """
    Service for rendering figures and exporting them.
    """

    def __init__(
        self,
        export_service: Optional[ExportService] = None,
        raster_service: Optional[RasterService] = None,
        storage_service: Optional[StorageService] = None,
    ):
        """Initialize the figure service with its collaborators."""
        self.export = export_service or get_export_service()
        self.raster = raster_service or get_raster_service()
        self.storage = storage_service or get_storage_service()

    def render(self, config: Configuration) -> Document:
        """
        Compose a figure.

        Args:
            config: Render configuration

        Returns:
            Composed document
        """
        return compose(config)

    def render_svg(self, config: Configuration) -> Tuple[Document, str]:
        """
        Compose a figure and serialize it for download.

        Args:
            config: Render configuration

        Returns:
            Tuple of (document, SVG file content)
        """
        document = self.render(config)
        return document, self.export.to_svg_document(document)

    def render_png(self, config: Configuration) -> bytes:
        """
        Compose a figure and rasterize it.

        Args:
            config: Render configuration

        Returns:
            PNG image as bytes
        """
        document = self.render(config)
        return self.raster.rasterize(document.to_svg())

    def save_figure(self, config: Configuration) -> Tuple[Document, str, Optional[str]]:
        """
        Render a figure and write its exports to storage.

        The PNG is skipped when no rasterizer is available. Rasterizing
        happens before anything is written, and a failed write removes the
        files already saved, so no file is left without its partner.

        Args:
            config: Render configuration

        Returns:
            Tuple of (document, svg_filename, png_filename or None)
        """
        document, svg_content = self.render_svg(config)

        png_bytes = None
        if self.raster.is_available():
            png_bytes = self.raster.rasterize(document.to_svg())

        # Unique stem so repeated saves of one configuration never collide
        stem = self.export.build_filename(config, "svg")[: -len(".svg")]
        stem = f"{stem}_{uuid.uuid4().hex[:8]}"

        svg_filename = f"{stem}.svg"
        png_filename = f"{stem}.png" if png_bytes is not None else None

        try:
            self.storage.save_figure(svg_filename, svg_content)
            if png_filename is not None:
                self.storage.save_figure(png_filename, png_bytes)
        except OSError:
            self.discard_files(svg_filename, png_filename)
            raise

        if png_filename is None:
            logger.warning(f"Rasterizer unavailable, saved {svg_filename} without PNG")

        return document, svg_filename, png_filename

    def discard_files(self, *filenames: Optional[str]) -> None:
        """
        Remove exported files that no gallery record will point to.

        Args:
            filenames: File names to delete; None entries are ignored
        """
        for filename in filenames:
            if filename:
                self.storage.delete_figure(filename)


# Singleton instance
_figure_service: Optional[FigureService] = None


def get_figure_service() -> FigureService:
    """
    Get or create the figure service singleton.

    Returns:
        FigureService instance
    """
    global _figure_service
    if _figure_service is None:
        _figure_service = FigureService()
    return _figure_service
