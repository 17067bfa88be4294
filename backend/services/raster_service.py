"""
Raster Service for PNG export.
Renders composed SVG documents to bitmaps with CairoSVG and re-encodes
them through Pillow.

CairoSVG needs the native cairo library. It is treated as an *optional*
dependency so the rest of the API (SVG rendering, gallery) keeps working
without it; routers check ``is_available`` before rasterizing.
"""

import io
import logging
from typing import Optional

from PIL import Image

from config import RASTER_SCALE

logger = logging.getLogger(__name__)

try:  # pragma: no cover - environment dependent
    import cairosvg  # type: ignore
except (ImportError, OSError) as exc:  # pragma: no cover - missing native cairo
    logger.warning(f"CairoSVG unavailable, PNG export disabled: {exc}")
    cairosvg = None


class RasterService:
    """
    Service class for converting SVG markup to PNG.
    """

    def __init__(self, scale: float = RASTER_SCALE):
        """
        Initialize raster service.
        
        Args:
            scale: Supersampling factor applied to the SVG viewport
        """
        self.scale = scale

    def is_available(self) -> bool:
        """Check whether the SVG rasterizer can be used."""
        return cairosvg is not None

    def rasterize(self, svg: str, scale: Optional[float] = None) -> bytes:
        """
        Render SVG markup to an optimized PNG.
        
        Args:
            svg: SVG markup
            scale: Optional override of the configured scale factor
            
        Returns:
            PNG image as bytes
        """
        if not self.is_available():
            raise RuntimeError(
                "PNG export requires CairoSVG and the cairo library. "
                "Install it with: pip install cairosvg"
            )

        png_bytes = cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            scale=scale or self.scale,
        )

        # Re-encode through Pillow for a smaller file
        image = Image.open(io.BytesIO(png_bytes))
        buffer = io.BytesIO()
        image.save(buffer, format="PNG", optimize=True)
        return buffer.getvalue()


# Singleton instance
_raster_service: Optional[RasterService] = None


def get_raster_service() -> RasterService:
    """
    Get or create the raster service singleton.
    
    Returns:
        RasterService instance
    """
    global _raster_service
    if _raster_service is None:
        _raster_service = RasterService()
    return _raster_service
