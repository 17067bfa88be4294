"""
Router for figure generation endpoints.
Handles live previews and SVG/PNG downloads of crochet figures.
"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from engine import MouthStyle
from engine.configuration import MIN_LAYERS, MAX_LAYERS, MIN_EYES, MAX_EYES, Configuration
from engine.palette import BODY_PALETTES, EYE_COLORS
from models.figure import (
    FigureRequest,
    FigureResponse,
    FigureSettings,
    OptionsResponse,
    PaletteOption,
    ErrorResponse,
)
from services.export_service import get_export_service
from services.figure_service import get_figure_service
from services.raster_service import get_raster_service
from services.sound_service import get_sound_service

router = APIRouter(prefix="/generate", tags=["Figure Generation"])


def _download_headers(filename: str, sound_url: str) -> dict:
    return {
        "Content-Disposition": f'attachment; filename="{filename}"',
        "X-Sound-Url": sound_url,
    }


@router.get(
    "/options",
    response_model=OptionsResponse,
    summary="List Figure Options",
    description="List the palettes, eye colors, mouth styles and count ranges the generator accepts.",
)
async def get_options():
    """
    Describe every selectable option.

    Returns:
        Palettes with their colors, eye colors, mouth styles, bounds and defaults
    """
    return OptionsResponse(
        body_colors=[
            PaletteOption(name=name, colors=asdict(palette))
            for name, palette in BODY_PALETTES.items()
        ],
        eye_colors=dict(EYE_COLORS),
        mouth_styles=[style.value for style in MouthStyle],
        layers={"min": MIN_LAYERS, "max": MAX_LAYERS},
        eyes={"min": MIN_EYES, "max": MAX_EYES},
        defaults=FigureSettings.from_configuration(Configuration()),
    )


@router.post(
    "/figure",
    response_model=FigureResponse,
    summary="Render Figure Preview",
    description="Render a crochet figure and return its SVG markup with a caption "
                "and a suggested filename. Occasionally includes a sound cue.",
)
async def render_figure(request: FigureRequest):
    """
    Render a figure preview from configuration fields.

    Out-of-range counts are clamped and unknown names fall back to defaults,
    so any well-typed request renders.

    Args:
        request: Figure configuration

    Returns:
        Normalized settings, SVG markup, viewport and metadata
    """
    config = request.to_configuration()
    export_service = get_export_service()
    document = get_figure_service().render(config)

    return FigureResponse(
        settings=FigureSettings.from_configuration(config),
        width=document.width,
        height=document.height,
        svg=document.to_svg(),
        filename=export_service.build_filename(config, "svg"),
        description=export_service.describe(config),
        sound_url=get_sound_service().cue_for_change(),
    )


@router.post(
    "/figure.svg",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
    summary="Download Figure as SVG",
    description="Render a crochet figure and return it as an SVG file download.",
)
async def download_svg(request: FigureRequest):
    """
    Download a figure as a standalone SVG file.

    Args:
        request: Figure configuration

    Returns:
        SVG file with an XML declaration
    """
    config = request.to_configuration()
    _, svg_content = get_figure_service().render_svg(config)
    filename = get_export_service().build_filename(config, "svg")

    return Response(
        content=svg_content,
        media_type="image/svg+xml",
        headers=_download_headers(filename, get_sound_service().cue_for_download()),
    )


@router.post(
    "/figure.png",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        503: {"model": ErrorResponse, "description": "Rasterizer not installed"},
    },
    summary="Download Figure as PNG",
    description="Render a crochet figure and return it as a 2x supersampled PNG download.",
)
async def download_png(request: FigureRequest):
    """
    Download a figure as a PNG file.

    Args:
        request: Figure configuration

    Returns:
        PNG file
    """
    if not get_raster_service().is_available():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="PNG export is not available on this server. Try downloading as SVG instead.",
        )

    config = request.to_configuration()
    png_bytes = get_figure_service().render_png(config)
    filename = get_export_service().build_filename(config, "png")

    return Response(
        content=png_bytes,
        media_type="image/png",
        headers=_download_headers(filename, get_sound_service().cue_for_download()),
    )
