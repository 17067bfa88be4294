"""
Router for gallery management endpoints.
Handles saving, viewing and deleting rendered figures.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db, FigureRecord
from models.figure import (
    GalleryItemResponse,
    GalleryListResponse,
    SaveFigureRequest,
    SuccessResponse,
    ErrorResponse,
)
from services.export_service import get_export_service
from services.figure_service import get_figure_service
from services.storage_service import get_storage_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gallery", tags=["Gallery"])


def _to_response(item: FigureRecord) -> GalleryItemResponse:
    """Build a gallery response with public URLs for the stored files."""
    storage_service = get_storage_service()
    return GalleryItemResponse(
        **item.to_dict(),
        svg_url=storage_service.get_figure_url(item.svg_path) if item.svg_path else None,
        png_url=storage_service.get_figure_url(item.png_path) if item.png_path else None,
    )


def _get_or_404(db: Session, item_id: int) -> FigureRecord:
    item = db.query(FigureRecord).filter(FigureRecord.id == item_id).first()

    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Gallery item with ID {item_id} not found",
        )
    return item


@router.post(
    "/save",
    response_model=GalleryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        500: {"model": ErrorResponse, "description": "Saving failed"},
    },
    summary="Save Figure to Gallery",
    description="Render a figure, store its SVG (and PNG when available) and record it in the gallery.",
)
async def save_to_gallery(
    request: SaveFigureRequest,
    db: Session = Depends(get_db),
):
    """
    Render and save a figure to the gallery.

    Args:
        request: Figure configuration with an optional custom name
        db: Database session

    Returns:
        The new gallery item
    """
    config = request.to_configuration()
    figure_service = get_figure_service()

    try:
        document, svg_filename, png_filename = figure_service.save_figure(config)
    except (OSError, RuntimeError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save figure. Please try again in a moment.",
        )

    settings = document.configuration
    item = FigureRecord(
        name=request.name or get_export_service().describe(config),
        body_color=settings.body_color,
        num_layers=settings.num_layers,
        num_eyes=settings.num_eyes,
        eye_color=settings.eye_color,
        has_arms=settings.has_arms,
        has_legs=settings.has_legs,
        mouth_style=settings.mouth_style.value,
        width=document.width,
        height=document.height,
        svg_path=svg_filename,
        png_path=png_filename,
    )

    try:
        db.add(item)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        figure_service.discard_files(svg_filename, png_filename)
        logger.error(f"Failed to record {svg_filename}, removed its files", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save figure. Please try again in a moment.",
        )
    db.refresh(item)

    return _to_response(item)


@router.get(
    "",
    response_model=GalleryListResponse,
    summary="Get All Gallery Items",
    description="Retrieve saved figures, newest first, with optional filtering by body color.",
)
async def get_gallery(
    skip: int = 0,
    limit: int = 50,
    body_color: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Get all gallery items with pagination and filtering.

    Args:
        skip: Number of items to skip
        limit: Maximum number of items to return
        body_color: Filter by body palette name
        db: Database session

    Returns:
        Paginated list of gallery items
    """
    query = db.query(FigureRecord)

    if body_color:
        query = query.filter(FigureRecord.body_color == body_color)

    total = query.count()
    items = query.order_by(
        FigureRecord.created_at.desc(), FigureRecord.id.desc()
    ).offset(skip).limit(limit).all()

    return GalleryListResponse(
        items=[_to_response(item) for item in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get(
    "/stats",
    summary="Get Gallery Statistics",
    description="Get statistics about the gallery contents.",
)
async def get_gallery_stats(
    db: Session = Depends(get_db),
):
    """
    Get statistics about gallery contents.

    Args:
        db: Database session

    Returns:
        Gallery statistics
    """
    by_color = dict(
        db.query(FigureRecord.body_color, func.count(FigureRecord.id))
        .group_by(FigureRecord.body_color)
        .all()
    )

    return {
        "total_items": db.query(FigureRecord).count(),
        "by_body_color": by_color,
        "with_arms": db.query(FigureRecord).filter(FigureRecord.has_arms.is_(True)).count(),
        "with_legs": db.query(FigureRecord).filter(FigureRecord.has_legs.is_(True)).count(),
        "stored_files": len(get_storage_service().list_figures()),
    }


@router.get(
    "/{item_id}",
    response_model=GalleryItemResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Item not found"},
    },
    summary="Get Gallery Item",
    description="Get details of a specific gallery item.",
)
async def get_gallery_item(
    item_id: int,
    db: Session = Depends(get_db),
):
    """
    Get a specific gallery item by ID.

    Args:
        item_id: ID of the item to retrieve
        db: Database session

    Returns:
        Gallery item details
    """
    return _to_response(_get_or_404(db, item_id))


@router.delete(
    "/{item_id}",
    response_model=SuccessResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Item not found"},
    },
    summary="Delete Gallery Item",
    description="Delete a gallery item and its associated files.",
)
async def delete_gallery_item(
    item_id: int,
    db: Session = Depends(get_db),
):
    """
    Delete a gallery item and its files.

    Args:
        item_id: ID of the item to delete
        db: Database session

    Returns:
        Success response
    """
    storage_service = get_storage_service()
    item = _get_or_404(db, item_id)

    # Delete associated files
    if item.svg_path:
        storage_service.delete_figure(item.svg_path)

    if item.png_path:
        storage_service.delete_figure(item.png_path)

    # Delete database record
    db.delete(item)
    db.commit()

    return SuccessResponse(
        success=True,
        message=f"Gallery item {item_id} deleted successfully",
    )
