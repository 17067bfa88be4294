"""
Main FastAPI application for the Crochet Poop Generator.

This application provides an API for:
- Rendering configurable crochet figures as SVG previews
- Downloading figures as SVG or 2x supersampled PNG files
- Saving figures to a gallery backed by SQLite

Run with: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy import text
import logging

from config import CORS_ORIGINS, API_HOST, API_PORT, STORAGE_DIR, LOG_LEVEL
from database import init_db

# Import routers
from routers import generate, gallery

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Initializes database and performs startup tasks.
    """
    # Startup
    logger.info("Starting Crochet Poop Generator API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down API...")


# Create FastAPI application
app = FastAPI(
    title="Crochet Poop Generator",
    description="""
    Procedurally composes a crocheted swirl figure from a handful of settings.

    ## Settings

    - **Body color**: chocolate, vanilla or blue yarn
    - **Layers**: 2 to 5 stacked coils
    - **Eyes**: 1 to 6 button eyes in one of seven colors
    - **Mouth**: smile, frown, tongue, shark or none
    - **Limbs**: optional arms and legs

    ## Workflow

    1. List the available options with `/generate/options`
    2. Preview a figure with `/generate/figure`
    3. Download it with `/generate/figure.svg` or `/generate/figure.png`
    4. Keep favourites with `/gallery/save`
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Sound-Url"],
)

# Mount static files for storage access
app.mount("/storage", StaticFiles(directory=str(STORAGE_DIR)), name="storage")

# Include routers
app.include_router(generate.router)
app.include_router(gallery.router)


@app.get("/", tags=["Health"])
async def root():
    """
    Root endpoint - API health check.

    Returns:
        API status and version information
    """
    return {
        "status": "healthy",
        "service": "Crochet Poop Generator",
        "version": "1.0.0",
        "endpoints": {
            "options": "/generate/options",
            "preview": "/generate/figure",
            "svg_download": "/generate/figure.svg",
            "png_download": "/generate/figure.png",
            "gallery": "/gallery",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Detailed health check endpoint.

    Returns:
        Health status of all services
    """
    health_status = {
        "api": "healthy",
        "database": "unknown",
        "rasterizer": "unknown",
    }

    # Check database
    try:
        from database import SessionLocal
        db = SessionLocal()
        db.execute(text("SELECT 1"))
        db.close()
        health_status["database"] = "healthy"
    except Exception as e:
        health_status["database"] = f"unhealthy: {str(e)}"

    # Check rasterizer
    from services.raster_service import get_raster_service
    if get_raster_service().is_available():
        health_status["rasterizer"] = "available"
    else:
        health_status["rasterizer"] = "not installed"

    return health_status


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.

    Args:
        request: The incoming request
        exc: The exception that was raised

    Returns:
        JSON error response
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
