"""
Configuration module for the Crochet Poop Generator.
Loads environment variables and provides configuration constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Storage Paths
BASE_DIR = Path(__file__).parent
STORAGE_DIR = Path(os.getenv("STORAGE_DIR", str(BASE_DIR / "storage")))
FIGURES_DIR = STORAGE_DIR / "figures"

# Ensure storage directories exist
FIGURES_DIR.mkdir(parents=True, exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/gallery.db")

# Rendering Configuration
RASTER_SCALE = float(os.getenv("RASTER_SCALE", "2.0"))  # PNG supersampling factor
FILENAME_PREFIX = os.getenv("FILENAME_PREFIX", "crochet_poop")

# Sound cue Configuration (audio is played by the client)
SOUND_PROBABILITY = float(os.getenv("SOUND_PROBABILITY", "0.25"))
AUDIO_BASE_URL = os.getenv("AUDIO_BASE_URL", "/fartAudio/")

# Server Configuration
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", f"http://localhost:{API_PORT}")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
