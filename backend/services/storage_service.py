"""
Storage Service for file management and URL generation.
Handles writing, deleting and listing exported figure files.
"""

import logging
from pathlib import Path
from typing import Optional, List, Union

from config import STORAGE_DIR, FIGURES_DIR, PUBLIC_BASE_URL

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service class for file storage operations.
    Manages local file storage and provides URL generation.
    """

    def __init__(self, base_url: str = PUBLIC_BASE_URL):
        """
        Initialize storage service.

        Args:
            base_url: Base URL for generating file URLs
        """
        self.base_url = base_url.rstrip("/")
        self.storage_dir = STORAGE_DIR
        self.figures_dir = FIGURES_DIR

        # Ensure directories exist
        self.figures_dir.mkdir(parents=True, exist_ok=True)

    def get_figure_url(self, filename: str) -> str:
        """
        Generate URL for a figure file.

        Args:
            filename: Name of the figure file

        Returns:
            URL for accessing the figure
        """
        return f"{self.base_url}/storage/figures/{filename}"

    def save_figure(self, filename: str, content: Union[str, bytes]) -> str:
        """
        Write a figure file to the figures directory.

        Args:
            filename: Name of the file to create
            content: SVG text or PNG bytes

        Returns:
            Path to the saved file
        """
        dest_path = self.figures_dir / filename
        if isinstance(content, str):
            dest_path.write_text(content, encoding="utf-8")
        else:
            dest_path.write_bytes(content)

        logger.info(f"Saved figure file {dest_path}")
        return str(dest_path)

    def delete_figure(self, filename: str) -> bool:
        """
        Delete a figure file from storage.

        Args:
            filename: Name of the file to delete

        Returns:
            True if file was deleted, False otherwise
        """
        path = self.figures_dir / Path(filename).name
        if path.exists():
            path.unlink()
            logger.info(f"Deleted figure file {path}")
            return True
        return False

    def list_figures(self) -> List[str]:
        """
        List all figure files in storage.

        Returns:
            List of figure filenames
        """
        return sorted(f.name for f in self.figures_dir.iterdir() if f.is_file())


# Singleton instance
_storage_service: Optional[StorageService] = None


def get_storage_service(base_url: str = PUBLIC_BASE_URL) -> StorageService:
    """
    Get or create the storage service singleton.

    Args:
        base_url: Base URL for file URL generation

    Returns:
        StorageService instance
    """
    global _storage_service
    if _storage_service is None:
        _storage_service = StorageService(base_url)
    return _storage_service
