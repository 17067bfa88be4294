"""
Routers package for the Crochet Poop Generator API.
"""

from . import generate, gallery

__all__ = ["generate", "gallery"]
