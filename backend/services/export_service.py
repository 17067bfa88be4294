"""
Export Service for vector downloads, filenames and captions.
Wraps composed documents for download and derives descriptive names
from the configuration that produced them.
"""

from typing import Optional

from config import FILENAME_PREFIX
from engine import Configuration, Document, MouthStyle

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class ExportService:
    """
    Service class for turning documents into downloadable artifacts.
    """

    def __init__(self, prefix: str = FILENAME_PREFIX):
        """
        Initialize export service.
        
        Args:
            prefix: First part of every generated filename
        """
        self.prefix = prefix

    def to_svg_document(self, document: Document) -> str:
        """
        Serialize a document as a standalone SVG file.
        
        Args:
            document: Composed figure
            
        Returns:
            SVG markup prefixed with an XML declaration
        """
        return XML_DECLARATION + document.to_svg()

    def build_filename(self, config: Configuration, extension: str) -> str:
        """
        Build a descriptive filename for a configuration.
        
        The mouth style is only included when it is not the default smile.
        
        Args:
            config: Configuration that produced the figure
            extension: File extension without the dot (svg or png)
            
        Returns:
            Filename such as "crochet_poop_vanilla_3layers_2blueeyes.svg"
        """
        config = config.normalized()
        eye_suffix = "s" if config.num_eyes != 1 else ""

        parts = [
            self.prefix,
            config.body_color,
            f"{config.num_layers}layers",
            f"{config.num_eyes}{config.eye_color}eye{eye_suffix}",
        ]

        if config.mouth_style is not MouthStyle.SMILE:
            parts.append(config.mouth_style.value)

        if config.has_arms:
            parts.append("arms")
        if config.has_legs:
            parts.append("legs")

        return f"{'_'.join(parts)}.{extension}"

    def describe(self, config: Configuration) -> str:
        """
        Build the human-readable caption shown under the preview.
        
        Args:
            config: Configuration to describe
            
        Returns:
            One-sentence description of the figure
        """
        config = config.normalized()
        eye_suffix = "s" if config.num_eyes != 1 else ""

        text = f"A beautiful {config.body_color} log with {config.num_layers} stinky stacks, "
        text += f"{config.num_eyes} {config.eye_color} stink eye{eye_suffix}, "
        if config.mouth_style is MouthStyle.NONE:
            text += "no mouth"
        else:
            text += f"{config.mouth_style.value} mouth"

        if config.has_arms:
            text += ", fudge fingers"
        if config.has_legs:
            text += ", turd trotters"

        return text


# Singleton instance
_export_service: Optional[ExportService] = None


def get_export_service() -> ExportService:
    """
    Get or create the export service singleton.
    
    Returns:
        ExportService instance
    """
    global _export_service
    if _export_service is None:
        _export_service = ExportService()
    return _export_service
