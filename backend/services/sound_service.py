"""
Sound cue service.
Decides when the client should play a sound effect and which one. Audio is
never played server-side; responses only carry the URL of the chosen clip.
"""

import random
from typing import Optional

from config import SOUND_PROBABILITY, AUDIO_BASE_URL

SOUND_FILES = [f"fart{i}.mp3" for i in range(1, 11)]


class SoundService:
    """
    Picks sound cues for configuration changes and downloads.
    Every change has a fixed chance of a cue; downloads always get one.
    """

    def __init__(
        self,
        probability: float = SOUND_PROBABILITY,
        base_url: str = AUDIO_BASE_URL,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the sound service.
        
        Args:
            probability: Chance of a cue on each configuration change
            base_url: URL prefix the clips are served from
            rng: Random source, seeded in tests
        """
        self.probability = probability
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.rng = rng or random.Random()

    def pick_sound(self) -> str:
        """Return the URL of a random clip."""
        return f"{self.base_url}{self.rng.choice(SOUND_FILES)}"

    def cue_for_change(self) -> Optional[str]:
        """Return a clip URL for a configuration change, or None most of the time."""
        if self.rng.random() < self.probability:
            return self.pick_sound()
        return None

    def cue_for_download(self) -> str:
        """Return a clip URL for a download."""
        return self.pick_sound()


# Singleton instance
_sound_service: Optional[SoundService] = None


def get_sound_service() -> SoundService:
    """
    Get or create the sound service singleton.
    
    Returns:
        SoundService instance
    """
    global _sound_service
    if _sound_service is None:
        _sound_service = SoundService()
    return _sound_service
