"""Sound cue names and synthesis settings."""

from pathlib import Path
import tempfile

CUE_GAME_END: str = "game_end"
CUE_FANFARE: str = "fanfare"
CUE_ACHIEVEMENT: str = "achievement"
CUE_CELEBRATION: str = "celebration"

SAMPLE_RATE: int = 44100
DEFAULT_VOLUME: float = 0.7
SOUND_CACHE_DIR: Path = Path(tempfile.gettempdir()) / "revealqt_sounds"
