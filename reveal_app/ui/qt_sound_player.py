"""Plays synthesized sound cues through ``QSoundEffect``."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from reveal_app.constants.sound_constants import DEFAULT_VOLUME, SOUND_CACHE_DIR
from reveal_app.core.services.sound_cues import SoundPlayer
from reveal_app.core.tone_synth import ensure_cue_files

logger = logging.getLogger(__name__)


class QtSoundPlayer(SoundPlayer):
    """Loads one ``QSoundEffect`` per cue and plays it on request."""

    def __init__(
        self,
        parent: QObject | None = None,
        cache_dir: Path = SOUND_CACHE_DIR,
        volume: float = DEFAULT_VOLUME,
    ) -> None:
        self._effects: dict[str, QSoundEffect] = {}
        self._volume = volume
        try:
            paths = ensure_cue_files(cache_dir)
        except OSError as exc:
            logger.warning("Sound cues unavailable, could not write %s: %s", cache_dir, exc)
            return
        for cue, path in paths.items():
            effect = QSoundEffect(parent)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(volume)
            self._effects[cue] = effect

    @property
    def volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        self._volume = max(0.0, min(1.0, volume))
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def play(self, cue: str) -> None:
        effect = self._effects.get(cue)
        if effect is None:
            logger.warning("No sound loaded for cue %s", cue)
            return
        if effect.status() == QSoundEffect.Status.Error:
            logger.warning("Sound cue %s failed to load; skipping", cue)
            return
        if effect.isPlaying():
            effect.stop()
        effect.play()
