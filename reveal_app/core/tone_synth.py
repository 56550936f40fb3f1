"""Renders the presenter sound cues as small WAV files.

Each cue is a single oscillator stepping through a short note sequence under
an exponential fade, written once to a cache directory so the Qt player can
load it with ``QSoundEffect``.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from pathlib import Path
import struct
import wave

from reveal_app.constants.sound_constants import (
    CUE_ACHIEVEMENT,
    CUE_CELEBRATION,
    CUE_FANFARE,
    CUE_GAME_END,
    SAMPLE_RATE,
)


@dataclass(frozen=True, slots=True)
class ToneRecipe:
    """Note sequence (Hz) played back to back, fading out over ``duration``."""

    notes: tuple[float, ...]
    step_seconds: float
    duration: float
    peak: float
    waveform: str = "sine"


CUE_RECIPES: dict[str, ToneRecipe] = {
    # C4 E4 G4 C5 resolution chord
    CUE_GAME_END: ToneRecipe((261.63, 329.63, 392.00, 523.25), 0.15, 2.0, 0.4),
    # C5 C5 C5 E5 G5 victory call
    CUE_FANFARE: ToneRecipe((523.25, 523.25, 523.25, 659.25, 783.99), 0.2, 1.2, 0.35, "square"),
    CUE_ACHIEVEMENT: ToneRecipe((523.25, 659.25, 783.99, 1046.50), 0.1, 1.5, 0.4),
    CUE_CELEBRATION: ToneRecipe((523.25, 587.33, 659.25, 783.99, 880.0, 1046.50), 0.15, 1.2, 0.4),
}

_FADE_FLOOR = 0.001


def render_samples(recipe: ToneRecipe, sample_rate: int = SAMPLE_RATE) -> list[int]:
    """16-bit signed samples for ``recipe``."""
    total = int(recipe.duration * sample_rate)
    decay = math.log(_FADE_FLOOR / recipe.peak) / recipe.duration
    samples: list[int] = []
    phase = 0.0
    for i in range(total):
        t = i / sample_rate
        note_index = min(int(t / recipe.step_seconds), len(recipe.notes) - 1)
        phase += 2 * math.pi * recipe.notes[note_index] / sample_rate
        wave_value = math.sin(phase)
        if recipe.waveform == "square":
            wave_value = 1.0 if wave_value >= 0 else -1.0
        amplitude = recipe.peak * math.exp(decay * t)
        samples.append(int(max(-1.0, min(1.0, wave_value * amplitude)) * 32767))
    return samples


def write_cue(path: Path, recipe: ToneRecipe, sample_rate: int = SAMPLE_RATE) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    samples = render_samples(recipe, sample_rate)
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(sample_rate)
        handle.writeframes(struct.pack(f"<{len(samples)}h", *samples))
    return path


def ensure_cue_files(cache_dir: Path) -> dict[str, Path]:
    """Write any missing cue files and return cue name -> WAV path."""
    paths: dict[str, Path] = {}
    for cue, recipe in CUE_RECIPES.items():
        path = cache_dir / f"{cue}.wav"
        if not path.exists():
            write_cue(path, recipe)
        paths[cue] = path
    return paths
