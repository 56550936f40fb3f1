"""
Tests for synthesized sound cue files
"""
import wave

from reveal_app.constants.sound_constants import SAMPLE_RATE
from reveal_app.core.tone_synth import CUE_RECIPES, ToneRecipe, ensure_cue_files, render_samples


def test_render_samples_length_and_range():
    recipe = ToneRecipe((440.0,), 0.1, 0.05, 0.4)
    samples = render_samples(recipe, sample_rate=8000)
    assert len(samples) == 400
    assert max(abs(s) for s in samples) <= 32767
    assert any(samples)


def test_ensure_cue_files_writes_each_cue_once(tmp_path):
    paths = ensure_cue_files(tmp_path)

    assert set(paths) == set(CUE_RECIPES)
    with wave.open(str(paths["fanfare"]), "rb") as handle:
        assert handle.getframerate() == SAMPLE_RATE
        assert handle.getnchannels() == 1
        assert handle.getnframes() == int(CUE_RECIPES["fanfare"].duration * SAMPLE_RATE)

    mtime = paths["fanfare"].stat().st_mtime_ns
    ensure_cue_files(tmp_path)
    assert paths["fanfare"].stat().st_mtime_ns == mtime
