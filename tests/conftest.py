"""
Pytest configuration and fixtures for pcmclip tests.
"""
import pytest
import numpy as np

from pcmclip.core.clip import Clip
from pcmclip.core.codec import save_clip

TONE_SAMPLERATE = 8000


@pytest.fixture
def stereo_clip() -> Clip:
    """Two channels of four samples at 8 Hz: half a second of audio."""
    return Clip.from_channels(
        [[1, 2, 3, 4], [10, 20, 30, 40]],
        sample_rate=8,
        name="scenario"
    )


@pytest.fixture
def tone_clip() -> Clip:
    """Generate 1 second of stereo 16-bit sine wave audio."""
    t = np.linspace(0, 1, TONE_SAMPLERATE, endpoint=False)
    left = (np.sin(2 * np.pi * 440 * t) * 16000).astype(np.int16)
    right = (np.sin(2 * np.pi * 880 * t) * 16000).astype(np.int16)
    return Clip.from_channels([left, right], sample_rate=TONE_SAMPLERATE, name="tone")


@pytest.fixture
def tone_path(tmp_path, tone_clip) -> str:
    """The tone clip written to a WAVE file."""
    return save_clip(tone_clip, tmp_path / "tone")
