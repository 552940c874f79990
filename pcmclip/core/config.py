"""
Centralized configuration for pcmclip.
Sample format limits, container settings and time units in one place.
"""
from dataclasses import dataclass

import numpy as np


# Storage type for every channel
SAMPLE_DTYPE = np.int16
SAMPLE_MIN = np.int16(np.iinfo(np.int16).min)  # -32768
SAMPLE_MAX = np.int16(np.iinfo(np.int16).max)  # 32767


@dataclass(frozen=True, slots=True)
class SampleFormat:
    """Fixed-width sample format."""
    bits_per_sample: int = 16
    dtype_name: str = "int16"
    min_value: int = int(SAMPLE_MIN)
    max_value: int = int(SAMPLE_MAX)

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """WAVE container settings."""
    extension: str = ".wav"
    container_format: str = "WAV"
    subtype: str = "PCM_16"
    pcm_audio_format: int = 1
    riff_header_size: int = 36  # RIFF size = 36 + data chunk size
    default_name: str = "untitled"


@dataclass(frozen=True, slots=True)
class TimeConfig:
    """Time granularity used for durations."""
    nanos_per_second: int = 1_000_000_000


# Global config instances (immutable singletons)
SAMPLE_FORMAT = SampleFormat()
CODEC_CONFIG = CodecConfig()
TIME_CONFIG = TimeConfig()
