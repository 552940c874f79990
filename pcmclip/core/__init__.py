"""
pcmclip Core Module

This module contains the core sample-buffer logic:
- Clip: Multi-channel 16-bit buffer and its algebra
- mixer: Saturating sample mixing
- WaveFile: WAVE container held in memory
- codec: Clip <-> container conversion and file helpers
- errors: Typed failures tagged with an ErrorKind
"""
from .clip import Clip, as_channel, concatenate
from .wave import WaveFile, WaveHeader
from .codec import (
    clip_from_wave,
    wave_from_clip,
    load_clip,
    save_clip,
    interleave,
    deinterleave,
    container_file_name
)
from .mixer import mix_sample, mix_channels
from .types import ComparisonResult
from .config import (
    CODEC_CONFIG,
    SAMPLE_FORMAT,
    TIME_CONFIG,
    SAMPLE_DTYPE,
    SAMPLE_MIN,
    SAMPLE_MAX
)
from .errors import (
    ErrorKind,
    ClipError,
    ChannelMismatchError,
    SampleMismatchError,
    InvalidSampleRateError,
    InvalidArgumentError,
    RangeError,
    CodecError,
    MalformedClipError
)

__all__ = [
    # Main classes
    'Clip',
    'WaveFile',
    'WaveHeader',
    'ComparisonResult',
    # Functions
    'as_channel',
    'concatenate',
    'clip_from_wave',
    'wave_from_clip',
    'load_clip',
    'save_clip',
    'interleave',
    'deinterleave',
    'container_file_name',
    'mix_sample',
    'mix_channels',
    # Config
    'CODEC_CONFIG',
    'SAMPLE_FORMAT',
    'TIME_CONFIG',
    'SAMPLE_DTYPE',
    'SAMPLE_MIN',
    'SAMPLE_MAX',
    # Errors
    'ErrorKind',
    'ClipError',
    'ChannelMismatchError',
    'SampleMismatchError',
    'InvalidSampleRateError',
    'InvalidArgumentError',
    'RangeError',
    'CodecError',
    'MalformedClipError',
]
