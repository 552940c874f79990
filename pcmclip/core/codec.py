"""
Conversion between clips and WAVE containers.

A WaveFile stores samples interleaved round-robin across channels
(L0 R0 L1 R1 ...); a Clip stores one array per channel. Everything here is
the mapping between the two layouts plus the file-name rule for containers.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .clip import Clip
from .config import CODEC_CONFIG, SAMPLE_DTYPE
from .errors import CodecError, MalformedClipError
from .types import Channel, InterleavedArray
from .wave import WaveFile, WaveHeader
from ..utils.logger import logger

PathLike = Union[str, Path]


def container_file_name(name: str) -> str:
    """Adds the container extension to ``name`` unless it already ends with it."""
    if not name:
        name = CODEC_CONFIG.default_name
    if not name.lower().endswith(CODEC_CONFIG.extension):
        name += CODEC_CONFIG.extension
    return name


def deinterleave(samples: InterleavedArray, num_channels: int) -> list[Channel]:
    """
    Splits a flat round-robin sequence into per-channel arrays.
    Sample ``i`` lands in channel ``i % num_channels``.
    """
    if num_channels <= 0:
        raise CodecError(f"Invalid channel count: {num_channels}")
    samples = np.asarray(samples, dtype=SAMPLE_DTYPE)
    if len(samples) % num_channels:
        logger.warning(
            f"{len(samples)} samples don't divide evenly into {num_channels} "
            f"channels; channel lengths will differ"
        )
    return [samples[ch::num_channels].copy() for ch in range(num_channels)]


def interleave(channels: list[Channel]) -> InterleavedArray:
    """
    Joins per-channel arrays into one flat round-robin sequence:
    every channel's sample at offset 0, then offset 1, and so on.
    """
    if not channels:
        raise MalformedClipError("Cannot interleave a clip without channels")
    length = len(channels[0])
    for chan_num, ch in enumerate(channels):
        if len(ch) != length:
            raise MalformedClipError(
                f"Channel {chan_num} has {len(ch)} samples, expected {length}"
            )
    return np.stack(channels, axis=1).astype(SAMPLE_DTYPE, copy=False).reshape(-1)


def clip_from_wave(wave: WaveFile) -> Clip:
    """Builds a clip from a decoded WAVE container."""
    clip = Clip(
        channels=deinterleave(wave.samples, wave.header.num_channels),
        name=wave.file_name,
        sample_rate=int(wave.header.sample_rate)
    )
    logger.debug(f"Decoded {clip!r}")
    return clip


def wave_from_clip(clip: Clip) -> WaveFile:
    """Builds a WAVE container from a clip, with its header finalized."""
    header = WaveHeader(num_channels=clip.num_channels, sample_rate=clip.sample_rate)
    wave = WaveFile(container_file_name(clip.name), header, interleave(clip.channels))
    wave.update_header()
    return wave


def load_clip(path: PathLike) -> Clip:
    """Reads a WAVE file from disk into a clip."""
    return clip_from_wave(WaveFile.open(path))


def save_clip(clip: Clip, path: Optional[PathLike] = None) -> str:
    """
    Writes a clip to disk as a WAVE file.

    Args:
        clip: Clip to write; must be well-formed with a positive sample rate
        path: Destination, defaults to the clip's name. The ``.wav``
              extension is appended when missing.

    Returns:
        The path written
    """
    wave = wave_from_clip(clip)
    target = container_file_name(str(path)) if path is not None else wave.file_name
    return wave.save(target)
