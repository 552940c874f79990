"""
WAVE container boundary for pcmclip.

WaveFile holds a header plus the flat, channel-interleaved sample data of a
16-bit PCM file. Reading and writing the binary format is delegated to
soundfile; this module only keeps the header fields consistent with the
sample data.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
import soundfile as sf

from .config import CODEC_CONFIG, SAMPLE_DTYPE, SAMPLE_FORMAT
from .errors import CodecError
from .types import FrameArray, InterleavedArray
from ..utils.logger import logger

PathLike = Union[str, Path]


@dataclass
class WaveHeader:
    """
    Header fields of a PCM WAVE file.
    The length-derived fields are only valid after WaveFile.update_header().
    """
    num_channels: int = 0
    sample_rate: int = 0
    bits_per_sample: int = SAMPLE_FORMAT.bits_per_sample
    audio_format: int = CODEC_CONFIG.pcm_audio_format

    # Derived from the fields above and the sample count
    block_align: int = 0
    byte_rate: int = 0
    data_size: int = 0
    riff_size: int = CODEC_CONFIG.riff_header_size


class WaveFile:
    """A 16-bit PCM WAVE file held in memory."""

    def __init__(
        self,
        file_name: str,
        header: Optional[WaveHeader] = None,
        samples: Optional[InterleavedArray] = None
    ):
        self.file_name = file_name
        self.header = header or WaveHeader()
        self.samples = samples if samples is not None else np.zeros(0, dtype=SAMPLE_DTYPE)

    @classmethod
    def open(cls, path: PathLike) -> WaveFile:
        """Reads a WAVE file from disk."""
        logger.info(f"Opening wave file: {path}")
        try:
            frames, samplerate = sf.read(str(path), dtype="int16", always_2d=True)
        except (RuntimeError, OSError) as e:
            logger.error(f"Failed to open {path}: {e}", exc_info=True)
            raise CodecError(f"Failed to open {path}: {e}") from e

        header = WaveHeader(num_channels=frames.shape[1], sample_rate=int(samplerate))
        # Row-major flattening of (frames, channels) is round-robin interleaving
        wave = cls(str(path), header, np.ascontiguousarray(frames).reshape(-1))
        wave.update_header()
        return wave

    @property
    def num_frames(self) -> int:
        if self.header.num_channels <= 0:
            return 0
        return len(self.samples) // self.header.num_channels

    def frames(self) -> FrameArray:
        """The sample data as a (frames, channels) view."""
        self._validate(require_rate=False)
        return self.samples.reshape(-1, self.header.num_channels)

    def update_header(self) -> None:
        """Recomputes the header fields that depend on the sample data."""
        h = self.header
        bytes_per_sample = SAMPLE_FORMAT.bytes_per_sample
        h.block_align = h.num_channels * bytes_per_sample
        h.byte_rate = h.sample_rate * h.block_align
        h.data_size = len(self.samples) * bytes_per_sample
        h.riff_size = CODEC_CONFIG.riff_header_size + h.data_size

    def save(self, path: Optional[PathLike] = None) -> str:
        """
        Writes the file to disk as 16-bit PCM.

        Args:
            path: Destination, defaults to ``file_name``

        Returns:
            The path written
        """
        target = str(path) if path is not None else self.file_name
        self._validate()
        self.update_header()
        try:
            sf.write(
                target,
                self.frames(),
                self.header.sample_rate,
                subtype=CODEC_CONFIG.subtype,
                format=CODEC_CONFIG.container_format
            )
        except (RuntimeError, OSError) as e:
            logger.error(f"Failed to write {target}: {e}", exc_info=True)
            raise CodecError(f"Failed to write {target}: {e}") from e
        logger.info(f"Saved {self.num_frames} frames to {target}")
        return target

    def _validate(self, require_rate: bool = True) -> None:
        h = self.header
        if h.num_channels <= 0:
            raise CodecError(f"Invalid channel count: {h.num_channels}")
        if require_rate and h.sample_rate <= 0:
            raise CodecError(f"Invalid sample rate: {h.sample_rate}")
        if len(self.samples) % h.num_channels:
            raise CodecError(
                f"{len(self.samples)} samples don't divide into "
                f"{h.num_channels} channels"
            )

    def __repr__(self) -> str:
        return (f"WaveFile('{self.file_name}', channels={self.header.num_channels}, "
                f"rate={self.header.sample_rate}, frames={self.num_frames})")
