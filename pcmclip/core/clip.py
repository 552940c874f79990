from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional

import numpy as np

from .config import SAMPLE_DTYPE, SAMPLE_FORMAT, TIME_CONFIG
from .errors import (
    ChannelMismatchError,
    InvalidArgumentError,
    InvalidSampleRateError,
    RangeError,
    SampleMismatchError,
)
from .mixer import mix_channels
from .types import Channel, ComparisonResult, SampleSequence
from ..utils.logger import logger


def as_channel(values: SampleSequence) -> Channel:
    """Copies a sample sequence into a fresh int16 channel, checking its range."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"Channel data must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype=SAMPLE_DTYPE)
    if arr.dtype.kind not in "iu":
        raise InvalidArgumentError(f"Channel data must be integers, got {arr.dtype}")

    lo, hi = int(arr.min()), int(arr.max())
    if lo < SAMPLE_FORMAT.min_value or hi > SAMPLE_FORMAT.max_value:
        raise RangeError(
            f"Samples out of 16-bit range [{SAMPLE_FORMAT.min_value}, "
            f"{SAMPLE_FORMAT.max_value}]: min={lo}, max={hi}"
        )
    return arr.astype(SAMPLE_DTYPE, copy=True)


@dataclass(eq=False)
class Clip:
    """
    A multi-channel clip of 16-bit audio.

    Each channel is a separate (non-interleaved) int16 array; all channels
    share one sample rate. Slices taken with ``copy=False`` are numpy views
    and share memory with the clip they came from.
    """
    channels: list[Channel] = field(default_factory=list)
    name: str = ""
    sample_rate: int = 0

    @classmethod
    def empty(cls, num_channels: int) -> Clip:
        """Creates a clip with ``num_channels`` empty channels to append to."""
        if num_channels < 0:
            raise InvalidArgumentError(
                f"Channel count must not be negative, got {num_channels}"
            )
        return cls(channels=[np.zeros(0, dtype=SAMPLE_DTYPE) for _ in range(num_channels)])

    @classmethod
    def from_channels(
        cls,
        channels: Iterable[SampleSequence],
        sample_rate: int = 0,
        name: str = ""
    ) -> Clip:
        """Creates a clip owning a copy of each given channel."""
        return cls(
            channels=[as_channel(ch) for ch in channels],
            name=name,
            sample_rate=sample_rate
        )

    # --- Shape ---

    @property
    def num_channels(self) -> int:
        return len(self.channels)

    @property
    def length(self) -> int:
        """Samples per channel (the first channel is authoritative)."""
        return len(self.channels[0]) if self.channels else 0

    @property
    def is_well_formed(self) -> bool:
        """True when every channel has the same length."""
        return len({len(ch) for ch in self.channels}) <= 1

    def _require_same_channels(self, other: Clip) -> None:
        if self.num_channels != other.num_channels:
            raise ChannelMismatchError(self.num_channels, other.num_channels)

    # --- Duration ---

    def duration_ns(self) -> int:
        """Real-time playback length in nanoseconds."""
        if self.sample_rate <= 0:
            raise InvalidSampleRateError(self.sample_rate)
        return self.length * TIME_CONFIG.nanos_per_second // self.sample_rate

    def duration(self) -> timedelta:
        # timedelta resolution is microseconds
        return timedelta(microseconds=self.duration_ns() // 1000)

    @property
    def duration_seconds(self) -> float:
        return self.duration_ns() / TIME_CONFIG.nanos_per_second

    # --- Equality diagnostics ---

    def compare(self, other: Clip) -> None:
        """
        Compares every sample of every channel against another clip.

        Raises:
            ChannelMismatchError: Channel counts differ
            SampleMismatchError: A channel length or sample value differs;
                the first discrepancy found is reported
        """
        self._require_same_channels(other)
        for chan_num, (mine, theirs) in enumerate(zip(self.channels, other.channels)):
            if len(mine) != len(theirs):
                raise SampleMismatchError(chan_num, lengths=(len(mine), len(theirs)))
            diff = np.flatnonzero(mine != theirs)
            if diff.size:
                offset = int(diff[0])
                raise SampleMismatchError(
                    chan_num,
                    offset=offset,
                    values=(int(mine[offset]), int(theirs[offset]))
                )

    def is_equal(self, other: Clip) -> ComparisonResult:
        """Like compare(), but reports the outcome instead of raising."""
        try:
            self.compare(other)
        except (ChannelMismatchError, SampleMismatchError) as e:
            return ComparisonResult(False, reason=str(e), error=e)
        return ComparisonResult(True)

    # --- Algebra ---

    def append(self, source: Clip) -> None:
        """Appends another clip's audio data to this clip, increasing its length."""
        self._require_same_channels(source)
        self.channels = [
            np.concatenate((target_ch, source_ch)).astype(SAMPLE_DTYPE, copy=False)
            for target_ch, source_ch in zip(self.channels, source.channels)
        ]
        logger.debug(f"Appended {source.length} samples to '{self.name}'")

    def mix(self, other: Clip) -> None:
        """
        Mixes another clip into this one with 16-bit saturation.

        Channels shorter than the matching channel of ``other`` are padded
        with silence first, so nothing from ``other`` is dropped.
        """
        self._require_same_channels(other)
        for chan_num, theirs in enumerate(other.channels):
            mine = self.channels[chan_num]
            if len(theirs) > len(mine):
                mine = np.concatenate(
                    (mine, np.zeros(len(theirs) - len(mine), dtype=SAMPLE_DTYPE))
                )
                self.channels[chan_num] = mine
            n = len(theirs)
            mine[:n] = mix_channels(mine[:n], theirs)
        logger.debug(f"Mixed '{other.name}' into '{self.name}'")

    def slice(self, start: int, end: int, copy: bool = False) -> Clip:
        """
        Returns the samples in [start, end) of every channel as a new clip.

        Args:
            start: First sample index, must lie within [0, length]
            end: One past the last sample index; clamped to the clip length
            copy: When False the result's channels are views sharing memory
                  with this clip; when True they are independent copies

        Returns:
            Clip with the same channel count, name and sample rate
        """
        length = self.length
        if start < 0 or start > length:
            raise RangeError(f"Slice start {start} outside [0, {length}]")
        end = min(end, length)
        if end < start:
            raise RangeError(f"Slice end {end} before start {start}")

        window = [ch[start:end] for ch in self.channels]
        if copy:
            window = [ch.copy() for ch in window]
        return Clip(channels=window, name=self.name, sample_rate=self.sample_rate)

    def split(self, num_divisions: int, copy: bool = False) -> list[Clip]:
        """
        Splits the clip into ``num_divisions`` equal-length clips.
        Trailing samples that don't fill a whole division are dropped.
        """
        if num_divisions <= 0:
            raise InvalidArgumentError(
                f"Number of divisions must be positive, got {num_divisions}"
            )
        step = self.length // num_divisions
        return [
            self.slice(i * step, (i + 1) * step, copy=copy)
            for i in range(num_divisions)
        ]

    def stretch(self) -> None:
        """Doubles the playback time of the clip, lowering its pitch an octave."""
        for chan_num, ch in enumerate(self.channels):
            stretched = np.zeros(len(ch) * 2, dtype=SAMPLE_DTYPE)
            stretched[0::2] = ch
            self.channels[chan_num] = stretched
        logger.debug(f"Stretched '{self.name}' to {self.length} samples per channel")

    def reverse(self) -> None:
        """Reverses the audio data of every channel in place."""
        for ch in self.channels:
            # numpy copies overlapping operands before writing
            ch[:] = ch[::-1]

    # --- Utilities ---

    def copy(self) -> Clip:
        return Clip(
            channels=[ch.copy() for ch in self.channels],
            name=self.name,
            sample_rate=self.sample_rate
        )

    def __repr__(self) -> str:
        details = f"'{self.name}', channels={self.num_channels}, samples={self.length}"
        if self.sample_rate > 0:
            details += f", rate={self.sample_rate}, {self.duration_seconds:.2f}s"
        return f"Clip({details})"


def concatenate(clips: Iterable[Clip], name: Optional[str] = None) -> Clip:
    """Joins clips end to end into a new clip (inputs are left untouched)."""
    clips = list(clips)
    if not clips:
        raise InvalidArgumentError("Cannot concatenate an empty list of clips")
    result = clips[0].copy()
    for clip in clips[1:]:
        result.append(clip)
    if name is not None:
        result.name = name
    return result


