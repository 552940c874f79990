"""
Error types raised by pcmclip.

Every failure is a ClipError tagged with an ErrorKind, so callers can either
catch the specific class or branch on ``error.kind``.
"""
from __future__ import annotations
from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Failure categories."""
    CHANNEL_MISMATCH = auto()
    SAMPLE_MISMATCH = auto()
    INVALID_SAMPLE_RATE = auto()
    INVALID_ARGUMENT = auto()
    RANGE_ERROR = auto()
    CODEC_ERROR = auto()
    MALFORMED_CLIP = auto()


class ClipError(Exception):
    """Base class for all pcmclip errors."""
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class ChannelMismatchError(ClipError):
    """Two clips given to a channel-wise operation have different channel counts."""
    kind = ErrorKind.CHANNEL_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Clips have varying number of channels: {expected}, {actual}"
        )


class SampleMismatchError(ClipError):
    """
    Two clips with the same channel count differ in a channel.

    Either ``lengths`` is set (channel lengths differ) or ``offset`` and
    ``values`` locate the first differing sample.
    """
    kind = ErrorKind.SAMPLE_MISMATCH

    def __init__(
        self,
        channel: int,
        offset: Optional[int] = None,
        values: Optional[tuple[int, int]] = None,
        lengths: Optional[tuple[int, int]] = None
    ) -> None:
        self.channel = channel
        self.offset = offset
        self.values = values
        self.lengths = lengths
        if lengths is not None:
            message = (f"Clips have varying number of samples "
                       f"({lengths[0]} and {lengths[1]}) for channel {channel}")
        else:
            message = (f"Clips have varying sample values "
                       f"({values[0]} and {values[1]}) at offset {offset} "
                       f"on channel {channel}")
        super().__init__(message)


class InvalidSampleRateError(ClipError, ValueError):
    """Duration requested on a clip without a positive sample rate."""
    kind = ErrorKind.INVALID_SAMPLE_RATE

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = sample_rate
        super().__init__(f"Sample rate must be positive, got {sample_rate}")


class InvalidArgumentError(ClipError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class RangeError(ClipError, IndexError):
    kind = ErrorKind.RANGE_ERROR


class CodecError(ClipError):
    """Failure opening, decoding or writing the WAVE container."""
    kind = ErrorKind.CODEC_ERROR


class MalformedClipError(ClipError, ValueError):
    """Clip channels are not uniform where the operation needs them to be."""
    kind = ErrorKind.MALFORMED_CLIP
