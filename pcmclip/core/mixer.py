"""
Saturating 16-bit mixer.
All functions are pure (no side effects) and operate on int16 samples.
"""
from __future__ import annotations
import numpy as np

from .config import SAMPLE_DTYPE, SAMPLE_MAX, SAMPLE_MIN
from .errors import InvalidArgumentError
from .types import Channel

_SPAN = int(SAMPLE_MAX) - int(SAMPLE_MIN) + 1


def _wrap(value: int) -> int:
    """Two's-complement wrap of an integer into the 16-bit range."""
    return (value - int(SAMPLE_MIN)) % _SPAN + int(SAMPLE_MIN)


def mix_sample(a: int, b: int) -> int:
    """
    Combine two 16-bit samples, clamping instead of wrapping on overflow.

    The overflow test compares signs against the wrapped sum: a positive
    addend that makes the sum smaller wrapped past the top, a negative
    addend that makes it larger wrapped past the bottom.

    Args:
        a: First sample
        b: Second sample

    Returns:
        Saturated sum in [SAMPLE_MIN, SAMPLE_MAX]
    """
    raw = _wrap(int(a) + int(b))
    if b > 0 and raw < a:
        return int(SAMPLE_MAX)
    if b < 0 and raw > a:
        return int(SAMPLE_MIN)
    return raw


def mix_channels(a: Channel, b: Channel) -> Channel:
    """
    Vectorized mix_sample over two equal-length channels.

    Args:
        a: First channel
        b: Second channel, same length as ``a``

    Returns:
        New int16 channel holding the saturated sums
    """
    if len(a) != len(b):
        raise InvalidArgumentError(
            f"Cannot mix channels of different lengths: {len(a)} and {len(b)}"
        )
    a = np.asarray(a, dtype=SAMPLE_DTYPE)
    b = np.asarray(b, dtype=SAMPLE_DTYPE)

    # Widen, then cast back down; the int32 -> int16 cast wraps.
    raw = (a.astype(np.int32) + b).astype(SAMPLE_DTYPE)

    raw[(b > 0) & (raw < a)] = SAMPLE_MAX
    raw[(b < 0) & (raw > a)] = SAMPLE_MIN
    return raw
