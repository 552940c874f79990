"""
Type definitions for the pcmclip core module.
Provides type aliases and small result objects shared across modules.
"""
from typing import Optional, Sequence, Union
import numpy as np
from numpy.typing import NDArray

from .errors import ClipError

# Sample data types
Channel = NDArray[np.int16]           # Shape: (samples,)
InterleavedArray = NDArray[np.int16]  # Shape: (samples * channels,), round-robin order
FrameArray = NDArray[np.int16]        # Shape: (frames, channels)

# Anything accepted as channel input
SampleSequence = Union[Sequence[int], NDArray[np.integer]]


class ComparisonResult:
    """Result from clip equality diagnostics."""
    __slots__ = ('equal', 'reason', 'error')

    def __init__(
        self,
        equal: bool,
        reason: Optional[str] = None,
        error: Optional[ClipError] = None
    ):
        self.equal = equal
        self.reason = reason
        self.error = error

    def __bool__(self) -> bool:
        return self.equal

    def __repr__(self) -> str:
        if self.equal:
            return "ComparisonResult(equal=True)"
        return f"ComparisonResult(equal=False, reason={self.reason!r})"
