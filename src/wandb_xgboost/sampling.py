"""Iteration sampling for metric logging."""

import math
import sys


def logging_stride(sample_rate: float) -> int:
    """Rounds between two logged iterations: ``round(1 / sample_rate)``, at least 1.

    Rates so small that the inverse overflows a float log only round 0.
    """
    inverse = 1.0 / sample_rate
    if math.isinf(inverse):
        return sys.maxsize
    return max(1, round(inverse))


def should_log(epoch: int, sample_rate: float) -> bool:
    """True for epoch 0 and every ``logging_stride(sample_rate)`` rounds after it."""
    return epoch % logging_stride(sample_rate) == 0
