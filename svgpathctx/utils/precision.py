"""Precision chopping for platform-independent coordinate output.

Every coordinate the path builder stores goes through chop_precision(), so
the emitted path data is identical across CPU architectures and compilers.
"""

from __future__ import annotations

import math

import numpy as np

# 4 decimal digits
_PRECISION_SCALE = 10000


def chop_precision(f: float) -> float:
    """Round f to 4 decimal digits after narrowing to float32.

    Non-finite values pass through unchanged. A finite value too large for
    float32 comes back as the float32 infinity.
    """
    if not math.isfinite(f):
        return f
    # bring down to float32 precision before rounding for consistency across architectures
    with np.errstate(over="ignore"):
        scaled = float(np.float32(f * _PRECISION_SCALE))
    if not math.isfinite(scaled):
        return scaled
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    # + 0.0 folds -0.0 into 0.0
    return rounded / _PRECISION_SCALE + 0.0


def format_number(v: float) -> str:
    """Shortest round-trip decimal form, without a trailing '.0'.

    Follows Python's repr: positional below 1e16 (1234567.0 -> "1234567"),
    exponent form from 1e16 on ("1e+16").
    """
    text = repr(float(v))
    if text.endswith(".0"):
        text = text[:-2]
    return text
