"""32-bit and 64-bit evaluation of easing functions."""
from __future__ import annotations

import numpy as np

from ezing.types import EasingFn, Precision

DTYPES: dict[str, type[np.floating]] = {
    "f32": np.float32,
    "f64": np.float64,
}


def _dtype(precision: str) -> type[np.floating]:
    dtype = DTYPES.get(precision)
    if dtype is None:
        raise ValueError(f"precision must be one of {sorted(DTYPES)}, got {precision!r}")
    return dtype


def as_precision(t: float, precision: Precision = "f64") -> np.floating:
    """Coerce ``t`` to a numpy scalar of the given precision."""
    return _dtype(precision)(t)


def sample(
    fn: EasingFn, n: int = 100, precision: Precision = "f64"
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate ``fn`` on ``n + 1`` evenly spaced points of [0, 1].

    Each point is passed to ``fn`` as a scalar of the requested precision, so
    the curve reflects what a caller working in that precision would see.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    dtype = _dtype(precision)
    ts = np.linspace(0.0, 1.0, n + 1, dtype=dtype)
    ys = np.array([fn(t) for t in ts], dtype=dtype)
    return ts, ys
