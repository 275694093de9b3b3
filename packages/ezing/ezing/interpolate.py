"""Map eased progress onto a value range."""
from __future__ import annotations

from ezing.registry import get_easing
from ezing.types import EasingRef


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def interpolate(start: float, end: float, t: float, easing: EasingRef = "linear") -> float:
    """Value between ``start`` and ``end`` at progress ``t`` shaped by ``easing``.

    ``t`` is clamped to [0, 1]. ``easing`` is a catalog name or any callable
    with the easing signature. Full progress lands exactly on ``end``.
    """
    easing_fn = get_easing(easing) if isinstance(easing, str) else easing
    t = min(max(t, 0.0), 1.0)
    if t >= 1.0:
        return end
    return lerp(start, end, easing_fn(t))
