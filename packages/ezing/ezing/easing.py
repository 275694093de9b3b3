"""Easing functions for animation interpolation.

Every function maps normalized progress ``t`` (conventionally in [0, 1]) to an
eased value, with ``f(0) == 0`` and ``f(1) == 1``. Inputs are not clamped.

The formulas are written once and serve both precisions: a ``numpy.float32``
argument yields a ``numpy.float32`` result, a Python ``float`` or
``numpy.float64`` argument yields a 64-bit result. Transcendental parts go
through numpy ufuncs for that reason.
"""
from __future__ import annotations

import numpy as np

from ezing.types import Real

PI = np.pi
HALF_PI = np.pi / 2


def linear(t: Real) -> Real:
    return t


def quad_in(t: Real) -> Real:
    return t * t


def quad_out(t: Real) -> Real:
    return -t * (t - 2.0)


def quad_inout(t: Real) -> Real:
    if t < 0.5:
        return 2.0 * t * t
    return (-2.0 * t * t) + (4.0 * t) - 1.0


def cubic_in(t: Real) -> Real:
    return t * t * t


def cubic_out(t: Real) -> Real:
    f = t - 1.0
    return f * f * f + 1.0


def cubic_inout(t: Real) -> Real:
    if t < 0.5:
        return 4.0 * t * t * t
    f = (2.0 * t) - 2.0
    return 0.5 * f * f * f + 1.0


def quart_in(t: Real) -> Real:
    return t * t * t * t


def quart_out(t: Real) -> Real:
    f = t - 1.0
    return f * f * f * (1.0 - t) + 1.0


def quart_inout(t: Real) -> Real:
    if t < 0.5:
        return 8.0 * t * t * t * t
    f = t - 1.0
    return -8.0 * f * f * f * f + 1.0


def quint_in(t: Real) -> Real:
    return t * t * t * t * t


def quint_out(t: Real) -> Real:
    f = t - 1.0
    return f * f * f * f * f + 1.0


def quint_inout(t: Real) -> Real:
    if t < 0.5:
        return 16.0 * t * t * t * t * t
    f = (2.0 * t) - 2.0
    return 0.5 * f * f * f * f * f + 1.0


def sine_in(t: Real) -> Real:
    return np.sin((t - 1.0) * HALF_PI) + 1.0


def sine_out(t: Real) -> Real:
    return np.sin(t * HALF_PI)


def sine_inout(t: Real) -> Real:
    return 0.5 * (1.0 - np.cos(t * PI))


def circ_in(t: Real) -> Real:
    return 1.0 - np.sqrt(1.0 - t * t)


def circ_out(t: Real) -> Real:
    return np.sqrt((2.0 - t) * t)


def circ_inout(t: Real) -> Real:
    if t < 0.5:
        return 0.5 * (1.0 - np.sqrt(1.0 - 4.0 * t * t))
    return 0.5 * (np.sqrt(-(2.0 * t - 3.0) * (2.0 * t - 1.0)) + 1.0)


def expo_in(t: Real) -> Real:
    """``2^(10(t-1))``, pinned to exactly 0 at ``t == 0``."""
    if t == 0.0:
        return t
    return np.exp2(10.0 * (t - 1.0))


def expo_out(t: Real) -> Real:
    """``1 - 2^(-10t)``, pinned to exactly 1 at ``t == 1``."""
    if t == 1.0:
        return t
    return 1.0 - np.exp2(-10.0 * t)


def expo_inout(t: Real) -> Real:
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return 0.5 * np.exp2(20.0 * t - 10.0)
    return -0.5 * np.exp2(-20.0 * t + 10.0) + 1.0


def elastic_in(t: Real) -> Real:
    return np.sin(13.0 * HALF_PI * t) * np.exp2(10.0 * (t - 1.0))


def elastic_out(t: Real) -> Real:
    return np.sin(-13.0 * HALF_PI * (t + 1.0)) * np.exp2(-10.0 * t) + 1.0


def elastic_inout(t: Real) -> Real:
    if t < 0.5:
        return 0.5 * np.sin(13.0 * HALF_PI * (2.0 * t)) * np.exp2(10.0 * (2.0 * t - 1.0))
    return 0.5 * (
        np.sin(-13.0 * HALF_PI * (2.0 * t)) * np.exp2(-10.0 * (2.0 * t - 1.0)) + 2.0
    )


def back_in(t: Real) -> Real:
    return t * t * t - t * np.sin(t * PI)


def back_out(t: Real) -> Real:
    f = 1.0 - t
    return 1.0 - f * f * f + f * np.sin(f * PI)


def back_inout(t: Real) -> Real:
    if t < 0.5:
        f = 2.0 * t
        return 0.5 * (f * f * f - f * np.sin(f * PI))
    f = 2.0 - 2.0 * t
    return 0.5 * (1.0 - (f * f * f - f * np.sin(f * PI))) + 0.5


def bounce_in(t: Real) -> Real:
    return 1.0 - bounce_out(1.0 - t)


def bounce_out(t: Real) -> Real:
    """Four quadratic arcs joined at 4/11, 8/11 and 9/10."""
    if t < 4.0 / 11.0:
        return 121.0 / 16.0 * t * t
    if t < 8.0 / 11.0:
        return 363.0 / 40.0 * t * t - 99.0 / 10.0 * t + 17.0 / 5.0
    if t < 9.0 / 10.0:
        return 4356.0 / 361.0 * t * t - 35442.0 / 1805.0 * t + 16061.0 / 1805.0
    return 54.0 / 5.0 * t * t - 513.0 / 25.0 * t + 268.0 / 25.0


def bounce_inout(t: Real) -> Real:
    if t < 0.5:
        return 0.5 * bounce_in(t * 2.0)
    return 0.5 * bounce_out(t * 2.0 - 1.0) + 0.5
