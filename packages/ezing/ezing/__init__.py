"""ezing - Easing functions for animation interpolation."""
from __future__ import annotations

from ezing.easing import (
    back_in,
    back_inout,
    back_out,
    bounce_in,
    bounce_inout,
    bounce_out,
    circ_in,
    circ_inout,
    circ_out,
    cubic_in,
    cubic_inout,
    cubic_out,
    elastic_in,
    elastic_inout,
    elastic_out,
    expo_in,
    expo_inout,
    expo_out,
    linear,
    quad_in,
    quad_inout,
    quad_out,
    quart_in,
    quart_inout,
    quart_out,
    quint_in,
    quint_inout,
    quint_out,
    sine_in,
    sine_inout,
    sine_out,
)
from ezing.interpolate import interpolate, lerp
from ezing.precision import DTYPES, as_precision, sample
from ezing.registry import EASINGS, FAMILIES, FAMILY_NAMES, VARIANTS, get_easing, get_family
from ezing.types import EasingFn, Precision, UnknownEasingError

__all__ = [
    "EASINGS",
    "FAMILIES",
    "FAMILY_NAMES",
    "VARIANTS",
    "DTYPES",
    "EasingFn",
    "Precision",
    "UnknownEasingError",
    "get_easing",
    "get_family",
    "as_precision",
    "sample",
    "lerp",
    "interpolate",
    *EASINGS,
]
