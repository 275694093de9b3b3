"""Name-based lookup over the easing catalog."""
from __future__ import annotations

import logging

from ezing import easing
from ezing.types import EasingFn, EasingTriple, UnknownEasingError

logger = logging.getLogger(__name__)

VARIANTS = ("in", "out", "inout")

FAMILY_NAMES = (
    "quad",
    "cubic",
    "quart",
    "quint",
    "sine",
    "circ",
    "expo",
    "elastic",
    "back",
    "bounce",
)

FAMILIES: dict[str, EasingTriple] = {
    family: tuple(getattr(easing, f"{family}_{variant}") for variant in VARIANTS)  # type: ignore[misc]
    for family in FAMILY_NAMES
}

EASINGS: dict[str, EasingFn] = {
    "linear": easing.linear,
    **{
        f"{family}_{variant}": fn
        for family, fns in FAMILIES.items()
        for variant, fn in zip(VARIANTS, fns)
    },
}


def _normalize(name: str) -> str:
    return name.strip().lower()


def get_easing(name: str) -> EasingFn:
    """Resolve an easing name such as ``"bounce_out"`` to its function."""
    fn = EASINGS.get(_normalize(name))
    if fn is None:
        logger.debug("unknown easing %r", name)
        raise UnknownEasingError(name, f"unknown easing: {name!r}")
    return fn


def get_family(name: str) -> EasingTriple:
    """Resolve a family name such as ``"quad"`` to its (in, out, inout) triple."""
    triple = FAMILIES.get(_normalize(name))
    if triple is None:
        logger.debug("unknown easing family %r", name)
        raise UnknownEasingError(name, f"unknown easing family: {name!r}")
    return triple
