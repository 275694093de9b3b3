"""Shared type aliases and errors for ezing."""

from __future__ import annotations

from typing import Callable, Literal, TypeVar, Union

import numpy as np

Real = TypeVar("Real", float, np.float32, np.float64)

EasingFn = Callable[[Real], Real]

EasingTriple = tuple[EasingFn, EasingFn, EasingFn]

Precision = Literal["f32", "f64"]

EasingRef = Union[str, EasingFn]


class UnknownEasingError(KeyError):
    """Raised when an easing or family name is not in the catalog."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)
