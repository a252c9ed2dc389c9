"""2D floating-point vector used by scene-description and shading math."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

import numpy as np

from .. import contracts


def _minimum(a, b):
    # NaN propagates through np.minimum; equal operands (0.0 vs -0.0) rank -0.0 lower.
    tied = np.copysign(a, np.where(np.signbit(a) | np.signbit(b), -1.0, 1.0))
    return np.where(a == b, tied, np.minimum(a, b))


def _maximum(a, b):
    tied = np.copysign(a, np.where(np.signbit(a) & np.signbit(b), -1.0, 1.0))
    return np.where(a == b, tied, np.maximum(a, b))


@dataclass(frozen=True, eq=False)
class Vector2f:
    """Immutable pair of binary64 components.

    Every instance, including the results of arithmetic, is built through the
    constructor, so NaN components are rejected whenever contract checks are
    enabled. With checks disabled NaN and infinities propagate per IEEE-754.
    """

    x: float
    y: float

    # Keep numpy scalars from broadcasting over us; defer to __rmul__ instead.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        if not isinstance(self.x, Real) or not isinstance(self.y, Real):
            raise TypeError(f"Vector2f components must be real numbers, got ({self.x!r}, {self.y!r})")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        contracts.require(not self.has_nans(), "Vector2f components must not be NaN: (%r, %r)", self.x, self.y)

    def get(self, index: int) -> float:
        """Return component ``index``; only 0 (x) and 1 (y) are valid."""
        index = operator.index(index)
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2f index out of range: {index}")

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __add__(self, other: "Vector2f") -> "Vector2f":
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2f") -> "Vector2f":
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2f":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2f(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: float) -> "Vector2f":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2f":
        if not isinstance(scalar, Real):
            return NotImplemented
        contracts.require(scalar != 0, "Cannot divide %r by zero.", self)
        if scalar == 0:
            # Python raises on 1.0 / 0.0; use the IEEE reciprocal instead.
            recip = math.copysign(math.inf, scalar)
        else:
            recip = 1.0 / scalar
        return self * recip

    def __neg__(self) -> "Vector2f":
        return Vector2f(-self.x, -self.y)

    def __abs__(self) -> "Vector2f":
        return self.abs()

    @staticmethod
    def add(left: "Vector2f", right: "Vector2f") -> "Vector2f":
        return left + right

    @staticmethod
    def subtract(left: "Vector2f", right: "Vector2f") -> "Vector2f":
        return left - right

    @staticmethod
    def multiply(left: "Vector2f | float", right: "Vector2f | float") -> "Vector2f":
        """Scale a vector; accepts the scalar on either side."""
        if not isinstance(left, Vector2f) and not isinstance(right, Vector2f):
            raise TypeError("multiply() needs one Vector2f operand.")
        return left * right

    @staticmethod
    def negate(item: "Vector2f") -> "Vector2f":
        return -item

    @staticmethod
    def divide(left: "Vector2f", right: float) -> "Vector2f":
        return left / right

    @staticmethod
    def component_min(v1: "Vector2f", v2: "Vector2f") -> "Vector2f":
        """Per-axis minimum. NaN on either side yields NaN; -0.0 ranks below 0.0."""
        return Vector2f.from_array(_minimum(v1.to_array(), v2.to_array()))

    @staticmethod
    def component_max(v1: "Vector2f", v2: "Vector2f") -> "Vector2f":
        """Per-axis maximum. NaN on either side yields NaN; 0.0 ranks above -0.0."""
        return Vector2f.from_array(_maximum(v1.to_array(), v2.to_array()))

    def abs(self) -> "Vector2f":
        return Vector2f(math.fabs(self.x), math.fabs(self.y))

    def dot(self, other: "Vector2f") -> float:
        return self.x * other.x + self.y * other.y

    def abs_dot(self, other: "Vector2f") -> float:
        return math.fabs(self.dot(other))

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector2f":
        """Scale to unit length.

        A zero-length vector is a contract violation. With checks disabled it
        comes back as (nan, nan); it is never clamped.
        """
        length = self.length()
        contracts.require(length != 0, "Cannot normalize a zero-length vector.")
        return self / length

    def min_component(self) -> float:
        return float(_minimum(self.x, self.y))

    def max_component(self) -> float:
        return float(_maximum(self.x, self.y))

    def max_dimension(self) -> int:
        # Strict comparison: ties go to axis 1.
        return 0 if self.x > self.y else 1

    def permute(self, i: int, j: int) -> "Vector2f":
        return Vector2f(self.get(i), self.get(j))

    def has_nans(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        combined = 3.0 * self.x + 5.0 * self.y
        if not math.isfinite(combined):
            return hash((self.x, self.y))
        return int(combined)

    def __str__(self) -> str:
        # repr(float) is the shortest string that parses back to the same bits.
        return f"[{self.x!r}, {self.y!r}]"

    @classmethod
    def parse(cls, text: str) -> "Vector2f":
        """Parse the ``[x, y]`` form produced by ``str()``."""
        body = text.strip()
        if not (body.startswith("[") and body.endswith("]")):
            raise ValueError(f"Malformed Vector2f text: {text!r}")
        parts = body[1:-1].split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected two components in {text!r}")
        return cls(float(parts[0]), float(parts[1]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> "Vector2f":
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (2,):
            raise ValueError(f"Expected 2 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))
