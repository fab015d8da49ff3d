# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Even and odd subalgebras of Cl(3,0).

The geometric product of 3-D Euclidean space splits into two closed halves:

    Even x Even -> Even    Even x Odd -> Odd
    Odd  x Even -> Odd     Odd  x Odd -> Even

:class:`EvenElement` holds the scalar and bivector grades, :class:`OddElement`
the vector and trivector grades. Both are immutable four-component values that
share the :class:`Versor` operations (``mag2``, ``rev``, ``inv``,
``normalize``, ``sandwich``).
"""

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Tuple

import torch

from ga3.validation import as_component


class DegenerateVersorError(ValueError):
    """Raised when an inverse or normalization needs a non-positive magnitude."""

    def __init__(self, operation: str, mag2: float):
        super().__init__(
            f"{operation}: squared magnitude {mag2!r} admits no {operation}"
        )
        self.operation = operation
        self.mag2 = mag2


class Versor(ABC):
    """Operations shared by both subalgebras.

    Concrete types are frozen dataclasses of four floats. Arithmetic always
    returns a new value; nothing is mutated in place.
    """

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            name = f"{type(self).__name__}.{f.name}"
            object.__setattr__(self, f.name, as_component(value, name))

    @abstractmethod
    def components(self) -> Tuple[float, float, float, float]:
        """The four components in field order."""

    @abstractmethod
    def rev(self):
        """Reversion: flips the sign of grades 2 and 3."""

    @staticmethod
    def product_type(left: type, right: type) -> type:
        """Result class of ``left * right`` in the closure table.

        Raises:
            TypeError: If the pair is not a product of two elements.
        """
        try:
            return _PRODUCT_TABLE[(left, right)][0]
        except KeyError:
            raise TypeError(
                f"no geometric product between {left.__name__} and {right.__name__}"
            ) from None

    def mag2(self) -> float:
        """Sum of squares of the four components."""
        return sum(c * c for c in self.components())

    def _unit_scaled(self):
        """``(self / s, s)`` with ``s`` the largest absolute component.

        Keeps the squared sums near 1 so tiny or huge components do not
        underflow or overflow on the way to the result.
        """
        s = max(abs(c) for c in self.components())
        return type(self)(*(c / s for c in self.components())), s

    def _checked(self, operation: str, m: float):
        if not all(math.isfinite(c) for c in self.components()):
            raise DegenerateVersorError(operation, m)
        return self

    def inv(self):
        """Multiplicative inverse ``rev(self) / mag2(self)``.

        Raises:
            DegenerateVersorError: If ``mag2 == 0``, or the inverse is not
                representable as finite floats.
        """
        m = self.mag2()
        if m == 0.0:
            raise DegenerateVersorError("inverse", m)
        unit, s = self._unit_scaled()
        k = unit.mag2() * s
        return type(self)(*(c / k for c in unit.rev().components()))._checked("inverse", m)

    def normalize(self):
        """Scales the value to unit ``mag2``.

        Raises:
            DegenerateVersorError: If ``mag2 <= 0``, or the components are
                not finite.
        """
        m = self.mag2()
        if not m > 0.0:
            raise DegenerateVersorError("normalization", m)
        unit, _ = self._unit_scaled()
        k = math.sqrt(unit.mag2())
        return type(self)(*(c / k for c in unit.components()))._checked("normalization", m)

    def sandwich(self, value):
        """Conjugates *value* by this versor: ``self * value * self.inv()``.

        The result always has the type of *value*.

        Raises:
            TypeError: If *value* is not an element, or the conjugation
                would not land back in the type of *value*.
            DegenerateVersorError: If this versor is not invertible.
        """
        if not isinstance(value, Versor):
            raise TypeError(
                f"sandwich expects an EvenElement or OddElement, got {type(value).__name__}"
            )
        middle = Versor.product_type(type(self), type(value))
        if Versor.product_type(middle, type(self)) is not type(value):
            raise TypeError(
                f"sandwich of {type(value).__name__} by {type(self).__name__} is not closed"
            )
        return self * value * self.inv()

    def sandwich_vector(self, v: "OddElement") -> "OddElement":
        """Applies this versor to a vector (odd element)."""
        if not isinstance(v, OddElement):
            raise TypeError(f"sandwich_vector expects an OddElement, got {type(v).__name__}")
        return self.sandwich(v)

    def sandwich_even(self, e: "EvenElement") -> "EvenElement":
        """Applies this versor to an even element."""
        if not isinstance(e, EvenElement):
            raise TypeError(f"sandwich_even expects an EvenElement, got {type(e).__name__}")
        return self.sandwich(e)

    def as_tensor(self) -> torch.Tensor:
        """Components as a float64 tensor of shape [4], in field order."""
        return torch.tensor(self.components(), dtype=torch.float64)

    def allclose(self, other, atol: float = 1e-9) -> bool:
        """Component-wise comparison within *atol* against a same-typed value."""
        if type(other) is not type(self):
            return False
        return torch.allclose(self.as_tensor(), other.as_tensor(), rtol=0.0, atol=atol)

    def _scaled(self, k: float):
        return type(self)(*(c * k for c in self.components()))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.components(), other.components())))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self.components(), other.components())))

    def __neg__(self):
        return self._scaled(-1.0)

    def __mul__(self, other):
        """Geometric product (element operand) or uniform scale (real operand)."""
        if isinstance(other, Versor):
            entry = _PRODUCT_TABLE.get((type(self), type(other)))
            if entry is None:
                return NotImplemented
            return entry[1](self, other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self._scaled(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self._scaled(float(other))
        return NotImplemented

    def __invert__(self):
        """Reversion (~A)."""
        return self.rev()


@dataclass(frozen=True)
class EvenElement(Versor):
    """Scalar + bivector. Rotors are the unit-magnitude members.

    Bivector components use the cyclic basis e_yz, e_zx, e_xy.

    Attributes:
        scalar (float): Grade-0 part.
        yz (float): e_yz coefficient.
        zx (float): e_zx coefficient.
        xy (float): e_xy coefficient.
    """

    scalar: float = 0.0
    yz: float = 0.0
    zx: float = 0.0
    xy: float = 0.0

    @classmethod
    def from_scalar(cls, s: float) -> "EvenElement":
        """Pure grade-0 element."""
        return cls(s, 0.0, 0.0, 0.0)

    @classmethod
    def from_bivector(cls, yz: float, zx: float, xy: float) -> "EvenElement":
        """Pure grade-2 element."""
        return cls(0.0, yz, zx, xy)

    def components(self):
        return (self.scalar, self.yz, self.zx, self.xy)

    def rev(self) -> "EvenElement":
        return EvenElement(self.scalar, -self.yz, -self.zx, -self.xy)

    def scalar_part(self) -> "EvenElement":
        return EvenElement(self.scalar, 0.0, 0.0, 0.0)

    def bivector_part(self) -> "EvenElement":
        return EvenElement(0.0, self.yz, self.zx, self.xy)

    def __str__(self):
        return f"sca: {self.scalar}, yz: {self.yz}, zx: {self.zx}, xy: {self.xy}"


@dataclass(frozen=True)
class OddElement(Versor):
    """Vector + trivector. Plain spatial vectors have ``xyz == 0``.

    Attributes:
        xyz (float): Pseudoscalar (e_xyz) coefficient.
        x (float): e_x coefficient.
        y (float): e_y coefficient.
        z (float): e_z coefficient.
    """

    xyz: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vector(cls, x: float, y: float, z: float) -> "OddElement":
        """Pure grade-1 element."""
        return cls(0.0, x, y, z)

    def components(self):
        return (self.xyz, self.x, self.y, self.z)

    def rev(self) -> "OddElement":
        return OddElement(-self.xyz, self.x, self.y, self.z)

    def vector_part(self) -> "OddElement":
        return OddElement(0.0, self.x, self.y, self.z)

    def __str__(self):
        return f"xyz: {self.xyz}, x: {self.x}, y: {self.y}, z: {self.z}"


def _even_even(a: EvenElement, b: EvenElement) -> EvenElement:
    return EvenElement(
        a.scalar * b.scalar - a.yz * b.yz - a.zx * b.zx - a.xy * b.xy,
        a.yz * b.scalar + a.scalar * b.yz + a.xy * b.zx - a.zx * b.xy,
        a.zx * b.scalar + a.scalar * b.zx + a.yz * b.xy - a.xy * b.yz,
        a.xy * b.scalar + a.scalar * b.xy + a.zx * b.yz - a.yz * b.zx,
    )


def _even_odd(a: EvenElement, b: OddElement) -> OddElement:
    return OddElement(
        a.scalar * b.xyz + a.yz * b.x + a.zx * b.y + a.xy * b.z,
        a.scalar * b.x - a.yz * b.xyz + a.xy * b.y - a.zx * b.z,
        a.scalar * b.y - a.zx * b.xyz + a.yz * b.z - a.xy * b.x,
        a.scalar * b.z - a.xy * b.xyz + a.zx * b.x - a.yz * b.y,
    )


def _odd_odd(a: OddElement, b: OddElement) -> EvenElement:
    return EvenElement(
        a.x * b.x + a.y * b.y + a.z * b.z - a.xyz * b.xyz,
        a.x * b.xyz + a.xyz * b.x + a.y * b.z - a.z * b.y,
        a.y * b.xyz + a.xyz * b.y + a.z * b.x - a.x * b.z,
        a.z * b.xyz + a.xyz * b.z + a.x * b.y - a.y * b.x,
    )


def _odd_even(a: OddElement, b: EvenElement) -> OddElement:
    return OddElement(
        a.xyz * b.scalar + a.x * b.yz + a.y * b.zx + a.z * b.xy,
        a.x * b.scalar - a.xyz * b.yz + a.z * b.zx - a.y * b.xy,
        a.y * b.scalar - a.xyz * b.zx + a.x * b.xy - a.z * b.yz,
        a.z * b.scalar - a.xyz * b.xy + a.y * b.yz - a.x * b.zx,
    )


# (left, right) -> (result type, product)
_PRODUCT_TABLE = {
    (EvenElement, EvenElement): (EvenElement, _even_even),
    (EvenElement, OddElement): (OddElement, _even_odd),
    (OddElement, EvenElement): (OddElement, _odd_even),
    (OddElement, OddElement): (EvenElement, _odd_odd),
}
