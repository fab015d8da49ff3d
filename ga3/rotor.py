# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Rotor constructors.

A rotor is an :class:`EvenElement` with unit ``mag2``; it acts on vectors
through :meth:`Versor.sandwich`. Both constructors normalize an intermediate
value and raise :class:`DegenerateVersorError` when that value is zero.
"""

import math

from ga3.versor import DegenerateVersorError, EvenElement, OddElement
from log import get_logger

logger = get_logger(__name__)

Rotor = EvenElement


def from_vectors(a: OddElement, b: OddElement) -> Rotor:
    """Shortest-arc rotor built from the directions of *a* and *b*.

    Computes ``â * m`` where ``m`` bisects the unit directions ``â`` and
    ``b̂``. Only the vector parts of the inputs are used. Under
    :meth:`Versor.sandwich` the returned rotor moves ``b̂`` onto ``â``;
    its inverse moves ``â`` onto ``b̂``.

    Args:
        a (OddElement): Start direction.
        b (OddElement): End direction.

    Returns:
        Rotor: Unit even element.

    Raises:
        DegenerateVersorError: If either vector is zero, or the two are
            antipodal so the bisector vanishes.
    """
    unit_a = a.vector_part().normalize()
    unit_b = b.vector_part().normalize()
    try:
        mid = (unit_a + unit_b).normalize()
    except DegenerateVersorError:
        logger.debug("from_vectors: antipodal directions %s and %s", unit_a, unit_b)
        raise
    rotor = unit_a * mid
    logger.debug("from_vectors -> %s", rotor)
    return rotor


def from_bivector_angle(element: EvenElement, angle: float) -> Rotor:
    """Rotor for *angle* radians in the plane of *element*'s bivector part.

    ``cos(angle/2) + B̂ sin(angle/2)`` with ``B̂`` the unit bivector; the
    scalar part of *element* is ignored.

    Raises:
        DegenerateVersorError: If the bivector part is zero.
    """
    plane = element.bivector_part().normalize()
    half = angle / 2.0
    rotor = EvenElement.from_scalar(math.cos(half)) + plane * EvenElement.from_scalar(math.sin(half))
    logger.debug("from_bivector_angle(angle=%s) -> %s", angle, rotor)
    return rotor
