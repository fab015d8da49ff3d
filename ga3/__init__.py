# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""ga3: even/odd subalgebra kernel of 3-D Euclidean geometric algebra.

Provides the two closed value types and the rotor constructors.
"""

__version__ = "0.1.0"

from .versor import Versor, EvenElement, OddElement, DegenerateVersorError
from .rotor import Rotor, from_vectors, from_bivector_angle

__all__ = [
    "__version__",
    # versor
    "Versor",
    "EvenElement",
    "OddElement",
    "DegenerateVersorError",
    # rotor
    "Rotor",
    "from_vectors",
    "from_bivector_angle",
]
