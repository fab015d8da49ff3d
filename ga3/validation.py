# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Lightweight input validation for ga3 values.

Shape checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable them even without the -O flag.
The type check in :func:`as_component` always runs.
"""

import numbers

import torch

VALIDATE = True


def check_component(value, name: str = "component") -> None:
    """Assert a tensor component is a real 0-d tensor."""
    if not VALIDATE or not isinstance(value, torch.Tensor):
        return
    assert value.ndim == 0, (
        f"{name}: expected a 0-d tensor, got shape {tuple(value.shape)}"
    )
    assert not value.is_complex(), f"{name}: complex tensors are not supported"


def as_component(value, name: str = "component") -> float:
    """Coerce one real component to ``float``.

    Accepts Python / numpy real numbers and tensors.

    Raises:
        TypeError: For ``bool``, strings, and anything that is not a real number.
    """
    check_component(value, name)
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, torch.Tensor)):
        raise TypeError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)
