# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Product tables of the even/odd elements against a dense Cl(3,0) product."""

import pytest
import torch

from ga3 import EvenElement, OddElement
from _dense import SIGNS, from_blades, geometric_product, reverse, to_blades


@pytest.fixture
def samples():
    gen = torch.Generator().manual_seed(3)
    rows = torch.randn(6, 4, generator=gen, dtype=torch.float64)
    evens = [EvenElement(*r.tolist()) for r in rows[:3]]
    odds = [OddElement(*r.tolist()) for r in rows[3:]]
    return evens, odds


class TestDenseOracle:
    def test_basis_vectors_square_to_one(self):
        for idx in (1, 2, 4):
            assert SIGNS[idx, idx].item() == 1.0

    def test_anticommuting_vectors(self):
        # e1 e2 = e12, e2 e1 = -e12
        assert SIGNS[1, 2].item() == 1.0
        assert SIGNS[2, 1].item() == -1.0

    def test_pseudoscalar_squares_to_minus_one(self):
        i = torch.zeros(8, dtype=torch.float64)
        i[7] = 1.0
        assert geometric_product(i, i)[0].item() == -1.0

    def test_zx_is_negative_e13(self):
        assert to_blades(EvenElement.from_bivector(0.0, 2.0, 0.0))[5].item() == -2.0

    def test_layout_round_trip(self, samples):
        evens, odds = samples
        assert from_blades(to_blades(evens[0]), EvenElement) == evens[0]
        assert from_blades(to_blades(odds[0]), OddElement) == odds[0]


class TestProductTablesMatchDenseProduct:
    """Every closure-table product agrees with the dense geometric product."""

    @staticmethod
    def _check(a, b):
        dense = geometric_product(to_blades(a), to_blades(b))
        assert torch.allclose(to_blades(a * b), dense, atol=1e-12), f"{a} * {b}"

    def test_even_even(self, samples):
        evens, _ = samples
        for a in evens:
            for b in evens:
                self._check(a, b)

    def test_even_odd(self, samples):
        evens, odds = samples
        for a in evens:
            for b in odds:
                self._check(a, b)

    def test_odd_even(self, samples):
        evens, odds = samples
        for a in odds:
            for b in evens:
                self._check(a, b)

    def test_odd_odd(self, samples):
        _, odds = samples
        for a in odds:
            for b in odds:
                self._check(a, b)

    def test_rev_matches_dense_reverse(self, samples):
        evens, odds = samples
        for v in evens + odds:
            assert torch.allclose(to_blades(v.rev()), reverse(to_blades(v)))
