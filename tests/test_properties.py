# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

import unittest

import torch

from ga3 import EvenElement, OddElement


def _random_elements(cls, count, seed):
    gen = torch.Generator().manual_seed(seed)
    samples = torch.randn(count, 4, generator=gen, dtype=torch.float64) * 3.0
    return [cls(*row.tolist()) for row in samples]


class TestAlgebraicProperties(unittest.TestCase):
    def setUp(self):
        self.evens = _random_elements(EvenElement, 16, seed=0)
        self.odds = _random_elements(OddElement, 16, seed=1)

    def test_reversion_is_involution(self):
        """rev(rev(v)) == v exactly."""
        for v in self.evens + self.odds:
            self.assertEqual(v.rev().rev(), v)

    def test_normalize_gives_unit_mag2(self):
        for v in self.evens + self.odds:
            self.assertAlmostEqual(v.normalize().mag2(), 1.0, delta=1e-9)

    def test_inverse_identity(self):
        one = EvenElement.from_scalar(1.0)
        for v in self.evens + self.odds:
            self.assertTrue((v * v.inv()).allclose(one, atol=1e-9), f"{v} * inv != 1")

    def test_rev_product_is_mag2(self):
        """rev(v) * v collapses to the scalar mag2 in both subalgebras."""
        for v in self.evens + self.odds:
            prod = v.rev() * v
            self.assertTrue(prod.allclose(EvenElement.from_scalar(v.mag2()), atol=1e-9))

    def test_product_is_associative(self):
        a, b, c = self.evens[:3]
        u, v, w = self.odds[:3]
        self.assertTrue(((a * b) * c).allclose(a * (b * c), atol=1e-9))
        self.assertTrue(((a * u) * b).allclose(a * (u * b), atol=1e-9))
        self.assertTrue(((u * v) * w).allclose(u * (v * w), atol=1e-9))
        self.assertTrue(((u * a) * v).allclose(u * (a * v), atol=1e-9))

    def test_product_distributes_over_addition(self):
        a, b = self.evens[:2]
        u, v = self.odds[:2]
        self.assertTrue((a * (u + v)).allclose(a * u + a * v, atol=1e-9))
        self.assertTrue(((u - v) * b).allclose(u * b - v * b, atol=1e-9))

    def test_reversion_reverses_products(self):
        """rev(AB) == rev(B) rev(A)."""
        a = self.evens[0]
        u, v = self.odds[:2]
        self.assertTrue((a * u).rev().allclose(u.rev() * a.rev(), atol=1e-9))
        self.assertTrue((u * v).rev().allclose(v.rev() * u.rev(), atol=1e-9))

    def test_unit_even_sandwich_is_isometry(self):
        for r in (e.normalize() for e in self.evens[:4]):
            for v in self.odds:
                out = r.sandwich(v.vector_part())
                self.assertAlmostEqual(out.mag2(), v.vector_part().mag2(), delta=1e-9)


if __name__ == '__main__':
    unittest.main()
