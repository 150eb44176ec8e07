# -*- coding: utf-8 -*-

###############################################################################
# This file is part of microlibm
###############################################################################
# MIT License
#
# Copyright (c) 2018 Kalray
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
###############################################################################
# created:          Oct 19th, 2026
#
# description:      unit-tests for floating-point random generators
###############################################################################
import unittest

import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64
from microlibm_core.core.random_gen import FPRandomGen, normalize_map
from microlibm_core.core.special_values import (
    is_subnormal, is_nan, is_snan, classify_integer_value, IntegerClass
)


def generate(rng, num=200):
    return [rng.get_new_value() for _ in range(num)]


class UT_RandomGen(unittest.TestCase):
    def test_normalize_map(self):
        weight_map = normalize_map({"a": 1.0, "b": 3.0})
        self.assertEqual(weight_map["a"], 0.25)
        self.assertEqual(weight_map["b"], 0.75)
        self.assertRaises(ValueError, normalize_map, {"a": -1.0, "b": 2.0})
        self.assertRaises(ValueError, normalize_map, {"a": 0.0})

    def test_seed_reproducibility(self):
        """ generators sharing a seed generate the same sequence """
        for precision in [ML_Binary32, ML_Binary64]:
            values_0 = generate(FPRandomGen(precision, seed=17))
            values_1 = generate(FPRandomGen(precision, seed=17))
            self.assertEqual(
                [precision.get_integer_coding(v) for v in values_0],
                [precision.get_integer_coding(v) for v in values_1])

    def test_value_format(self):
        for value in generate(FPRandomGen(ML_Binary32, seed=3)):
            self.assertTrue(isinstance(value, np.float32))
        for value in generate(FPRandomGen(ML_Binary64, seed=3)):
            self.assertTrue(isinstance(value, np.float64))

    def test_exponent_range(self):
        """ FPLogInterval values lie in [2**min_exp, 2**(max_exp+1)) """
        rng = FPRandomGen(
            ML_Binary64, {FPRandomGen.Category.FPLogInterval(-3, 4, positive=True): 1.0}, seed=5)
        for value in generate(rng):
            self.assertTrue(2.0**-3 <= value < 2.0**5)
        rng = FPRandomGen(ML_Binary32, {FPRandomGen.Category.FPLogInterval(0, 0): 1.0}, seed=5)
        for value in generate(rng):
            self.assertTrue(1.0 <= abs(value) < 2.0)

    def test_subnormal_category(self):
        rng = FPRandomGen(ML_Binary32, weight_map={FPRandomGen.Category.Subnormal: 1.0}, seed=11)
        for value in generate(rng):
            self.assertTrue(is_subnormal(value, ML_Binary32))

    def test_near_one_category(self):
        """ NearOne values are a few ulps away from +1 or -1 """
        rng = FPRandomGen(ML_Binary64, weight_map={FPRandomGen.Category.NearOne: 1.0}, seed=2)
        for value in generate(rng):
            abs_coding = ML_Binary64.get_integer_coding(abs(value))
            self.assertTrue(abs(abs_coding - ML_Binary64.get_one_coding()) <= rng.near_range)

    def test_integer_category(self):
        rng = FPRandomGen(ML_Binary32, weight_map={FPRandomGen.Category.Integer: 1.0}, seed=2, integer_range=8)
        values = generate(rng)
        for value in values:
            self.assertTrue(value == 0 or classify_integer_value(value, ML_Binary32) != IntegerClass.NotInteger)
            self.assertTrue(abs(value) <= 8)

    def test_interval_boundary_category(self):
        """ boundary values perturbed by at most one ulp """
        rng = FPRandomGen(
            ML_Binary64, weight_map={FPRandomGen.Category.IntervalBoundary: 1.0},
            seed=7, boundary_list=[1.5])
        for value in generate(rng):
            delta = ML_Binary64.get_integer_coding(value) - ML_Binary64.get_integer_coding(1.5)
            self.assertTrue(delta in (-1, 0, 1))

    def test_special_values(self):
        rng = FPRandomGen(ML_Binary32, weight_map={FPRandomGen.Category.SpecialValues: 1.0}, seed=1)
        values = generate(rng)
        self.assertFalse(any(is_snan(v, ML_Binary32) for v in values))
        self.assertTrue(any(is_nan(v, ML_Binary32) for v in values))
        self.assertTrue(ML_Binary32.get_omega() in rng.sp_list)
        snan_rng = FPRandomGen(ML_Binary32, include_snan=True)
        self.assertTrue(any(is_snan(v, ML_Binary32) for v in snan_rng.sp_list))


if __name__ == '__main__':
    unittest.main()
