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
# description:      unit-tests for the binary32 power function
###############################################################################
import unittest

import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32
from microlibm_core.core.special_values import is_nan

from microlibm_functions import pow, powf
from microlibm_functions.ml_pow import POW_CONSTANTS


def coding(value):
    return ML_Binary32.get_integer_coding(value)


class UT_PowfConstants(unittest.TestCase):
    def test_constant_codings(self):
        """ binary32 kernel constants are pinned by their encodings """
        cst = POW_CONSTANTS[ML_Binary32]
        self.assertEqual([coding(v) for v in cst.BP], [0x3f800000, 0x3fc00000])
        self.assertEqual([coding(v) for v in cst.DP_H], [0x0, 0x3f15c000])
        self.assertEqual([coding(v) for v in cst.DP_L], [0x0, 0x35d1cfdc])
        self.assertEqual(cst.SUBNORMAL_SCALE, 2.0**24)
        self.assertEqual(
            [coding(v) for v in cst.L],
            [0x3f19999a, 0x3edb6db7, 0x3eaaaaab, 0x3e8ba305, 0x3e6c3255, 0x3e53f142])
        self.assertEqual(
            [coding(v) for v in cst.P],
            [0x3e2aaaab, 0xbb360b61, 0x388ab355, 0xb5ddea0e, 0x3331bb4c])
        self.assertEqual(coding(cst.LG2), 0x3f317218)
        self.assertEqual(coding(cst.LG2_H), 0x3f317200)
        self.assertEqual(coding(cst.LG2_L), 0x35bfbe8c)
        self.assertEqual(coding(cst.CP), 0x3f76384f)
        self.assertEqual(coding(cst.CP_H), 0x3f764000)
        self.assertEqual(coding(cst.CP_L), 0xb8f623c6)
        self.assertEqual(coding(cst.IVLN2), 0x3fb8aa3b)
        self.assertEqual(coding(cst.IVLN2_H), 0x3fb8aa00)
        self.assertEqual(coding(cst.IVLN2_L), 0x36eca570)

    def test_constant_values(self):
        """ encodings match the decimal values of the constants """
        cst = POW_CONSTANTS[ML_Binary32]
        self.assertEqual(cst.L[0], np.float32(6e-1))
        self.assertEqual(cst.P[0], np.float32(1.6666667e-1))
        self.assertEqual(cst.DP_H[1], np.float32(5.8496094e-1))
        self.assertEqual(cst.CP_H, np.float32(9.6191406e-1))
        self.assertEqual(cst.IVLN2_H, np.float32(1.442688))
        self.assertEqual(cst.OVT, np.float32(4.2995666e-8))
        self.assertEqual(cst.HUGE, np.float32(1.0e30))
        self.assertEqual(cst.TINY, np.float32(1.0e-30))
        self.assertTrue(isinstance(cst.OVT, np.float32))

    def test_thresholds(self):
        cst = POW_CONSTANTS[ML_Binary32]
        self.assertEqual(cst.huge_y, 0x4d000000)
        self.assertEqual(cst.near_one_lo, 0x3f7ffff8)
        self.assertEqual(cst.near_one_hi, 0x3f800007)
        self.assertEqual(cst.interval_lo, 0x1cc471)
        self.assertEqual(cst.interval_hi, 0x5db3d7)
        self.assertTrue(cst.ceiling_y is None)


class UT_PowfAccuracy(unittest.TestCase):
    def test_output_format(self):
        self.assertTrue(isinstance(powf(2.0, 3.0), np.float32))
        self.assertTrue(isinstance(powf(np.float32(2.0), np.float32(0.5)), np.float32))
        self.assertEqual(powf.get_name(), "powf")
        self.assertEqual(pow.get_name(), "pow")

    def test_known_values(self):
        self.assertEqual(powf(2.0, 20.0), 1048576.0)
        self.assertEqual(powf(-2.0, 3.0), -8.0)
        self.assertEqual(powf(4.0, 0.5), 2.0)
        self.assertEqual(powf(2.0, 127.0), 2.0**127)
        self.assertEqual(powf(2.0, -149.0), float.fromhex("0x1p-149"))
        self.assertTrue(powf.get_ulp_error(10.0, -1.0) <= 1)
        self.assertTrue(powf.get_ulp_error(1.5, 0.3) <= 1)

    def test_input_rounding(self):
        """ binary64 arguments are rounded to binary32 first """
        self.assertEqual(powf(0.1, 1.0), np.float32(0.1))
        self.assertTrue(is_nan(powf(-1.0, 2.2), ML_Binary32))

    def test_overflow_underflow(self):
        """ out of range results are +-inf or +-0 """
        self.assertEqual(powf(10.0, 40.0), np.inf)
        self.assertEqual(powf(-10.0, 41.0), -np.inf)
        self.assertEqual(powf(10.0, -50.0), 0.0)
        self.assertEqual(coding(powf(-10.0, -51.0)), 0x80000000)
        self.assertEqual(powf(2.0, 128.0), np.inf)
        self.assertEqual(powf(2.0, -150.0), 0.0)

    def test_huge_exponent(self):
        """ |y| > 2**27: over/underflow unless x is within a few ulps of 1 """
        self.assertEqual(powf(0.5, 2.0**28), 0.0)
        self.assertEqual(powf(0.5, -2.0**28), np.inf)
        self.assertEqual(powf(-0.5, 2.0**28), 0.0)
        x_far = ML_Binary32.get_value_from_integer_coding(0x3f800009)
        self.assertEqual(powf(x_far, 2.0**28), np.inf)
        self.assertEqual(powf(x_far, -2.0**28), 0.0)
        x_near = ML_Binary32.get_value_from_integer_coding(0x3f800001)
        self.assertTrue(powf.get_ulp_error(x_near, 2.0**28) <= powf.accuracy_bound)
        x_below = ML_Binary32.get_value_from_integer_coding(0x3f7ffffc)
        self.assertTrue(powf.get_ulp_error(x_below, -1.5 * 2.0**27) <= powf.accuracy_bound)

    def test_subnormal_inputs(self):
        self.assertTrue(powf.get_ulp_error(float.fromhex("0x1p-149"), 0.25) <= powf.accuracy_bound)
        self.assertTrue(powf.get_ulp_error(float.fromhex("0x1.8p-140"), -0.75) <= powf.accuracy_bound)

    def test_standard_test_cases(self):
        self.assertEqual(powf.run_standard_test_cases(), [])

    def test_random_inputs(self):
        """ differential check against the mpmath reference """
        max_error, worst_inputs = powf.check_accuracy(3000, seed=11)
        self.assertTrue(max_error <= powf.accuracy_bound)

    def test_value_test(self):
        """ user defined inputs are checked along the random ones """
        max_error, worst_inputs = powf.check_accuracy(10, seed=3, value_test=[(1.25, 3.5), (0.75, -12.0)])
        self.assertTrue(max_error <= powf.accuracy_bound)


if __name__ == '__main__':
    unittest.main()
