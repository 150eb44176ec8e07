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
# description:      unit-tests for the binary32 natural logarithm
###############################################################################
import unittest

import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32
from microlibm_core.core.special_values import is_nan, is_minus_infty, is_plus_infty, is_plus_zero

from microlibm_functions import logf
from microlibm_functions.ml_logf import (
    LN2_HI, LN2_LO, LG1, LG2, LG3, LG4, X1P25, SQRT2_HALF_CODING
)


def coding(value):
    return ML_Binary32.get_integer_coding(value)


class UT_LogfSpecialValues(unittest.TestCase):
    def test_one(self):
        """ log(1) is exactly +0 """
        self.assertTrue(is_plus_zero(logf(1.0), ML_Binary32))

    def test_zeros(self):
        self.assertTrue(is_minus_infty(logf(0.0), ML_Binary32))
        self.assertTrue(is_minus_infty(logf(-0.0), ML_Binary32))

    def test_negative(self):
        """ log of a negative number is NaN """
        for value in [-1.0, -np.inf, -float.fromhex("0x1p-149"), -3.5e38]:
            self.assertTrue(is_nan(logf(value), ML_Binary32))

    def test_infinity_nan(self):
        self.assertTrue(is_plus_infty(logf(np.inf), ML_Binary32))
        self.assertTrue(is_nan(logf(np.nan), ML_Binary32))
        # NaN inputs are forwarded unchanged
        snan = ML_Binary32.get_value_from_integer_coding(0x7fa00000)
        self.assertEqual(coding(logf(snan)), 0x7fa00000)

    def test_output_format(self):
        self.assertTrue(isinstance(logf(2.0), np.float32))
        self.assertTrue(isinstance(logf(np.float32(0.0)), np.float32))


class UT_LogfConstants(unittest.TestCase):
    def test_constant_codings(self):
        """ every kernel constant is pinned by its encoding """
        self.assertEqual(coding(LN2_HI), 0x3f317180)
        self.assertEqual(coding(LN2_LO), 0x3717f7d1)
        self.assertEqual(coding(LG1), 0x3f2aaaaa)
        self.assertEqual(coding(LG2), 0x3eccce13)
        self.assertEqual(coding(LG3), 0x3e91e9ee)
        self.assertEqual(coding(LG4), 0x3e789e26)
        self.assertEqual(coding(X1P25), 0x4c000000)
        self.assertEqual(SQRT2_HALF_CODING, 0x3f3504f3)

    def test_ln2_split(self):
        """ LN2_HI + LN2_LO is ln(2) to more than binary32 precision """
        self.assertEqual(np.float32(LN2_HI + LN2_LO), np.float32(np.log(2.0)))
        self.assertEqual(coding(LN2_HI) & 0x7f, 0)


class UT_LogfAccuracy(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(logf(2.0), np.float32(np.log(2.0)))
        self.assertTrue(logf.get_ulp_error(float.fromhex("0x1p-126")) <= 1)
        self.assertTrue(logf.get_ulp_error(10.0) <= 1)
        self.assertTrue(logf.get_ulp_error(float.fromhex("0x1p-149")) <= 1)

    def test_standard_test_cases(self):
        self.assertEqual(logf.run_standard_test_cases(), [])

    def test_reduction_boundaries(self):
        """ inputs around sqrt(2)/2 * 2**e on both sides of the
            reduction interval """
        for exponent in range(-140, 128, 7):
            for offset in range(-3, 4):
                value_coding = SQRT2_HALF_CODING + (exponent << 23) + offset
                if value_coding < 1 or value_coding >= 0x7f800000:
                    continue
                value = ML_Binary32.get_value_from_integer_coding(value_coding)
                self.assertTrue(logf.get_ulp_error(value) <= logf.accuracy_bound, value)

    def test_near_one(self):
        for offset in range(-64, 65):
            value = ML_Binary32.get_value_from_integer_coding(0x3f800000 + offset)
            self.assertTrue(logf.get_ulp_error(value) <= logf.accuracy_bound, value)

    def test_random_inputs(self):
        """ differential check against the mpmath reference """
        max_error, worst_inputs = logf.check_accuracy(3000, seed=42)
        self.assertTrue(max_error <= logf.accuracy_bound)

    def test_invalid_calls(self):
        self.assertRaises(TypeError, logf)
        self.assertRaises(TypeError, logf, 1.0, 2.0)
        self.assertRaises(TypeError, logf, "1.0")


if __name__ == '__main__':
    unittest.main()
