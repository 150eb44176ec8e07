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
# description:      unit-tests for special values and value classification
###############################################################################
import unittest

import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64
from microlibm_core.core.special_values import (
    FP_PlusInfty, FP_MinusInfty, FP_PlusZero, FP_MinusZero, FP_QNaN, FP_SNaN,
    FP_PlusOmega, FP_MinusOmega,
    is_nan, is_qnan, is_snan, is_infty, is_plus_infty, is_minus_infty,
    is_zero, is_plus_zero, is_minus_zero, is_subnormal, is_number, is_negative,
    IntegerClass, classify_integer, classify_integer_value
)


class UT_SpecialValues(unittest.TestCase):
    def test_special_value_coding(self):
        self.assertEqual(FP_PlusInfty(ML_Binary32).get_integer_coding(), 0x7f800000)
        self.assertEqual(FP_MinusInfty(ML_Binary32).get_integer_coding(), 0xff800000)
        self.assertEqual(FP_MinusZero(ML_Binary64).get_integer_coding(), 0x8000000000000000)
        self.assertEqual(FP_QNaN(ML_Binary32).get_integer_coding(), 0x7fc00000)
        self.assertEqual(FP_SNaN(ML_Binary64).get_integer_coding(), 0x7ff0000000000001)
        self.assertEqual(FP_PlusOmega(ML_Binary32), float.fromhex("0x1.fffffep+127"))
        self.assertEqual(FP_MinusOmega(ML_Binary32), -float.fromhex("0x1.fffffep+127"))

    def test_special_value_predicates(self):
        """ special values are recognized from their encoding """
        for precision in [ML_Binary32, ML_Binary64]:
            plus_inf = FP_PlusInfty(precision).get_value()
            minus_inf = FP_MinusInfty(precision).get_value()
            plus_zero = FP_PlusZero(precision).get_value()
            minus_zero = FP_MinusZero(precision).get_value()
            qnan = FP_QNaN(precision).get_value()
            snan = FP_SNaN(precision).get_value()
            self.assertTrue(is_plus_infty(plus_inf, precision))
            self.assertTrue(is_minus_infty(minus_inf, precision))
            self.assertFalse(is_plus_infty(minus_inf, precision))
            self.assertTrue(is_infty(minus_inf, precision))
            self.assertTrue(is_plus_zero(plus_zero, precision))
            self.assertTrue(is_minus_zero(minus_zero, precision))
            self.assertFalse(is_plus_zero(minus_zero, precision))
            self.assertTrue(is_zero(minus_zero, precision))
            self.assertTrue(is_qnan(qnan, precision))
            self.assertTrue(is_snan(snan, precision))
            self.assertFalse(is_qnan(snan, precision))
            self.assertTrue(is_nan(snan, precision))
            self.assertFalse(is_number(qnan, precision))
            self.assertFalse(is_number(plus_inf, precision))
            self.assertTrue(is_number(minus_zero, precision))
            self.assertTrue(is_negative(minus_zero, precision))
            self.assertFalse(is_nan(plus_inf, precision))

    def test_subnormal(self):
        self.assertTrue(is_subnormal(ML_Binary32.get_min_subnormal_value(), ML_Binary32))
        self.assertTrue(is_subnormal(-ML_Binary32.get_max_subnormal_value(), ML_Binary32))
        self.assertFalse(is_subnormal(ML_Binary32.get_min_normal_value(), ML_Binary32))
        self.assertFalse(is_subnormal(np.float32(0.0), ML_Binary32))
        self.assertTrue(is_subnormal(float.fromhex("0x1p-1074"), ML_Binary64))


class UT_IntegerClass(unittest.TestCase):
    def test_classify_integer(self):
        """ odd, even and non-integer values """
        for precision in [ML_Binary32, ML_Binary64]:
            self.assertEqual(classify_integer_value(3.0, precision), IntegerClass.OddInteger)
            self.assertEqual(classify_integer_value(-3.0, precision), IntegerClass.OddInteger)
            self.assertEqual(classify_integer_value(1.0, precision), IntegerClass.OddInteger)
            self.assertEqual(classify_integer_value(2.0, precision), IntegerClass.EvenInteger)
            self.assertEqual(classify_integer_value(-1024.0, precision), IntegerClass.EvenInteger)
            self.assertEqual(classify_integer_value(0.5, precision), IntegerClass.NotInteger)
            self.assertEqual(classify_integer_value(2.25, precision), IntegerClass.NotInteger)
            self.assertEqual(classify_integer_value(-1.14, precision), IntegerClass.NotInteger)
            self.assertEqual(classify_integer_value(np.inf, precision), IntegerClass.EvenInteger)

    def test_classify_large_values(self):
        """ every value beyond 2**(mantissa size) is an even integer """
        self.assertEqual(classify_integer_value(2.0**24 - 1, ML_Binary32), IntegerClass.OddInteger)
        self.assertEqual(classify_integer_value(2.0**24, ML_Binary32), IntegerClass.EvenInteger)
        self.assertEqual(classify_integer_value(2.0**53 - 1, ML_Binary64), IntegerClass.OddInteger)
        self.assertEqual(classify_integer_value(2.0**53, ML_Binary64), IntegerClass.EvenInteger)
        self.assertEqual(classify_integer_value(1e300, ML_Binary64), IntegerClass.EvenInteger)

    def test_classify_coding(self):
        self.assertEqual(classify_integer(0x40400000, ML_Binary32), IntegerClass.OddInteger)
        self.assertEqual(classify_integer(0x3f000000, ML_Binary32), IntegerClass.NotInteger)
        self.assertEqual(classify_integer(1, ML_Binary64), IntegerClass.NotInteger)
        self.assertEqual(int(IntegerClass.EvenInteger), 2)


if __name__ == '__main__':
    unittest.main()
