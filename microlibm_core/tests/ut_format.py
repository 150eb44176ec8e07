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
# description:      unit-tests for floating-point formats
###############################################################################
import unittest

import numpy as np

from microlibm_core.core.ml_formats import (
    ML_Binary32, ML_Binary64, to_signed, precision_parser
)
from microlibm_core.utility.common import ML_FormatError


class UT_FormatParse(unittest.TestCase):
    def test_precision_parser(self):
        """ format names and aliases """
        self.assertTrue(precision_parser("binary32") is ML_Binary32)
        self.assertTrue(precision_parser("float") is ML_Binary32)
        self.assertTrue(precision_parser("binary64") is ML_Binary64)
        self.assertTrue(precision_parser("double") is ML_Binary64)
        self.assertRaises(ML_FormatError, precision_parser, "binary16")


class UT_StdFormat(unittest.TestCase):
    def test_parameters(self):
        """ exponent range of binary32 and binary64 """
        self.assertEqual(ML_Binary32.get_bias(), -127)
        self.assertEqual(ML_Binary32.get_emax(), 127)
        self.assertEqual(ML_Binary32.get_emin_normal(), -126)
        self.assertEqual(ML_Binary32.get_emin_subnormal(), -149)
        self.assertEqual(ML_Binary64.get_bias(), -1023)
        self.assertEqual(ML_Binary64.get_emax(), 1023)
        self.assertEqual(ML_Binary64.get_emin_normal(), -1022)
        self.assertEqual(ML_Binary64.get_emin_subnormal(), -1074)
        self.assertEqual(ML_Binary32.get_mantissa_size(), 24)
        self.assertEqual(ML_Binary64.get_mantissa_size(), 53)

    def test_integer_coding(self):
        """ encoding of usual values """
        self.assertEqual(ML_Binary32.get_integer_coding(1.0), 0x3f800000)
        self.assertEqual(ML_Binary32.get_integer_coding(-0.0), 0x80000000)
        self.assertEqual(ML_Binary32.get_integer_coding(np.inf), 0x7f800000)
        self.assertEqual(ML_Binary64.get_integer_coding(1.0), 0x3ff0000000000000)
        self.assertEqual(ML_Binary64.get_integer_coding(-2.0), 0xc000000000000000)
        self.assertEqual(ML_Binary32.get_one_coding(), 0x3f800000)
        self.assertEqual(ML_Binary64.get_infty_coding(), 0x7ff0000000000000)

    def test_value_from_integer_coding(self):
        value = ML_Binary32.get_value_from_integer_coding(0x3fc00000)
        self.assertTrue(isinstance(value, np.float32))
        self.assertEqual(value, 1.5)
        self.assertEqual(ML_Binary64.get_value_from_integer_coding("0x4000000000000000", 16), 2.0)
        self.assertEqual(ML_Binary64.get_value_from_integer_coding("0x3ff8000000000000"), 1.5)
        self.assertTrue(np.isnan(ML_Binary64.get_value_from_integer_coding(0x7ff8000000000000)))
        self.assertRaises(ML_FormatError, ML_Binary32.get_value_from_integer_coding, 2**32)
        self.assertRaises(ML_FormatError, ML_Binary32.get_value_from_integer_coding, -1)

    def test_coding_identity(self):
        """ encoding is preserved through value conversion """
        for coding in [0x1, 0x007fffff, 0x00800000, 0x3f3504f3, 0x7f7fffff, 0xff800000, 0x80000001]:
            value = ML_Binary32.get_value_from_integer_coding(coding)
            self.assertEqual(ML_Binary32.get_integer_coding(value), coding)

    def test_cast(self):
        """ cast rounds to nearest and overflows to infinity """
        self.assertEqual(ML_Binary32.cast(0.1), np.float32(0.1))
        self.assertTrue(np.isinf(ML_Binary32.cast(1e40)))
        self.assertEqual(ML_Binary32.cast(float.fromhex("0x1.0000001p+0")), 1.0)
        value = np.float32(3.0)
        self.assertTrue(ML_Binary32.cast(value) is value)

    def test_extremal_values(self):
        self.assertEqual(ML_Binary32.get_omega(), float.fromhex("0x1.fffffep+127"))
        self.assertEqual(ML_Binary64.get_omega(), float.fromhex("0x1.fffffffffffffp+1023"))
        self.assertEqual(ML_Binary32.get_min_normal_value(), float.fromhex("0x1p-126"))
        self.assertEqual(ML_Binary32.get_max_subnormal_value(), float.fromhex("0x1.fffffcp-127"))
        self.assertEqual(ML_Binary32.get_min_subnormal_value(), float.fromhex("0x1p-149"))
        self.assertEqual(ML_Binary64.get_min_subnormal_value(), float.fromhex("0x1p-1074"))


class UT_WordAccess(unittest.TestCase):
    def test_to_signed(self):
        self.assertEqual(to_signed(0xffffffff, 32), -1)
        self.assertEqual(to_signed(0x7fffffff, 32), 0x7fffffff)
        self.assertEqual(to_signed(0x1c0000000, 32), -0x40000000)

    def test_high_word(self):
        """ signed high word of binary64 and binary32 values """
        self.assertEqual(ML_Binary64.get_high_word(1.0), 0x3ff00000)
        self.assertEqual(ML_Binary64.get_high_word(-2.0), -0x40000000)
        self.assertEqual(ML_Binary32.get_high_word(np.float32(1.0)), 0x3f800000)
        self.assertEqual(ML_Binary32.get_high_word(np.float32(-2.0)), -0x40000000)
        self.assertEqual(ML_Binary64.get_high_field_size(), 20)
        self.assertEqual(ML_Binary32.get_high_field_size(), 23)

    def test_set_words(self):
        self.assertEqual(ML_Binary64.with_set_high_word(0.0, 0x3ff00000), 1.0)
        self.assertEqual(ML_Binary64.with_set_high_word(1.0 + 2.0**-52, 0x40000000), 2.0 + 2.0**-51)
        self.assertEqual(ML_Binary32.with_set_high_word(np.float32(0.0), 0x3fc00000), 1.5)
        self.assertEqual(ML_Binary64.get_high_word_coding(0x3ff8000000000000), 0x3ff80000)


if __name__ == '__main__':
    unittest.main()
