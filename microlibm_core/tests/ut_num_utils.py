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
# description:      unit-tests for ulp error measurement
###############################################################################
import math
import unittest

import mpmath
import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64
from microlibm_core.utility.num_utils import (
    REFERENCE_PRECISION, ulp, ulp_error, get_mpf, is_mp_special
)


class UT_Ulp(unittest.TestCase):
    def test_ulp(self):
        self.assertEqual(ulp(1.0, ML_Binary64), mpmath.ldexp(1, -52))
        self.assertEqual(ulp(1.5, ML_Binary64), mpmath.ldexp(1, -52))
        self.assertEqual(ulp(0.75, ML_Binary64), mpmath.ldexp(1, -53))
        self.assertEqual(ulp(-1.0, ML_Binary32), mpmath.ldexp(1, -23))
        self.assertEqual(ulp(0, ML_Binary32), mpmath.ldexp(1, -149))

    def test_subnormal_ulp(self):
        """ subnormal values share the ulp of the minimal normal number """
        self.assertEqual(ulp(float.fromhex("0x1p-1074"), ML_Binary64), mpmath.ldexp(1, -1074))
        self.assertEqual(ulp(float.fromhex("0x1p-130"), ML_Binary32), mpmath.ldexp(1, -149))

    def test_get_mpf(self):
        """ conversion to mpmath is exact """
        self.assertEqual(get_mpf(np.float32(0.1)), mpmath.mpf(float(np.float32(0.1))))
        self.assertTrue(is_mp_special(mpmath.inf))
        self.assertTrue(is_mp_special(mpmath.nan))
        self.assertFalse(is_mp_special(mpmath.mpf(1)))


class UT_UlpError(unittest.TestCase):
    def test_finite_error(self):
        self.assertEqual(ulp_error(np.float64(1.0), mpmath.mpf(1), ML_Binary64), 0.0)
        self.assertEqual(ulp_error(np.float64(1.0 + 2.0**-52), mpmath.mpf(1), ML_Binary64), 1.0)
        with mpmath.workprec(REFERENCE_PRECISION):
            exact = mpmath.mpf(1) + mpmath.ldexp(1, -53)
        self.assertEqual(ulp_error(np.float64(1.0), exact, ML_Binary64), 0.5)
        self.assertEqual(ulp_error(np.float32(2.0), 2.0, ML_Binary32), 0.0)

    def test_nan(self):
        """ NaN references are only matched by NaN results """
        self.assertEqual(ulp_error(np.float64(np.nan), mpmath.nan, ML_Binary64), 0)
        self.assertEqual(ulp_error(np.float64(np.nan), np.float64(np.nan), ML_Binary64), 0)
        self.assertEqual(ulp_error(np.float64(1.0), mpmath.nan, ML_Binary64), math.inf)
        self.assertEqual(ulp_error(np.float64(np.nan), mpmath.mpf(1), ML_Binary64), math.inf)

    def test_overflow(self):
        """ infinite results match references beyond the format range """
        self.assertEqual(ulp_error(np.float32(np.inf), mpmath.inf, ML_Binary32), 0)
        self.assertEqual(ulp_error(np.float32(np.inf), mpmath.ldexp(1, 129), ML_Binary32), 0)
        self.assertEqual(ulp_error(np.float32(-np.inf), -mpmath.ldexp(1, 129), ML_Binary32), 0)
        self.assertEqual(ulp_error(np.float32(-np.inf), mpmath.ldexp(1, 129), ML_Binary32), math.inf)
        omega = get_mpf(ML_Binary32.get_omega())
        self.assertEqual(ulp_error(np.float32(np.inf), omega, ML_Binary32), math.inf)
        self.assertEqual(ulp_error(ML_Binary32.get_omega(), mpmath.inf, ML_Binary32), math.inf)

    def test_overflow_boundary(self):
        """ the overflow threshold is omega plus half an ulp, not rounded """
        with mpmath.workprec(REFERENCE_PRECISION):
            threshold = mpmath.ldexp(1, 1024) - mpmath.ldexp(1, 970)
            below = threshold - mpmath.ldexp(1, 900)
        self.assertEqual(ulp_error(np.float64(np.inf), threshold, ML_Binary64), 0)
        self.assertEqual(ulp_error(np.float64(np.inf), below, ML_Binary64), math.inf)


if __name__ == '__main__':
    unittest.main()
