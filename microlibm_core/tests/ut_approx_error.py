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
# description:      unit-tests for kernel polynomial approximation errors
###############################################################################
import unittest

import mpmath

try:
    import sollya
except ImportError:
    sollya = None

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64
from microlibm_core.utility.num_utils import REFERENCE_PRECISION, get_mpf

from microlibm_functions.ml_logf import LOGF_POLY, LOGF_APPROX_ERROR
from microlibm_functions.ml_pow import POW_CONSTANTS


def logf_target(s):
    return mpmath.log((1 + s) / (1 - s)) / s - 2

def pow_log_target(s):
    return 3 * (mpmath.log((1 + s) / (1 - s)) - 2 * s - 2 * s**3 / 3) / (2 * s)

def pow_exp_target(z):
    return z * (mpmath.exp(z) + 1) / (mpmath.exp(z) - 1) - 2

# positive half of each kernel interval
LOGF_INTERVAL = (2.0**-12, "0.1716")
POW_LOG_INTERVAL = (2.0**-12, "0.1011")
POW_EXP_INTERVAL = (2.0**-12, "0.3466")


def sampled_error(polynomial, function, interval, sample_num=2000):
    """ max of |polynomial(s**2) - function(s)| over sample_num + 1
        evenly spaced points s of interval """
    with mpmath.workprec(REFERENCE_PRECISION):
        lo, hi = mpmath.mpf(interval[0]), mpmath.mpf(interval[1])
        coeff_list = [(index, get_mpf(coeff)) for index, coeff in polynomial.get_ordered_coeff_list()]
        max_error = mpmath.mpf(0)
        for i in range(sample_num + 1):
            s = lo + (hi - lo) * i / sample_num
            t = s * s
            poly_value = mpmath.fsum(coeff * t**index for index, coeff in coeff_list)
            max_error = max(max_error, abs(poly_value - function(s)))
        return max_error


class UT_ApproxErrorBound(unittest.TestCase):
    """ approximation errors of the shipped coefficients against an
        mpmath evaluation of the approximated functions """
    def test_logf_poly(self):
        self.assertTrue(sampled_error(LOGF_POLY, logf_target, LOGF_INTERVAL) < LOGF_APPROX_ERROR)

    def test_pow_polys(self):
        for precision in [ML_Binary64, ML_Binary32]:
            constants = POW_CONSTANTS[precision]
            self.assertTrue(
                sampled_error(constants.log_poly, pow_log_target, POW_LOG_INTERVAL) < constants.log_approx_error,
                precision)
            self.assertTrue(
                sampled_error(constants.exp_poly, pow_exp_target, POW_EXP_INTERVAL) < constants.exp_approx_error,
                precision)

    def test_truncated_poly(self):
        """ dropping the highest degree monomial breaks the bound """
        truncated_poly = LOGF_POLY.sub_poly_cond(lambda i, c: i < LOGF_POLY.get_degree())
        self.assertTrue(sampled_error(truncated_poly, logf_target, LOGF_INTERVAL) > LOGF_APPROX_ERROR)


@unittest.skipIf(sollya is None, "pythonsollya is not installed")
class UT_ApproxError(unittest.TestCase):
    def test_logf_poly(self):
        """ logf kernel error is below its stored bound """
        from microlibm_core.core.approximation import get_poly_approx_error, dirty_error
        self.assertTrue(get_poly_approx_error(LOGF_POLY, "logf", dirty_error) < LOGF_APPROX_ERROR)
        self.assertTrue(get_poly_approx_error(LOGF_POLY, "logf") < LOGF_APPROX_ERROR)

    def test_pow_polys(self):
        """ pow and powf log2 / exp2 kernel errors """
        from microlibm_core.core.approximation import get_poly_approx_error, dirty_error
        for precision in [ML_Binary64, ML_Binary32]:
            constants = POW_CONSTANTS[precision]
            self.assertTrue(
                get_poly_approx_error(constants.log_poly, "pow_log", dirty_error) < constants.log_approx_error)
            self.assertTrue(
                get_poly_approx_error(constants.exp_poly, "pow_exp", dirty_error) < constants.exp_approx_error)

    def test_fpminimax_rebuild(self):
        """ a rebuilt binary32 logf candidate is as accurate as the
            shipped coefficients """
        from microlibm_core.core.approximation import (
            get_poly_approx_error, build_from_approximation, dirty_error)
        S2 = sollya.SollyaObject(2)
        poly = build_from_approximation("logf", [1, 2, 3, 4], ML_Binary32)
        self.assertEqual(poly.get_degree(), 4)
        self.assertTrue(get_poly_approx_error(poly, "logf", dirty_error) < S2**-33)


if __name__ == '__main__':
    unittest.main()
