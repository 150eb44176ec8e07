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
###############################################################################

""" binary32 natural logarithm

    x is reduced to 2**k * (1 + f) with 1 + f in [sqrt(2)/2, sqrt(2)],
    log(1 + f) = f - hfsq + s * (hfsq + R(z)) with s = f / (2 + f),
    hfsq = f*f/2 and R an even polynomial in s whose approximation error
    |(log(1+s) - log(1-s))/s - 2 - R(z)| is below 2**-34.24 """

import mpmath
import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32
from microlibm_core.core.ml_function import ML_FunctionBasis
from microlibm_core.core.polynomials import Polynomial, PolynomialSchemeEvaluator
from microlibm_core.core.random_gen import FPRandomGen
from microlibm_core.core.special_values import is_nan, is_negative, is_zero, is_infty
from microlibm_core.utility.log_report import Log
from microlibm_core.utility.num_utils import REFERENCE_PRECISION, get_mpf


def cst(coding):
    return ML_Binary32.get_value_from_integer_coding(coding)

## ln(2) split, LN2_HI has a short significand so that k * LN2_HI
#  is exact for every binary32 exponent k
LN2_HI = cst(0x3f317180)
LN2_LO = cst(0x3717f7d1)
LG1 = cst(0x3f2aaaaa)
LG2 = cst(0x3eccce13)
LG3 = cst(0x3e91e9ee)
LG4 = cst(0x3e789e26)

## 2**25, subnormal input scaling factor
X1P25 = cst(0x4c000000)
## encoding of sqrt(2)/2
SQRT2_HALF_CODING = 0x3f3504f3

LOGF_POLY = Polynomial({1: LG1, 2: LG2, 3: LG3, 4: LG4})
## bound of |log((1+s)/(1-s))/s - 2 - LOGF_POLY(s**2)| for |s| <= 0.1716
LOGF_APPROX_ERROR = 2.0**-34


class ML_Logf(ML_FunctionBasis):
    function_name = "logf"
    arity = 1

    def __init__(self):
        ML_FunctionBasis.__init__(self, precision=ML_Binary32)

    def evaluate(self, x):
        precision = self.precision
        one = precision.cast(1.0)
        ix = precision.get_integer_coding(x)
        k = 0

        if ix < 0x00800000 or (ix >> 31) != 0:
            if (ix << 1) & 0xffffffff == 0:
                # log(+-0) = -inf
                return -one / (x * x)
            if (ix >> 31) != 0:
                # log(-#) = NaN
                return (x - x) / precision.cast(0.0)
            # subnormal number, scale up x
            k -= 25
            x = x * X1P25
            ix = precision.get_integer_coding(x)
        elif ix >= 0x7f800000:
            return x
        elif ix == 0x3f800000:
            return precision.cast(0.0)

        # reduce x into [sqrt(2)/2, sqrt(2)]
        ix += 0x3f800000 - SQRT2_HALF_CODING
        k += (ix >> 23) - 0x7f
        ix = (ix & 0x007fffff) + SQRT2_HALF_CODING
        x = precision.get_value_from_integer_coding(ix)

        f = x - one
        s = f / (precision.cast(2.0) + f)
        z = s * s
        w = z * z
        r = PolynomialSchemeEvaluator.evaluate_even_odd_scheme(LOGF_POLY, z, w)
        hfsq = precision.cast(0.5) * f * f
        dk = precision.cast(k)
        if Log.is_level_enabled(Log.Debug):
            Log.report(Log.Debug, "logf: k={} f={} s={} r={}", k, f, s, r)
        return s * (hfsq + r) + dk * LN2_LO - hfsq + f + dk * LN2_HI

    def numeric_emulate(self, x):
        """ Numeric emulation of logf """
        if is_nan(x, self.precision):
            return np.float32(np.nan)
        if is_zero(x, self.precision):
            return np.float32(-np.inf)
        if is_negative(x, self.precision):
            return np.float32(np.nan)
        if is_infty(x, self.precision):
            return x
        with mpmath.workprec(REFERENCE_PRECISION):
            return mpmath.log(get_mpf(x))

    def get_input_generators(self, seed=None):
        # boundaries of the reduction interval in every binade neighbourhood
        boundary_list = [
            ML_Binary32.get_value_from_integer_coding(SQRT2_HALF_CODING + (e << 23))
            for e in range(-60, 61)
        ] + [
            ML_Binary32.get_min_normal_value(),
            ML_Binary32.get_max_subnormal_value(),
            ML_Binary32.get_min_subnormal_value(),
            ML_Binary32.get_omega(),
        ]
        weight_map = {
            FPRandomGen.Category.SpecialValues: 0.05,
            FPRandomGen.Category.Subnormal: 0.1,
            FPRandomGen.Category.Normal: 0.5,
            FPRandomGen.Category.NearOne: 0.2,
            FPRandomGen.Category.IntervalBoundary: 0.15,
        }
        return [FPRandomGen(ML_Binary32, weight_map=weight_map, seed=seed, boundary_list=boundary_list)]

    standard_test_cases = [
        (1.0, 0.0),
        (0.0, -np.inf),
        (-0.0, -np.inf),
        (-1.0, np.nan),
        (np.inf, np.inf),
        (-np.inf, np.nan),
        (np.nan, np.nan),
        (float.fromhex("0x1p-149"),),
        (float.fromhex("0x1.fffffcp-127"),),
        (float.fromhex("0x1p-126"),),
        (float.fromhex("0x1.fffffep+127"),),
        (float.fromhex("0x1.6a09e6p-1"),),
        (float.fromhex("0x1.6a09e8p-1"),),
        (float.fromhex("0x1.000002p+0"),),
        (float.fromhex("0x1.fffffep-1"),),
        (2.0,),
        (10.0,),
    ]


logf = ML_Logf()
