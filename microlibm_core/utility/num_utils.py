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

## @package num_utils
#  numerical helpers for accuracy measurement: unit in the last place
#  and ulp distance between a computed result and a multi-precision
#  reference value (mpmath)

import math

import mpmath
import numpy as np


## working precision (in bits) of the reference computations
REFERENCE_PRECISION = 200


def get_mpf(value):
    """ convert a numpy / python float to an (exact) mpmath number """
    return mpmath.mpf(float(value))


def is_mp_special(value):
    return mpmath.isnan(value) or mpmath.isinf(value)


def ulp(v, format_):
    """ return a 'unit in last place' value for <v> assuming precision is
        defined by format_, subnormal range values share the ulp of the
        minimal normal number """
    with mpmath.workprec(REFERENCE_PRECISION):
        v = mpmath.mpf(v)
        if v == 0:
            return mpmath.ldexp(1, format_.get_emin_subnormal())
        _, exp = mpmath.frexp(abs(v))
        return mpmath.ldexp(1, max(int(exp) - 1, format_.get_emin_normal()) - format_.get_field_size())


def ulp_error(result, exact, format_):
    """ distance (in ulps of exact) between the computed value <result>
        and the reference value <exact>

        a NaN reference is only matched by a NaN result, an infinite
        reference by the same infinity; a reference beyond the format
        range is matched by the infinity it rounds to """
    if isinstance(exact, (np.floating, float)):
        exact = get_mpf(exact)
    if mpmath.isnan(exact):
        return 0 if np.isnan(result) else math.inf
    if np.isnan(result):
        return math.inf
    with mpmath.workprec(REFERENCE_PRECISION):
        if np.isinf(result):
            omega = get_mpf(format_.get_omega())
            overflow_bound = omega + ulp(omega, format_) / 2
            if mpmath.isinf(exact) or abs(exact) >= overflow_bound:
                return 0 if (result > 0) == (exact > 0) else math.inf
            return math.inf
        if mpmath.isinf(exact):
            return math.inf
        return float(abs(get_mpf(result) - exact) / ulp(exact, format_))
