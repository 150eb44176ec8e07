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

## @package fp_primitives
#  elementary floating-point primitives consumed by the function kernels
#  (absolute value, square root, power-of-two scaling), each one returns
#  a value of the requested format

import numpy as np

from ..utility.decorator import fp_silent


@fp_silent
def fabs(value, precision):
    return precision.cast(np.abs(precision.cast(value)))


@fp_silent
def sqrt(value, precision):
    """ correctly rounded square root, NaN for negative non-zero inputs """
    return precision.cast(np.sqrt(precision.cast(value)))


@fp_silent
def scalbn(value, n, precision):
    """ value * 2**n computed exactly (up to the final rounding of a
        subnormal or overflowing result) """
    return precision.cast(np.ldexp(precision.cast(value), np.int32(n)))
