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
## @package approximation
#  sollya based tooling for the kernel polynomials: approximation error
#  measurement of a coefficient set and fp-minimax rebuild of candidates

import collections

import sollya

from sollya import Interval, sup, log, exp, dirtyinfnorm
S2 = sollya.SollyaObject(2)

from .ml_formats import ML_Binary32, ML_Binary64
from .polynomials import Polynomial
from ..utility.log_report import Log


class SollyaError(Exception):
    """ sollya returned an error object """
    pass


## sollya format objects for the microlibm formats
SOLLYA_FORMAT_MAP = {
    ML_Binary32: sollya.binary32,
    ML_Binary64: sollya.binary64,
}


## description of a polynomial approximation: the polynomial is evaluated
#  on <variable> (an expression of sollya.x) and approximates <function>
#  on <interval>
ApproxDescriptor = collections.namedtuple("ApproxDescriptor", ["function", "variable", "interval"])

# the three kernels approximate even functions, only the positive half
# of each symmetric interval is sampled
APPROX_DESCRIPTOR_MAP = {
    # logf, s = f / (2 + f) with 1 + f in [sqrt(2)/2, sqrt(2)]
    "logf": ApproxDescriptor(
        log((1 + sollya.x) / (1 - sollya.x)) / sollya.x - 2,
        sollya.x**2,
        Interval(S2**-12, sollya.parse("0.1716"))),
    # pow log2 kernel, |s| <= (sqrt(3/2) - 1) / (sqrt(3/2) + 1)
    "pow_log": ApproxDescriptor(
        3 * (log((1 + sollya.x) / (1 - sollya.x)) - 2 * sollya.x - 2 * sollya.x**3 / 3) / (2 * sollya.x),
        sollya.x**2,
        Interval(S2**-12, sollya.parse("0.1011"))),
    # pow exp2 kernel, |z| <= ln(2) / 2
    "pow_exp": ApproxDescriptor(
        sollya.x * (exp(sollya.x) + 1) / (exp(sollya.x) - 1) - 2,
        sollya.x**2,
        Interval(S2**-12, sollya.parse("0.3466"))),
}


def get_sollya_poly(polynomial, variable=sollya.x):
    """ sollya expression of <polynomial> evaluated on <variable>,
        coefficients are converted exactly """
    sollya_poly = sollya.SollyaObject(0)
    for index, coeff in polynomial.get_ordered_coeff_list():
        sollya_poly += sollya.SollyaObject(float(coeff)) * variable**index
    return sollya_poly


def supnorm_error(poly, function, interval, tightness=S2**-24):
    """ certified upper bound of |poly - function| on interval """
    return sup(sollya.supnorm(poly, function, interval, sollya.absolute, tightness))


def dirty_error(poly, function, interval, tightness=None):
    """ sampled (non certified) estimation of |poly - function| """
    return dirtyinfnorm(function - poly, interval)


def get_poly_approx_error(polynomial, approx_name, error_function=supnorm_error):
    """ absolute approximation error of <polynomial> for the kernel
        <approx_name> (key of APPROX_DESCRIPTOR_MAP) """
    descriptor = APPROX_DESCRIPTOR_MAP[approx_name]
    sollya_poly = get_sollya_poly(polynomial, descriptor.variable)
    approx_error = error_function(sollya_poly, descriptor.function, descriptor.interval)
    if approx_error.is_error():
        Log.report(
            Log.Error, "unable to evaluate approximation error of {} for {}", polynomial, approx_name,
            error=SollyaError("approximation error evaluation failed")
        )
    Log.report(Log.Verbose, "approximation error of {}: {}", approx_name, approx_error)
    return approx_error


def build_from_approximation(approx_name, monomial_list, coeff_format):
    """ construct a polynomial object approximating the kernel <approx_name>
        with sollya's fpminimax, <monomial_list> lists the degrees (in the
        kernel variable) of the monomials, every coefficient is a
        <coeff_format> number """
    descriptor = APPROX_DESCRIPTOR_MAP[approx_name]
    # fpminimax works on sollya.x, monomials are expanded to powers of x
    variable_degree = int(sollya.degree(descriptor.variable))
    x_monomial_list = [index * variable_degree for index in monomial_list]
    format_list = [SOLLYA_FORMAT_MAP[coeff_format]] * len(monomial_list)
    sollya_poly = sollya.fpminimax(
        descriptor.function, x_monomial_list, format_list, descriptor.interval, sollya.absolute)
    if sollya_poly.is_error():
        Log.report(
            Log.Error, "fpminimax failed for {} (monomials: {}, format: {})",
            approx_name, monomial_list, coeff_format,
            error=SollyaError("fpminimax failed")
        )
    return Polynomial({
        index: coeff_format.cast(float(sollya.coeff(sollya_poly, x_index)))
        for index, x_index in zip(monomial_list, x_monomial_list)
    })
