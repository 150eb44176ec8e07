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

""" binary64 / binary32 power function

    pow(x, y) = s * 2**(y * log2|x|) where s is the sign of the result.
    log2|x| is evaluated as an extended precision pair (t1, t2) from
    ss = (|x| - bp) / (|x| + bp) with bp in {1, 1.5}, the product
    y * (t1 + t2) is split into (p_h, p_l) and 2**(p_h + p_l) is rebuilt
    from an integer n and a polynomial approximation of 2**f on
    [-ln(2)/2, ln(2)/2]. One implementation serves both formats, only the
    constant set (PowConstants) depends on the format. """

import collections

import mpmath
import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64, to_signed
from microlibm_core.core.ml_function import ML_FunctionBasis
from microlibm_core.core.multi_precision import truncate_low_bits, split_high, split_sum
from microlibm_core.core.fp_primitives import fabs, sqrt, scalbn
from microlibm_core.core.polynomials import Polynomial, PolynomialSchemeEvaluator
from microlibm_core.core.random_gen import FPRandomGen
from microlibm_core.core.special_values import (
    IntegerClass, classify_integer, classify_integer_value, is_number, is_zero
)
from microlibm_core.utility.decorator import fp_silent
from microlibm_core.utility.log_report import Log
from microlibm_core.utility.num_utils import REFERENCE_PRECISION, get_mpf


class PowConstants(object):
    """ constant set of MetaPow for one floating-point format

        floating-point constants are given by their encoding (fp_codings,
        lists for tables), or by a numerical value rounded to the format
        (fp_values); thresholds are integers compared to high words;
        approx_errors bound the absolute error of log_poly and exp_poly
        against the functions they approximate """
    def __init__(self, precision, fp_codings, fp_values, thresholds, approx_errors):
        self.precision = precision
        self.log_approx_error = approx_errors["log"]
        self.exp_approx_error = approx_errors["exp"]
        self.fp_codings = fp_codings
        self.thresholds = thresholds
        for name, coding in fp_codings.items():
            if isinstance(coding, list):
                value = [precision.get_value_from_integer_coding(c) for c in coding]
            else:
                value = precision.get_value_from_integer_coding(coding)
            setattr(self, name, value)
        for name, value in fp_values.items():
            setattr(self, name, precision.cast(value))
        for name, value in thresholds.items():
            setattr(self, name, value)
        # (3/2)*(log((1+s)/(1-s))/s - 2 - 2/3*s**2) in s**2
        self.log_poly = Polynomial({index + 2: coeff for index, coeff in enumerate(self.L)})
        # z*(exp(z) + 1)/(exp(z) - 1) - 2 in t = z**2
        self.exp_poly = Polynomial({index + 1: coeff for index, coeff in enumerate(self.P)})


POW_CONSTANTS = {
    ML_Binary64: PowConstants(
        ML_Binary64,
        fp_codings={
            "BP": [0x3ff0000000000000, 0x3ff8000000000000],
            "DP_H": [0x0, 0x3fe2b80340000000],
            "DP_L": [0x0, 0x3e4cfdeb43cfd006],
            # 2**53
            "SUBNORMAL_SCALE": 0x4340000000000000,
            "L": [
                0x3fe3333333333303, 0x3fdb6db6db6fabff, 0x3fd55555518f264d,
                0x3fd17460a91d4101, 0x3fcd864a93c9db65, 0x3fca7e284a454eef,
            ],
            "P": [
                0x3fc555555555553e, 0xbf66c16c16bebd93, 0x3f11566aaf25de2c,
                0xbebbbd41c5d26bf1, 0x3e66376972bea4d0,
            ],
            "LG2": 0x3fe62e42fefa39ef,
            "LG2_H": 0x3fe62e4300000000,
            "LG2_L": 0xbe205c610ca86c39,
            # 2/(3*ln(2))
            "CP": 0x3feec709dc3a03fd,
            "CP_H": 0x3feec709e0000000,
            "CP_L": 0xbe3e2fe0145b01f5,
            "IVLN2": 0x3ff71547652b82fe,
            "IVLN2_H": 0x3ff7154760000000,
            "IVLN2_L": 0x3e54ae0bf85ddf44,
            "THIRD": 0x3fd5555555555555,
        },
        fp_values={
            # -(1024 - log2(ovfl + .5ulp))
            "OVT": 8.008566259537294e-17,
            "HUGE": 1.0e300,
            "TINY": 1.0e-300,
            "OVF_BOUND": 1024.0,
            "UNF_BOUND": 1075.0,
        },
        thresholds={
            # |y| > 2**31
            "huge_y": 0x41e00000,
            # |y| > 2**64
            "ceiling_y": 0x43f00000,
            "ceiling_x_lo": 0x3fefffff,
            "ceiling_x_hi": 0x3ff00000,
            "near_one_lo": 0x3fefffff,
            "near_one_hi": 0x3ff00000,
            # sqrt(3/2), sqrt(3)
            "interval_lo": 0x3988e,
            "interval_hi": 0xbb67a,
            "t_h_mask": 0xffffffff,
            "final_drop_bits": 32,
        },
        approx_errors={"log": 2.0**-52, "exp": 2.0**-57},
    ),
    ML_Binary32: PowConstants(
        ML_Binary32,
        fp_codings={
            "BP": [0x3f800000, 0x3fc00000],
            "DP_H": [0x0, 0x3f15c000],
            "DP_L": [0x0, 0x35d1cfdc],
            # 2**24
            "SUBNORMAL_SCALE": 0x4b800000,
            "L": [0x3f19999a, 0x3edb6db7, 0x3eaaaaab, 0x3e8ba305, 0x3e6c3255, 0x3e53f142],
            "P": [0x3e2aaaab, 0xbb360b61, 0x388ab355, 0xb5ddea0e, 0x3331bb4c],
            "LG2": 0x3f317218,
            "LG2_H": 0x3f317200,
            "LG2_L": 0x35bfbe8c,
            "CP": 0x3f76384f,
            "CP_H": 0x3f764000,
            "CP_L": 0xb8f623c6,
            "IVLN2": 0x3fb8aa3b,
            "IVLN2_H": 0x3fb8aa00,
            "IVLN2_L": 0x36eca570,
            "THIRD": 0x3eaaaaab,
        },
        fp_values={
            # -(128 - log2(ovfl + .5ulp))
            "OVT": 4.2995666e-8,
            "HUGE": 1.0e30,
            "TINY": 1.0e-30,
            "OVF_BOUND": 128.0,
            "UNF_BOUND": 150.0,
        },
        thresholds={
            # |y| > 2**27
            "huge_y": 0x4d000000,
            "ceiling_y": None,
            "ceiling_x_lo": None,
            "ceiling_x_hi": None,
            "near_one_lo": 0x3f7ffff8,
            "near_one_hi": 0x3f800007,
            "interval_lo": 0x1cc471,
            "interval_hi": 0x5db3d7,
            "t_h_mask": 0xfffff000,
            "final_drop_bits": 15,
        },
        approx_errors={"log": 2.0**-36, "exp": 2.0**-29},
    ),
}


class PowOperands(object):
    """ bit-level view of the pow operands shared by the special-case
        rules """
    def __init__(self, x, y, precision):
        self.x = x
        self.y = y
        self.precision = precision
        self.x_coding = precision.get_integer_coding(x)
        self.y_coding = precision.get_integer_coding(y)
        self.abs_x = self.x_coding & precision.get_abs_mask()
        self.abs_y = self.y_coding & precision.get_abs_mask()
        self.x_negative = self.x_coding != self.abs_x
        self.y_negative = self.y_coding != self.abs_y
        # parity of y is only relevant for a negative x
        self.yisint = classify_integer(self.y_coding, precision) if self.x_negative else IntegerClass.NotInteger

    def one(self):
        return self.precision.cast(1.0)

    def coding(self, value):
        return self.precision.get_integer_coding(self.precision.cast(value))


def y_infty_result(ops):
    if ops.abs_x == ops.coding(1.0):
        # (-1)**+-inf is 1
        return ops.one()
    elif ops.abs_x > ops.coding(1.0):
        # (|x|>1)**+-inf = inf,0
        return ops.precision.cast(0.0) if ops.y_negative else ops.y
    else:
        # (|x|<1)**+-inf = 0,inf
        return -ops.y if ops.y_negative else ops.precision.cast(0.0)


def x_special_result(ops):
    z = fabs(ops.x, ops.precision)
    if ops.y_negative:
        z = ops.one() / z
    if ops.x_negative:
        if ops.abs_x == ops.coding(1.0) and ops.yisint == IntegerClass.NotInteger:
            # (-1)**non-int is NaN
            z = (z - z) / (z - z)
        elif ops.yisint == IntegerClass.OddInteger:
            # (x<0)**odd = -(|x|**odd)
            z = -z
    return z


SpecialCaseRule = collections.namedtuple("SpecialCaseRule", ["name", "guard", "result"])

## ordered special-case decision table, the first matching rule
#  gives the result
POW_SPECIAL_CASES = [
    # x**0 = 1, even if x is NaN
    SpecialCaseRule(
        "y_is_zero",
        lambda ops: ops.abs_y == 0,
        lambda ops: ops.one()),
    # 1**y = 1, even if y is NaN
    SpecialCaseRule(
        "x_is_one",
        lambda ops: ops.x_coding == ops.coding(1.0),
        lambda ops: ops.one()),
    SpecialCaseRule(
        "nan_operand",
        lambda ops: ops.abs_x > ops.precision.get_infty_coding() or ops.abs_y > ops.precision.get_infty_coding(),
        lambda ops: ops.x + ops.y),
    SpecialCaseRule(
        "y_is_infty",
        lambda ops: ops.abs_y == ops.precision.get_infty_coding(),
        y_infty_result),
    SpecialCaseRule(
        "y_is_one",
        lambda ops: ops.abs_y == ops.coding(1.0),
        lambda ops: ops.one() / ops.x if ops.y_negative else ops.x),
    SpecialCaseRule(
        "y_is_two",
        lambda ops: ops.y_coding == ops.coding(2.0),
        lambda ops: ops.x * ops.x),
    # x >= +0
    SpecialCaseRule(
        "y_is_half",
        lambda ops: ops.y_coding == ops.coding(0.5) and not ops.x_negative,
        lambda ops: sqrt(ops.x, ops.precision)),
    SpecialCaseRule(
        "x_is_zero_infty_one",
        lambda ops: ops.abs_x in (0, ops.precision.get_infty_coding(), ops.coding(1.0)),
        x_special_result),
    # (x<0)**(non-int) is NaN
    SpecialCaseRule(
        "negative_x_non_integer_y",
        lambda ops: ops.x_negative and ops.yisint == IntegerClass.NotInteger,
        lambda ops: (ops.x - ops.x) / (ops.x - ops.x)),
]


class MetaPow(ML_FunctionBasis):
    function_name = "pow"
    arity = 2

    def __init__(self, precision=ML_Binary64, function_name=None):
        ML_FunctionBasis.__init__(
            self, precision=precision,
            function_name=function_name or ("powf" if precision is ML_Binary32 else "pow")
        )
        self.constants = POW_CONSTANTS[precision]
        self.special_cases = POW_SPECIAL_CASES

    def select_special_case(self, ops):
        """ return the first special-case rule matching ops (or None) """
        for rule in self.special_cases:
            if rule.guard(ops):
                return rule
        return None

    def high_word(self, value):
        return self.precision.get_high_word(value)

    def evaluate(self, x, y):
        precision = self.precision
        cst = self.constants
        ops = PowOperands(x, y, precision)

        rule = self.select_special_case(ops)
        if rule is not None:
            if Log.is_level_enabled(Log.Debug):
                Log.report(Log.Debug, "{}({}, {}): special case {}", self.function_name, x, y, rule.name)
            return rule.result(ops)

        one = ops.one()
        hy = self.high_word(y)
        ix = self.high_word(x) & 0x7fffffff
        iy = hy & 0x7fffffff

        # sign of result
        s = -one if ops.yisint == IntegerClass.OddInteger else one

        if iy > cst.huge_y:
            t1, t2 = self.evaluate_log2_near_one(x, hy, ix, iy, s)
            if t2 is None:
                # overflow or underflow shortcut
                return t1
        else:
            t1, t2 = self.evaluate_log2(fabs(x, precision), ix)

        # split up y into y1+y2 and compute (y1+y2)*(t1+t2)
        y1, y2 = split_high(y, precision)
        p_l = y2 * t1 + y * t2
        p_h = y1 * t1
        z = p_l + p_h

        overflow = self.check_overflow(z, p_h, p_l)
        if overflow is not None:
            return s * overflow

        return s * self.evaluate_exp2(z, p_h, p_l)

    def evaluate_log2_near_one(self, x, hy, ix, iy, s):
        """ |y| is huge, either pow(x, y) over/underflows or |1 - x| is
            tiny and log2(x) is evaluated from a truncated series

            return (result, None) for an over/underflow, (t1, t2) otherwise """
        cst = self.constants
        precision = self.precision
        huge = cst.HUGE * cst.HUGE
        tiny = cst.TINY * cst.TINY
        if cst.ceiling_y is not None and iy > cst.ceiling_y:
            # |y| > ceiling, must o/uflow
            if ix <= cst.ceiling_x_lo:
                return (huge if hy < 0 else tiny), None
            if ix >= cst.ceiling_x_hi:
                return (huge if hy > 0 else tiny), None

        # over/underflow if x is not close to one
        if ix < cst.near_one_lo:
            return (s * cst.HUGE * cst.HUGE if hy < 0 else s * cst.TINY * cst.TINY), None
        if ix > cst.near_one_hi:
            return (s * cst.HUGE * cst.HUGE if hy > 0 else s * cst.TINY * cst.TINY), None

        # log(x) ~ t - t**2/2 + t**3/3 - t**4/4
        t = fabs(x, precision) - precision.cast(1.0)
        w = (t * t) * (precision.cast(0.5) - t * (cst.THIRD - t * precision.cast(0.25)))
        u = cst.IVLN2_H * t
        v = t * cst.IVLN2_L - w * cst.IVLN2
        return split_sum(u, v, precision)

    def evaluate_log2(self, ax, ix):
        """ log2(ax) as an extended precision pair (t1, t2) """
        precision = self.precision
        cst = self.constants
        hf = precision.get_high_field_size()
        implicit_hi = 1 << hf
        field_mask_hi = implicit_hi - 1
        one_hi = precision.get_high_word_coding(precision.get_one_coding())
        bias = -precision.get_bias()

        n = 0
        if ix < implicit_hi:
            # take care of subnormal number
            ax = ax * cst.SUBNORMAL_SCALE
            n -= precision.get_field_size() + 1
            ix = self.high_word(ax)
        n += (ix >> hf) - bias
        j = ix & field_mask_hi

        # determine interval
        ix = j | one_hi
        if j <= cst.interval_lo:
            # |x| < sqrt(3/2)
            k = 0
        elif j < cst.interval_hi:
            # |x| < sqrt(3)
            k = 1
        else:
            k = 0
            n += 1
            ix -= implicit_hi
        ax = precision.with_set_high_word(ax, ix)
        bp = cst.BP[k]

        # ss = s_h + s_l = (x-1)/(x+1) or (x-1.5)/(x+1.5)
        u = ax - bp
        v = precision.cast(1.0) / (ax + bp)
        ss = u * v
        s_h = truncate_low_bits(ss, precision)
        # t_h = ax + bp[k] High
        t_h = precision.with_set_high_word(
            precision.cast(0.0),
            (((ix >> 1) & cst.t_h_mask) | 0x20000000) + (implicit_hi >> 1) + (k << (hf - 2))
        )
        t_l = ax - (t_h - bp)
        s_l = v * ((u - s_h * t_h) - s_h * t_l)

        # log(ax)
        three = precision.cast(3.0)
        s2 = ss * ss
        r = PolynomialSchemeEvaluator.evaluate_horner_scheme(cst.log_poly, s2)
        r += s_l * (s_h + ss)
        s2 = s_h * s_h
        t_h = truncate_low_bits(three + s2 + r, precision)
        t_l = r - ((t_h - three) - s2)

        # u + v = ss*(1+...)
        u = s_h * t_h
        v = s_l * t_h + t_l * ss

        # 2/(3*log2)*(ss+...)
        p_h, p_l = split_sum(u, v, precision)
        z_h = cst.CP_H * p_h
        z_l = cst.CP_L * p_h + p_l * cst.CP + cst.DP_L[k]

        # log2(ax) = (ss+..)*2/(3*log2) = n + dp_h + z_h + z_l
        t = precision.cast(n)
        t1 = truncate_low_bits(((z_h + z_l) + cst.DP_H[k]) + t, precision)
        t2 = z_l - (((t1 - t) - cst.DP_H[k]) - z_h)
        return t1, t2

    def check_overflow(self, z, p_h, p_l):
        """ return HUGE*HUGE (overflow), TINY*TINY (underflow) or None """
        precision = self.precision
        cst = self.constants
        z_coding = precision.get_integer_coding(z)
        z_signed = to_signed(z_coding, precision.get_bit_size())
        ovf_coding = precision.get_integer_coding(cst.OVF_BOUND)
        unf_coding = precision.get_integer_coding(cst.UNF_BOUND)
        if z_signed > ovf_coding:
            # z > ovf bound
            return cst.HUGE * cst.HUGE
        elif z_signed == ovf_coding:
            if p_l + cst.OVT > z - p_h:
                return cst.HUGE * cst.HUGE
        elif (z_coding & precision.get_abs_mask()) > unf_coding:
            # z < -unf bound
            return cst.TINY * cst.TINY
        elif z_coding == precision.get_sign_mask() | unf_coding and p_l <= z - p_h:
            # z == -unf bound
            return cst.TINY * cst.TINY
        return None

    def evaluate_exp2(self, z, p_h, p_l):
        """ 2**(p_h + p_l) with z = p_h + p_l in the format range """
        precision = self.precision
        cst = self.constants
        hf = precision.get_high_field_size()
        implicit_hi = 1 << hf
        field_mask_hi = implicit_hi - 1
        bias = -precision.get_bias()
        half_hi = precision.get_high_word_coding(precision.get_integer_coding(precision.cast(0.5)))

        j = self.high_word(z)
        i = j & 0x7fffffff
        k = (i >> hf) - bias
        n = 0
        if i > half_hi:
            # |z| > 0.5, set n = [z + 0.5]
            n = j + (implicit_hi >> (k + 1))
            # new k for n
            k = ((n & 0x7fffffff) >> hf) - bias
            t = precision.with_set_high_word(precision.cast(0.0), n & ~(field_mask_hi >> k))
            n = ((n & field_mask_hi) | implicit_hi) >> (hf - k)
            if j < 0:
                n = -n
            p_h = p_h - t

        one = precision.cast(1.0)
        t = truncate_low_bits(p_l + p_h, precision, cst.final_drop_bits)
        u = t * cst.LG2_H
        v = (p_l - (t - p_h)) * cst.LG2 + t * cst.LG2_L
        z = u + v
        w = v - (z - u)
        t = z * z
        t1 = z - PolynomialSchemeEvaluator.evaluate_horner_scheme(cst.exp_poly, t)
        r = (z * t1) / (t1 - precision.cast(2.0)) - (w + z * w)
        z = one - (r - z)
        j = self.high_word(z)
        j += n << hf

        if (j >> hf) <= 0:
            # subnormal output
            return scalbn(z, n, precision)
        return precision.with_set_high_word(z, j)

    @fp_silent
    def numeric_emulate(self, x, y):
        """ Numeric emulation of pow """
        precision = self.precision
        # zeros, infinities and NaN follow C99 Annex F
        if not (is_number(x, precision) and is_number(y, precision)) \
                or is_zero(x, precision) or is_zero(y, precision) \
                or precision.get_integer_coding(x) == precision.get_one_coding():
            return precision.cast(np.power(x, y))
        yisint = classify_integer_value(y, precision)
        if x < 0 and yisint == IntegerClass.NotInteger:
            return precision.cast(np.nan)
        negative = x < 0 and yisint == IntegerClass.OddInteger
        mp_x = abs(get_mpf(x))
        mp_y = get_mpf(y)
        with mpmath.workprec(64):
            exponent = mp_y * mpmath.log(mp_x, 2)
        with mpmath.workprec(REFERENCE_PRECISION):
            if exponent > precision.get_emax() + 2:
                result = mpmath.inf
            elif exponent < precision.get_emin_subnormal() - 2:
                result = mpmath.mpf(0)
            else:
                result = mpmath.power(mp_x, mp_y)
            return -result if negative else result

    def get_input_generators(self, seed=None):
        if self.precision is ML_Binary64:
            x_exp_range, y_exp_range = (-60, 60), (-10, 3)
        else:
            x_exp_range, y_exp_range = (-20, 20), (-8, 2)
        seed_y = None if seed is None else seed + 1
        x_weight_map = {
            FPRandomGen.Category.FPLogInterval(*x_exp_range, positive=True): 0.45,
            FPRandomGen.Category.FPLogInterval(*x_exp_range): 0.15,
            FPRandomGen.Category.NearOne: 0.15,
            FPRandomGen.Category.Integer: 0.1,
            FPRandomGen.Category.Subnormal: 0.05,
            FPRandomGen.Category.SpecialValues: 0.05,
            FPRandomGen.Category.IntervalBoundary: 0.05,
        }
        y_weight_map = {
            FPRandomGen.Category.FPLogInterval(*y_exp_range): 0.75,
            FPRandomGen.Category.Integer: 0.2,
            FPRandomGen.Category.SpecialValues: 0.05,
        }
        # reduction interval boundaries: sqrt(3/2), sqrt(3) and their
        # neighbours on both sides of every interval limit
        low_size = self.precision.get_low_word_size()
        one_coding = self.precision.get_one_coding()
        boundary_list = [
            self.precision.get_value_from_integer_coding(one_coding | (j << low_size))
            for j in (self.constants.interval_lo, self.constants.interval_lo + 1,
                      self.constants.interval_hi - 1, self.constants.interval_hi)
        ] + [self.precision.get_min_normal_value(), self.precision.get_omega()]
        return [
            FPRandomGen(self.precision, weight_map=x_weight_map, seed=seed,
                        boundary_list=boundary_list, integer_range=32),
            FPRandomGen(self.precision, weight_map=y_weight_map, seed=seed_y, integer_range=64),
        ]

    @property
    def standard_test_cases(self):
        generic_list = [
            # test-case #1
            (float.fromhex("0x1.bbe2f2p-1"), float.fromhex("0x1.2d34ep+9")),
            # test-case #2
            (0.0, float.fromhex("0x1.a45a2ep-56"), 0.0),
            # test-case #0
            (float.fromhex("0x1.5d20b8p-115"), float.fromhex("0x1.c20048p+0")),
            # special cases
            (0.0, 1.0, 0.0),
            (0.0, 0.0, 1.0),
            (np.nan, 0.0, 1.0),
            (1.0, np.nan, 1.0),
            (-1.0, np.inf, 1.0),
            (-1.0, -np.inf, 1.0),
            (2.0, 20.0, 1048576.0),
            (-1.0, 9.0, -1.0),
            (-1.0, 2.2, np.nan),
            (-1.0, -1.14, np.nan),
            (-2.0, 3.0, -8.0),
            (-0.0, -3.0, -np.inf),
            (-np.inf, 3.0, -np.inf),
            (-np.inf, -3.0, -0.0),
            (4.0, 0.5, 2.0),
            (10.0, -1.0),
            (float.fromhex("0x1.000002p+0"), 1e9),
        ]
        fp64_list = [
            (3.0, 5.0, 243.0),
            # subnormal output
            (float.fromhex("0x1.21998d0c5039bp-976"), float.fromhex("0x1.bc68e3d0ffd24p+3")),
            # |y| > 2**64
            (float.fromhex("0x1.0000000000001p+0"), 2.0**70, np.inf),
            (float.fromhex("0x1.fffffffffffffp-1"), 2.0**70, 0.0),
        ]
        return generic_list + (fp64_list if self.precision.get_bit_size() >= 64 else [])


pow = MetaPow(ML_Binary64)
powf = MetaPow(ML_Binary32)
