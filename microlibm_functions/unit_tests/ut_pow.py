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
# description:      unit-tests for the binary64 and binary32 power functions
###############################################################################
import math
import unittest

import mpmath
import numpy as np

from microlibm_core.core.ml_formats import ML_Binary32, ML_Binary64
from microlibm_core.core.random_gen import FPRandomGen
from microlibm_core.core.special_values import is_nan
from microlibm_core.utility.num_utils import REFERENCE_PRECISION, ulp_error

from microlibm_functions import pow, powf
from microlibm_functions.ml_pow import POW_CONSTANTS, POW_SPECIAL_CASES, PowOperands


def get_test_sets(precision):
    """ named sets of remarkable values of <precision> """
    omega = precision.get_omega()
    epsilon = 2.0**-precision.get_field_size()
    min_normal = precision.get_min_normal_value()
    raw_sets = [
        ("pos_zero", [0.0]),
        ("neg_zero", [-0.0]),
        ("nans", [np.nan]),
        ("neg_small_floats", [-0.5, -min_normal, -epsilon]),
        ("pos_small_floats", [0.5, min_normal, epsilon]),
        ("neg_floats", [-99.0 / 70.0, -math.e, -math.pi]),
        ("pos_floats", [99.0 / 70.0, math.e, math.pi]),
        ("neg_evens", [-omega, -100.0, -22.0, -10.0, -8.0, -6.0, -2.0]),
        ("pos_evens", [2.0, 6.0, 8.0, 10.0, 22.0, 100.0, omega]),
        ("neg_odds", [-7.0, -3.0]),
        ("pos_odds", [3.0, 7.0]),
        ("neg_inf", [-np.inf]),
        ("pos_inf", [np.inf]),
        ("neg_one", [-1.0]),
        ("pos_one", [1.0]),
    ]
    return [(name, [precision.cast(v) for v in values]) for name, values in raw_sets]


class UT_PowSpecialValues(unittest.TestCase):
    """ special values of the power function, every result is checked
        bit for bit (any NaN matching a NaN) """
    function = pow
    precision = ML_Binary64

    def setUp(self):
        self.test_sets = get_test_sets(self.precision)
        self.all_sets = [values for _, values in self.test_sets]
        set_map = dict(self.test_sets)
        self.pos_sets = [set_map[name] for name in ["pos_zero", "pos_odds", "pos_one", "pos_floats", "pos_evens", "pos_inf"]]
        self.neg_sets = [set_map[name] for name in ["neg_zero", "neg_odds", "neg_one", "neg_floats", "neg_evens", "neg_inf"]]
        self.set_map = set_map

    def cast(self, value):
        return self.precision.cast(value)

    def assert_same_value(self, result, expected, msg):
        if is_nan(expected, self.precision):
            self.assertTrue(is_nan(result, self.precision), msg)
        else:
            self.assertEqual(
                self.precision.get_integer_coding(result),
                self.precision.get_integer_coding(expected), msg)

    def check_pow(self, base, exponent, expected):
        result = self.function(base, exponent)
        self.assertTrue(isinstance(result, self.precision.get_numpy_type()))
        self.assert_same_value(result, self.cast(expected), "{} ** {} was {} instead of {}".format(base, exponent, result, expected))

    def check_sets_as_base(self, sets, exponent, expected):
        for values in sets:
            for value in values:
                self.check_pow(value, exponent, expected)

    def check_sets_as_exponent(self, base, sets, expected):
        for values in sets:
            for value in values:
                self.check_pow(base, value, expected)

    def check_sets(self, sets, computed, expected):
        with np.errstate(all="ignore"):
            for values in sets:
                for value in values:
                    self.assert_same_value(
                        computed(value), self.cast(expected(value)),
                        "test for {} was {} instead of {}".format(value, computed(value), expected(value)))

    def test_zero_as_exponent(self):
        self.check_sets_as_base(self.all_sets, 0.0, 1.0)
        self.check_sets_as_base(self.all_sets, -0.0, 1.0)

    def test_one_as_base(self):
        self.check_sets_as_exponent(1.0, self.all_sets, 1.0)

    def test_nan_inputs(self):
        """ NaN ** anything but 0 and anything but 1 ** NaN are NaN """
        self.check_sets_as_exponent(np.nan, self.all_sets[2:], np.nan)
        self.check_sets_as_base(self.all_sets[:-2], np.nan, np.nan)

    def test_infinity_as_base(self):
        self.check_sets_as_exponent(np.inf, self.pos_sets[1:], np.inf)
        self.check_sets_as_exponent(np.inf, self.neg_sets[1:], 0.0)
        self.check_sets_as_exponent(-np.inf, [self.set_map["pos_odds"]], -np.inf)
        # -inf ** y == -0 ** -y
        self.check_sets(
            self.all_sets,
            lambda v: self.function(-np.inf, v),
            lambda v: self.function(-0.0, -v))

    def test_infinity_as_exponent(self):
        self.check_sets_as_base(self.all_sets[5:-2], np.inf, np.inf)
        self.check_sets_as_base(self.all_sets[5:-2], -np.inf, 0.0)
        base_below_one = [self.set_map[name] for name in ["pos_zero", "neg_zero", "neg_small_floats", "pos_small_floats"]]
        self.check_sets_as_base(base_below_one, np.inf, 0.0)
        self.check_sets_as_base(base_below_one, -np.inf, np.inf)
        self.check_sets_as_base([self.set_map["neg_one"], self.set_map["pos_one"]], np.inf, 1.0)
        self.check_sets_as_base([self.set_map["neg_one"], self.set_map["pos_one"]], -np.inf, 1.0)

    def test_zero_as_base(self):
        self.check_sets_as_exponent(0.0, self.pos_sets[1:], 0.0)
        self.check_sets_as_exponent(0.0, self.neg_sets[1:], np.inf)
        self.check_sets_as_exponent(-0.0, self.pos_sets[3:], 0.0)
        self.check_sets_as_exponent(-0.0, self.neg_sets[3:], np.inf)
        self.check_sets_as_exponent(-0.0, [self.set_map["pos_odds"]], -0.0)
        self.check_sets_as_exponent(-0.0, [self.set_map["neg_odds"]], -np.inf)

    def test_special_cases(self):
        """ y = 1, y = -1, sign factoring and negative bases """
        one = self.cast(1.0)
        self.check_sets(self.all_sets, lambda v: self.function(v, 1.0), lambda v: v)
        self.check_sets(self.all_sets, lambda v: self.function(v, -1.0), lambda v: one / v)
        integer_sets = [self.set_map[name] for name in ["pos_zero", "neg_zero", "pos_one", "neg_one", "pos_evens", "neg_evens"]]
        for values in integer_sets:
            for integer in values:
                self.check_sets(
                    self.all_sets,
                    lambda v: self.function(-v, integer),
                    lambda v: self.function(-1.0, integer) * self.function(v, integer))
        # negative base (imaginary results)
        for values in self.neg_sets[1:-1]:
            for value in values:
                self.check_sets(self.all_sets[3:7], lambda v: self.function(value, v), lambda v: np.nan)

    def test_normal_cases(self):
        self.check_pow(2.0, 20.0, float(1 << 20))
        self.check_pow(-1.0, 9.0, -1.0)
        self.assertTrue(is_nan(self.function(-1.0, 2.2), self.precision))
        self.assertTrue(is_nan(self.function(-1.0, -1.14), self.precision))

    def test_standard_test_cases(self):
        self.assertEqual(self.function.run_standard_test_cases(), [])


class UT_PowfSpecialValues(UT_PowSpecialValues):
    function = powf
    precision = ML_Binary32


class UT_PowProperties(unittest.TestCase):
    """ algebraic identities checked on random inputs """
    function = pow
    precision = ML_Binary64

    def get_random_values(self, seed, num=500):
        rng = FPRandomGen(self.precision, seed=seed)
        return [rng.get_new_value() for _ in range(num)]

    def check_identity(self, computed, expected):
        with np.errstate(all="ignore"):
            for value in self.get_random_values(17):
                result = computed(value)
                reference = expected(value)
                if is_nan(reference, self.precision):
                    self.assertTrue(is_nan(result, self.precision), value)
                else:
                    self.assertEqual(
                        self.precision.get_integer_coding(result),
                        self.precision.get_integer_coding(reference), value)

    def test_square(self):
        """ x ** 2 == x * x """
        self.check_identity(lambda x: self.function(x, 2.0), lambda x: x * x)

    def test_identity(self):
        self.check_identity(lambda x: self.function(x, 1.0), lambda x: x)

    def test_reciprocal(self):
        one = self.precision.cast(1.0)
        self.check_identity(lambda x: self.function(x, -1.0), lambda x: one / x)

    def test_sign_factoring(self):
        """ (-x) ** n == (-1) ** n * x ** n for integer n """
        for n in [3.0, 4.0, -5.0, 10.0, -2.0]:
            self.check_identity(
                lambda x: self.function(-x, n),
                lambda x: self.function(-1.0, n) * self.function(x, n))

    def test_negative_base(self):
        """ negative finite base and non-integer finite exponent give NaN """
        for value in self.get_random_values(23, 200):
            if not np.isfinite(value) or value == 0:
                continue
            self.assertTrue(is_nan(self.function(-abs(value), 0.75), self.precision))
            self.assertTrue(is_nan(self.function(-abs(value), -2.5), self.precision))

    def test_special_case_ladder(self):
        """ earlier rules take precedence """
        one = self.precision.cast(1.0)
        def rule_name(x, y):
            ops = PowOperands(self.precision.cast(x), self.precision.cast(y), self.precision)
            rule = self.function.select_special_case(ops)
            return None if rule is None else rule.name
        self.assertEqual(rule_name(np.nan, 0.0), "y_is_zero")
        self.assertEqual(rule_name(1.0, np.nan), "x_is_one")
        self.assertEqual(rule_name(-1.0, np.nan), "nan_operand")
        self.assertEqual(rule_name(-1.0, np.inf), "y_is_infty")
        self.assertEqual(rule_name(-0.0, 1.0), "y_is_one")
        self.assertEqual(rule_name(-3.0, 2.0), "y_is_two")
        self.assertEqual(rule_name(4.0, 0.5), "y_is_half")
        self.assertEqual(rule_name(-0.0, 0.5), "x_is_zero_infty_one")
        self.assertEqual(rule_name(-2.0, 0.5), "negative_x_non_integer_y")
        self.assertEqual(rule_name(-2.0, 3.0), None)
        self.assertEqual(rule_name(3.0, 5.0), None)
        self.assertEqual([rule.name for rule in POW_SPECIAL_CASES][0], "y_is_zero")
        self.assertEqual(one, self.function(np.nan, -0.0))


class UT_PowfProperties(UT_PowProperties):
    function = powf
    precision = ML_Binary32


class UT_PowEmulation(unittest.TestCase):
    """ mpmath reference used by the accuracy checks """
    function = pow
    precision = ML_Binary64

    def test_odd_exponent_symmetry(self):
        """ the reference of (-x) ** n is the exact negation of x ** n """
        field_size = self.precision.get_field_size()
        base_list = [1.0 + 2.0**-field_size, 1.5, 3.0 - 2.0**(1 - field_size), 0.1, 7.0]
        for base in base_list:
            x = self.precision.cast(base)
            for n in [3.0, 5.0, -3.0, 7.0]:
                y = self.precision.cast(n)
                positive = self.function.numeric_emulate(x, y)
                negative = self.function.numeric_emulate(-x, y)
                self.assertEqual(negative, mpmath.fneg(positive, exact=True), (base, n))
                self.assertEqual(
                    ulp_error(self.function(-x, y), negative, self.precision),
                    ulp_error(self.function(x, y), positive, self.precision))

    def test_cube_is_exact(self):
        """ (1 + ulp) ** 3 needs more than the format precision """
        field_size = self.precision.get_field_size()
        x = self.precision.cast(-(1.0 + 2.0**-field_size))
        with mpmath.workprec(REFERENCE_PRECISION):
            expected = -(1 + mpmath.ldexp(1, -field_size)) ** 3
        self.assertEqual(self.function.numeric_emulate(x, self.precision.cast(3.0)), expected)


class UT_PowfEmulation(UT_PowEmulation):
    function = powf
    precision = ML_Binary32


class UT_PowConstants(unittest.TestCase):
    def test_constant_codings(self):
        """ binary64 kernel constants are pinned by their encodings """
        cst = POW_CONSTANTS[ML_Binary64]
        coding = ML_Binary64.get_integer_coding
        self.assertEqual([coding(v) for v in cst.BP], [0x3ff0000000000000, 0x3ff8000000000000])
        self.assertEqual([coding(v) for v in cst.DP_H], [0x0, 0x3fe2b80340000000])
        self.assertEqual([coding(v) for v in cst.DP_L], [0x0, 0x3e4cfdeb43cfd006])
        self.assertEqual(cst.SUBNORMAL_SCALE, 2.0**53)
        self.assertEqual([coding(v) for v in cst.L], [
            0x3fe3333333333303, 0x3fdb6db6db6fabff, 0x3fd55555518f264d,
            0x3fd17460a91d4101, 0x3fcd864a93c9db65, 0x3fca7e284a454eef])
        self.assertEqual([coding(v) for v in cst.P], [
            0x3fc555555555553e, 0xbf66c16c16bebd93, 0x3f11566aaf25de2c,
            0xbebbbd41c5d26bf1, 0x3e66376972bea4d0])
        self.assertEqual(coding(cst.LG2), 0x3fe62e42fefa39ef)
        self.assertEqual(coding(cst.LG2_H), 0x3fe62e4300000000)
        self.assertEqual(coding(cst.LG2_L), 0xbe205c610ca86c39)
        self.assertEqual(coding(cst.CP), 0x3feec709dc3a03fd)
        self.assertEqual(coding(cst.CP_H), 0x3feec709e0000000)
        self.assertEqual(coding(cst.CP_L), 0xbe3e2fe0145b01f5)
        self.assertEqual(coding(cst.IVLN2), 0x3ff71547652b82fe)
        self.assertEqual(coding(cst.IVLN2_H), 0x3ff7154760000000)
        self.assertEqual(coding(cst.IVLN2_L), 0x3e54ae0bf85ddf44)
        self.assertEqual(cst.OVT, 8.008566259537294e-17)
        self.assertEqual(cst.HUGE, 1.0e300)
        self.assertEqual(cst.TINY, 1.0e-300)

    def test_constant_values(self):
        """ encodings match the decimal values of the constants """
        cst = POW_CONSTANTS[ML_Binary64]
        self.assertEqual(cst.L[0], 5.999999999999946e-1)
        self.assertEqual(cst.P[1], -2.7777777777015593e-3)
        self.assertEqual(cst.DP_H[1], 5.849624872207642e-1)
        self.assertEqual(cst.CP, 9.617966939259756e-1)
        self.assertEqual(cst.IVLN2, 1.4426950408889634)

    def test_polynomials(self):
        cst = POW_CONSTANTS[ML_Binary64]
        self.assertEqual(cst.log_poly.get_min_monomial_degree(), 2)
        self.assertEqual(cst.log_poly.get_degree(), 7)
        self.assertEqual(cst.exp_poly.get_min_monomial_degree(), 1)
        self.assertEqual(cst.exp_poly.get_degree(), 5)


class UT_PowAccuracy(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(pow(3.0, 5.0), 243.0)
        self.assertEqual(pow(2.0, -1074.0), float.fromhex("0x1p-1074"))
        self.assertEqual(pow(2.0, 1023.0), 2.0**1023)
        self.assertEqual(pow(10.0, 2.0), 100.0)
        self.assertTrue(pow.get_ulp_error(10.0, -1.0) <= 1)
        self.assertTrue(pow.get_ulp_error(1.5, 0.3) <= 1)

    def test_overflow_underflow(self):
        """ out of range results are +-inf or +-0 """
        self.assertEqual(pow(10.0, 400.0), np.inf)
        self.assertEqual(pow(-10.0, 401.0), -np.inf)
        self.assertEqual(pow(10.0, -400.0), 0.0)
        self.assertEqual(ML_Binary64.get_integer_coding(pow(-10.0, -401.0)), 0x8000000000000000)
        self.assertEqual(pow(2.0, 1024.0), np.inf)
        self.assertEqual(pow(2.0, -1075.0), 0.0)
        # |y| > 2**64
        self.assertEqual(pow(0.5, 2.0**70), 0.0)
        self.assertEqual(pow(0.5, -2.0**70), np.inf)
        # |y| > 2**31, x close to 1
        self.assertTrue(pow.get_ulp_error(1.0 + 2.0**-40, 2.0**40) <= pow.accuracy_bound)

    def test_subnormal_inputs(self):
        self.assertTrue(pow.get_ulp_error(float.fromhex("0x1p-1074"), 0.5) <= 1)
        self.assertTrue(pow.get_ulp_error(float.fromhex("0x1.8p-1060"), -0.75) <= 2)
        self.assertTrue(pow.get_ulp_error(float.fromhex("0x1.8p-1060"), 0.99) <= 2)

    def test_random_inputs(self):
        """ differential check against the mpmath reference """
        max_error, worst_inputs = pow.check_accuracy(3000, seed=7)
        self.assertTrue(max_error <= pow.accuracy_bound)

    def test_invalid_calls(self):
        self.assertRaises(TypeError, pow, 2.0)
        self.assertRaises(TypeError, pow, 2.0, "3")


if __name__ == '__main__':
    unittest.main()
