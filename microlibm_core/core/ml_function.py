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

import numbers

from .ml_formats import ML_Binary64
from .random_gen import FPRandomGen
from ..utility.log_report import Log
from ..utility.common import ML_NotImplemented
from ..utility.decorator import fp_silent
from ..utility.num_utils import ulp_error

## \defgroup ml_function ml_function
## @{


class ValidError(Exception):
  """ Exception to indicate that a validation stage failed """
  pass


## Base class for all microlibm function (metafunction)
class ML_FunctionBasis(object):
  function_name = "function_basis"
  arity = 1
  ## maximal error (in ulps) accepted by the differential validation
  accuracy_bound = 2

  ## constructor
  #   @param precision output format
  #   @param input_precisions list of input formats (None selects
  #          [precision] * arity)
  def __init__(self, precision=ML_Binary64, input_precisions=None, function_name=None):
    self.precision = precision
    self._input_precisions = input_precisions
    if function_name:
      self.function_name = function_name

  @property
  def input_precisions(self):
    if self._input_precisions is None:
      return [self.precision] * self.arity
    return self._input_precisions

  def get_name(self):
    return self.function_name

  def get_output_precision(self):
    return self.precision
  def get_input_precision(self, index=0):
    return self.input_precisions[index]
  def get_input_precisions(self):
    return self.input_precisions

  def __repr__(self):
    return "<{} {}>".format(self.__class__.__name__, self.function_name)

  def cast_inputs(self, args):
    """ convert the call arguments to the function input formats,
        values already in the right format are forwarded unchanged """
    if len(args) != self.arity:
      Log.report(
        Log.Error, "{} expects {} argument(s), {} given",
        self.function_name, self.arity, len(args),
        error=TypeError("{}() takes {} argument(s)".format(self.function_name, self.arity))
      )
    cast_args = []
    for value, precision in zip(args, self.input_precisions):
      if not isinstance(value, numbers.Real):
        Log.report(
          Log.Error, "{} argument {!r} is not a real number",
          self.function_name, value,
          error=TypeError("{}() argument must be a real number, not {}".format(
            self.function_name, type(value).__name__))
        )
      cast_args.append(precision.cast(value))
    return cast_args

  @fp_silent
  def __call__(self, *args):
    return self.evaluate(*self.cast_inputs(args))

  ## evaluate the function on inputs already converted to their formats
  def evaluate(self, *args):
    raise ML_NotImplemented()

  ## provide numeric evaluation of the main function on @p input_value
  #  @param input_value numeric input value(s) (numpy scalars)
  #  @return mpmath number (or numpy special value) corresponding
  #          to the exact value of @p self function on @p input_value
  def numeric_emulate(self, *input_value):
    raise ML_NotImplemented()

  # list of input to be used for standard test validation, each test case
  # is an input tuple optionally followed by the expected output
  standard_test_cases = []

  def get_input_generators(self, seed=None):
    """ return one random generator per input """
    return [
      FPRandomGen(precision, seed=(None if seed is None else seed + index))
      for index, precision in enumerate(self.input_precisions)
    ]

  def generate_rand_input_iterator(self, test_num, seed=None):
    """ generate a random list of test inputs """
    rng_list = self.get_input_generators(seed)
    for _ in range(test_num):
      yield tuple(rng.get_new_value() for rng in rng_list)

  def get_standard_inputs(self):
    """ standard test cases inputs, converted to the input formats """
    return [
      tuple(self.cast_inputs(test_case[:self.arity])) for test_case in self.standard_test_cases
    ]

  def generate_test_inputs(self, test_num, seed=None, value_test=None):
    """ Generate inputs list: standard test cases, user defined values
        and test_num random inputs """
    test_case_list = self.get_standard_inputs()
    if value_test:
      test_case_list += [tuple(self.cast_inputs(value)) for value in value_test]
    test_case_list += list(self.generate_rand_input_iterator(test_num, seed))
    Log.report(Log.Info, "{} test inputs generated for {}", len(test_case_list), self.function_name)
    return test_case_list

  def get_ulp_error(self, *inputs):
    """ error of the function on @p inputs, in ulps of the exact result """
    inputs = self.cast_inputs(inputs)
    result = self(*inputs)
    return ulp_error(result, self.numeric_emulate(*inputs), self.precision)

  def get_max_ulp_error(self, input_list):
    """ return the maximal error and the inputs it was reached on """
    max_error = 0.0
    worst_inputs = None
    for inputs in input_list:
      error = self.get_ulp_error(*inputs)
      Log.report(Log.Verbose, "{}{} error: {} ulp(s)", self.function_name, inputs, error)
      if error > max_error or worst_inputs is None:
        max_error = error
        worst_inputs = inputs
    return max_error, worst_inputs

  def run_standard_test_cases(self):
    """ check every standard test case, those carrying an expected output
        must match it bit for bit, the others must satisfy the accuracy
        bound. Return the list of failing test cases """
    failures = []
    for test_case in self.standard_test_cases:
      inputs = self.cast_inputs(test_case[:self.arity])
      result = self(*inputs)
      if len(test_case) > self.arity and test_case[self.arity] is not None:
        expected = self.precision.cast(test_case[self.arity])
        valid = self.precision.get_integer_coding(result) == self.precision.get_integer_coding(expected) \
          or (result != result and expected != expected)
      else:
        valid = ulp_error(result, self.numeric_emulate(*inputs), self.precision) <= self.accuracy_bound
      if not valid:
        Log.report(Log.Warning, "standard test case {}{} failed: {}", self.function_name, tuple(inputs), result)
        failures.append((tuple(inputs), result))
    return failures

  def check_accuracy(self, test_num, seed=None, max_ulp=None, value_test=None):
    """ differential validation campaign, raises ValidError if the
        function exceeds max_ulp (default accuracy_bound) """
    max_ulp = self.accuracy_bound if max_ulp is None else max_ulp
    failures = self.run_standard_test_cases()
    if failures:
      Log.report(
        Log.Error, "{} standard test case(s) failed for {}", len(failures), self.function_name,
        error=ValidError("standard test cases failed for {}".format(self.function_name))
      )
    input_list = self.generate_test_inputs(test_num, seed=seed, value_test=value_test)
    max_error, worst_inputs = self.get_max_ulp_error(input_list)
    Log.report(Log.Info, "max error for {}: {} ulp(s) on {}", self.function_name, max_error, worst_inputs)
    if max_error > max_ulp:
      Log.report(
        Log.Error, "{} error {} ulp(s) on {} exceeds {} ulp(s)",
        self.function_name, max_error, worst_inputs, max_ulp,
        error=ValidError("{} accuracy check failed".format(self.function_name))
      )
    return max_error, worst_inputs


# end of Doxygen's ml_function group
## @}
