# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""Exceptions raised by pegboard containers and iteration helpers

Every error is a subclass of one of the built-in TypeError or
ValueError so that callers who do not care about the finer taxonomy
can catch the usual suspects.
"""


class UnexpectedFloat(ValueError):
    """A number was given where an integer is required."""


class UnexpectedNegative(ValueError):
    """A negative integer was given where only values >= 0 are allowed."""


class Underflow(UnexpectedNegative):
    """A bulk subtraction would take one or more counts below zero.

    The attribute underflow maps every offending key to a pair
    (this_value, other_value).
    """
    def __init__(self, message, underflow=None):
        super(Underflow, self).__init__(message)
        self.underflow = dict(underflow or {})


class CapabilityError(TypeError):
    """An argument lacks the methods an operation relies on."""


class MismatchedLengths(ValueError):
    """Iterables passed to zip_strict did not terminate together."""
