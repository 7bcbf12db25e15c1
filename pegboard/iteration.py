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
"""Lazy iteration helpers

Generators over ranges, cartesian products, zipped sequences and
de-duplicated or repeated items. All public functions validate their
arguments eagerly and return a generator, so that bad arguments
fail at the call site rather than on the first call to next().

Note that range and zip shadow the builtins of the same name when
imported with a star import.
"""
import builtins
from collections.abc import Container, Iterable
from numbers import Integral, Number

from .exceptions import (CapabilityError, MismatchedLengths,
                         UnexpectedFloat, UnexpectedNegative)


__all__ = ['Dial', 'empty', 'first_matching', 'product', 'range',
           'repeat', 'unique', 'zip', 'zip_strict']


def _integer_problem(value, what):
    """Return an error instance if value is no integer, else None"""
    if isinstance(value, bool) or not isinstance(value, Number):
        return TypeError("%s is not an integer: %r" % (what, value))
    elif not isinstance(value, Integral):
        return UnexpectedFloat("%s is not an integer: %r" % (what, value))
    return None


def _require_iterables(iterables):
    for i, iterable in enumerate(iterables):
        if not isinstance(iterable, Iterable):
            raise CapabilityError(
                "argument %d does not appear to be iterable: %r" % (i, iterable))


def empty(*args):
    """A generator that yields nothing, whatever it is called with."""
    return
    yield


def _range(begin, end, step):
    value = begin
    while value < end:
        yield value
        value += step


def range(*args):
    """Generate integers from begin (inclusive) to end (exclusive).

    Accepts (end), (begin, end) or (begin, end, step) like the builtin,
    but only ascending sequences: step must be positive. Calling range
    again with the same arguments starts a fresh sequence.
    """
    if not 1 <= len(args) <= 3:
        raise TypeError("range expected 1 to 3 arguments, got %d" % len(args))
    for i, value in enumerate(args):
        problem = _integer_problem(value, "argument %d" % i)
        if problem:
            raise problem

    begin, step = 0, 1
    if len(args) == 1:
        end, = args
    elif len(args) == 2:
        begin, end = args
    else:
        begin, end, step = args
    if step <= 0:
        raise ValueError("range step must be positive, not %d" % step)
    return _range(begin, end, step)


class Dial(object):
    """A digit wheel over a fixed sequence of values

    The dial points at one of its values at a time. Advancing past
    either end wraps around and records a carry of +1 (overflow) or
    -1 (underflow), like a digit of an odometer.
    """
    def __init__(self, values):
        values = tuple(values)
        if not values:
            raise ValueError("a Dial needs at least one value")
        self._values = values
        self._index = 0
        self._carry = 0

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._values)

    @property
    def carry(self):
        """Carry of the last advance: -1, 0 or 1"""
        return self._carry

    @property
    def current_index(self):
        return self._index

    @property
    def current_value(self):
        return self._values[self._index]

    def reset_carry(self):
        self._carry = 0

    def advance(self, n=1):
        """Turn the dial by n positions and return the carry.

        n may be negative. The carry is -1 when the dial wrapped below
        its first value, 1 when it wrapped past its last value, and 0
        otherwise.
        """
        problem = _integer_problem(n, "n")
        if problem:
            raise problem
        position = self._index + n
        if position < 0:
            self._carry = -1
        elif position >= len(self._values):
            self._carry = 1
        else:
            self._carry = 0
        self._index = position % len(self._values)
        return self._carry


def _product(dials):
    combinations = 1
    for dial in dials:
        combinations *= len(dial)

    for _ in builtins.range(combinations):
        yield tuple(dial.current_value for dial in dials)
        # rightmost dial turns fastest; stop at the first one that does not carry
        for dial in reversed(dials):
            dial.reset_carry()
            if not dial.advance():
                break


def product(*iterables):
    """Generate the cartesian product of the given iterables.

    Every iterable is read into a snapshot before the first tuple is
    produced. Tuples are generated in odometer order, with the last
    iterable varying fastest. Without iterables, or if any iterable is
    empty, nothing is generated.
    """
    _require_iterables(iterables)
    snapshots = [tuple(iterable) for iterable in iterables]
    if not snapshots or not all(snapshots):
        return empty()
    return _product([Dial(values) for values in snapshots])


def _zip(iterables, strict):
    iterators = [iter(iterable) for iterable in iterables]
    if not iterators:
        return
    position = 0
    while True:
        values = []
        stopped = []
        for i, iterator in enumerate(iterators):
            try:
                values.append(next(iterator))
            except StopIteration:
                stopped.append(i)
        if not stopped:
            yield tuple(values)
            position += 1
        elif strict and len(stopped) < len(iterators):
            raise MismatchedLengths(
                "iterables %s stopped early at index %d"
                % (', '.join(str(i) for i in stopped), position))
        else:
            return


def zip(*iterables):
    """Generate tuples of same-index items, stopping at the shortest.

    See zip_strict for a version that refuses iterables of unequal
    length.
    """
    _require_iterables(iterables)
    return _zip(iterables, strict=False)


def zip_strict(*iterables):
    """Generate tuples of same-index items from equally long iterables.

    The returned generator raises MismatchedLengths as soon as some,
    but not all, iterables are exhausted.
    """
    _require_iterables(iterables)
    return _zip(iterables, strict=True)


def _unique(iterable, seen):
    for item in iterable:
        if item in seen:
            continue
        seen.add(item)
        yield item


def unique(iterable, seen=None):
    """Generate items of iterable, skipping those seen before.

    seen is a set-like object that records generated items. It
    defaults to a fresh set; passing one in allows skipping items
    known in advance, or de-duplicating across several calls.
    """
    _require_iterables([iterable])
    if seen is None:
        seen = set()
    elif not (isinstance(seen, Container) and callable(getattr(seen, 'add', None))):
        raise CapabilityError(
            "seen must support 'in' and add(), not %r" % (seen,))
    return _unique(iterable, seen)


def _repeat(item, n_times):
    for _ in range(n_times):
        yield item


def repeat(item, n_times):
    """Generate item n_times times."""
    problem = _integer_problem(n_times, "n_times")
    if problem is None and n_times < 0:
        problem = UnexpectedNegative("n_times must be >= 0, not %d" % n_times)
    if problem:
        raise problem
    return _repeat(item, n_times)


def first_matching(iterable, predicate=bool, default=None):
    """First item for which predicate is true, else default"""
    for item in iterable:
        if predicate(item):
            return item
    return default
