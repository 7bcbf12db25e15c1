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
"""Set algebra over generic set-like containers

The functions in this module implement subset tests and the basic
set operations for any receiver that supports membership tests,
len() and iteration, and whose type can be constructed from an
iterable. Results are new instances of the receiver's type, which
may be immutable like frozenset; neither operand is ever modified.

Container types can opt into method-style access by deriving from
SetAlgebra. OrderedSet is a ready-made insertion-ordered set that
does so.
"""
import abc
from collections.abc import Container, Iterable, MutableSet, Set, Sized

from .exceptions import CapabilityError


_CAPABILITIES = {
    'in': Container,
    'len': Sized,
    'iteration': Iterable,
}


def _require(other, *capabilities):
    missing = [name for name in capabilities
               if not isinstance(other, _CAPABILITIES[name])]
    if missing:
        raise CapabilityError(
            "expected a set-like object supporting %s, but got %r"
            % (', '.join(missing), other))


def smaller_larger(a, b):
    """Return a and b ordered by size, a first on a tie."""
    return (b, a) if len(b) < len(a) else (a, b)


def is_subset_of(receiver, other):
    """Whether every element of receiver is in other"""
    _require(other, 'in')
    if other is receiver:
        return True
    return all(element in other for element in receiver)


def is_superset_of(receiver, other):
    """Whether every element of other is in receiver"""
    _require(other, 'iteration')
    return all(element in receiver for element in other)


def is_disjoint_from(receiver, other):
    """Whether receiver and other have no element in common"""
    _require(other, 'in', 'len', 'iteration')
    smaller, larger = smaller_larger(receiver, other)
    return not any(element in larger for element in smaller)


def difference(receiver, other):
    """Elements of receiver that are not in other"""
    _require(other, 'in')
    return type(receiver)(element for element in receiver if element not in other)


def union(receiver, other):
    """Elements of receiver or other"""
    _require(other, 'in', 'iteration')
    elements = list(receiver)
    elements.extend(element for element in other if element not in receiver)
    return type(receiver)(elements)


def intersection(receiver, other):
    """Elements of both receiver and other"""
    _require(other, 'in', 'len', 'iteration')
    smaller, larger = smaller_larger(receiver, other)
    return type(receiver)(element for element in smaller if element in larger)


def symmetric_difference(receiver, other):
    """Elements of exactly one of receiver and other"""
    _require(other, 'in', 'iteration')
    elements = [element for element in receiver if element not in other]
    elements.extend(element for element in other if element not in receiver)
    return type(receiver)(elements)


def sets_equal(*sets):
    """Whether all given sets contain the same elements"""
    for i, set_like in enumerate(sets):
        if not isinstance(set_like, Set):
            raise CapabilityError("non-set at index %d: %r" % (i, set_like))
    if len(sets) < 2:
        return True
    first = sets[0]
    return all(len(first) == len(other) and first <= other for other in sets[1:])


class SetAlgebra(metaclass=abc.ABCMeta):
    """Mixin providing set algebra methods

    Subclasses must implement __contains__, __iter__, __len__ and add,
    and be constructible from an iterable.
    """
    __slots__ = ()

    @abc.abstractmethod
    def __contains__(self, element):
        return False

    @abc.abstractmethod
    def __iter__(self):
        return iter(())

    @abc.abstractmethod
    def __len__(self):
        return 0

    @abc.abstractmethod
    def add(self, element):
        """Add element to the container"""

    def is_subset_of(self, other):
        return is_subset_of(self, other)

    def is_superset_of(self, other):
        return is_superset_of(self, other)

    def is_disjoint_from(self, other):
        return is_disjoint_from(self, other)

    def difference(self, other):
        return difference(self, other)

    def union(self, other):
        return union(self, other)

    def intersection(self, other):
        return intersection(self, other)

    def symmetric_difference(self, other):
        return symmetric_difference(self, other)


class OrderedSet(SetAlgebra, MutableSet):
    """A mutable set that remembers insertion order

    Elements are stored as the keys of a dict, which preserves their
    insertion order.
    """
    __slots__ = ('_elements',)

    def __init__(self, iterable=None):
        self._elements = dict.fromkeys(iterable) if iterable is not None else {}

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, list(self._elements))

    def __contains__(self, element):
        return element in self._elements

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def add(self, element):
        self._elements[element] = None

    def discard(self, element):
        self._elements.pop(element, None)

    def copy(self):
        return type(self)(self)

    __copy__ = copy
