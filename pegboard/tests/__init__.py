"""Tests for the pegboard package

The behaviour of pegboard is specified via tests. Each pegboard module
has an associated test module and each pegboard class an associated
TestCase. Test cases of base classes are written against a class
attribute, so that derived classes can be tested by deriving from
the test case and overloading that attribute. For example,

>>> class TestMultiSet(TestCounter):
...     Counter = MultiSet

runs the Counter tests against MultiSet. For interfaces that are
abstract, see pegboard.tests.abstract_test.
"""
