"""Tests for pegboard.views"""
import unittest

from pegboard.tests.abstract_test import AbstractTestCase
from pegboard.exceptions import CapabilityError
from pegboard.sets import OrderedSet
from pegboard.structures import Counter, MultiSet
from pegboard import views


class TestReadableCounter(AbstractTestCase('View', views.ReadableCounter)):
    """ReadableCounter specification

    Concrete implementations bind View to a callable that creates an
    instance counting 'a' once and 'b' once.
    """
    def make(self):
        return self.View()

    def test_present(self):
        counter = self.make()
        self.assertIn('a', counter)
        self.assertEqual(counter['a'], 1)
        self.assertEqual(counter.get('a'), 1)

    def test_absent(self):
        """absent keys read as 0"""
        counter = self.make()
        self.assertNotIn('z', counter)
        self.assertEqual(counter['z'], 0)
        self.assertEqual(counter.get('z'), 0)
        self.assertEqual(counter.get('z', 7), 7)

    def test_iteration(self):
        counter = self.make()
        self.assertEqual(sorted(counter), ['a', 'b'])
        self.assertEqual(len(counter), 2)
        self.assertEqual(sorted(counter.items()), [('a', 1), ('b', 1)])


class TestCounterView(TestReadableCounter):
    View = staticmethod(lambda: views.CounterView({'a': 1, 'b': 1}))

    def test_read_only(self):
        view = self.make()
        with self.assertRaises(TypeError):
            view['a'] = 2


class TestSetCounterView(TestReadableCounter):
    View = staticmethod(lambda: views.SetCounterView({'a', 'b'}))


class TestCounterIsReadable(TestReadableCounter):
    View = staticmethod(lambda: Counter('ab'))

    def test_registered(self):
        self.assertIsInstance(Counter(), views.ReadableCounter)
        self.assertIsInstance(MultiSet(), views.ReadableCounter)


class TestDefaultView(unittest.TestCase):
    """Tests for views.DefaultView"""
    def test_default(self):
        source = {'a': 1}
        view = views.DefaultView(source, 'D')
        self.assertEqual(view['a'], 1)
        self.assertEqual(view['missing'], 'D')
        self.assertEqual(view.get('missing'), 'D')
        self.assertEqual(view.get('missing', 'override'), 'override')
        self.assertEqual(view.default_value, 'D')
        self.assertNotIn('missing', source)

    def test_live(self):
        """views reflect changes of the underlying mapping"""
        source = {}
        view = views.DefaultView(source)
        source['a'] = 1
        self.assertEqual(dict(view), {'a': 1})

    def test_argument_count(self):
        with self.assertRaises(TypeError):
            views.DefaultView({}).get('a', 1, 2)

    def test_rejects_non_mappings(self):
        with self.assertRaises(CapabilityError):
            views.DefaultView(['a'])


class TestAsCounterLike(unittest.TestCase):
    """Tests for views.as_counter_like"""
    def test_counters_unchanged(self):
        counter = Counter('abc')
        self.assertIs(views.as_counter_like(counter), counter)

    def test_mappings(self):
        self.assertIsInstance(views.as_counter_like({'a': 1}), views.CounterView)

    def test_sets(self):
        for set_like in ({'a'}, frozenset('a'), OrderedSet('a'), {'a': 1}.keys()):
            view = views.as_counter_like(set_like)
            self.assertIsInstance(view, views.SetCounterView)
            self.assertEqual(view['a'], 1)

    def test_others(self):
        for other in (None, 1, ['a'], 'a', (x for x in 'a')):
            self.assertIsNone(views.as_counter_like(other))


class TestKeyChoice(unittest.TestCase):
    """Tests for views.all_keys and views.shared_keys"""
    def test_all_keys(self):
        self.assertEqual(views.all_keys({'b': 1, 'a': 1}, {'c': 1, 'a': 1}), ['b', 'a', 'c'])
        self.assertEqual(views.all_keys(), [])

    def test_shared_keys(self):
        self.assertEqual(views.shared_keys({'b': 1, 'a': 1, 'c': 1}, {'c': 1, 'b': 1}), ['b', 'c'])
        self.assertEqual(views.shared_keys({'a': 1}, {}), [])
        self.assertEqual(views.shared_keys(), [])


if __name__ == '__main__':
    unittest.main()
