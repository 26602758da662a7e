"""
This module contains unit tests for classes in cykit.cfg.symbol
"""

import unittest
import pickle

from cykit.cfg.symbol import Symbol, Terminal, Nonterminal, Epsilon


class TerminalTestCase(unittest.TestCase):

    def setUp(self):
        self.a = Terminal('a')
        self.a2 = Terminal('a')
        self.aa = Terminal('aa')

    def test_inheritance(self):
        self.assertIsInstance(self.a, Symbol)

    def test_underlying(self):
        self.assertEqual(self.a.underlying, 'a')
        self.assertEqual(self.aa.surface, 'aa')

    def test_instance_management(self):
        self.assertIs(self.a, self.a2)
        self.assertIsNot(self.a, self.aa)

    def test_str(self):
        self.assertEqual(str(self.aa), "'aa'")
        self.assertEqual(self.aa.underlying_str(), 'aa')

    def test_repr(self):
        self.assertEqual(repr(self.a), "Terminal('a')")


class NonterminalTestCase(unittest.TestCase):

    def setUp(self):
        self.X = Nonterminal('X')
        self.X2 = Nonterminal('X')

    def test_inheritance(self):
        self.assertIsInstance(self.X, Symbol)

    def test_label(self):
        self.assertEqual(self.X.label, 'X')
        self.assertEqual(self.X.label, self.X.underlying)

    def test_instance_management(self):
        self.assertIs(self.X, self.X2)

    def test_str(self):
        self.assertEqual(str(self.X), '[X]')

    def test_repr(self):
        self.assertEqual(repr(self.X), "Nonterminal('X')")


class ComparisonTestCase(unittest.TestCase):

    def test_type_matters(self):
        self.assertNotEqual(Terminal('X'), Nonterminal('X'),
                            msg='The specific type of the symbol matters to decide for equality.')
        self.assertNotEqual(Terminal('e'), Epsilon('e'))

    def test_hash(self):
        self.assertEqual(len({Terminal('a'), Terminal('a'), Nonterminal('a'), Epsilon('a')}), 3)


class PickleTestCase(unittest.TestCase):

    def test_interned_after_unpickling(self):
        for symbol in [Terminal('a'), Nonterminal('S'), Epsilon('e')]:
            self.assertIs(pickle.loads(pickle.dumps(symbol)), symbol)


if __name__ == '__main__':
    unittest.main()
