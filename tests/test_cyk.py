"""
This module contains unit tests for the CYK recogniser (cykit.cfg.cyk)
"""

import unittest
import pickle
from itertools import product

import numpy as np

from cykit.cfg.cfg import CNF
from cykit.cfg.cyk import CYK, accepts
from cykit.cfg.ply_cfg import read_grammar
from cykit.cfg.symbol import Terminal
from cykit.cfg.errors import GrammarError, UnrecognizedSymbolError


BALANCED = """
S,T,A,B
a,b
S
S -> A T | A B
T -> S B
A -> a
B -> b
"""

PALINDROMES = """
S,X,Y,A,B
a,b
S
S -> A X | B Y | A A | B B | a | b
X -> S A
Y -> S B
A -> a
B -> b
"""

AB = """
S,A,B
a,b
S
S -> AB
A -> a
B -> b
"""

MULTICHAR = """
S,X,Y
aa,b
S
S -> X Y
X -> aa
Y -> b
"""


def load(text, **kwargs):
    return read_grammar(text.splitlines(), **kwargs)


def strings(alphabet, max_length):
    for n in range(max_length + 1):
        for letters in product(alphabet, repeat=n):
            yield ''.join(letters)


class SpanTestCase(unittest.TestCase):

    def setUp(self):
        self.cyk = CYK(load(AB))

    def test_accept(self):
        self.assertTrue(self.cyk.accepts('ab'))

    def test_reject(self):
        self.assertFalse(self.cyk.accepts('ba'))
        self.assertFalse(self.cyk.accepts('a'))
        self.assertFalse(self.cyk.accepts('aab'))
        self.assertFalse(self.cyk.accepts(''))

    def test_chart(self):
        index = self.cyk.index
        words = self.cyk.tokenize('ab')
        table = self.cyk.chart(words)
        self.assertEqual(table.shape, (2, 2, 3))
        self.assertEqual([index.variable(v).label for v in table[0, 0].nonzero()[0]], ['A'])
        self.assertEqual([index.variable(v).label for v in table[1, 1].nonzero()[0]], ['B'])
        self.assertEqual([index.variable(v).label for v in table[0, 1].nonzero()[0]], ['S'])
        self.assertFalse(table[1, 0].any())

    def test_module_function(self):
        grammar = load(AB)
        self.assertTrue(accepts(grammar, 'ab'))
        self.assertFalse(accepts(grammar, 'ba'))


class BalancedTestCase(unittest.TestCase):

    def setUp(self):
        self.cyk = CYK(load(BALANCED))

    def test_scenario(self):
        self.assertTrue(self.cyk.accepts('ab'))
        self.assertTrue(self.cyk.accepts('aabb'))
        self.assertFalse(self.cyk.accepts('aaabb'))
        self.assertFalse(self.cyk.accepts('ba'))

    def test_exhaustive(self):
        for s in strings('ab', 8):
            n = len(s) // 2
            expected = n > 0 and s == 'a' * n + 'b' * n
            self.assertEqual(self.cyk.accepts(s), expected, msg=s)


class PalindromeTestCase(unittest.TestCase):

    def setUp(self):
        self.cyk = CYK(load(PALINDROMES))

    def test_scenario(self):
        self.assertTrue(self.cyk.accepts('aba'))
        self.assertTrue(self.cyk.accepts('abba'))
        self.assertFalse(self.cyk.accepts('abab'))

    def test_exhaustive(self):
        for s in strings('ab', 7):
            expected = len(s) > 0 and s == s[::-1]
            self.assertEqual(self.cyk.accepts(s), expected, msg=s)


class EmptyStringTestCase(unittest.TestCase):

    def test_start_rewrites_to_epsilon(self):
        grammar = load(BALANCED + 'S -> e\n')
        self.assertTrue(accepts(grammar, ''))
        self.assertTrue(accepts(grammar, 'ab'))

    def test_no_epsilon_rule(self):
        self.assertFalse(accepts(load(BALANCED), ''))

    def test_only_other_variables_rewrite_to_epsilon(self):
        grammar = load(BALANCED + 'A -> e\nT -> e\n')
        self.assertFalse(accepts(grammar, ''))

    def test_blank_string_is_not_empty(self):
        grammar = load(BALANCED + 'S -> e\n')
        self.assertFalse(accepts(grammar, '   '))
        self.assertFalse(accepts(grammar, ' '))

    def test_custom_marker(self):
        grammar = load(BALANCED + 'S -> @\n', epsilon='@')
        self.assertTrue(accepts(grammar, ''))

    def test_decision(self):
        result = CYK(load(BALANCED + 'S -> e\n')).decide('', keep_chart=True)
        self.assertTrue(result.accepted)
        self.assertEqual(result.words, ())
        self.assertIsNone(result.chart)
        self.assertIsNone(result.error)


class TokenizationTestCase(unittest.TestCase):

    def setUp(self):
        self.cyk = CYK(load(MULTICHAR))

    def test_multichar_terminals(self):
        self.assertEqual(self.cyk.tokenize('aab'), (Terminal('aa'), Terminal('b')))
        self.assertTrue(self.cyk.accepts('aab'))

    def test_failed_segmentation_is_a_rejection(self):
        with self.assertRaises(UnrecognizedSymbolError):
            self.cyk.tokenize('ab')
        self.assertFalse(self.cyk.accepts('ab'))
        result = self.cyk.decide('ab')
        self.assertFalse(result.accepted)
        self.assertIsNone(result.words)
        self.assertIsInstance(result.error, UnrecognizedSymbolError)
        self.assertEqual(result.error.position, 0)

    def test_unknown_symbols(self):
        self.assertFalse(self.cyk.accepts('aabc'))
        self.assertFalse(self.cyk.accepts('xyz'))
        # later queries are unaffected
        self.assertTrue(self.cyk.accepts('aab'))

    def test_whitespace_is_rejected(self):
        self.assertFalse(self.cyk.accepts('aa b'))
        self.assertFalse(self.cyk.accepts(' aab '))
        result = self.cyk.decide('aa b')
        self.assertIsInstance(result.error, UnrecognizedSymbolError)
        self.assertEqual(result.error.position, 2)
        grammar = load(AB)
        self.assertFalse(accepts(grammar, 'a b'))
        self.assertFalse(accepts(grammar, 'a\tb'))
        self.assertTrue(accepts(grammar, 'ab'))


class PropertiesTestCase(unittest.TestCase):

    def test_determinism(self):
        cyk = CYK(load(PALINDROMES))
        for s in ['abba', 'abab', '', 'a', 'bab']:
            first = cyk.decide(s, keep_chart=True)
            second = cyk.decide(s, keep_chart=True)
            self.assertEqual(first.accepted, second.accepted)
            if first.chart is not None:
                self.assertTrue(np.array_equal(first.chart, second.chart))
        self.assertEqual(cyk.accepts('abba'), CYK(load(PALINDROMES)).accepts('abba'))

    def test_dead_rules(self):
        grammar = load(BALANCED)
        before = [accepts(grammar, s) for s in strings('ab', 6)]
        grammar.add_variable('Z')
        grammar.add_variable('W')
        grammar.add_rule('Z', ['Z', 'W'])
        grammar.add_rule('Z', ['a'])
        grammar.add_rule('W', ['b'])
        grammar.add_rule('W', ['A', 'Z'])
        after = [accepts(grammar, s) for s in strings('ab', 6)]
        self.assertEqual(before, after)

    def test_malformed_rules(self):
        with self.assertLogs(level='WARNING'):
            grammar = load(BALANCED + 'B -> Q\nT -> A\nS -> B A b\n')
        self.assertEqual(len(grammar.malformed), 3)
        self.assertEqual(len(grammar), 5)
        self.assertTrue(accepts(grammar, 'aabb'))
        self.assertFalse(accepts(grammar, 'abb'))

    def test_independent_grammars(self):
        balanced = CYK(load(BALANCED))
        palindromes = CYK(load(PALINDROMES))
        self.assertTrue(balanced.accepts('ab'))
        self.assertFalse(palindromes.accepts('ab'))
        self.assertTrue(palindromes.accepts('aa'))
        self.assertFalse(balanced.accepts('aa'))

    def test_pickle(self):
        cyk = pickle.loads(pickle.dumps(CYK(load(BALANCED))))
        self.assertTrue(cyk.accepts('aabb'))
        self.assertFalse(cyk.accepts('abab'))

    def test_no_start(self):
        grammar = CNF()
        grammar.add_variable('S')
        with self.assertRaises(GrammarError):
            CYK(grammar)

    def test_no_binary_rules(self):
        grammar = load(MULTICHAR.replace('S -> X Y', 'S -> aa'))
        self.assertTrue(accepts(grammar, 'aa'))
        self.assertFalse(accepts(grammar, 'aab'))
        self.assertFalse(accepts(grammar, 'aaaa'))


if __name__ == '__main__':
    unittest.main()
