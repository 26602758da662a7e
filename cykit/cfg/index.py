"""
A precomputed view of a CNF grammar organised for the CYK recogniser.

Variables are interned as small integers (their declaration order), rules are grouped by kind:

    * terminal rules are indexed by terminal: a -> array of ids of A such that A -> a
    * binary rules are stored as three aligned arrays (heads, left, right) for A -> B C
    * epsilon rules are kept as the set of ids of nullable variables
"""

import numpy as np
from collections import defaultdict
from .rule import RuleKind
from .segment import Segmenter


def _id_array(values):
    return np.array(values, dtype=np.intp)


class RuleIndex(object):

    def __init__(self, grammar):
        self._variables = tuple(grammar.variables)
        self._ids = {v: i for i, v in enumerate(self._variables)}

        lexical = defaultdict(list)
        heads, left, right = [], [], []
        nullable = set()
        for rule in grammar:
            head = self._ids[rule.lhs]
            if rule.kind == RuleKind.TERMINAL:
                lexical[rule.rhs[0]].append(head)
            elif rule.kind == RuleKind.BINARY:
                heads.append(head)
                left.append(self._ids[rule.rhs[0]])
                right.append(self._ids[rule.rhs[1]])
            elif rule.kind == RuleKind.EPSILON:
                nullable.add(head)

        self._lexical = {t: _id_array(ids) for t, ids in lexical.items()}
        self._heads = _id_array(heads)
        self._left = _id_array(left)
        self._right = _id_array(right)
        self._nullable = frozenset(nullable)
        self._lexicon = Segmenter(t.surface for t in grammar.terminals)

    @property
    def variables(self):
        """Variables in the order of their ids."""
        return self._variables

    def n_variables(self):
        return len(self._variables)

    def n_binary(self):
        return len(self._heads)

    def id(self, variable):
        """Return the integer id of a variable."""
        return self._ids[variable]

    def variable(self, i):
        return self._variables[i]

    def lexical(self, terminal):
        """Return the ids of variables rewriting directly to a terminal (possibly an empty array)."""
        return self._lexical.get(terminal, _EMPTY)

    @property
    def binary(self):
        """A triplet of aligned arrays (heads, left, right)."""
        return self._heads, self._left, self._right

    def is_nullable(self, variable):
        return self._ids[variable] in self._nullable

    @property
    def lexicon(self):
        """A Segmenter over the surface of terminals."""
        return self._lexicon


_EMPTY = _id_array([])
