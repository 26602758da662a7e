"""
This module contains class definitions for CNF productions and their classification.
"""

from .symbol import Terminal, Nonterminal, Epsilon


class RuleKind(object):
    """The shapes a production may take in Chomsky Normal Form (plus the catch-all MALFORMED)."""

    TERMINAL = 'terminal'  # A -> a
    BINARY = 'binary'  # A -> B C
    EPSILON = 'epsilon'  # A -> e
    MALFORMED = 'malformed'


def classify(rhs):
    """
    Return the RuleKind of a right-hand side.

    >>> classify([Terminal('a')])
    'terminal'
    >>> classify([Nonterminal('A'), Nonterminal('B')])
    'binary'
    >>> classify([Epsilon('e')])
    'epsilon'
    >>> classify([Nonterminal('A')])
    'malformed'
    >>> classify([Nonterminal('A'), Terminal('b')])
    'malformed'
    >>> classify(['x'])
    'malformed'
    """
    if len(rhs) == 1:
        if isinstance(rhs[0], Terminal):
            return RuleKind.TERMINAL
        if isinstance(rhs[0], Epsilon):
            return RuleKind.EPSILON
    elif len(rhs) == 2:
        if all(isinstance(s, Nonterminal) for s in rhs):
            return RuleKind.BINARY
    return RuleKind.MALFORMED


class CNFProduction(object):
    """
    Implements a production of a grammar in Chomsky Normal Form.

    The kind of the production is computed once, from its right-hand side, and never changes.
    A malformed production may carry raw strings in its right-hand side (tokens that could not be resolved).

    >>> r = CNFProduction(Nonterminal('S'), [Nonterminal('A'), Nonterminal('B')])
    >>> r.kind
    'binary'
    >>> r
    CNFProduction(Nonterminal('S'), (Nonterminal('A'), Nonterminal('B')), 'binary')
    >>> str(r)
    'S -> A B'
    >>> r == CNFProduction(Nonterminal('S'), (Nonterminal('A'), Nonterminal('B')))
    True
    """

    def __init__(self, lhs, rhs):
        self._lhs = lhs
        self._rhs = tuple(rhs)
        self._kind = classify(self._rhs)

    @property
    def lhs(self):
        """Return the LHS symbol (a Nonterminal) aka the head."""
        return self._lhs

    @property
    def rhs(self):
        """A tuple of symbols representing the RHS aka the tail."""
        return self._rhs

    @property
    def kind(self):
        return self._kind

    def is_terminal(self):
        return self._kind == RuleKind.TERMINAL

    def is_binary(self):
        return self._kind == RuleKind.BINARY

    def is_epsilon(self):
        return self._kind == RuleKind.EPSILON

    def is_malformed(self):
        return self._kind == RuleKind.MALFORMED

    def __eq__(self, other):
        return isinstance(other, CNFProduction) and self._lhs is other._lhs and self._rhs == other._rhs

    def __hash__(self):
        return hash((self._lhs, self._rhs))

    def __repr__(self):
        return '%s(%r, %r, %r)' % (CNFProduction.__name__, self._lhs, self._rhs, self._kind)

    def rhs_str(self):
        return ' '.join(s.underlying_str() if hasattr(s, 'underlying_str') else str(s) for s in self._rhs)

    def __str__(self):
        return '%s -> %s' % (self._lhs.underlying_str(), self.rhs_str())
