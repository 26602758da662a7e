"""
This module contains the class definition of context-free grammars in Chomsky Normal Form.
"""

import logging
from collections import defaultdict
from itertools import chain
from .symbol import Terminal, Nonterminal, Epsilon
from .rule import CNFProduction, RuleKind
from .segment import Segmenter
from .index import RuleIndex
from .errors import GrammarError, DuplicateDeclarationError, UndeclaredLhsError, MalformedRuleError
from .errors import UnrecognizedSymbolError


DEFAULT_EPSILON = 'e'


class CNF(object):
    """A context-free grammar in Chomsky Normal Form.

    Symbols must be declared before rules mention them.
    Rules are given as raw tokens and classified (see RuleKind) as they are added.
    Malformed rules are kept aside for diagnostics and never take part in recognition.

    >>> cnf = CNF()
    >>> cnf.add_variable('S')
    Nonterminal('S')
    >>> cnf.add_variable('A')
    Nonterminal('A')
    >>> cnf.add_terminal('a')
    Terminal('a')
    >>> cnf.start = 'S'
    >>> cnf.add_rule('S', ['A', 'A'])
    CNFProduction(Nonterminal('S'), (Nonterminal('A'), Nonterminal('A')), 'binary')
    >>> cnf.add_rule('S', ['AA']).kind  # segmented into A A
    'binary'
    >>> len(cnf)
    1
    >>> cnf.add_rule('A', ['a']).kind
    'terminal'
    >>> cnf.is_epsilon_derivable('S')
    False
    >>> cnf.add_rule('S', ['e']).kind
    'epsilon'
    >>> cnf.is_epsilon_derivable('S')
    True
    >>> [str(r) for r in cnf.rules_by_lhs('S')]
    ['S -> A A', 'S -> e']
    """

    def __init__(self, epsilon=DEFAULT_EPSILON):
        """
        :param epsilon: the marker standing for the empty string in rule text
        """
        self._epsilon = Epsilon(epsilon)
        self._variables = {}  # name -> Nonterminal (in declaration order)
        self._terminals = {}  # name -> Terminal (in declaration order)
        self._start = None
        self._rules = []
        self._rule_set = set()
        self._rules_by_lhs = defaultdict(list)
        self._malformed = []
        self._segmenter = None
        self._index = None

    def __len__(self):
        """Count the number of (well-formed) rules."""
        return len(self._rules)

    def __iter__(self):
        """Iterate through well-formed rules in insertion order."""
        return iter(self._rules)

    @property
    def epsilon(self):
        return self._epsilon

    @property
    def variables(self):
        """Declared variables in declaration order."""
        return tuple(self._variables.values())

    @property
    def terminals(self):
        """Declared terminals in declaration order (never includes the epsilon marker)."""
        return tuple(self._terminals.values())

    @property
    def malformed(self):
        """Rules which were reported and excluded."""
        return tuple(self._malformed)

    @property
    def start(self):
        return self._start

    @start.setter
    def start(self, name):
        name = _name(name)
        if name not in self._variables:
            raise GrammarError("Start symbol '%s' is not a declared variable" % name)
        self._start = self._variables[name]

    def n_variables(self):
        return len(self._variables)

    def n_terminals(self):
        return len(self._terminals)

    def is_variable(self, name):
        return _name(name) in self._variables

    def is_terminal(self, name):
        return _name(name) in self._terminals

    def add_variable(self, name):
        """Declare a variable (declaring it twice is harmless) and return its symbol."""
        name = _name(name)
        if name in self._terminals:
            raise DuplicateDeclarationError(name, 'terminal')
        if name == self._epsilon.marker:
            raise GrammarError("'%s' is the epsilon marker and cannot be a variable" % name)
        symbol = self._variables.get(name, None)
        if symbol is None:
            symbol = Nonterminal(name)
            self._variables[name] = symbol
            self._invalidate()
        return symbol

    def add_terminal(self, name):
        """Declare a terminal (declaring it twice is harmless) and return its symbol.

        The epsilon marker is never a terminal: declaring it is refused with a warning and None is returned.
        """
        name = _name(name)
        if name in self._variables:
            raise DuplicateDeclarationError(name, 'variable')
        if name == self._epsilon.marker:
            logging.warning("Ignoring terminal '%s': it is the epsilon marker", name)
            return None
        symbol = self._terminals.get(name, None)
        if symbol is None:
            symbol = Terminal(name)
            self._terminals[name] = symbol
            self._invalidate()
        return symbol

    def add_rule(self, lhs, rhs):
        """
        Add a rule given its left-hand side and its right-hand side as a sequence of raw tokens.

        Tokens which are not declared names are segmented into declared symbols (e.g. 'AB' -> A B).
        Rules that cannot be resolved or that are not in CNF are reported and excluded.

        :returns: the production (whose kind may be MALFORMED)
        :raises UndeclaredLhsError: if lhs is not a declared variable
        """
        name = _name(lhs)
        if name not in self._variables:
            raise UndeclaredLhsError(name)
        head = self._variables[name]
        raw = tuple(_name(token) for token in rhs)
        try:
            symbols = tuple(chain(*(self._resolve(token) for token in raw)))
            rule = CNFProduction(head, symbols)
            reason = 'expected a single terminal, two variables or the epsilon marker'
        except UnrecognizedSymbolError as e:
            rule = CNFProduction(head, raw)
            reason = str(e)

        if rule.kind == RuleKind.MALFORMED:
            logging.warning('%s (rule skipped)', MalformedRuleError(name, raw, reason))
            self._malformed.append(rule)
            return rule

        if rule in self._rule_set:
            logging.debug('Duplicate rule ignored: %s', rule)
            return rule
        self._rule_set.add(rule)
        self._rules.append(rule)
        self._rules_by_lhs[head].append(rule)
        self._index = None
        return rule

    def rules_by_lhs(self, variable):
        """Return the rules rewriting a given variable in insertion order."""
        symbol = self._variables.get(_name(variable), None)
        return tuple(self._rules_by_lhs.get(symbol, ()))

    def iteritems(self):
        """Iterate through pairs (lhs, rules) in declaration order of the variables."""
        for v in self._variables.values():
            yield v, self.rules_by_lhs(v)

    def is_epsilon_derivable(self, variable):
        """Whether the grammar has a rule `variable -> epsilon`."""
        return any(r.kind == RuleKind.EPSILON for r in self.rules_by_lhs(variable))

    def index(self):
        """Return the (cached) rule index used by the recogniser."""
        if self._index is None:
            self._index = RuleIndex(self)
        return self._index

    def _invalidate(self):
        self._segmenter = None
        self._index = None

    def _resolve(self, token):
        """Map a raw token to a tuple of symbols."""
        if token == self._epsilon.marker:
            return (self._epsilon,)
        symbol = self._variables.get(token, None) or self._terminals.get(token, None)
        if symbol is not None:
            return (symbol,)
        if self._segmenter is None:
            self._segmenter = Segmenter(chain(self._variables, self._terminals))
        return tuple(self._variables.get(s, None) or self._terminals[s] for s in self._segmenter.segment(token))

    def __str__(self):
        """String representation of the CNF (one line per variable)."""
        lines = []
        for lhs, rules in self.iteritems():
            if rules:
                lines.append('%s -> %s' % (lhs.underlying_str(), ' | '.join(r.rhs_str() for r in rules)))
        return '\n'.join(lines)


def _name(symbol):
    """Raw name of a symbol (strings are returned as they are)."""
    return symbol.underlying if hasattr(symbol, 'underlying') else symbol
