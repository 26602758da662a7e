"""
This is an implementation of the CYK (Cocke-Younger-Kasami) recogniser for grammars in Chomsky Normal Form.

For an input w[0..n-1] the chart T[i, j] holds the variables that derive w[i..j]:

    Base:
        A -> a  and  w[i] == a
        ______________________
              A in T[i, i]

    Induction (for spans of length 2..n and every split point i <= k < j):
        A -> B C  and  B in T[i, k]  and  C in T[k+1, j]
        _________________________________________________
                         A in T[i, j]

    Goal:
        S in T[0, n-1]

The empty string is decided apart: it is accepted iff the start variable rewrites to epsilon.

The chart is a boolean numpy array of shape (n, n, |V|) where variables are represented by their ids in the
grammar's RuleIndex; only cells with i <= j are ever used.
For each span and split point all binary rules are tested at once by fancy indexing.
"""

import logging
import numpy as np
from types import SimpleNamespace
from .symbol import Terminal
from .errors import GrammarError, UnrecognizedSymbolError
from cykit.recipes import timeit


class CYK(object):
    """
    A recogniser bound to a grammar.
    It only reads the grammar, thus an instance may answer any number of queries (each with a fresh chart).
    """

    def __init__(self, grammar):
        if grammar.start is None:
            raise GrammarError('The grammar has no start variable')
        self._grammar = grammar
        self._index = grammar.index()
        self._start = self._index.id(grammar.start)

    @property
    def grammar(self):
        return self._grammar

    @property
    def index(self):
        return self._index

    def tokenize(self, text):
        """
        Segment a candidate string into terminals.
        :raises UnrecognizedSymbolError: if the string cannot be segmented into terminals of the grammar
        """
        return tuple(Terminal(surface) for surface in self._index.lexicon.segment(text))

    def chart(self, words):
        """
        Fill in the CYK chart bottom-up.

        :param words: a non-empty sequence of Terminal symbols
        :returns: a boolean array T such that T[i, j, v] is True iff variable v derives words[i..j]
        """
        n = len(words)
        index = self._index
        table = np.zeros((n, n, index.n_variables()), dtype=bool)

        # spans of length 1
        for i, word in enumerate(words):
            table[i, i, index.lexical(word)] = True

        # spans of length 2..n
        heads, left, right = index.binary
        for length in range(2, n + 1):
            for i in range(n - length + 1):
                j = i + length - 1
                cell = table[i, j]
                for k in range(i, j):
                    fired = table[i, k, left] & table[k + 1, j, right]
                    cell[heads[fired]] = True
        return table

    def recognise(self, words):
        """Whether the start variable derives a sequence of terminals."""
        if not words:
            return self._index.is_nullable(self._grammar.start)
        return bool(self.chart(words)[0, len(words) - 1, self._start])

    def decide(self, text, keep_chart=False):
        """
        Decide membership of a candidate string.

        :param text: the candidate string
        :param keep_chart: whether the filled chart should be returned (for diagnostics)
        :returns: a SimpleNamespace with fields
            'text' (the input), 'words' (terminals or None if tokenization failed),
            'accepted' (bool), 'error' (an UnrecognizedSymbolError or None) and 'chart' (an array or None)
        """
        try:
            words = self.tokenize(text)
        except UnrecognizedSymbolError as e:
            logging.debug('Rejecting %r: %s', text, e)
            return SimpleNamespace(text=text, words=None, accepted=False, error=e, chart=None)
        if not words:
            # the empty string never reaches the chart
            accepted = self._index.is_nullable(self._grammar.start)
            return SimpleNamespace(text=text, words=words, accepted=accepted, error=None, chart=None)
        dt, table = t_chart(self, words)
        accepted = bool(table[0, len(words) - 1, self._start])
        logging.debug('%r: n=%d accepted=%s time=%s', text, len(words), accepted, dt)
        return SimpleNamespace(text=text, words=words, accepted=accepted, error=None,
                               chart=table if keep_chart else None)

    def accepts(self, text):
        """Whether the grammar generates a candidate string (unrecognised symbols lead to rejection)."""
        return self.decide(text).accepted


@timeit
def t_chart(recogniser, words):
    """This is a timed version of CYK.chart"""
    return recogniser.chart(words)


def accepts(grammar, text):
    """Decide whether a grammar in CNF generates a string."""
    return CYK(grammar).accepts(text)
