"""
Contains class definitions for symbols (Terminal, Nonterminal and the Epsilon marker).

Symbols are interned: constructing a symbol twice from the same underlying object returns the same instance.
Equality and hashing are thus identity based and cheap.
"""

from weakref import WeakValueDictionary


class Symbol(object):
    """
    Base class for interned symbols.
    References are managed per concrete type with a WeakValueDictionary for builtin reference counting.
    """

    _interned = WeakValueDictionary()

    def __new__(cls, underlying):
        """The underlying object has to be hashable."""
        key = (cls, underlying)
        obj = Symbol._interned.get(key, None)
        if obj is None:
            obj = object.__new__(cls)
            obj._underlying = underlying
            Symbol._interned[key] = obj
        return obj

    def __getnewargs__(self):
        # unpickling goes through __new__ and thus through the interning table
        return (self._underlying,)

    @property
    def underlying(self):
        """The underlying object that uniquely represents the symbol (within its type)."""
        return self._underlying

    def underlying_str(self):
        """Return the string associated with the underlying object."""
        return str(self._underlying)


class Terminal(Symbol):
    """
    Implements a terminal symbol.

    >>> t1 = Terminal('a')
    >>> t2 = Terminal('a')
    >>> t1 is t2
    True
    >>> t1 == Terminal('b')
    False
    >>> Terminal('aa')
    Terminal('aa')
    >>> str(Terminal('aa'))
    "'aa'"
    """

    @property
    def surface(self):
        return self._underlying

    def __repr__(self):
        return '%s(%r)' % (Terminal.__name__, self._underlying)

    def __str__(self):
        return "'{0}'".format(self.underlying_str())


class Nonterminal(Symbol):
    """
    Implements a nonterminal symbol (a variable of the grammar).

    >>> Nonterminal('S') is Nonterminal('S')
    True
    >>> Nonterminal('S') is Terminal('S')
    False
    >>> Nonterminal('S')
    Nonterminal('S')
    >>> str(Nonterminal('S'))
    '[S]'
    """

    @property
    def label(self):
        return self._underlying

    def __repr__(self):
        return '%s(%r)' % (Nonterminal.__name__, self._underlying)

    def __str__(self):
        return '[{0}]'.format(self.underlying_str())


class Epsilon(Symbol):
    """
    The marker standing for the empty string in rule text.
    It is neither a terminal nor a variable.

    >>> Epsilon('e') is Epsilon('e')
    True
    >>> Epsilon('e') is Terminal('e')
    False
    >>> str(Epsilon('e'))
    'e'
    """

    @property
    def marker(self):
        return self._underlying

    def __repr__(self):
        return '%s(%r)' % (Epsilon.__name__, self._underlying)

    def __str__(self):
        return self.underlying_str()
