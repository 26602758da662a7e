"""
Errors raised while building grammars and tokenizing candidate strings.
"""


class GrammarError(ValueError):
    """The grammar cannot be built as requested."""
    pass


class DuplicateDeclarationError(GrammarError):
    """A name was declared both as a variable and as a terminal."""

    def __init__(self, name, declared_as):
        super().__init__("'%s' is already declared as a %s" % (name, declared_as))
        self.name = name
        self.declared_as = declared_as


class UndeclaredLhsError(GrammarError):

    def __init__(self, lhs):
        super().__init__("Rule left-hand side '%s' is not a declared variable" % lhs)
        self.lhs = lhs


class MalformedRuleError(GrammarError):
    """A rule's right-hand side is not one of: terminal, pair of variables, epsilon."""

    def __init__(self, lhs, rhs, reason):
        super().__init__("Malformed rule %s -> %s: %s" % (lhs, ' '.join(str(s) for s in rhs), reason))
        self.lhs = lhs
        self.rhs = tuple(rhs)
        self.reason = reason


class UnrecognizedSymbolError(ValueError):
    """No declared symbol matches the text at a given position."""

    def __init__(self, text, position):
        super().__init__("No symbol matches '%s' at position %d" % (text, position))
        self.text = text
        self.position = position
