"""
Reading CNF grammars from text.

The format is line oriented:

    * the first line lists variables (comma separated)
    * the second line lists terminals (comma separated)
    * a line without an arrow names the start variable
    * any other line is a rule, possibly with alternatives separated by bars

Blank lines and lines starting with '#' are ignored. See _EXAMPLE_GRAMMAR_ below.
"""

import logging
import sys
import ply.lex as lex
import ply.yacc as yacc

from .cfg import CNF, DEFAULT_EPSILON
from .errors import GrammarError
from cykit.recipes import smart_ropen


_EXAMPLE_GRAMMAR_ = """
# a^n b^n (n > 0)
S,T,A,B
a,b
S
S -> A T | A B
T -> S B
A -> a
B -> b
"""


class CNFLex(object):

    # Token definitions
    tokens = (
            'ARROW',
            'BAR',
            'SYMBOL',
            )

    # Ignored characters
    t_ignore = " \t\r"

    def t_ARROW(self, t):
        r'->'
        return t

    def t_BAR(self, t):
        r'\|'
        return t

    def t_SYMBOL(self, t):
        r'(?:[^\s|\-]|-(?!>))+'
        return t

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += t.value.count("\n")

    def t_error(self, t):
        logging.warning("Illegal character '%s'", t.value[0])
        t.lexer.skip(1)

    def build(self, **kwargs):
        self.lexer = lex.lex(module=self, **kwargs)

    def tokenize(self, data):
        self.lexer.input(data)
        for tok in self.lexer:
            yield tok


class CNFYacc(object):
    """
    Parse rule lines such as 'S -> A B | a | e'.

    >>> parser = CNFYacc().build(debug=False, write_tables=False)
    >>> list(parser.parse([(1, 'S -> A B | a')]))
    [(1, 'S', [['A', 'B'], ['a']])]
    >>> list(parser.parse([(2, 'X->YZ|')]))
    [(2, 'X', [['YZ'], []])]
    """

    def __init__(self, cnf_lexer=None):
        if cnf_lexer is None:
            cnf_lexer = CNFLex()
            cnf_lexer.build(debug=False)
        self.tokens = cnf_lexer.tokens
        self.lexer = cnf_lexer.lexer
        self.failed_ = False

    def p_rule(self, p):
        'rule : SYMBOL ARROW alternatives'
        p[0] = (p[1], p[3])

    def p_alternatives(self, p):
        'alternatives : alternative'
        p[0] = [p[1]]

    def p_alternatives_recursion(self, p):
        'alternatives : alternatives BAR alternative'
        p[0] = p[1] + [p[3]]

    def p_alternative(self, p):
        '''alternative : symbols
                       | empty'''
        p[0] = p[1]

    def p_symbols(self, p):
        'symbols : SYMBOL'
        p[0] = [p[1]]

    def p_symbols_recursion(self, p):
        'symbols : symbols SYMBOL'
        p[0] = p[1] + [p[2]]

    def p_empty(self, p):
        'empty :'
        p[0] = []

    def p_error(self, p):
        self.failed_ = True
        if p is None:
            logging.warning('Syntax error at the end of a rule')
        else:
            logging.warning("Syntax error at '%s'", p.value)

    def build(self, **kwargs):
        self.parser = yacc.yacc(module=self, **kwargs)
        return self

    def parse(self, lines):
        """
        :param lines: pairs (line number, rule line)
        :returns: triplets (line number, lhs, alternatives), where each alternative is a list of raw tokens;
            lines with syntax errors are reported and skipped
        """
        for lineno, line in lines:
            self.failed_ = False
            result = self.parser.parse(line, lexer=self.lexer)
            if self.failed_ or result is None:
                logging.warning('Line %d: skipping rule: %s', lineno, line)
                continue
            yield (lineno, result[0], result[1])


def read_basic(lines):
    """
    Parse rule lines by splitting on the arrow, on bars and on whitespace.

    >>> list(read_basic([(1, 'S -> A B | a')]))
    [(1, 'S', [['A', 'B'], ['a']])]
    """
    for lineno, line in lines:
        lhs, _, rhs = line.partition('->')
        lhs = lhs.split()
        if len(lhs) != 1:
            logging.warning('Line %d: expected a single variable on the left-hand side, skipping rule: %s',
                            lineno, line)
            continue
        yield (lineno, lhs[0], [alternative.split() for alternative in rhs.split('|')])


def significant_lines(istream):
    """Enumerate (from 1) lines which are neither blank nor comments, stripping them."""
    for lineno, line in enumerate(istream, 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield lineno, line


def split_names(line):
    return [name.strip() for name in line.split(',') if name.strip()]


def read_grammar(istream, epsilon=DEFAULT_EPSILON, start=None, ply_based=True):
    """
    Read a grammar from an input stream.

    :param istream: an input stream (an iterable of lines) or a path to a grammar file.
    :param epsilon: the marker standing for the empty string
    :param start: overrides the start variable declared in the file
    :param ply_based: whether or not to use a lex-yacc parser for rules
    :return: a CNF
    :raises GrammarError: for headers missing, duplicate declarations and undeclared left-hand sides

    >>> cnf = read_grammar(_EXAMPLE_GRAMMAR_.splitlines())
    >>> cnf.start
    Nonterminal('S')
    >>> len(cnf)
    5
    """

    if type(istream) is str:
        fi = smart_ropen(istream)
        try:
            return read_grammar(fi, epsilon, start, ply_based)
        finally:
            if fi is not sys.stdin:
                fi.close()

    lines = significant_lines(istream)
    header = [line for _, (_, line) in zip(range(2), lines)]
    if len(header) != 2 or any('->' in line for line in header):
        raise GrammarError('Expected a line of variables followed by a line of terminals')

    cnf = CNF(epsilon)
    for name in split_names(header[0]):
        cnf.add_variable(name)
    for name in split_names(header[1]):
        cnf.add_terminal(name)

    declared_start = None
    rule_lines = []
    for lineno, line in lines:
        if '->' in line:
            rule_lines.append((lineno, line))
            continue
        if declared_start is not None:
            logging.warning('Line %d: start variable redeclared (%s replaces %s)', lineno, line, declared_start)
        declared_start = line

    if ply_based:
        parser = CNFYacc()
        parser.build(debug=False, write_tables=False)
        rules = parser.parse(rule_lines)
    else:
        rules = read_basic(rule_lines)
    for lineno, lhs, alternatives in rules:
        for alternative in alternatives:
            cnf.add_rule(lhs, alternative)

    if start is None:
        start = declared_start
    if start is None:
        if not cnf.n_variables():
            raise GrammarError('The grammar declares no variables')
        start = cnf.variables[0].label
        logging.warning('No start variable declared, using %s', start)
    cnf.start = start

    logging.info('Grammar: variables=%d terminals=%d rules=%d malformed=%d',
                 cnf.n_variables(), cnf.n_terminals(), len(cnf), len(cnf.malformed))
    return cnf
