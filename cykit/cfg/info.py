"""
Reports information about grammars and CYK charts.
"""

import argparse
import logging
import sys
from tabulate import tabulate
from .ply_cfg import read_grammar
from .cfg import DEFAULT_EPSILON
from .cmdline import configure_logging


def summary(path, cnf):
    """A row of general information about a grammar."""
    return [path,
            cnf.start.label if cnf.start is not None else '',
            cnf.n_variables(),
            cnf.n_terminals(),
            len(cnf),
            len(cnf.malformed)]


SUMMARY_HEADER = ['path', 'start', 'variables', 'terminals', 'rules', 'malformed']


def pprint_grammar(cnf):
    """
    Symbols and rules of a grammar (rules are grouped by left-hand side).
    """
    lines = ['Variables: %s' % ', '.join(v.label for v in cnf.variables),
             'Terminals: %s' % ', '.join(t.surface for t in cnf.terminals),
             'Start Variable: %s' % (cnf.start.label if cnf.start is not None else ''),
             'Rules:']
    rows = [[lhs.label, '->', ' | '.join(r.rhs_str() for r in rules)] for lhs, rules in cnf.iteritems() if rules]
    if rows:
        lines.append(tabulate(rows, tablefmt='plain'))
    if cnf.malformed:
        lines.append('Malformed (skipped):')
        lines.extend('  %s' % r for r in cnf.malformed)
    return '\n'.join(lines)


def pprint_chart(index, words, table):
    """
    A triangular view of a CYK chart: row i and column j show the variables deriving words[i..j].

    :param index: the RuleIndex the chart was built with
    :param words: the input terminals
    :param table: the boolean chart returned by CYK.chart
    """
    n = len(words)
    rows = []
    for i in range(n):
        row = [i]
        for j in range(n):
            if j < i:
                row.append('')
            else:
                row.append('{%s}' % ','.join(index.variable(v).label for v in table[i, j].nonzero()[0]))
        rows.append(row)
    header = ['i\\j'] + ['%d:%s' % (j, w.surface) for j, w in enumerate(words)]
    return tabulate(rows, header)


def report(args):

    general_info = []
    for path in args.grammar:
        logging.info('Loading grammar: %s', path)
        cnf = read_grammar(path, epsilon=args.epsilon, ply_based=args.reader == 'ply')
        general_info.append(summary(path, cnf))
        if args.rules:
            print('# %s' % path)
            print(pprint_grammar(cnf))
            print()

    print(tabulate(general_info, SUMMARY_HEADER))


def argparser():

    parser = argparse.ArgumentParser(prog='cykit.cfg.info',
                                     usage='python -m %(prog)s [options]',
                                     description="Output information about a (collection of) grammar(s)",
                                     epilog="")

    parser.formatter_class = argparse.ArgumentDefaultsHelpFormatter

    parser.add_argument('grammar',
                        type=str, nargs='+',
                        help='grammar file(s)')
    parser.add_argument('--epsilon',
                        type=str, default=DEFAULT_EPSILON, metavar='MARKER',
                        help='marker standing for the empty string in rules')
    parser.add_argument('--reader',
                        type=str, default='ply', choices=['ply', 'basic'],
                        help='how rule lines are parsed: ply (lex-yacc) or basic (string splitting)')
    parser.add_argument('--rules',
                        action='store_true',
                        help='also print symbols and rules of each grammar')
    parser.add_argument('--verbose', '-v',
                        action='count', default=0,
                        help='increase the verbosity level')

    return parser


def main():
    args = argparser().parse_args()
    configure_logging(args.verbose)

    try:
        report(args)
    except (ValueError, IOError) as e:
        logging.error('%s', e)
        sys.exit(1)


if __name__ == '__main__':
    main()
