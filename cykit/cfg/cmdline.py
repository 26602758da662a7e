import argparse
import logging
from .cfg import DEFAULT_EPSILON


def argparser():
    """parse command line arguments"""

    parser = argparse.ArgumentParser(prog='cykit.cfg.membership',
                                     usage='python -m %(prog)s [options]',
                                     description="Decide whether strings belong to the language of a CNF grammar",
                                     epilog="Each input line is a candidate (an empty line is the empty string). "
                                            "For each candidate a line '<string>: Accept' or '<string>: Reject' "
                                            "is written.")

    parser.formatter_class = argparse.ArgumentDefaultsHelpFormatter

    parser.add_argument('grammar',
                        type=str,
                        help='grammar file')
    parser.add_argument('input',
                        type=str, nargs='?', default='-',
                        help="candidate strings, one per line ('-' for stdin)")
    parser.add_argument('--output',
                        type=str, default='-', metavar='PATH',
                        help="where verdicts are written ('-' for stdout)")
    parser.add_argument('--cpus',
                        type=int, default=1,
                        help='number of cpus available (-1 for all)')

    cmd_grammar(parser.add_argument_group('Grammar'))
    cmd_info(parser.add_argument_group('Info'))

    return parser


def cmd_grammar(group):
    group.add_argument('--start',
                       type=str, default=None,
                       metavar='LABEL',
                       help='start variable (overrides the one declared in the grammar file)')
    group.add_argument('--epsilon',
                       type=str, default=DEFAULT_EPSILON,
                       metavar='MARKER',
                       help='marker standing for the empty string in rules')
    group.add_argument('--reader',
                       type=str, default='ply', choices=['ply', 'basic'],
                       help='how rule lines are parsed: ply (lex-yacc) or basic (string splitting)')


def cmd_info(group):
    group.add_argument('--report',
                       action='store_true',
                       help='print the grammar (symbols and rules) before testing strings')
    group.add_argument('--chart',
                       action='store_true',
                       help='log the CYK chart of every candidate (requires -v)')
    group.add_argument('--verbose', '-v',
                       action='count', default=0,
                       help='increase the verbosity level')
    group.add_argument('--profile',
                       type=str, metavar='PSTATS',
                       help='use cProfile and save a pstats report')


def configure_logging(verbose):
    """Configures the main logger: warnings by default, INFO with -v and DEBUG with -vv."""
    if verbose == 1:
        logging.basicConfig(level=logging.INFO, format='%(asctime)-15s %(levelname)s %(message)s')
    elif verbose > 1:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(levelname)s %(message)s')


if __name__ == '__main__':
    argparser().parse_args()
