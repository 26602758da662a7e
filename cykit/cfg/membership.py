"""
This module is the command line interface to the CYK recogniser.

    python -m cykit.cfg.membership GRAMMAR [INPUT] [options]

The grammar is loaded once and each candidate string is decided against it (possibly by a pool of workers).
"""

import logging
import sys
import traceback

from multiprocessing import Pool
from functools import partial
from types import SimpleNamespace

from cykit.recipes import smart_ropen, smart_wopen
from cykit.cfg.ply_cfg import read_grammar
from cykit.cfg.cyk import CYK
from cykit.cfg.sentence import read_sentences
from cykit.cfg.info import pprint_grammar, pprint_chart
from cykit.cfg.errors import GrammarError
from cykit.cfg.cmdline import argparser, configure_logging


VERDICTS = {True: 'Accept', False: 'Reject'}


def core(seg, recogniser, chart=False):
    """
    Decide a single candidate.

    :param seg: a Sentence
    :param recogniser: a CYK instance
    :param chart: whether to log the chart
    :returns: a SimpleNamespace with fields 'id', 'display', 'accepted' and 'reason'
    """
    result = recogniser.decide(seg.text, keep_chart=chart)
    if result.error is not None:
        logging.info('[%d] %s', seg.id, result.error)
    elif result.chart is not None:
        logging.info('[%d] chart:\n%s', seg.id, pprint_chart(recogniser.index, result.words, result.chart))
    logging.info('[%d] %s', seg.id, VERDICTS[result.accepted])
    return SimpleNamespace(id=seg.id,
                           display=seg.display(recogniser.grammar.epsilon.marker),
                           accepted=result.accepted,
                           reason=None if result.error is None else str(result.error))


def traced_core(seg, recogniser, chart=False):
    """
    This method simply wraps core and trace exceptions.
    This is convenient when using multiprocessing.Pool
    """
    try:
        return core(seg, recogniser, chart)
    except Exception:
        raise Exception(''.join(traceback.format_exception(*sys.exc_info())))


def decide_all(recogniser, sentences, cpus=1, chart=False):
    """Decide all candidates, results are returned in input order."""
    if cpus == 1:
        return [core(seg, recogniser, chart) for seg in sentences]
    with Pool(cpus if cpus > 0 else None) as pool:
        return pool.map(partial(traced_core, recogniser=recogniser, chart=chart), sentences)


def write_verdicts(results, ostream):
    for r in results:
        print('%s: %s' % (r.display, VERDICTS[r.accepted]), file=ostream)


def configure(argv=None):
    """
    Parse command line arguments, configures the main logger.
    :returns: command line arguments
    """

    args = argparser().parse_args(argv)
    configure_logging(args.verbose)

    return args


def main(argv=None):
    """
    Loads the grammar, decides every candidate and writes verdicts.
    It might also profile the run if the user chose to do so.

    :returns: exit status
    """

    args = configure(argv)

    logging.info('Loading grammar: %s', args.grammar)
    try:
        cnf = read_grammar(args.grammar, epsilon=args.epsilon, start=args.start, ply_based=args.reader == 'ply')
    except (GrammarError, IOError) as e:
        logging.error('Cannot load grammar %s: %s', args.grammar, e)
        return 1

    if args.report:
        print(pprint_grammar(cnf))
        print()

    recogniser = CYK(cnf)

    try:
        istream = smart_ropen(args.input)
        try:
            sentences = read_sentences(istream)
        finally:
            if istream is not sys.stdin:
                istream.close()
    except IOError as e:
        logging.error('Cannot read input %s: %s', args.input, e)
        return 1
    logging.info('Deciding %d candidates', len(sentences))

    if args.profile:
        import cProfile

        pr = cProfile.Profile()
        pr.enable()
        results = decide_all(recogniser, sentences, 1, args.chart)
        pr.disable()
        pr.dump_stats(args.profile)
    else:
        results = decide_all(recogniser, sentences, args.cpus, args.chart)

    ostream = smart_wopen(args.output)
    try:
        write_verdicts(results, ostream)
    finally:
        if ostream is not sys.stdout:
            ostream.close()

    logging.info('Accepted %d out of %d', sum(1 for r in results if r.accepted), len(results))
    return 0


if __name__ == '__main__':
    sys.exit(main())
