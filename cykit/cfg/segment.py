"""
Symbol segmentation by greedy longest match.

Symbols of a grammar are not necessarily single characters, thus strings such as candidate inputs
(or right-hand sides written without spaces) must be segmented into known symbols.
"""

from .errors import UnrecognizedSymbolError


class Segmenter(object):
    """
    Segments a string into a sequence of known symbol names.

    At each position candidates are tried in order of decreasing length and the first match is consumed.

    >>> seg = Segmenter(['a', 'aa', 'b'])
    >>> seg.segment('aab')
    ('aa', 'b')
    >>> seg.segment('aaab')
    ('aa', 'a', 'b')
    >>> seg.segment('')
    ()
    >>> seg.segment('abc')
    Traceback (most recent call last):
      ...
    cykit.cfg.errors.UnrecognizedSymbolError: No symbol matches 'abc' at position 2
    """

    def __init__(self, symbols):
        """
        :param symbols: an iterable of symbol names (strings), empty names are ignored
        """
        # ties are broken lexicographically so that segmentation does not depend on insertion order
        self._candidates = tuple(sorted(set(s for s in symbols if s), key=lambda s: (-len(s), s)))

    @property
    def candidates(self):
        return self._candidates

    def __len__(self):
        return len(self._candidates)

    def segment(self, text, offset=0):
        """
        Segment a string with no gaps.

        :param text: the string
        :param offset: added to positions reported in errors
        :returns: a tuple of symbol names
        :raises UnrecognizedSymbolError: if at some position no candidate matches
        """
        if not text:
            return ()
        symbols = []
        i = 0
        while i < len(text):
            for candidate in self._candidates:
                if text.startswith(candidate, i):
                    symbols.append(candidate)
                    i += len(candidate)
                    break
            else:
                raise UnrecognizedSymbolError(text, i + offset)
        return tuple(symbols)
