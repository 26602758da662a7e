"""
Candidate strings read from an input source.
"""


class Sentence(object):
    """
    A candidate string and its position in the input.

    >>> Sentence(0, 'ab')
    Sentence(0, 'ab')
    >>> Sentence(1, '').display('e')
    'e'
    """

    def __init__(self, uid, text):
        self._uid = uid
        self._text = text

    @property
    def id(self):
        return self._uid

    @property
    def text(self):
        return self._text

    def __len__(self):
        return len(self._text)

    def display(self, epsilon):
        """The text itself, or the epsilon marker when the text is empty."""
        return self._text if self._text else epsilon

    def __repr__(self):
        return '%s(%r, %r)' % (Sentence.__name__, self._uid, self._text)

    def __str__(self):
        return self._text


def read_sentences(istream):
    """
    One candidate per line, surrounding whitespace is stripped and an empty line stands for the empty string.

    >>> [s.text for s in read_sentences(['ab\\n', '\\n', ' aabb '])]
    ['ab', '', 'aabb']
    """
    return [Sentence(i, line.strip()) for i, line in enumerate(istream)]
