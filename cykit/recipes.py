"""
Small recipes shared by the command line tools.
"""

import time
import sys
import gzip
from io import TextIOWrapper
from functools import wraps


def smart_ropen(path):
    """Opens files directly or through gzip depending on extension ('-' stands for stdin)."""
    if path == '-':
        return sys.stdin
    if path.endswith('.gz'):
        return TextIOWrapper(gzip.open(path, 'rb'))
    else:
        return open(path, 'r')


def smart_wopen(path):
    """Opens files directly or through gzip depending on extension ('-' stands for stdout)."""
    if path == '-':
        return sys.stdout
    if path.endswith('.gz'):
        return TextIOWrapper(gzip.open(path, 'wb'))
    else:
        return open(path, 'w')


def timeit(func):
    @wraps(func)
    def newfunc(*args, **kwargs):
        t0 = time.time()
        r = func(*args, **kwargs)
        delta = time.time() - t0
        return delta, r
    return newfunc
