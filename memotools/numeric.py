""" Small numeric helpers that the command line drivers exercise the
    memoizer with.
"""
import math
import time

from memotools.key import make_key
from memotools.memoize import memoize, memoize_recursive


class ParseError(ValueError):
    """ A token could not be converted to the requested number type """

    def __init__(self, token, kind, position=None):
        self.token = token
        self.kind = kind
        self.position = position
        super().__init__(self._message())

    def _message(self):
        kindname = getattr(self.kind, "__name__", str(self.kind))
        if self.position is None:
            return "{!r} is not a valid {}".format(self.token, kindname)
        return "argument {} ({!r}) is not a valid {}".format(self.position, self.token, kindname)


def parse(token, kind=float, position=None):
    """ Convert the whole of token to kind (int or float).
        Surrounding whitespace and digit separators are rejected rather than
        quietly accepted.
    """
    if not isinstance(token, str) or token != token.strip() or "_" in token:
        raise ParseError(token, kind, position)
    try:
        return kind(token)
    except (ValueError, TypeError) as err:
        raise ParseError(token, kind, position) from err


def parse_all(tokens, kind=float):
    """ Parse every token.  Positions in the error are 1-based like argv """
    return [parse(token, kind, position=index) for index, token in enumerate(tokens, 1)]


def sum_(values):
    result = 0
    for value in values:
        result += value
    return result


def avg(values):
    values = list(values)
    if not values:
        raise ValueError("avg() of an empty sequence")
    return sum_(values) / len(values)


def fib(n):
    """ Naive exponential Fibonacci with fib(0) == fib(1) == 1 """
    return 1 if n <= 1 else fib(n - 1) + fib(n - 2)


def _fib(fib, n):
    return 1 if n <= 1 else fib(n - 1) + fib(n - 2)


class _bottom_up_memoize(memoize):
    """ Fills a cold cache from the bottom so that fib(n) only ever recurses
        one level into already cached values.
    """

    def __call__(self, n):
        if not math.isfinite(n):
            raise ValueError("fib_memo needs a finite n, got " + str(n))
        if make_key((n - 1,)) not in self:
            for step in range(math.ceil(n - 1), 0, -1):
                super().__call__(n - step)
        return super().__call__(n)


def make_fib_memo(maxsize=None):
    """ A memoized Fibonacci with its own cache.
        The recursion goes through the cache so fib_memo(n) does O(n) work
        at a constant stack depth.
    """
    return memoize_recursive(_fib, maxsize=maxsize, memoizer=_bottom_up_memoize)


fib_memo = make_fib_memo()


def slow_func(seconds):
    """ Block for the given number of seconds then return it """
    time.sleep(seconds)
    return seconds


def format_number(value):
    """ Integral floats print without the trailing .0 """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
