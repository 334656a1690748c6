""" The argument tuple that identifies one memoize cache entry.

    Equality is plain structural tuple equality.  The hash folds the hash of
    each element together with the boost hash_combine mixing step, so two
    keys with equal elements always hash the same.
"""

GOLDEN_RATIO = 0x9E3779B9
_MASK = (1 << 64) - 1

# Separates positional arguments from keyword arguments inside a key
_KWARGS_MARK = object()


def hash_combine(seed, value_hash):
    """ boost::hash_combine, truncated to 64 bits """
    seed &= _MASK
    value_hash &= _MASK
    return (seed ^ (value_hash + GOLDEN_RATIO + (seed << 6) + (seed >> 2))) & _MASK


def tuple_hash(values):
    """ Hash of the first element combined with the hash of the rest.
        Walks from the right so that deep tuples don't recurse.
    """
    if not values:
        return 0
    result = hash(values[-1]) & _MASK
    for value in reversed(values[:-1]):
        result = hash_combine(hash(value), result)
    return result


class ArgumentTuple(tuple):
    """ Immutable, hashable key built from a call's arguments.

        Floating point arguments are compared exactly, so 0.1 + 0.2 and 0.3
        are different keys.  Don't mix ArgumentTuples and plain tuples in the
        same dict: they compare equal but hash differently.
    """

    def __hash__(self):
        try:
            return self._hashvalue
        except AttributeError:
            self._hashvalue = tuple_hash(self)
            return self._hashvalue

    def __repr__(self):
        return "".join(
            [self.__class__.__name__, "(", ", ".join(repr(vv) for vv in self), ")"]
        )


def make_key(args, kwargs=None):
    """ Build the cache key for a call.
        Keyword arguments are appended in name order after a marker so
        f(1, ("a", 2)) and f(1, a=2) stay distinct.
    """
    if not kwargs:
        return ArgumentTuple(args)
    return ArgumentTuple(tuple(args) + (_KWARGS_MARK,) + tuple(sorted(kwargs.items())))
