import collections
import functools
import threading

from memotools.key import make_key

CacheInfo = collections.namedtuple("CacheInfo", ["hits", "misses", "maxsize", "currsize"])

_MISSING = object()


class memoize(dict):
    """ Cache the results of func, keyed by the call's arguments.

        The memoize object is itself the cache (a dict of ArgumentTuple to
        result), so every wrapper owns an independent cache.  func is called
        at most once per distinct argument tuple.  Exceptions are not cached:
        if func raises, nothing is stored and the next call with the same
        arguments calls func again.

        maxsize=None means the cache grows without bound.  A positive maxsize
        evicts the oldest inserted entry once the cache is full.

        Not thread safe.  Use synchronized_memoize for that.

        Usage:
        @memoize
        def my_func(foo, bar):
            ....

        @memoize(maxsize=128)
        def my_other_func(doh):
            ....
    """

    def __new__(cls, func=None, maxsize=None):
        if func is None:
            # Decorator with arguments
            return functools.partial(cls, maxsize=maxsize)
        return super().__new__(cls)

    def __init__(self, func, maxsize=None):
        super().__init__()
        if not callable(func):
            raise TypeError("Given object is not callable!: " + repr(func))
        if maxsize is not None and maxsize <= 0:
            raise ValueError("maxsize must be a positive integer or None, not " + repr(maxsize))
        functools.update_wrapper(self, func)
        self.func = func
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0

    def __call__(self, *args, **kwargs):
        key = make_key(args, kwargs)
        result = self.get(key, _MISSING)
        if result is not _MISSING:
            self.hits += 1
            return result

        self.misses += 1
        result = self.func(*args, **kwargs)
        self._store(key, result)
        return result

    def __get__(self, obj, objtype=None):
        """ Memoizing a method puts the instance into the key """
        if obj is None:
            return self
        return functools.partial(self, obj)

    def _store(self, key, result):
        if self.maxsize is not None and key not in self:
            while len(self) >= self.maxsize:
                del self[next(iter(self))]
        self[key] = result

    def cache_info(self):
        return CacheInfo(self.hits, self.misses, self.maxsize, len(self))

    def cache_clear(self):
        self.clear()
        self.hits = 0
        self.misses = 0

    # dicts compare by content which makes no sense for a function
    __eq__ = object.__eq__
    __ne__ = object.__ne__
    __hash__ = object.__hash__

    def __repr__(self):
        return "<{} {}.{} {}>".format(
            self.__class__.__name__,
            getattr(self, "__module__", None),
            getattr(self, "__qualname__", repr(self.func)),
            self.cache_info(),
        )


class synchronized_memoize(memoize):
    """ A memoize that can be shared between threads.

        The lookup and the insert are one atomic get-or-compute, so func is
        evaluated at most once per key even under concurrent calls.  Threads
        asking for a key that is being computed wait for that computation
        rather than starting their own.  If it raises, one of the waiters
        computes it again.
    """

    def __init__(self, func, maxsize=None):
        super().__init__(func, maxsize=maxsize)
        self._lock = threading.Lock()
        self._inflight = {}

    def __call__(self, *args, **kwargs):
        key = make_key(args, kwargs)
        while True:
            with self._lock:
                result = self.get(key, _MISSING)
                if result is not _MISSING:
                    self.hits += 1
                    return result
                event = self._inflight.get(key)
                if event is None:
                    event = self._inflight[key] = threading.Event()
                    self.misses += 1
                    break
            event.wait()

        try:
            result = self.func(*args, **kwargs)
            with self._lock:
                self._store(key, result)
            return result
        finally:
            with self._lock:
                del self._inflight[key]
            event.set()

    def cache_info(self):
        with self._lock:
            return CacheInfo(self.hits, self.misses, self.maxsize, len(self))

    def cache_clear(self):
        with self._lock:
            super().cache_clear()


def memoize_recursive(func, maxsize=None, memoizer=memoize):
    """ Memoize a self recursive function.
        func is given the memoized function as its first argument so that
        the recursive calls go through (and fill) the same cache.

        @memoize_recursive
        def fib(fib, n):
            return 1 if n <= 1 else fib(n - 1) + fib(n - 2)
    """
    if not callable(func):
        raise TypeError("Given object is not callable!: " + repr(func))

    @functools.wraps(func)
    def unrolled(*args, **kwargs):
        return func(memoized, *args, **kwargs)

    memoized = memoizer(unrolled, maxsize=maxsize)
    return memoized
