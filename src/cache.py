"""
Fixed-size caches using random eviction
"""

import operator
import random

import ujson

import settings
import util

class CacheError(Exception):
    pass

class CapacityError(CacheError, ValueError):
    pass

class Cache():
    """Common interface for fixed-size caches"""

    def try_get(self, key, default=None):
        raise NotImplementedError()

    def insert(self, key, value):
        raise NotImplementedError()

class Random(Cache):
    """Evicts a uniformly random resident entry when full.

    `keys` holds resident keys by slot, `cache` maps each key to its value.
    Both always contain the same keys.
    """

    def __init__(self, max_size, rng=None):
        if isinstance(max_size, bool):
            raise CapacityError("max_size must be an int, got %r" % (max_size,))
        try:
            max_size = operator.index(max_size)
        except TypeError:
            raise CapacityError("max_size must be an int, got %r" % (max_size,))
        if max_size < 1:
            raise CapacityError("max_size must be at least 1, got %i" % max_size)
        self.max_size = max_size
        self.cache = {}
        self.keys = []
        if rng is None:
            rng = random.Random(settings.random_seed)
        self.rng = rng
        if settings.verbose:
            util.log('cache.Random', 'created with max_size %i' % max_size)

    def __contains__(self, key):
        return key in self.cache

    def __getitem__(self, key):
        return self.cache[key]

    def __len__(self):
        return len(self.keys)

    def __iter__(self):
        cache = self.cache
        for key in self.keys:
            yield key, cache[key]

    def __repr__(self):
        return "Random(%i, %r)" % (self.max_size, list(self))

    def full(self):
        return len(self.keys) >= self.max_size

    def try_get(self, key, default=None):
        return self.cache.get(key, default)

    def _evict(self):
        # only called by insert on a full cache, which refills the returned slot straight away
        index = self.rng.randrange(self.max_size)
        del self.cache[self.keys[index]]
        return index

    def insert(self, key, value):
        # existing keys keep their slot
        if key in self.cache:
            self.cache[key] = value
            return

        if self.full():
            index = self._evict()
            self.keys[index] = key
        else:
            self.keys.append(key)
        self.cache[key] = value

    def dumps(self):
        return ujson.dumps({'max_size': self.max_size, 'entries': [[key, value] for key, value in self]})
