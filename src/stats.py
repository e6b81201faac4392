"""Checks that random eviction picks its victims uniformly across slots"""

import collections
import matplotlib.pyplot as plot

import cache
import settings
import util

class CountingRandom(cache.Random):
    """A Random cache which remembers how often each slot was evicted"""
    def __init__(self, max_size, rng=None):
        cache.Random.__init__(self, max_size, rng)
        self.evictions = collections.Counter()

    def _evict(self):
        index = cache.Random._evict(self)
        self.evictions[index] += 1
        return index

def fill(rr, num_inserts):
    for key in range(0, num_inserts):
        rr.insert(key, key)
    return rr

@util.timed
def eviction_counts(max_size, num_inserts, rng=None):
    rr = fill(CountingRandom(max_size, rng), num_inserts)
    counts = [rr.evictions[index] for index in range(0, max_size)]
    util.log('eviction_counts', '%i evictions over %i slots, chi squared %.2f' % (sum(counts), max_size, chi_squared(counts)))
    return counts

def chi_squared(counts):
    """Pearson's statistic for counts against a uniform distribution"""
    total = sum(counts)
    if total == 0:
        return 0.0
    expected = float(total) / len(counts)
    return sum((count - expected) ** 2 / expected for count in counts)

def resident_after(max_size, num_inserts, rng=None):
    rr = fill(cache.Random(max_size, rng), num_inserts)
    return sorted(key for key, _ in rr)

def plot_evictions(max_size, num_inserts):
    counts = eviction_counts(max_size, num_inserts)
    plot.bar(range(0, max_size), counts)
    plot.axhline(float(sum(counts)) / max_size, color='red')
    plot.xlabel('Slot')
    plot.ylabel('Evictions')
    plot.title('%i inserts into %i slots' % (num_inserts, max_size))
    plot.show()

if __name__ == '__main__':
    plot_evictions(settings.stats_max_size, settings.stats_num_inserts)
