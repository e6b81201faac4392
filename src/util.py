import sys
import time
from datetime import datetime
import functools

def log(name, event):
    sys.stderr.write("%s %s - %s\n" % (datetime.now(), name, event))
    sys.stderr.flush()

def timed(fn):
    """Log when fn starts and how long it took to finish"""
    @functools.wraps(fn)
    def wrapped(*args, **kwargs):
        log(fn.__name__, 'started')
        start = time.perf_counter()
        result = fn(*args, **kwargs)
        log(fn.__name__, 'finished in %.3fs' % (time.perf_counter() - start))
        return result
    return wrapped
