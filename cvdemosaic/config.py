import os
import threading
import multiprocessing.pool

from cvdemosaic.util.nullpool import NullPool

default_pattern = os.environ.get('CFA_PATTERN', 'rggb')
parallel = os.environ.get('CFA_PARALLEL', 'yes') != 'no'

_global_pool = None
_spawn_lock = threading.Lock()


def default_pool():
    global _global_pool
    if _global_pool is not None:
        return _global_pool

    with _spawn_lock:
        if _global_pool is not None:
            return _global_pool
        if parallel:
            _global_pool = multiprocessing.pool.ThreadPool(4)
        else:
            _global_pool = NullPool()

    return _global_pool


def close_default_pool():
    global _global_pool
    if _global_pool is None:
        return

    with _spawn_lock:
        if _global_pool is None:
            return
        global_pool = _global_pool
        _global_pool = None

    global_pool.terminate()
    global_pool.join()
