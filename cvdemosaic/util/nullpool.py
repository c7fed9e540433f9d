
class NullPool:
    """ Runs everything inline, for when thread pools are disabled """

    def apply(self, func, args=(), kwds={}):
        return func(*args, **kwds)

    def map(self, func, iterable, chunksize=None):
        return list(map(func, iterable))

    def imap(self, func, iterable, chunksize=None):
        return map(func, iterable)

    imap_unordered = imap

    def _nop(self, *p, **kw):
        pass

    close = terminate = join = _nop
