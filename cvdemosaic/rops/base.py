import logging

from cvdemosaic import config
from cvdemosaic.util.arrays import check_cfa_shape, saturate_cast
from cvdemosaic.util.pattern import CFAPattern

logger = logging.getLogger(__name__)

class BaseRop(object):

    PROCESSING_MARGIN = 0

    _rmask = _gmask = _bmask = None

    def __init__(self, pattern=None, default_pool=None, **kw):
        if pattern is None:
            pattern = config.default_pattern
        self.pattern = CFAPattern(pattern)
        self.default_pool = default_pool

        # Generic way to set simple parameters at construction time
        cls = type(self)
        for k, v in kw.items():
            if hasattr(cls, k):
                defv = getattr(self, k)
                if isinstance(defv, bool):
                    setattr(self, k, bool(int(v)))
                elif isinstance(defv, (int, float, str)):
                    setattr(self, k, type(defv)(v))
            else:
                raise TypeError("%s has no parameter %r" % (cls.__name__, k))

    @property
    def raw_pattern(self):
        return self.pattern.raw_pattern

    @property
    def rmask(self):
        if self._rmask is None:
            self._rmask = self.pattern.tile_mask('r')
        return self._rmask

    @property
    def gmask(self):
        if self._gmask is None:
            self._gmask = self.pattern.tile_mask('g')
        return self._gmask

    @property
    def bmask(self):
        if self._bmask is None:
            self._bmask = self.pattern.tile_mask('b')
        return self._bmask

    @property
    def pool(self):
        if self.default_pool is None:
            return config.default_pool()
        return self.default_pool

    def detect(self, data, **kw):
        pass

    def correct(self, data, detected=None, **kw):
        raise NotImplementedError

    def effective_roi(self, roi, shape=None):
        t, l, b, r = roi

        # Add margin
        margin = int(self.PROCESSING_MARGIN)
        t = max(0, t - margin)
        l = max(0, l - margin)
        b += margin
        r += margin

        # Round to pattern boundaries
        t -= t % 2
        l -= l % 2
        b += b % 2
        r += r % 2

        if shape is not None:
            b = min(b, shape[0] - shape[0] % 2)
            r = min(r, shape[1] - shape[1] % 2)

        return t, l, b, r

    def roi_precrop(self, roi, data):
        t, l, b, r = eff_roi = self.effective_roi(roi, data.shape)
        return eff_roi, data[t:b, l:r]

class PerChannelRop(BaseRop):

    def process_channel(self, channel_data, detected=None, channel=None):
        raise NotImplementedError

    def correct(self, data, detected=None, **kw):
        check_cfa_shape(data)
        pool = kw.get('pool')
        if pool is None:
            pool = self.pool
        map_ = pool.imap_unordered

        roi = kw.get('roi')
        process_method = kw.get('process_method', self.process_channel)

        rv = data
        if roi is not None:
            _, data = self.roi_precrop(roi, data)

        def process_channel(task):
            try:
                y, x = task
                processed = process_method(data[y::2, x::2], detected, channel=(y, x))

                if (hasattr(processed, 'dtype') and processed.shape and processed.dtype != data.dtype
                        and data.dtype.kind in ('i', 'u')):
                    processed = saturate_cast(processed, data.dtype)

                data[y::2, x::2] = processed
                del processed
            except Exception:
                logger.exception("Error processing channel data")
                raise

        tasks = []
        for y in range(2):
            for x in range(2):
                tasks.append((y, x))

        for _ in map_(process_channel, tasks):
            pass

        return rv
