# -*- coding: utf-8 -*-
from ..base import PerChannelRop
from cvdemosaic.util import gaussian


class GaussianFilterRop(PerChannelRop):
    """ Gaussian blur of each Bayer offset on its own """

    ksize = 5
    mode = 'reflect'

    @property
    def PROCESSING_MARGIN(self):
        return gaussian.odd_ksize(self.ksize)

    def process_channel(self, data, detected=None, channel=None, **kw):
        return gaussian.gaussian_blur(data, self.ksize, mode=self.mode)

    def correct(self, data, detected=None, **kw):
        if kw.get('roi') is None and self.mode == 'reflect':
            # Whole-frame fast path through the quadrant mosaic
            pool = kw.get('pool')
            if pool is None:
                pool = self.pool
            return gaussian.cfa_smooth(data, self.ksize, out=data, pool=pool)
        return super(GaussianFilterRop, self).correct(data, detected, **kw)
