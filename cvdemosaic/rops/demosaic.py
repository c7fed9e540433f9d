# -*- coding: utf-8 -*-
from .base import BaseRop
from cvdemosaic.util import demosaic


class DemosaicRop(BaseRop):

    thumbnail = False

    def correct(self, data, detected=None, **kw):
        if self.thumbnail:
            return demosaic.demosaic_thumbnail(data, self.pattern)
        else:
            return demosaic.demosaic(data, self.pattern)
