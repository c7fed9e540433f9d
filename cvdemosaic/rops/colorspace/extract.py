# -*- coding: utf-8 -*-
from ..base import BaseRop
from cvdemosaic.util import channels, demosaic
from cvdemosaic.util.pattern import color_key


class ExtractChannelRop(BaseRop):

    channel = 'g'
    half_size = True

    def correct(self, data, detected=None, **kw):
        if self.half_size:
            return channels.cfa_color_channel(data, self.channel, self.pattern)

        # Full resolution: interpolate the channel and write it back
        # into every CFA site, yielding a monochrome CFA image
        ppdata = demosaic.demosaic(data, self.pattern)
        data[:] = ppdata[:,:,demosaic.BGR.index(color_key(self.channel))]
        return data
