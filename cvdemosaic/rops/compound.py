# -*- coding: utf-8 -*-
from .base import BaseRop

class CompoundRop(BaseRop):

    def __init__(self, pattern, *rops):
        self.rops = rops
        super(CompoundRop, self).__init__(pattern)

    def detect(self, data, **kw):
        rv = []
        for rop in self.rops:
            if data is None:
                rv.append(data)
            else:
                rv.append(rop.detect(data, **kw))
                data = rop.correct(data, rv[-1], **kw)
        return rv

    def correct(self, data, detected=None, **kw):
        if detected is None:
            detected = [None] * len(self.rops)

        for rop, rop_detected in zip(self.rops, detected):
            data = rop.correct(data, rop_detected, **kw)
            if data is None:
                break

        return data
