# -*- coding: utf-8 -*-
import functools

import numpy

from cvdemosaic.errors import DimensionError
from .pattern import CFAPattern, color_key


def _tile(indicator, shape):
    h, w = shape
    if h % 2 or w % 2:
        raise DimensionError("CFA masks need even dimensions, got %dx%d" % (w, h))
    mask = numpy.tile(indicator, (h // 2, w // 2))
    mask.setflags(write=False)
    return mask


@functools.lru_cache(maxsize=64)
def _cached_mask(color, orientation, pattern, shape):
    if orientation is None:
        indicator = pattern.tile_mask(color)
    else:
        indicator = pattern.adjacent_mask(color, orientation)
    return _tile(indicator, shape)


def build_mask(color, pattern, shape):
    """ Full resolution boolean mask of the pixels sampling color.

    The returned array is shared and read-only.
    """
    return _cached_mask(color_key(color), None, CFAPattern(pattern), tuple(shape))


def build_adjacent_mask(color, orientation, pattern, shape):
    """ Full resolution mask of green pixels with a color neighbor
    in the same row (orientation ``'row'``) or column (``'col'``).
    """
    return _cached_mask(color_key(color), orientation, CFAPattern(pattern), tuple(shape))
