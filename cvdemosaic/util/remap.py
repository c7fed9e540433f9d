# -*- coding: utf-8 -*-
import logging

import numpy
import scipy.ndimage

from .arrays import check_out

logger = logging.getLogger(__name__)


def safe_remap(src, x_map, y_map, out=None):
    """ Nearest-neighbor remap: ``out[y, x] = src[y_map[y, x], x_map[y, x]]``

    Unlike the underlying resampler, out may be src itself (or any
    view overlapping it), in which case the remap goes through a
    temporary buffer.
    """
    x_map = numpy.asarray(x_map)
    y_map = numpy.asarray(y_map)
    if x_map.shape != y_map.shape:
        raise ValueError("coordinate maps differ in shape: %r vs %r" % (x_map.shape, y_map.shape))

    if out is None:
        out = numpy.empty(x_map.shape, src.dtype)
    else:
        check_out(out, x_map.shape, src.dtype)

    if numpy.may_share_memory(src, out):
        logger.debug("In-place remap of %r image, using temporary buffer", src.shape)
        remapped = numpy.empty(out.shape, out.dtype)
        _remap(src, x_map, y_map, remapped)
        out[:] = remapped
    else:
        _remap(src, x_map, y_map, out)

    return out


def _remap(src, x_map, y_map, out):
    if x_map.dtype.kind in 'ui' and y_map.dtype.kind in 'ui':
        # Integral maps are a plain gather, exact for any type including
        # 64-bit integers and float16, which map_coordinates can't handle
        h, w = src.shape
        indices = numpy.clip(y_map, 0, h - 1) * w + numpy.clip(x_map, 0, w - 1)
        out[...] = numpy.take(src, indices)
    else:
        coords = numpy.array([y_map, x_map], numpy.float64)
        scipy.ndimage.map_coordinates(src, coords, output=out, order=0, mode='nearest')
