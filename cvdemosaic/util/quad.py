# -*- coding: utf-8 -*-
""" Quadrant mosaics of CFA images.

A quadrant mosaic rearranges a CFA image into four half-resolution
images, one per Bayer offset x, y::

    +---+---+
    |0,0|1,0|
    +---+---+
    |0,1|1,1|
    +---+---+

Each block keeps the raster order of its sub-lattice, so per-channel
operations can run on contiguous images and the result can be scattered
back with :func:`quad_cfa`.
"""
import functools

import numpy

from .arrays import check_cfa_shape, check_out
from .remap import safe_remap


@functools.lru_cache(maxsize=16)
def quad_maps(shape):
    """ Coordinate maps (x_map, y_map) that gather a CFA image into a quadrant mosaic """
    h, w = shape
    h2, w2 = h // 2, w // 2
    x = numpy.arange(w)
    y = numpy.arange(h)
    xs = numpy.where(x < w2, x * 2, (x - w2) * 2 + 1)
    ys = numpy.where(y < h2, y * 2, (y - h2) * 2 + 1)
    x_map, y_map = numpy.meshgrid(xs, ys)
    x_map.setflags(write=False)
    y_map.setflags(write=False)
    return x_map, y_map


@functools.lru_cache(maxsize=16)
def cfa_maps(shape):
    """ Coordinate maps (x_map, y_map) that scatter a quadrant mosaic back into CFA layout """
    h, w = shape
    h2, w2 = h // 2, w // 2
    x = numpy.arange(w)
    y = numpy.arange(h)
    xs = numpy.where(x % 2 == 0, x // 2, w2 + x // 2)
    ys = numpy.where(y % 2 == 0, y // 2, h2 + y // 2)
    x_map, y_map = numpy.meshgrid(xs, ys)
    x_map.setflags(write=False)
    y_map.setflags(write=False)
    return x_map, y_map


def _validate(src, out):
    check_cfa_shape(src)
    if out is not None:
        check_out(out, src.shape, src.dtype)


def cfa_quad(src, out=None):
    """ Convert a CFA image into its quadrant mosaic.

    :param src: the CFA image, with even width and height
    :param out: optional destination of the same shape and type.
        May be src itself.
    :return: the quadrant mosaic
    """
    _validate(src, out)
    x_map, y_map = quad_maps(src.shape)
    return safe_remap(src, x_map, y_map, out=out)


def quad_cfa(src, out=None):
    """ Inverse of :func:`cfa_quad` """
    _validate(src, out)
    x_map, y_map = cfa_maps(src.shape)
    return safe_remap(src, x_map, y_map, out=out)


def quad_block(quad, x, y):
    """ View of the block holding Bayer offset x, y in a quadrant mosaic """
    h2 = quad.shape[0] // 2
    w2 = quad.shape[1] // 2
    return quad[y*h2:(y+1)*h2, x*w2:(x+1)*w2]
