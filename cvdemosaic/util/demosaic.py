# -*- coding: utf-8 -*-
import logging
from types import MappingProxyType

import numpy
import scipy.ndimage

from cvdemosaic.errors import DimensionError
from .arrays import as_working_float, check_cfa_shape, check_out, saturate_cast
from .masks import build_adjacent_mask, build_mask
from .pattern import CFAPattern
from .quad import cfa_quad, quad_block

logger = logging.getLogger(__name__)


def _kernel(rows):
    k = numpy.array(rows, numpy.float64) / 8
    k.setflags(write=False)
    return k


# Malvar, He, Cutler "high quality linear" interpolation kernels.
# All of them add up to 1, so flat fields come out flat.
KERNELS = MappingProxyType({
    # G at R or B sites
    'g_at_rb': _kernel([
        [ 0, 0, -1, 0,  0],
        [ 0, 0,  2, 0,  0],
        [-1, 2,  4, 2, -1],
        [ 0, 0,  2, 0,  0],
        [ 0, 0, -1, 0,  0],
    ]),

    # R at B sites, B at R sites
    'rb_at_br': _kernel([
        [   0, 0, -1.5, 0,    0],
        [   0, 2,    0, 2,    0],
        [-1.5, 0,    6, 0, -1.5],
        [   0, 2,    0, 2,    0],
        [   0, 0, -1.5, 0,    0],
    ]),

    # R or B at G sites with the wanted color on the same row
    'rb_at_g_row': _kernel([
        [ 0,  0, 0.5,  0,  0],
        [ 0, -1,   0, -1,  0],
        [-1,  4,   5,  4, -1],
        [ 0, -1,   0, -1,  0],
        [ 0,  0, 0.5,  0,  0],
    ]),

    # R or B at G sites with the wanted color on the same column
    'rb_at_g_col': _kernel([
        [  0,  0, -1,  0,   0],
        [  0, -1,  4, -1,   0],
        [0.5,  0,  5,  0, 0.5],
        [  0, -1,  4, -1,   0],
        [  0,  0, -1,  0,   0],
    ]),
})

# Output plane order
BGR = ('b', 'g', 'r')

BORDER_MODE = 'mirror'


def _interpolate(image, kernel_name):
    return scipy.ndimage.correlate(image, KERNELS[kernel_name], mode=BORDER_MODE)


def demosaic(raw_image, pattern='rggb'):
    """ Demosaic a CFA image into a BGR color image.

    Implements Malvar et al's "high quality linear" algorithm:
    native samples are kept as-is, missing ones are interpolated
    with fixed 5x5 gradient-corrected kernels.

    Any integer or float type is accepted, and the output has the
    same type. Computation happens in floating point without
    rescaling, and integer outputs are rounded and saturated.

    :param raw_image: 2D CFA image with even width and height
    :param pattern: the Bayer pattern, one of ``rggb``, ``bggr``,
        ``grbg`` or ``gbrg``, case insensitive.
    :return: an array of shape ``raw_image.shape + (3,)`` in B, G, R order
    """
    pattern = CFAPattern(pattern)
    check_cfa_shape(raw_image)
    shape = raw_image.shape

    logger.debug("Demosaicing %r %s image with pattern %s", shape, raw_image.dtype, pattern)

    image = as_working_float(raw_image)

    rmask = build_mask('r', pattern, shape)
    gmask = build_mask('g', pattern, shape)
    bmask = build_mask('b', pattern, shape)

    # G: native samples, interpolate at R and B
    G = _interpolate(image, 'g_at_rb')
    G[gmask] = image[gmask]

    R = numpy.empty_like(image)
    B = numpy.empty_like(image)
    R[rmask] = image[rmask]
    B[bmask] = image[bmask]

    iRB = _interpolate(image, 'rb_at_br')
    R[bmask] = iRB[bmask]
    B[rmask] = iRB[rmask]

    for orientation in ('row', 'col'):
        iRB = _interpolate(image, 'rb_at_g_' + orientation)
        for color, plane in (('r', R), ('b', B)):
            mask = build_adjacent_mask(color, orientation, pattern, shape)
            plane[mask] = iRB[mask]
    del iRB

    bgr = numpy.stack([B, G, R], axis=-1)
    return saturate_cast(bgr, raw_image.dtype)


def demosaic_thumbnail(raw_image, pattern='rggb'):
    """ Half-size, low quality BGR preview of a CFA image.

    Each quadrant of the CFA becomes one color plane, with no
    interpolation at all. Only the first green quadrant is used,
    the other one is discarded.
    """
    pattern = CFAPattern(pattern)
    check_cfa_shape(raw_image)

    quad = cfa_quad(raw_image)
    return numpy.stack([quad_block(quad, *pattern.offset(c)) for c in BGR], axis=-1)


def remosaic(image, pattern='rggb', out=None):
    """ Sample a full-resolution BGR image back into a CFA image.

    Each pixel takes the plane of the color its tile samples.
    """
    pattern = CFAPattern(pattern)
    if image.ndim != 3 or image.shape[2] != 3:
        raise DimensionError("remosaic needs a 3-plane BGR image, got shape %r" % (image.shape,))
    shape = image.shape[:2]
    check_cfa_shape(image[:, :, 0])

    if out is None:
        raw_image = numpy.empty(shape, image.dtype)
    else:
        check_out(out, shape, image.dtype)
        raw_image = out

    for x in range(2):
        for y in range(2):
            plane = BGR.index(pattern.color_at(x, y))
            raw_image[y::2, x::2] = image[y::2, x::2, plane]

    return raw_image
