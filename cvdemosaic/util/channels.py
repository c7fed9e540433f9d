# -*- coding: utf-8 -*-
import numpy

from cvdemosaic.errors import RangeError
from .arrays import check_cfa_shape, check_out
from .pattern import CFAPattern, COLORS
from .quad import cfa_quad, quad_block


def _is_offset(v):
    return isinstance(v, (int, numpy.integer)) and v in (0, 1)


def cfa_channel(src, x=0, y=0, out=None):
    """ Return a half-resolution image with the pixels at Bayer offset x, y.

    :param src: the CFA image
    :param x: the x offset, 0 or 1
    :param y: the y offset, 0 or 1
    :param out: optional destination, must already be half the size
        of src and of the same type
    """
    if not (_is_offset(x) and _is_offset(y)):
        raise RangeError("Bayer offset (%r, %r) out of range" % (x, y))
    check_cfa_shape(src)
    h2 = src.shape[0] // 2
    w2 = src.shape[1] // 2
    if out is not None:
        check_out(out, (h2, w2), src.dtype)

    block = quad_block(cfa_quad(src), x, y)
    if out is None:
        return block.copy()
    out[:] = block
    return out


def cfa_color_channel(src, channel, pattern='rggb', out=None):
    """ Like :func:`cfa_channel`, with the offset of the first tile of color channel """
    x, y = CFAPattern(pattern).offset(channel)
    return cfa_channel(src, x, y, out=out)


def cfa_channels(src, pattern='rggb'):
    """ All color planes of a CFA image at half resolution, keyed by color.

    Green comes from its first tile only.
    """
    pattern = CFAPattern(pattern)
    check_cfa_shape(src)
    quad = cfa_quad(src)
    return {c: quad_block(quad, *pattern.offset(c)).copy() for c in COLORS}
