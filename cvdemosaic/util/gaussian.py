# -*- coding: utf-8 -*-
import logging

import scipy.ndimage

from .arrays import as_working_float, check_cfa_shape, check_out, saturate_cast
from .quad import cfa_quad, quad_cfa, quad_block

logger = logging.getLogger(__name__)


def odd_ksize(ksize):
    ksize = int(ksize)
    if ksize < 0:
        raise ValueError("kernel size must be positive, got %d" % ksize)
    if ksize % 2 == 0:
        ksize += 1
    return ksize


def kernel_sigma(ksize):
    # The usual sigma for a given aperture, same as OpenCV's getGaussianKernel
    return 0.3 * ((ksize - 1) * 0.5 - 1) + 0.8


def gaussian_blur(data, ksize, sigma=None, mode='reflect'):
    """ Gaussian blur with an explicit ksize x ksize aperture.

    Integer data is blurred in floating point and rounded back.
    """
    ksize = odd_ksize(ksize)
    if sigma is None:
        sigma = kernel_sigma(ksize)
    if ksize == 1:
        return data.copy()

    blurred = scipy.ndimage.gaussian_filter(
        as_working_float(data), sigma, mode=mode, radius=ksize // 2)
    return saturate_cast(blurred, data.dtype)


def cfa_smooth(src, ksize, out=None, pool=None):
    """ Smooth a CFA image with a Gaussian filter applied to each
    Bayer offset independently, so colors never bleed into each other.

    :param src: the CFA image
    :param ksize: the kernel size. Use about half of what you would use
        for a full-resolution image. Even sizes are bumped to the next
        odd size, and sigma is derived from it.
    :param out: optional destination of the same shape and type as src.
        May be src itself.
    :param pool: optional thread pool to blur the four offsets in parallel
    """
    check_cfa_shape(src)
    if out is not None:
        check_out(out, src.shape, src.dtype)

    ksize = odd_ksize(ksize)
    sigma = kernel_sigma(ksize)

    logger.debug("Smoothing %r CFA image with ksize=%d sigma=%.3f", src.shape, ksize, sigma)

    if pool is not None:
        map_ = pool.imap_unordered
    else:
        map_ = map

    quad = cfa_quad(src)

    def smooth_block(offset):
        x, y = offset
        try:
            block = quad_block(quad, x, y)
            block[:] = gaussian_blur(block, ksize, sigma)
        except Exception:
            logger.exception("Error smoothing Bayer offset %r", offset)
            raise

    for _ in map_(smooth_block, [(0, 0), (1, 0), (0, 1), (1, 1)]):
        pass

    return quad_cfa(quad, out=out)
