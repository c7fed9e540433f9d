import numpy

from cvdemosaic.errors import DimensionError, SizeMismatch, TypeMismatch


def asnative(a):
    if not a.dtype.isnative:
        a = a.astype(a.dtype.newbyteorder('='))
    return a


def working_dtype(dtype):
    # float64 data and integers wider than 16 bits are processed as float64,
    # float32 can't hold all of their values. Anything else is float32.
    dtype = numpy.dtype(dtype)
    if dtype == numpy.float64 or (dtype.kind in 'ui' and dtype.itemsize > 2):
        return numpy.dtype(numpy.float64)
    return numpy.dtype(numpy.float32)


def as_working_float(a):
    return asnative(a).astype(working_dtype(a.dtype), copy=False)


def saturate_cast(data, dtype, out=None):
    """ Convert float data back to dtype, rounding to nearest and clipping
    to the representable range when dtype is an integer type.
    """
    dtype = numpy.dtype(dtype)
    if dtype.kind in 'ui':
        limits = numpy.iinfo(dtype)
        if dtype.itemsize > 2:
            # Clip in float64, the limits of wide types round up in float32
            data = numpy.asarray(data, numpy.float64)
        hi = float(limits.max)
        if int(hi) > limits.max:
            # 64-bit limits aren't exact even in float64
            hi = numpy.nextafter(hi, 0)
        data = numpy.clip(numpy.rint(data), limits.min, hi)
    elif dtype.kind == 'b':
        data = data != 0
    if out is not None:
        out[:] = data
        return out
    return data.astype(dtype, copy=False)


def check_cfa_shape(data):
    if data.ndim != 2:
        raise DimensionError("CFA images must be single-plane 2D arrays, got shape %r" % (data.shape,))
    h, w = data.shape
    if h % 2 or w % 2:
        raise DimensionError("CFA image dimensions must be even, got %dx%d" % (w, h))


def check_out(out, shape, dtype):
    if out.shape != tuple(shape):
        raise SizeMismatch("output shape %r does not match required %r" % (out.shape, tuple(shape)))
    if out.dtype != dtype:
        raise TypeMismatch("output type %s does not match required %s" % (out.dtype, numpy.dtype(dtype)))
