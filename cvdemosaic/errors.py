# -*- coding: utf-8 -*-


class DemosaicError(ValueError):
    pass


class PatternError(DemosaicError):
    """ Malformed CFA pattern string or unknown color name """


class DimensionError(DemosaicError):
    """ Image shape unsuitable for a 2x2 CFA (odd sizes, wrong rank) """


class RangeError(DemosaicError):
    """ Bayer offset outside of the 2x2 tile """


class SizeMismatch(DemosaicError):
    pass


class TypeMismatch(DemosaicError):
    pass
