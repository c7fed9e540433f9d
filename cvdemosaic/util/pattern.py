# -*- coding: utf-8 -*-
import numpy

from cvdemosaic.errors import PatternError

KNOWN_PATTERNS = ('rggb', 'bggr', 'grbg', 'gbrg')

COLORS = 'rgb'

# raw_pattern channel indices, same numbering as libraw's raw_colors
CHANNEL_INDEX = {'r': 0, 'g': 1, 'b': 2}

# Pattern strings are laid out in row-major order over the 2x2 tile:
#
#   index 0 -> (x=0, y=0)   index 1 -> (x=1, y=0)
#   index 2 -> (x=0, y=1)   index 3 -> (x=1, y=1)
#
# Offsets, masks and quadrant blocks all follow this convention.
TILE_OFFSETS = ((0, 0), (1, 0), (0, 1), (1, 1))

ORIENTATIONS = ('row', 'col')


def color_key(color):
    if not color:
        raise PatternError("empty color name")
    c = color[0].lower()
    if c not in COLORS:
        raise PatternError("unknown color %r, expected one of red, green, blue" % (color,))
    return c


class CFAPattern(object):
    """ A validated 2x2 Bayer pattern such as ``rggb``.

    Construction normalizes case and rejects anything that isn't
    exactly four characters with one red, one blue and two green tiles.
    Instances are immutable and hashable, so they can key caches.
    """

    __slots__ = ('_tiles',)

    def __init__(self, pattern):
        if isinstance(pattern, CFAPattern):
            tiles = pattern.tiles
        else:
            if not isinstance(pattern, str):
                raise PatternError("CFA pattern must be a string, got %r" % (pattern,))
            tiles = pattern.lower()
            if len(tiles) != 4:
                raise PatternError("CFA pattern must have 4 characters, got %r" % (pattern,))
            if any(c not in COLORS for c in tiles):
                raise PatternError("CFA pattern %r contains colors other than r, g, b" % (pattern,))
            if tiles.count('r') != 1 or tiles.count('b') != 1 or tiles.count('g') != 2:
                raise PatternError("CFA pattern %r must hold one r, one b and two g" % (pattern,))
        object.__setattr__(self, '_tiles', tiles)

    def __setattr__(self, name, value):
        raise AttributeError("CFAPattern is immutable")

    def __reduce__(self):
        return (CFAPattern, (self._tiles,))

    @property
    def tiles(self):
        return self._tiles

    def __str__(self):
        return self._tiles

    def __repr__(self):
        return 'CFAPattern(%r)' % (self._tiles,)

    def __eq__(self, other):
        if isinstance(other, CFAPattern):
            return self._tiles == other._tiles
        return NotImplemented

    def __hash__(self):
        return hash(self._tiles)

    def color_at(self, x, y):
        return self._tiles[y * 2 + x]

    def offset(self, color):
        c = color_key(color)
        for tile, (x, y) in zip(self._tiles, TILE_OFFSETS):
            if tile == c:
                return x, y

    def offsets(self, color):
        c = color_key(color)
        return [xy for tile, xy in zip(self._tiles, TILE_OFFSETS) if tile == c]

    def tile_mask(self, color):
        c = color_key(color)
        return numpy.array([t == c for t in self._tiles], numpy.bool_).reshape((2, 2))

    def adjacent_mask(self, color, orientation):
        """ Mask of green tiles whose neighbor along the given orientation
        (``'row'`` or ``'col'``) is of the given color.
        """
        c = color_key(color)
        if orientation not in ORIENTATIONS:
            raise ValueError("orientation must be one of %r" % (ORIENTATIONS,))
        mask = numpy.zeros((2, 2), numpy.bool_)
        for x, y in TILE_OFFSETS:
            if orientation == 'row':
                nx, ny = 1 - x, y
            else:
                nx, ny = x, 1 - y
            mask[y, x] = self.color_at(x, y) == 'g' and self.color_at(nx, ny) == c
        return mask

    @property
    def raw_pattern(self):
        return numpy.array([CHANNEL_INDEX[t] for t in self._tiles], numpy.uint8).reshape((2, 2))


def resolve_offset(color, pattern):
    """ Return the (x, y) tile offset of the first tile holding color """
    return CFAPattern(pattern).offset(color)
