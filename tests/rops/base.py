import unittest
import numpy

from cvdemosaic import config
from cvdemosaic.rops import base
from cvdemosaic.util.nullpool import NullPool
from cvdemosaic.util.pattern import CFAPattern
from cvdemosaic.errors import DimensionError, PatternError


class ParamRop(base.BaseRop):
    flag = False
    size = 3
    scale = 1.5
    name = 'x'


class ScaleChannelRop(base.PerChannelRop):

    factor = 2.0

    def process_channel(self, data, detected=None, channel=None):
        if channel == (0, 0):
            return data * self.factor
        return data


class BaseRopTest(unittest.TestCase):

    def test_effective_roi_no_margin(self):
        class MockRop(base.BaseRop):
            PROCESSING_MARGIN = 0

        rop = MockRop('rggb')

        exp_roi = in_roi = (10, 20, 30, 40)
        eff_roi = rop.effective_roi(in_roi)
        self.assertEqual(exp_roi, eff_roi)

        in_roi = (11, 21, 31, 41)
        exp_roi = (10, 20, 32, 42)
        eff_roi = rop.effective_roi(in_roi)
        self.assertEqual(exp_roi, eff_roi)

    def test_effective_roi_margin(self):
        class MockRop(base.BaseRop):
            PROCESSING_MARGIN = 3

        rop = MockRop('rggb')

        in_roi = (10, 20, 30, 40)
        exp_roi = (6, 16, 34, 44)
        eff_roi = rop.effective_roi(in_roi)
        self.assertEqual(exp_roi, eff_roi)

        in_roi = (1, 2, 30, 40)
        exp_roi = (0, 0, 32, 40)
        eff_roi = rop.effective_roi(in_roi, shape=(32, 40))
        self.assertEqual(exp_roi, eff_roi)

    def test_params(self):
        rop = ParamRop('rggb', flag='1', size='7', scale=2, name=5)
        self.assertIs(rop.flag, True)
        self.assertEqual(rop.size, 7)
        self.assertIsInstance(rop.scale, float)
        self.assertEqual(rop.scale, 2.0)
        self.assertEqual(rop.name, '5')

        rop = ParamRop('rggb')
        self.assertIs(rop.flag, False)
        self.assertEqual(rop.size, 3)

        self.assertRaises(TypeError, ParamRop, 'rggb', nosuchparam=1)

    def test_pattern(self):
        rop = ParamRop('GBRG')
        self.assertEqual(rop.pattern, CFAPattern('gbrg'))
        self.assertEqual(rop.raw_pattern.tolist(), [[1, 2], [0, 1]])
        self.assertEqual(rop.rmask.tolist(), [[False, False], [True, False]])
        self.assertEqual(rop.gmask.tolist(), [[True, False], [False, True]])
        self.assertEqual(rop.bmask.tolist(), [[False, True], [False, False]])
        self.assertRaises(PatternError, ParamRop, 'gbr')

    def test_default_pattern(self):
        self.assertEqual(ParamRop().pattern, CFAPattern(config.default_pattern))

    def test_pool(self):
        pool = NullPool()
        self.assertIs(ParamRop(default_pool=pool).pool, pool)


class PerChannelRopTest(unittest.TestCase):

    def test_correct(self):
        data = numpy.full((4, 6), 100, numpy.uint8)
        rop = ScaleChannelRop('rggb', default_pool=NullPool(), factor=3)
        rv = rop.correct(data)
        self.assertIs(rv, data)
        # float results are rounded and clipped to the data type
        self.assertTrue((data[0::2, 0::2] == 255).all())
        self.assertTrue((data[1::2, :] == 100).all())
        self.assertTrue((data[0::2, 1::2] == 100).all())

    def test_process_method(self):
        data = numpy.full((4, 4), 10, numpy.uint16)
        rop = ScaleChannelRop('rggb', default_pool=NullPool())
        rop.correct(data, process_method=lambda d, detected, channel: d * 0.25)
        self.assertTrue((data == 2).all())

    def test_roi(self):
        data = numpy.full((8, 8), 10, numpy.uint16)
        rop = ScaleChannelRop('rggb', default_pool=NullPool())
        rv = rop.correct(data, roi=(2, 2, 4, 4))
        self.assertIs(rv, data)
        self.assertTrue((data[2:4:2, 2:4:2] == 20).all())
        self.assertEqual(int(data.sum()), 10 * 64 + 10)

    def test_pool_keyword(self):
        class NoDefaultPoolRop(ScaleChannelRop):
            @property
            def pool(self):
                raise AssertionError("default pool used")

        data = numpy.full((4, 4), 10, numpy.uint16)
        NoDefaultPoolRop('rggb').correct(data, pool=NullPool())
        self.assertTrue((data[0::2, 0::2] == 20).all())

    def test_saturate_int32(self):
        data = numpy.full((4, 4), 2**30, numpy.int32)
        ScaleChannelRop('rggb', default_pool=NullPool(), factor=4).correct(data)
        self.assertTrue((data[0::2, 0::2] == 2**31 - 1).all())
        self.assertTrue((data[1::2, :] == 2**30).all())

    def test_errors_propagate(self):
        class FailingRop(base.PerChannelRop):
            def process_channel(self, data, detected=None, channel=None):
                raise RuntimeError("boom")

        rop = FailingRop('rggb', default_pool=NullPool())
        self.assertRaises(RuntimeError, rop.correct, numpy.zeros((4, 4)))
        self.assertRaises(DimensionError, rop.correct, numpy.zeros((3, 4)))
