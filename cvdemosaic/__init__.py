# -*- coding: utf-8 -*-
from ._version import __version__
