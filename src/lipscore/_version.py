#!/usr/bin/env python
# -*- coding: utf-8 -*-

#
#  This file is part of the `lipscore` python module
#
#  Copyright (c) 2015-2019 - EMBL
#
#  File author(s): lipscore developers
#
#  Distributed under the GNU GPLv3 License.
#  See accompanying file LICENSE.txt or copy at
#      http://www.gnu.org/licenses/gpl-3.0.html
#
#  Website: http://denes.omnipathdb.org/
#


import os

_here = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(_here, '__version__')) as _fp:
    
    __version__ = _fp.read().strip()

version_info = tuple(int(i) for i in __version__.split('.'))
__release__ = '.'.join(str(i) for i in version_info[:2])
