#!/usr/bin/env python
# -*- coding: utf-8 -*-

#
#  This file is part of the `lipscore` python module
#
#  Copyright (c) 2015-2019 - EMBL
#
#  File author(s): lipscore developers
#
#  Distributed under the GPLv3 License.
#  See accompanying file LICENSE.txt or copy at
#      http://www.gnu.org/licenses/gpl-3.0.html
#
#  Website: http://denes.omnipathdb.org/
#

import os
from setuptools import setup

with open(os.path.join('src', 'lipscore', '__version__'), 'r') as f:
    __version__ = f.read().strip()

with open('README.rst') as f:
    readme = f.read()

with open('HISTORY.rst') as f:
    history = f.read()

setup(
    name = 'lipscore',
    version = __version__,
    long_description = readme + '\n\n' + history,
    long_description_content_type = 'text/x-rst',
    keywords = [
        'lipidomics',
        'lipids',
        'mass spectrometry',
        'MS',
        'LC MS',
        'adducts',
        'retention time',
        'annotation',
        'glycerophospholipids',
        'metabolomics',
    ],
    description = 'Confidence scoring of lipid annotations '
        'from LC MS data',
    license = 'GPLv3',
    platforms = [
        'Linux',
        'Unix',
        'MacOSX',
        'Windows',
    ],
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Natural Language :: English',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Topic :: Scientific/Engineering :: Chemistry'
    ],
    package_dir = {'': 'src'},
    packages = [
        'lipscore',
    ],
    package_data = {
        'lipscore': ['__version__'],
    },
    include_package_data = True,
    install_requires = [
        'numpy',
        'tqdm',
    ],
    extras_require = {
        'tests': [
            'pytest',
        ],
    }
)
