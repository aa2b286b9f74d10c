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

import collections

import lipscore.common as common

_defaults = {
    # Absolute m/z tolerance for finding the peak among the grouped
    # signals which corresponds to the annotated m/z itself.
    'base_peak_tolerance': 0.01,
    # Highest accepted difference in ppm between the m/z of a grouped
    # peak and the m/z predicted from the base peak under another
    # adduct.
    'adduct_ppm_tolerance': 10,
    # Messages at and below this level are written into the logfile.
    'log_verbosity': 0,
    # Messages at and below this level are printed to the console too.
    # -1 means nothing goes to the console.
    'console_level': -1,
    # Directory for the log files, relative to the working directory.
    'logdir': 'lipscore_log',
    # Show a progressbar while evaluating the annotation pairs.
    # Useful only for populations of several thousands.
    'progress': False,
}


def reset_all():
    """
    Rebuilds the ``settings`` namespace from the defaults.
    """
    
    settings = collections.namedtuple('Settings', list(_defaults.keys()))
    
    for k in _defaults.keys():
        
        setattr(settings, k, getattr(defaults, k))
    
    globals()['settings'] = settings


def setup(**kwargs):
    """
    Sets one or more parameters.

    Parameters
    ----------
    **kwargs :
        Parameter names and their new values.
    """
    
    for param, value in kwargs.items():
        
        setattr(settings, param, value)


def get(param):
    """
    Returns the current value of a parameter or ``None`` if it
    does not exist.

    Parameters
    ----------
    param : str
        Name of the parameter.
    """
    
    if hasattr(settings, param):
        
        return getattr(settings, param)


def get_default(param):
    """
    Returns the default value of a parameter.

    Parameters
    ----------
    param : str
        Name of the parameter.
    """
    
    if hasattr(defaults, param):
        
        return getattr(defaults, param)


def reset(param):
    """
    Sets a parameter back to its default value.

    Parameters
    ----------
    param : str
        Name of the parameter.
    """
    
    setup(**{param: get_default(param)})


defaults = common._const()

for k, v in _defaults.items():
    
    setattr(defaults, k, v)

reset_all()
