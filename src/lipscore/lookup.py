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

import numpy as np


def find(a, m, t = 0.01):
    """
    Finds the value closest to a reference value in a one dimensional
    sorted numpy array of floats, within an absolute range of tolerance.
    If the array contains more identical elements only the index of
    the first is returned.

    Parameters
    ----------
    a : numpy.array
        Sorted one dimensional float array.
    m : float
        Value to lookup.
    t : float
        Range of tolerance, the difference must be lower than this.
        (Default value = 0.01)

    Returns
    -------
    Index of the closest value, None if no value found in within tolerance.
    """
    
    a = np.asarray(a)
    
    iu = a.searchsorted(m)
    
    dl = du = np.inf
    
    if iu < len(a):
        
        du = abs(a[iu] - m)
    
    if iu != 0:
        
        dl = abs(m - a[iu - 1])
    
    if dl <= du:
        
        if dl < t:
            
            return int(iu - 1)
    
    elif du < t:
        
        return int(iu)
