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

import re
import numbers


class _const:
    """
    Namespace with attributes which can be set only once.
    """
    
    class ConstError(TypeError):
        
        pass
    
    def __setattr__(self, name, value):
        
        if name in self.__dict__:
            
            raise self.ConstError("Can't rebind const(%s)" % name)
        
        self.__dict__[name] = value


IONMODE_POS = 'pos'
IONMODE_NEG = 'neg'

IONMODES = (IONMODE_POS, IONMODE_NEG)

reint = re.compile(r'([-]?[0-9]+[\.]?[0-9]*)')


def guess_ionmode(*args):
    """
    Returns the first ionization mode recognized in the arguments.
    Anything containing `pos` (e.g. ``'POSITIVE'``, ``'pos'``) is
    positive mode, anything containing `neg` is negative mode.

    Parameters
    ----------
    *args :
        Strings or other objects, non strings are ignored.

    Returns
    -------
    ``'pos'``, ``'neg'`` or ``None``.
    """
    
    for a in args:
        
        if hasattr(a, 'lower'):
            
            a = a.lower()
            
            if IONMODE_POS in a:
                
                return IONMODE_POS
                
            elif IONMODE_NEG in a:
                
                return IONMODE_NEG


def ionmode(value):
    """
    Normalizes an ionization mode label. Raises ``ValueError`` if
    the mode can not be recognized.
    """
    
    mode = guess_ionmode(value)
    
    if mode is None:
        
        raise ValueError('Unknown ionization mode: %r' % (value,))
    
    return mode


def to_int(num):
    """Converts a number or a string starting with a number to ``int``.

    Parameters
    ----------
    num :
        Integer, float with integer value (numpy scalars too)
        or string starting with a number.

    Returns
    -------
    ``int``.
    """
    
    if isinstance(num, numbers.Integral):
        
        return int(num)
    
    if isinstance(num, numbers.Real):
        
        if float(num).is_integer():
            
            return int(num)
        
        raise ValueError('Integer expected: %r' % (num,))
    
    match = reint.match(num.strip()) if isinstance(num, str) else None
    
    if match:
        
        return int(float(match.groups(0)[0]))
        
    else:
        
        raise ValueError('Integer expected: %r' % (num,))
