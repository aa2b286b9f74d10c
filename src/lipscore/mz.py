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

"""
Module for arithmetics with m/z values and adduct ions.

Adducts are given by their notation (e.g. ``[2M+Na]+``, ``[M+2H]2+``)
and a signed mass shift. The shift is subtracted from the neutral mass
to get the m/z, hence adducts adding positive ions have negative
shifts, e.g. ``[M+H]+`` has ``-1.007276``. The shift in the catalog is
the total for all charges, here it is divided by the charge.
"""

import re
import math
import collections


remultimer = re.compile(r'\[([0-9]*)M')
recharge = re.compile(r'([0-9]*)([+-])\]?$')


def extract_multimer(notation):
    """
    Extracts the number of molecules in the adduct, i.e. the number
    directly before the ``M``.

    Parameters
    ----------
    notation : str
        Adduct notation, e.g. ``[2M+H]+``.

    Returns
    -------
    ``int``, 1 if no number or no ``[M`` found at all.
    """
    
    match = remultimer.search(notation)
    
    if match and match.group(1):
        
        return int(match.group(1))
    
    return 1


def extract_charge(notation):
    """
    Extracts the charge of the adduct, i.e. the number directly before
    the trailing ``+`` or ``-`` sign.

    Parameters
    ----------
    notation : str
        Adduct notation, e.g. ``[M+2H]2+``.

    Returns
    -------
    ``int``, 1 if no number or no trailing sign found at all.
    """
    
    match = recharge.search(notation)
    
    if match and match.group(1):
        
        return int(match.group(1))
    
    return 1


def _shift_per_charge(shift, charge):
    
    return shift / charge


def mz_from_mass(mass, adduct):
    """
    Calculates the m/z of a neutral monoisotopic mass in the form of
    an adduct.

    Parameters
    ----------
    mass : float
        Neutral monoisotopic mass (M).
    adduct : Adduct, tuple
        An ``Adduct`` or a ``(notation, shift)`` tuple.

    Returns
    -------
    The expected m/z as ``float``.
    """
    
    notation, shift = adduct
    multimer = extract_multimer(notation)
    charge = extract_charge(notation)
    shift = _shift_per_charge(shift, charge)
    
    # with multimer or charge equal to one these reduce to
    # M - shift, M / z - shift and M * n - shift
    return (mass * multimer) / charge - shift


def mass_from_mz(mz, adduct):
    """
    Calculates the neutral monoisotopic mass from the m/z of an adduct.
    The exact inverse of ``mz_from_mass``.

    Parameters
    ----------
    mz : float
        The observed m/z.
    adduct : Adduct, tuple
        An ``Adduct`` or a ``(notation, shift)`` tuple.

    Returns
    -------
    The neutral monoisotopic mass as ``float``.
    """
    
    notation, shift = adduct
    multimer = extract_multimer(notation)
    charge = extract_charge(notation)
    shift = _shift_per_charge(shift, charge)
    
    return ((mz + shift) * charge) / multimer


def ppm_error(experimental, theoretical):
    """
    Difference between an experimental and a theoretical mass in ppm,
    rounded half up to an integer.

    Parameters
    ----------
    experimental : float
        Measured mass or m/z.
    theoretical : float
        Expected mass or m/z, must be positive.

    Returns
    -------
    ``int``.
    """
    
    if not theoretical > 0:
        
        raise ValueError(
            'Theoretical mass must be positive, got %s' % theoretical
        )
    
    error = abs((experimental - theoretical) * 1e6 / theoretical)
    
    return int(math.floor(error + .5))


def delta_from_ppm(mass, ppm):
    """
    Converts a tolerance in ppm to the corresponding absolute mass
    difference at a particular mass.
    """
    
    return abs(mass * ppm / 1e6)


class Adduct(collections.namedtuple('AdductBase', ['notation', 'shift'])):
    """
    An adduct type: its notation and the mass shift from the catalog.
    Multimer count and charge are always derived from the notation.
    """
    
    __slots__ = ()
    
    @property
    def multimer(self):
        
        return extract_multimer(self.notation)
    
    @property
    def charge(self):
        
        return extract_charge(self.notation)
    
    def mz(self, mass):
        """
        m/z of the neutral mass ``mass`` in the form of this adduct.
        """
        
        return mz_from_mass(mass, self)
    
    def mass(self, mz):
        """
        Neutral mass from the m/z ``mz`` of this adduct.
        """
        
        return mass_from_mz(mz, self)
    
    def __str__(self):
        
        return self.notation
