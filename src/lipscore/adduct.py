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
Catalogs of adduct types with their mass shifts, one table for each
ionization mode. Shifts follow the convention of ``lipscore.mz``:
``mz = M - shift`` for single charged adducts of one molecule.
"""

import re
import collections

import lipscore.common as common
import lipscore.mz as mzmod


#: Mass of a proton
proton = 1.00727646677
#: Mass of an electron
electron = 0.00054857990924

#: Monoisotopic masses of the elements occuring in the adducts
monoiso = {
    'H': 1.00782503223,
    'C': 12.0,
    'N': 14.00307400443,
    'O': 15.99491461957,
    'Na': 22.9897692820,
    'Cl': 34.968852682,
    'K': 38.9637064864,
}

_re_form = re.compile(r'([A-Z][a-z]*)([0-9]*)')


def formula_to_atoms(formula):
    """
    Converts chemical formula string to dict of atom counts.
    
    Parameters
    ----------
    formula : str
        Chemical formula, e.g. ``CH3COOH``.

    Returns
    -------
    ``dict`` with elements as keys and counts as values.
    """
    
    atoms = collections.defaultdict(int)
    
    for elem, cnt in _re_form.findall(formula):
        
        atoms[elem] += int(cnt or '1')
    
    return atoms


def formula_mass(formula):
    """
    Monoisotopic mass of a neutral formula.
    """
    
    return sum(
        monoiso[elem] * cnt
        for elem, cnt in formula_to_atoms(formula).items()
    )


def cation(formula):
    
    return formula_mass(formula) - electron


def anion(formula):
    
    return formula_mass(formula) + electron


#: Adducts in positive mode, in the order they are tried.
POSITIVE = collections.OrderedDict([
    ('[M+H]+',          -proton),
    ('[M+2H]2+',        -2 * proton),
    ('[M+Na]+',         -cation('Na')),
    ('[M+NH4]+',        -cation('NH4')),
    ('[M+K]+',          -cation('K')),
    ('[M+H-H2O]+',      formula_mass('H2O') - proton),
    ('[M+3H]3+',        -3 * proton),
    ('[2M+H]+',         -proton),
    ('[2M+Na]+',        -cation('Na')),
    ('[2M+NH4]+',       -cation('NH4')),
])

#: Adducts in negative mode, in the order they are tried.
NEGATIVE = collections.OrderedDict([
    ('[M-H]-',          proton),
    ('[M+Cl]-',         -anion('Cl')),
    ('[M+HCOOH-H]-',    -(formula_mass('HCOOH') - proton)),
    ('[M+CH3COOH-H]-',  -(formula_mass('CH3COOH') - proton)),
    ('[M-H-H2O]-',      formula_mass('H2O') + proton),
    ('[M-2H]2-',        2 * proton),
    ('[M-3H]3-',        3 * proton),
    ('[2M-H]-',         proton),
    ('[2M+HCOOH-H]-',   -(formula_mass('HCOOH') - proton)),
])


class AdductCatalog(object):
    
    def __init__(self, pos = None, neg = None):
        """
        Adduct types with their mass shifts for the two ionization
        modes. The catalog can not be modified after creation.
        
        Parameters
        ----------
        pos : dict, list
            Mapping of adduct notations to mass shifts or a list of
            ``(notation, shift)`` pairs for positive mode. The order
            of the items is the order the adducts will be tried.
        neg : dict, list
            Same for negative mode.
        """
        
        self._tables = {
            common.IONMODE_POS: self._table(pos),
            common.IONMODE_NEG: self._table(neg),
        }
    
    @staticmethod
    def _table(adducts):
        
        adducts = adducts or ()
        
        if hasattr(adducts, 'items'):
            
            adducts = adducts.items()
        
        return tuple(
            mzmod.Adduct(notation, float(shift))
            for notation, shift in adducts
        )
    
    def get(self, ionmode):
        """
        Returns the table of adducts for one ionization mode as a tuple
        of ``lipscore.mz.Adduct`` objects.
        
        Parameters
        ----------
        ionmode : str
            Anything recognized by ``lipscore.common.ionmode``,
            e.g. ``'pos'`` or ``'NEGATIVE'``.
        """
        
        return self._tables[common.ionmode(ionmode)]
    
    __getitem__ = get
    
    def shift(self, notation, ionmode):
        """
        Returns the mass shift of one adduct or ``None`` if it is
        not in the catalog.
        """
        
        for adduct in self.get(ionmode):
            
            if adduct.notation == notation:
                
                return adduct.shift
    
    def __iter__(self):
        
        for ionmode in common.IONMODES:
            
            for adduct in self._tables[ionmode]:
                
                yield ionmode, adduct
    
    def __len__(self):
        
        return sum(len(table) for table in self._tables.values())
    
    def __repr__(self):
        
        return '<Adduct catalog: %u positive, %u negative>' % (
            len(self._tables[common.IONMODE_POS]),
            len(self._tables[common.IONMODE_NEG]),
        )


def default_catalog():
    """
    Returns a new catalog with the built in adduct tables.
    """
    
    return AdductCatalog(pos = POSITIVE, neg = NEGATIVE)
