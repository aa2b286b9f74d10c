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
import collections

import lipscore.common as common


#: Lipid classes in their order of elution, the position is the rank.
LIPID_TYPES = (
    'PG', # phosphatidylglycerol
    'PE', # phosphatidylethanolamine
    'PI', # phosphatidylinositol
    'PA', # phosphatidic acid
    'PS', # phosphatidylserine
    'PC', # phosphatidylcholine
    'TG', # triacylglycerol
)

TYPE_RANK = dict((typ, i) for i, typ in enumerate(LIPID_TYPES))

relipid = re.compile(
    r'^\s*([A-Za-z]+)\s*[\( ]\s*([0-9]+):([0-9]+)\s*\)?\s*$'
)


def type_rank(lipid_type):
    """
    Returns the elution rank of a lipid class.

    Parameters
    ----------
    lipid_type : str
        Lipid class abbreviation, e.g. ``PC``.
    """
    
    if lipid_type not in TYPE_RANK:
        
        raise ValueError('Unknown lipid type: %r' % (lipid_type,))
    
    return TYPE_RANK[lipid_type]


class Lipid(collections.namedtuple(
        'LipidBase',
        ['name', 'lipid_type', 'carbon_count', 'double_bonds_count']
    )):
    """
    A lipid species: its class and the total carbon count and
    unsaturation of its chains.
    """
    
    __slots__ = ()
    
    def __new__(cls, name, lipid_type, carbon_count, double_bonds_count):
        
        type_rank(lipid_type)
        
        return super(Lipid, cls).__new__(
            cls,
            name,
            lipid_type,
            common.to_int(carbon_count),
            common.to_int(double_bonds_count),
        )
    
    @property
    def rank(self):
        
        return TYPE_RANK[self.lipid_type]
    
    def cu_str(self):
        
        return '%u:%u' % (self.carbon_count, self.double_bonds_count)
    
    def __str__(self):
        
        return self.name or '%s(%s)' % (self.lipid_type, self.cu_str())


def str2lipid(name):
    """
    Processes a lipid name of species level like ``PC(34:1)`` or
    ``PE 36:2`` into a ``Lipid`` object.
    """
    
    match = relipid.match(name)
    
    if not match:
        
        raise ValueError('Could not process lipid name: %r' % (name,))
    
    lipid_type, c, u = match.groups()
    
    return Lipid(
        name = name.strip(),
        lipid_type = lipid_type.upper(),
        carbon_count = int(c),
        double_bonds_count = int(u),
    )
