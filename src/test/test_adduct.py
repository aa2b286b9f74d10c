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

import pytest

import lipscore.adduct as adduct
import lipscore.mz as mz


class TestAdduct(object):
    
    @pytest.fixture(autouse = True)
    def auto_inject_fixture(self):
        
        self.catalog = adduct.default_catalog()
    
    def test_formula_mass(self):
        
        assert adduct.formula_to_atoms('CH3COOH') == {'C': 2, 'H': 4, 'O': 2}
        assert adduct.formula_mass('H2O') == pytest.approx(18.0105647)
        assert adduct.cation('Na') == pytest.approx(22.9892207)
        assert adduct.anion('Cl') == pytest.approx(34.9694013)
    
    def test_default_tables(self):
        
        assert adduct.POSITIVE['[M+H]+'] == pytest.approx(-1.0072765)
        assert adduct.POSITIVE['[M+Na]+'] == pytest.approx(-22.9892207)
        assert adduct.POSITIVE['[M+NH4]+'] == pytest.approx(-18.0338256)
        assert adduct.NEGATIVE['[M-H]-'] == pytest.approx(1.0072765)
        assert adduct.NEGATIVE['[M+HCOOH-H]-'] == pytest.approx(-44.9982028)
        assert list(adduct.POSITIVE.keys())[0] == '[M+H]+'
        assert list(adduct.NEGATIVE.keys())[0] == '[M-H]-'
    
    def test_adducts_give_positive_mz(self):
        
        # m/z above zero for a usual lipid mass, and growing
        # with the mass
        for ionmode, add in self.catalog:
            
            assert add.mz(700.0) > 0
            assert add.mz(800.0) > add.mz(700.0)
    
    def test_get(self):
        
        pos = self.catalog.get('pos')
        
        assert pos == self.catalog.get('POSITIVE')
        assert pos == self.catalog['positive']
        assert all(isinstance(a, mz.Adduct) for a in pos)
        assert [a.notation for a in pos] == list(adduct.POSITIVE.keys())
        assert (
            [a.notation for a in self.catalog.get('neg')] ==
            list(adduct.NEGATIVE.keys())
        )
    
    def test_unknown_ionmode(self):
        
        with pytest.raises(ValueError):
            
            self.catalog.get('zwitterion')
    
    def test_custom_catalog(self):
        
        catalog = adduct.AdductCatalog(
            pos = [('[M+Na]+', -22.989218), ('[M+H]+', -1.007276)],
        )
        
        assert len(catalog) == 2
        assert catalog.get('neg') == ()
        assert catalog.get('pos')[0].notation == '[M+Na]+'
        assert catalog.shift('[M+H]+', 'pos') == -1.007276
        assert catalog.shift('[M+H]+', 'neg') is None
        assert repr(catalog) == '<Adduct catalog: 2 positive, 0 negative>'
    
    def test_catalog_is_a_copy(self):
        
        table = {'[M+H]+': -1.007276}
        catalog = adduct.AdductCatalog(pos = table)
        table['[M+Na]+'] = -22.989218
        
        assert len(catalog.get('pos')) == 1
