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
import lipscore.annotation as annotation
import lipscore.inference as inference
import lipscore.lipid as lipid


class TestAdductInference(object):
    
    @pytest.fixture(autouse = True)
    def auto_inject_fixture(self):
        
        self.pc = lipid.Lipid('PC 34:1', 'PC', 34, 1)
        self.catalog = adduct.default_catalog()
        self.inference = inference.AdductInference(self.catalog)
    
    def annotation(self, mz, peaks, ionmode = 'pos'):
        
        return annotation.Annotation(
            lipid = self.pc,
            mz = mz,
            intensity = 1e6,
            rt_min = 10.0,
            ionmode = ionmode,
            grouped_signals = [(p, 1e5) for p in peaks],
        )
    
    def test_h_and_na(self):
        
        ann = self.annotation(400.2, [400.2, 422.182])
        
        assert self.inference.detect(ann) == '[M+H]+'
        assert ann.adduct == '[M+H]+'
    
    def test_peer_peak_below_base(self):
        
        # the sodium adduct as annotated peak and
        # the protonated one grouped with it
        ann = self.annotation(422.182, [400.2, 422.182])
        
        assert self.inference.detect(ann) == '[M+Na]+'
    
    def test_negative_mode(self):
        
        ann = self.annotation(400.0, [400.0, 435.9767], ionmode = 'neg')
        
        assert self.inference.detect(ann) == '[M-H]-'
        assert ann.adduct == '[M-H]-'
    
    def test_no_base_peak(self):
        
        ann = self.annotation(400.25, [400.2, 422.182])
        
        assert self.inference.detect(ann) is None
        assert ann.adduct is None
    
    def test_only_base_peak(self):
        
        ann = self.annotation(400.2, [400.2])
        
        assert self.inference.detect(ann) is None
        assert ann.adduct is None
    
    def test_out_of_tolerance(self):
        
        # 19 ppm off from the sodium adduct
        ann = self.annotation(400.2, [400.2, 422.19])
        
        assert self.inference.detect(ann) is None
        
        loose = inference.AdductInference(self.catalog, ppm_tolerance = 25)
        
        assert loose.detect(ann) == '[M+H]+'
    
    def test_unrelated_peak_skipped(self):
        
        ann = self.annotation(400.2, [400.2, 410.3, 422.182])
        
        assert self.inference.detect(ann) == '[M+H]+'
    
    def test_detect_pair(self):
        
        adducts = self.catalog.get('pos')
        base = annotation.Peak(400.2)
        
        assert (
            inference.AdductInference.detect_pair(
                base,
                annotation.Peak(422.182),
                adducts,
            ) == '[M+H]+'
        )
        assert (
            inference.AdductInference.detect_pair(
                base,
                annotation.Peak(422.182),
                adducts,
                ppm_tolerance = 0,
            ) == '[M+H]+'
        )
        assert (
            inference.AdductInference.detect_pair(
                base,
                annotation.Peak(450.0),
                adducts,
            ) is None
        )
    
    def test_same_adduct_never_paired(self):
        
        adducts = [('[M+H]+', -1.00727646677)]
        
        assert (
            inference.AdductInference.detect_pair(
                annotation.Peak(400.2),
                annotation.Peak(400.2),
                adducts,
            ) is None
        )
    
    def test_first_match_by_catalog_order(self):
        
        # the same pair explained by two adduct pairs
        catalog = {
            'positive': [
                ('[M+Na]+', -22.98922070209),
                ('[M+H]+', -1.00727646677),
                ('[M+X]+', -22.98922070209),
            ],
        }
        ann = self.annotation(422.182, [400.2, 422.182])
        
        assert inference.AdductInference(catalog).detect(ann) == '[M+Na]+'
        
        ann = self.annotation(422.182, [400.2, 422.182])
        catalog['positive'] = catalog['positive'][::-1]
        
        assert inference.AdductInference(catalog).detect(ann) == '[M+X]+'
    
    def test_catalog_from_dict(self):
        
        inf = inference.AdductInference({
            'pos': adduct.POSITIVE,
            'NEGATIVE': adduct.NEGATIVE,
        })
        
        assert len(inf.catalog) == len(self.catalog)
        assert inf.ppm_tolerance == 10
        assert inf.base_peak_tolerance == 0.01
    
    def test_run(self):
        
        annotations = [
            self.annotation(400.2, [400.2, 422.182]),
            self.annotation(400.25, [400.2, 422.182]),
            self.annotation(400.0, [400.0, 435.9767], ionmode = 'neg'),
        ]
        labelled = self.annotation(400.2, [400.2, 422.182])
        labelled.adduct = '[M+H]+'
        annotations.append(labelled)
        
        assert self.inference.run(annotations) == 2
        assert [a.adduct for a in annotations] == [
            '[M+H]+', None, '[M-H]-', '[M+H]+',
        ]
    
    def test_already_labelled(self):
        
        ann = self.annotation(400.2, [400.2, 422.182])
        ann.adduct = '[M+Na]+'
        
        # the existing label is kept, no error
        assert self.inference.detect(ann) == '[M+Na]+'
        assert ann.adduct == '[M+Na]+'
