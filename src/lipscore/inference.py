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
Infers the adduct type of annotations from the peaks grouped together
with them.
"""

import lipscore.common as common
import lipscore.session as session
import lipscore.settings as settings
import lipscore.adduct as adductmod
import lipscore.mz as mzmod


class AdductInference(object):
    
    def __init__(
            self,
            catalog,
            ppm_tolerance = None,
            base_peak_tolerance = None,
        ):
        """
        Detects the adduct of annotations by looking for a pair of
        grouped peaks which can be explained as two different adducts
        of the same neutral mass.
        
        Parameters
        ----------
        catalog : lipscore.adduct.AdductCatalog, dict
            The adducts to consider. Either an ``AdductCatalog`` or a
            dict with ionization modes as keys and mappings of adduct
            notations to mass shifts as values.
        ppm_tolerance : int
            Highest accepted error in ppm between the m/z of the second
            peak and the m/z predicted for it. By default the
            ``adduct_ppm_tolerance`` from the settings.
        base_peak_tolerance : float
            Absolute m/z tolerance to find the peak of the annotation
            itself among its grouped peaks. By default the
            ``base_peak_tolerance`` from the settings.
        """
        
        self.catalog = self._catalog(catalog)
        self.ppm_tolerance = (
            settings.get('adduct_ppm_tolerance')
                if ppm_tolerance is None else
            ppm_tolerance
        )
        self.base_peak_tolerance = (
            settings.get('base_peak_tolerance')
                if base_peak_tolerance is None else
            base_peak_tolerance
        )
        self.log = session.get_log()
    
    @staticmethod
    def _catalog(catalog):
        
        if isinstance(catalog, adductmod.AdductCatalog):
            
            return catalog
        
        tables = dict(
            (common.ionmode(ionmode), table)
            for ionmode, table in catalog.items()
        )
        
        return adductmod.AdductCatalog(
            pos = tables.get(common.IONMODE_POS),
            neg = tables.get(common.IONMODE_NEG),
        )
    
    def detect(self, annotation):
        """
        Detects the adduct of one annotation and sets its ``adduct``
        attribute if successful.
        
        Returns
        -------
        The adduct notation or ``None`` if no adduct could be detected.
        Annotations which already have an adduct are left unchanged and
        their adduct is returned.
        """
        
        if annotation.adduct is not None:
            
            return annotation.adduct
        
        base = annotation.base_peak(self.base_peak_tolerance)
        
        if base is None:
            
            self.log.msg(
                'No peak found at m/z %.4f among the grouped signals of '
                '%s, no adduct detected.' % (annotation.mz, annotation),
                level = 1,
            )
            return None
        
        adducts = self.catalog.get(annotation.ionmode)
        
        for peak in annotation.grouped_signals:
            
            if peak == base:
                
                continue
            
            notation = self.detect_pair(
                base,
                peak,
                adducts,
                self.ppm_tolerance,
            )
            
            if notation is not None:
                
                self.log.msg(
                    'Adduct %s detected for %s from the peaks at '
                    'm/z %.4f and %.4f.' % (
                        notation,
                        annotation,
                        base.mz,
                        peak.mz,
                    ),
                    level = 1,
                )
                annotation.adduct = notation
                
                return notation
        
        self.log.msg(
            'No pair of adducts explains the grouped signals of %s.' % (
                annotation
            ),
            level = 1,
        )
    
    @staticmethod
    def detect_pair(peak1, peak2, adducts, ppm_tolerance = 10):
        """
        Tests all ordered pairs of different adducts whether ``peak1``
        as the first and ``peak2`` as the second adduct could originate
        from the same neutral mass.
        
        Parameters
        ----------
        peak1 : lipscore.annotation.Peak
            The peak of the annotation.
        peak2 : lipscore.annotation.Peak
            Another peak grouped with it.
        adducts : list
            ``lipscore.mz.Adduct`` objects or ``(notation, shift)`` pairs,
            the order of the tests follows the order of this list.
        ppm_tolerance : int
            Highest accepted error in ppm.
        
        Returns
        -------
        The notation of the adduct of the first peak from the first
        matching pair, ``None`` if none of the pairs match.
        """
        
        for adduct1 in adducts:
            
            mass = mzmod.mass_from_mz(peak1.mz, adduct1)
            
            for adduct2 in adducts:
                
                if adduct1[0] == adduct2[0]:
                    
                    continue
                
                theoretical_mz = mzmod.mz_from_mass(mass, adduct2)
                
                if theoretical_mz <= 0:
                    
                    continue
                
                if (
                    mzmod.ppm_error(peak2.mz, theoretical_mz) <=
                    ppm_tolerance
                ):
                    
                    return adduct1[0]
    
    def run(self, annotations):
        """
        Detects the adducts for all annotations which don't have one yet.
        
        Returns
        -------
        The number of annotations with newly detected adducts.
        """
        
        detected = 0
        total = 0
        
        for annotation in annotations:
            
            total += 1
            
            if annotation.adduct is not None:
                
                continue
            
            if self.detect(annotation) is not None:
                
                detected += 1
        
        self.log.msg(
            'Adduct inference: detected adducts for %u out of %u '
            'annotations.' % (detected, total)
        )
        
        return detected
