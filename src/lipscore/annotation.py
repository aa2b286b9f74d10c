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

import numpy as np

import lipscore.common as common
import lipscore.lookup as lookup
import lipscore.settings as settings


class Peak(collections.namedtuple('PeakBase', ['mz', 'intensity'])):
    """
    One MS1 signal. Peaks are equal, ordered and hashed by their m/z
    only, hence in a set two peaks with the same m/z collapse into one.
    """
    
    __slots__ = ()
    
    def __new__(cls, mz, intensity = 0.):
        
        return super(Peak, cls).__new__(cls, float(mz), float(intensity))
    
    def __eq__(self, other):
        
        return self.mz == getattr(other, 'mz', other)
    
    def __ne__(self, other):
        
        return not self == other
    
    def __lt__(self, other):
        
        return self.mz < other.mz
    
    def __le__(self, other):
        
        return self.mz <= other.mz
    
    def __gt__(self, other):
        
        return self.mz > other.mz
    
    def __ge__(self, other):
        
        return self.mz >= other.mz
    
    def __hash__(self):
        
        return hash(self.mz)
    
    def __repr__(self):
        
        return 'Peak(mz=%.4f, intensity=%.1f)' % (self.mz, self.intensity)


class Annotation(object):
    
    def __init__(
            self,
            lipid,
            mz,
            intensity,
            rt_min,
            ionmode,
            grouped_signals = (),
        ):
        """
        One candidate identification of a feature as a lipid species.
        
        Parameters
        ----------
        lipid : lipscore.lipid.Lipid
            The lipid proposed for this feature. Only referenced, not
            copied.
        mz : float
            The m/z of the feature.
        intensity : float
            Intensity of the feature.
        rt_min : float
            Retention time in minutes.
        ionmode : str
            Ionization mode, ``pos`` or ``neg`` (or anything recognized
            by ``lipscore.common.ionmode``).
        grouped_signals : iterable
            Peaks grouped together with the feature, ``Peak`` objects or
            ``(mz, intensity)`` tuples. These will be sorted by m/z and
            peaks with identical m/z kept only once.
        """
        
        self.lipid = lipid
        self.mz = mz
        self.intensity = intensity
        self.rt_min = rt_min
        self.ionmode = common.ionmode(ionmode)
        self._adduct = None
        self._score = 0
        self._comparisons_applied = 0
        self._set_grouped_signals(grouped_signals)
    
    def _set_grouped_signals(self, grouped_signals):
        
        peaks = collections.OrderedDict()
        
        for peak in grouped_signals:
            
            peak = peak if isinstance(peak, Peak) else Peak(*peak)
            
            # the first one wins among peaks with the same m/z
            if peak.mz not in peaks:
                
                peaks[peak.mz] = peak
        
        self._grouped_signals = tuple(sorted(peaks.values()))
        self.grouped_mzs = np.array(
            [peak.mz for peak in self._grouped_signals],
            dtype = np.float64,
        )
    
    @property
    def grouped_signals(self):
        
        return self._grouped_signals
    
    @property
    def adduct(self):
        
        return self._adduct
    
    @adduct.setter
    def adduct(self, notation):
        
        if self._adduct is not None and notation != self._adduct:
            
            raise ValueError(
                'Adduct of %s already set to `%s`.' % (self, self._adduct)
            )
        
        self._adduct = notation
    
    @property
    def score(self):
        
        return self._score
    
    @property
    def comparisons_applied(self):
        
        return self._comparisons_applied
    
    def add_score(self, delta, comparisons = 1):
        """
        Adds ``delta`` to the score and counts ``comparisons`` more
        rule matches.
        """
        
        self._score += int(delta)
        self._comparisons_applied += int(comparisons)
    
    @property
    def normalized_score(self):
        """
        The score divided by the number of rule matches, 0 if no rule
        has ever matched this annotation.
        """
        
        if self._comparisons_applied == 0:
            
            return 0.
        
        return self._score / self._comparisons_applied
    
    def base_peak(self, tolerance = None):
        """
        Returns the grouped peak corresponding to the m/z of the
        annotation itself, or ``None``.

        Parameters
        ----------
        tolerance : float
            Absolute m/z tolerance, by default the ``base_peak_tolerance``
            from the settings.
        """
        
        tolerance = (
            settings.get('base_peak_tolerance')
                if tolerance is None else
            tolerance
        )
        
        i = lookup.find(self.grouped_mzs, self.mz, tolerance)
        
        if i is not None:
            
            return self._grouped_signals[i]
    
    def _key(self):
        
        return (self.lipid, self.mz, self.rt_min)
    
    def __eq__(self, other):
        
        return (
            isinstance(other, Annotation) and
            self._key() == other._key()
        )
    
    def __ne__(self, other):
        
        return not self == other
    
    def __hash__(self):
        
        return hash(self._key())
    
    def __repr__(self):
        
        return (
            'Annotation(%s, mz=%.4f, RT=%.2f, adduct=%s, '
            'intensity=%.1f, score=%d)' % (
                getattr(self.lipid, 'name', self.lipid),
                self.mz,
                self.rt_min,
                self.adduct,
                self.intensity,
                self.score,
            )
        )
