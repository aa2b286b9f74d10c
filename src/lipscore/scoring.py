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
Scores annotations by their consistency with all other annotations of
the same experiment. Within one lipid class longer chains and fewer
double bonds elute later, and the lipid classes elute in a fixed
order. Pairs of annotations which follow these trends increase each
other's score, pairs which contradict them decrease it.
"""

import itertools
import operator
import collections

import numpy as np

import lipscore.session as session
import lipscore.settings as settings
import lipscore.progress as progressmod
import lipscore.lipid as lipidmod


class PopulationError(ValueError):
    
    pass


Rule = collections.namedtuple(
    'Rule',
    ['name', 'condition', 'rt_condition', 'delta'],
)


def fewer_carbons(lipid1, lipid2):
    """
    Same class and unsaturation, the second has fewer carbons.
    """
    
    return (
        lipid1.lipid_type == lipid2.lipid_type and
        lipid1.double_bonds_count == lipid2.double_bonds_count and
        lipid2.carbon_count < lipid1.carbon_count
    )


def more_double_bonds(lipid1, lipid2):
    """
    Same class and carbon count, the second has more double bonds.
    """
    
    return (
        lipid1.lipid_type == lipid2.lipid_type and
        lipid2.double_bonds_count > lipid1.double_bonds_count and
        lipid1.carbon_count == lipid2.carbon_count
    )


def earlier_class(lipid1, lipid2):
    """
    Same carbon count and unsaturation, the second is of a class
    with lower elution rank.
    """
    
    return (
        lipid1.lipid_type != lipid2.lipid_type and
        lipidmod.type_rank(lipid2.lipid_type) <
        lipidmod.type_rank(lipid1.lipid_type) and
        lipid1.double_bonds_count == lipid2.double_bonds_count and
        lipid1.carbon_count == lipid2.carbon_count
    )


def elutes_earlier(annotation1, annotation2):
    
    return operator.lt(annotation2.rt_min, annotation1.rt_min)


def elutes_later(annotation1, annotation2):
    
    return operator.gt(annotation2.rt_min, annotation1.rt_min)


RULES = (
    Rule('fewer_carbons_elutes_earlier', fewer_carbons, elutes_earlier, 1),
    Rule(
        'more_double_bonds_elutes_earlier',
        more_double_bonds,
        elutes_earlier,
        1,
    ),
    Rule('earlier_class_elutes_earlier', earlier_class, elutes_earlier, 1),
    Rule('fewer_carbons_elutes_later', fewer_carbons, elutes_later, -1),
    Rule(
        'more_double_bonds_elutes_later',
        more_double_bonds,
        elutes_later,
        -1,
    ),
    Rule('earlier_class_elutes_later', earlier_class, elutes_later, -1),
)


class ConsistencyScorer(object):
    
    def __init__(self, annotations, rules = None, progress = None):
        """
        Evaluates the retention time consistency rules for all ordered
        pairs of annotations and accumulates the results in the
        ``score`` and ``comparisons_applied`` of the annotations.
        
        Parameters
        ----------
        annotations : list
            ``lipscore.annotation.Annotation`` objects, all annotations
            from one experiment.
        rules : tuple
            ``Rule`` objects, by default ``RULES``.
        progress : bool
            Show a progressbar. By default the ``progress`` value
            from the settings.
        """
        
        self.annotations = list(annotations)
        self.rules = RULES if rules is None else tuple(rules)
        self.progress = (
            settings.get('progress')
                if progress is None else
            progress
        )
        self.log = session.get_log()
    
    def __len__(self):
        
        return len(self.annotations)
    
    def validate(self):
        """
        Checks if all annotations have all attributes necessary for
        scoring. Raises ``PopulationError`` at the first one with
        missing data.
        """
        
        for i, annotation in enumerate(self.annotations):
            
            lipid = getattr(annotation, 'lipid', None)
            
            if lipid is None:
                
                raise PopulationError(
                    'Annotation #%u has no lipid.' % i
                )
            
            for attr in ('lipid_type', 'carbon_count', 'double_bonds_count'):
                
                if getattr(lipid, attr, None) is None:
                    
                    raise PopulationError(
                        'The lipid of annotation #%u has no `%s`.' % (
                            i,
                            attr,
                        )
                    )
            
            if lipid.lipid_type not in lipidmod.TYPE_RANK:
                
                raise PopulationError(
                    'The lipid of annotation #%u is of unknown '
                    'type: `%s`.' % (i, lipid.lipid_type)
                )
            
            if getattr(annotation, 'rt_min', None) is None:
                
                raise PopulationError(
                    'Annotation #%u has no retention time.' % i
                )
    
    def evaluate_pair(self, annotation1, annotation2):
        """
        Returns the list of rules matching the ordered pair of
        annotations. Does not change the annotations.
        """
        
        lipid1 = annotation1.lipid
        lipid2 = annotation2.lipid
        
        return [
            rule
            for rule in self.rules
            if (
                rule.condition(lipid1, lipid2) and
                rule.rt_condition(annotation1, annotation2)
            )
        ]
    
    def run(self):
        """
        Evaluates all ordered pairs of different annotations.
        The deltas are summed up for each annotation and added to
        its score at the end. Calling this twice doubles the scores.
        
        Returns
        -------
        The number of rule matches.
        """
        
        self.validate()
        
        n = len(self.annotations)
        scores = np.zeros(n, dtype = np.int64)
        counts = np.zeros(n, dtype = np.int64)
        matches = 0
        
        self.log.msg('Scoring %u annotations pairwise.' % n)
        
        prg = progressmod.Progress(
            total = n,
            name = 'Scoring annotations',
            disable = not self.progress,
        )
        
        for i, j in itertools.product(range(n), repeat = 2):
            
            if j == 0:
                
                prg.step()
            
            annotation1 = self.annotations[i]
            annotation2 = self.annotations[j]
            
            if annotation1 is annotation2:
                
                continue
            
            for rule in self.evaluate_pair(annotation1, annotation2):
                
                scores[i] += rule.delta
                scores[j] += rule.delta
                counts[i] += 1
                counts[j] += 1
                matches += 1
                
                if self.log.verbosity >= 2:
                    
                    self.log.msg(
                        'Rule `%s` matches %s and %s.' % (
                            rule.name,
                            annotation1,
                            annotation2,
                        ),
                        level = 2,
                    )
        
        prg.terminate()
        
        for annotation, score, count in zip(self.annotations, scores, counts):
            
            if count:
                
                annotation.add_score(score, count)
        
        self.log.msg(
            'Scoring finished, %u rule matches among %u annotations.' % (
                matches,
                n,
            )
        )
        
        return matches
    
    def normalized_scores(self):
        """
        Returns an array with the normalized scores of the annotations.
        """
        
        return np.array(
            [annotation.normalized_score for annotation in self.annotations],
            dtype = np.float64,
        )
    
    def score_table(self):
        """
        Returns a list of tuples with the annotation, its score, number
        of rule matches and normalized score.
        """
        
        return [
            (
                annotation,
                annotation.score,
                annotation.comparisons_applied,
                annotation.normalized_score,
            )
            for annotation in self.annotations
        ]
