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

import time

import tqdm

__all__ = ['Progress']


class Progress(object):
    """
    Wrapper around the progressbar `tqdm` which updates the bar
    in larger chunks and carries a status label.
    """
    
    def __init__(
            self,
            total = None,
            name = 'Progress',
            interval = None,
            status = 'initializing',
            done = 0,
            unit = 'it',
            disable = False,
        ):
        
        self.name = name
        self.total = total
        self.interval = (
            max(int((total or 0) / 100), 1)
                if interval is None else
            interval
        )
        self.done = done
        self.status = status
        self.unit = unit
        self.disable = disable
        self.min_update_interval = 0.1
        self.last_printed_value = 0
        
        self.init_tqdm()
    
    def init_tqdm(self):
        
        self.tqdm = tqdm.tqdm(
            total = self.total,
            desc = self.get_desc(),
            unit_scale = True,
            unit = self.unit,
            disable = self.disable,
        )
        self.last_updated = time.time()
    
    def step(self, step = 1, status = 'busy', force = False):
        """
        Updates the progressbar by the desired number of steps.
        
        :param int step: Number of steps or items.
        """
        
        self.done += step
        
        if force or (
            self.done % self.interval < 1.0 and
            time.time() - self.last_updated > self.min_update_interval
        ):
            
            self.set_status(status)
            
            this_update = max(0, self.done - self.last_printed_value)
            
            if this_update:
                
                self.tqdm.update(int(this_update))
            
            self.last_printed_value = self.done
            self.last_updated = time.time()
    
    def terminate(self, status = 'finished'):
        """
        Terminates the progressbar and destroys the tqdm object.
        """
        
        self.step(
            max((self.total or self.done) - self.done, 0),
            force = True,
            status = status,
        )
        self.tqdm.close()
    
    def set_status(self, status):
        """
        Changes the prefix of the progressbar.
        """
        
        if status != self.status:
            
            self.status = status
            self.tqdm.set_description(self.get_desc())
    
    def get_desc(self):
        """
        Returns a formatted string of the description, consisted of
        the name and the status.
        """
        
        return '%s%s%s' % (
            self.name,
            ' -- ' if len(self.name) else '',
            self.status,
        )
