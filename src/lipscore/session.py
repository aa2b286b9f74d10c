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
The session holds the logger shared by all modules of the package.
"""

import random
import string

import lipscore.log as log

_session = None


class Session(object):
    
    def __init__(self, label = None, log_verbosity = None):
        
        self.label = label or ''.join(
            random.choice(string.ascii_lowercase + string.digits)
            for _ in range(5)
        )
        self.log = log.Logger(
            'lipscore-%s.log' % self.label,
            verbosity = log_verbosity,
        )
        self.log.msg('Session `%s` started.' % self.label)
    
    def __repr__(self):
        
        return '<lipscore session %s>' % self.label


def new_session(label = None, log_verbosity = None):
    """
    Starts a new session with a new log file and returns it.
    """
    
    global _session
    
    if _session is not None:
        
        _session.log.close()
    
    _session = Session(label, log_verbosity)
    
    return _session


def get_session():
    
    return _session or new_session()


def get_log():
    
    return get_session().log
