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
Plain text logging into one file per session.

Every message has a level: the lower the more important. Messages up to
the ``verbosity`` of the logger are written into the file, messages up
to its ``console_level`` are printed to stdout as well.
"""

import os
import sys
import time
import textwrap

import lipscore.settings as settings


class Logger(object):
    
    timefmt = '%Y-%m-%d %H:%M:%S'
    
    def __init__(
            self,
            fname,
            verbosity = None,
            console_level = None,
            logdir = None,
            max_width = 79,
            flush_interval = 2,
        ):
        """
        fname : str
            Name of the log file within ``logdir``.
        verbosity : int
            Highest level written into the file. By default
            ``log_verbosity`` from the settings.
        console_level : int
            Highest level also printed to the console. By default
            ``console_level`` from the settings.
        logdir : str
            Directory of the log file, created if necessary. By default
            ``logdir`` from the settings.
        """
        
        self.verbosity = self._param(verbosity, 'log_verbosity')
        self.console_level = self._param(console_level, 'console_level')
        self.logdir = self._param(logdir, 'logdir') or 'lipscore_log'
        self.flush_interval = flush_interval
        # continuation lines aligned after the timestamp
        self.wrapper = textwrap.TextWrapper(
            width = max_width,
            subsequent_indent = ' ' * (len(self.timestamp()) + 3),
            break_long_words = False,
        )
        
        os.makedirs(self.logdir, exist_ok = True)
        self.fname = os.path.join(self.logdir, fname)
        self.fp = open(self.fname, 'w')
        self.last_flush = time.time()
        
        self.msg('Logging into `%s`.' % self.fname)
    
    @staticmethod
    def _param(value, name):
        
        return settings.get(name) if value is None else value
    
    @classmethod
    def timestamp(cls):
        
        return time.strftime(cls.timefmt)
    
    def format(self, text):
        
        return self.wrapper.fill('[%s] %s' % (self.timestamp(), text))
    
    def msg(self, text = '', level = 0):
        """
        Logs a message.

        Parameters
        ----------
        text : str
            The message.
        level : int
            Importance of the message, 0 is the most important.
        """
        
        line = None
        
        if level <= self.verbosity and not self.closed:
            
            line = self.format(text)
            self.fp.write(line + '\n')
            
            if time.time() - self.last_flush > self.flush_interval:
                
                self.flush()
        
        if level <= self.console_level:
            
            sys.stdout.write((line or self.format(text)) + '\n')
            sys.stdout.flush()
    
    @property
    def closed(self):
        
        return not hasattr(self, 'fp') or self.fp.closed
    
    def flush(self):
        
        if not self.closed:
            
            self.fp.flush()
            self.last_flush = time.time()
    
    def close(self):
        """
        Writes a closing line and closes the log file.
        """
        
        if not self.closed:
            
            self.msg('Closing log `%s`.' % self.fname)
            self.fp.close()
    
    def __del__(self):
        
        self.close()
