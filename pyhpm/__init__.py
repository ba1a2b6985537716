#!/usr/bin/env python
""" PyHPM v 0.1.0: A Python 3.x head position model
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for PyHPM program files
 Estimates where a first person shooter player's head is, given the eye
 (camera) position, view angles and duck amount reported by the engine

Requirements
 - Python 3.x https://www.python.org

External Dependencies
 - numpy
    https://numpy.org
    pip3 install numpy
 - matplotlib (pyhpm.draw only)
    https://matplotlib.org
    pip3 install matplotlib

Usage
 import pyhpm.model.head as head
 head.head_position([50.,50.,50.],[0.,20.],1.)

DO NOT IMPORT *
"""

#__name__ = 'pyhpm'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

class PyHPMException(Exception):
    def __init__(self,msg): super().__init__(msg)
