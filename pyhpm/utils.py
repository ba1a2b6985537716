#!/usr/bin/env python
""" utils.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines unit conversions and small vector helpers shared by the model
"""

#__name__ = 'utils'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import numpy as np

# smallest xy length treated as a usable horizontal direction. cos(d2r(90)) is
# ~6.1e-17, the nearest pitch short of 90 already gives ~2.5e-16
HORIZONTAL_EPS = 1e-16

# degree/radian. All numpy trig fcts expect radians, convert at the api
# boundary only
def d2r(d): return d*np.pi/180.0 # degrees to radians
def r2d(r): return r*180.0/np.pi # radians to degrees

def lerp(stand,crouch,duck):
    """
     blends a standing and a crouching value by duck amount
    :param stand: value at duck = 0
    :param crouch: value at duck = 1
    :param duck: duck amount, scalar or array. Not clamped, values outside
     [0,1] extrapolate
    :return: duck*crouch + (1-duck)*stand
    """
    return duck*crouch + (1-duck)*stand

def horizontal_unit(vs,eps=HORIZONTAL_EPS):
    """
     drops the z-component of vector(s) vs and scales the xy remainder to unit
     length
    :param vs: a 3 vector or an (n,3) array of vectors
    :param eps: xy lengths below this are degenerate (looking straight up/down)
    :return: tuple t = (us,ok) where us has the shape of vs with z = 0 and ok
     is a bool (array) set where the xy length was usable. Degenerate rows of us
     are the zero vector
    """
    vs = np.array(vs,np.double) # copy, never touch the caller's array
    vs[...,2] = 0.
    ns = np.linalg.norm(vs,axis=-1,keepdims=True)
    ok = ns >= eps
    us = np.zeros_like(vs)
    np.divide(vs,ns,out=us,where=ok)
    return us,ok[...,0]
