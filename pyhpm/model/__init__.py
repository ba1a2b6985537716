#!/usr/bin/env python
""" model
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Top level directory for the player model package
Contains:
 angles - view angles to forward vector
 head - head position from eye position, view angles and duck amount
 hull - player bounding box from foot position and duck amount
 skeleton - standing/crouching offsets of the modeled player

Defines axis indices and input checks shared by the above
"""

#__name__ = 'model'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import numpy as np
from pyhpm import PyHPMException

class ModelException(PyHPMException):
    def __init__(self,msg): super().__init__(msg)

# CONSTANTS
# world coordinates are engine units, +z is up
IX = 0 # axis index x
IY = 1 # axis index y
IZ = 2 # axis index z

# view angles are treated as 2d vectors indexed as
IYAW   = 0 # rotation in the xy plane
IPITCH = 1 # positive looks down

def as_vec(x,n,name):
    """
     copies x to a double array whose last axis has length n
    :param x: a single vector or an (m,n) array of vectors
    :param n: expected length of each vector
    :param name: argument name for the error message
    :return: the copied array
    """
    try:
        v = np.array(x,np.double)
    except (TypeError,ValueError) as e:
        raise ModelException("Invalid '{}' ({})".format(name,e)) from e
    if v.ndim not in (1,2) or v.shape[-1] != n:
        raise ModelException(
            "Invalid '{}' shape {}, expected ({},) or (m,{})".format(name,v.shape,n,n)
        )
    return v

def as_duck(duck):
    """ copies duck amount(s) to a double scalar or (m,) array """
    try:
        d = np.array(duck,np.double)
    except (TypeError,ValueError) as e:
        raise ModelException("Invalid 'duck' ({})".format(e)) from e
    if d.ndim > 1:
        raise ModelException("Invalid 'duck' shape {}".format(d.shape))
    return d

def batch_shape(*shapes):
    """ common batch shape of the inputs, () when none is batched """
    try:
        return np.broadcast_shapes(*shapes)
    except ValueError as e:
        raise ModelException("Mismatched batch sizes: {}".format(e)) from e
