#!/usr/bin/env python
""" hull.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the player bounding box (hull) approximation
"""

#__name__ = 'hull'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import numpy as np
import pyhpm.model as mdl
import pyhpm.utils as utils
from pyhpm.model.skeleton import CSGO

def height(duck,skel=CSGO):
    """ hull height at duck amount """
    return utils.lerp(skel.height_stand,skel.height_duck,duck)

def player_aabb(foot,duck,skel=CSGO):
    """
     axis aligned box around the player standing at foot
    :param foot: foot (origin) position (x,y,z) or an (n,3) array of them
    :param duck: duck amount or an (n,) array of them
    :param skel: the PlayerSkeleton
    :return: tuple t = (mn,mx) of corners where
      mn = foot - (width/2,width/2,0)
      mx = foot + (width/2,width/2,height)
    """
    foot = mdl.as_vec(foot,3,'foot')
    duck = mdl.as_duck(duck)
    mdl.batch_shape(foot.shape[:-1],duck.shape)

    hw = skel.width/2
    mx = foot + np.stack(np.broadcast_arrays(hw,hw,height(duck,skel)),axis=-1)
    mn = np.broadcast_to(foot - np.array([hw,hw,0.],np.double),mx.shape).copy()
    return mn,mx

def eye_position(foot,duck,skel=CSGO):
    """
     eye (camera) position of a player standing at foot, i.e. the origin plus
     the engine's view offset
    :param foot: foot (origin) position (x,y,z) or an (n,3) array of them
    :param duck: duck amount or an (n,) array of them
    :param skel: the PlayerSkeleton
    :return: eye position (x,y,z) or an (n,3) array of them
    """
    foot = mdl.as_vec(foot,3,'foot')
    duck = mdl.as_duck(duck)
    mdl.batch_shape(foot.shape[:-1],duck.shape)

    dz = utils.lerp(skel.eye_stand,skel.eye_duck,duck)
    return foot + np.stack(np.broadcast_arrays(0.,0.,dz),axis=-1)
