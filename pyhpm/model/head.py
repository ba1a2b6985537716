#!/usr/bin/env python
""" head.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the head position model. The engine reports the eye (camera) position,
the head sits forward of and below it, and tilts with the view pitch
"""

#__name__ = 'head'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import logging
import numpy as np
import pyhpm.model as mdl
import pyhpm.model.angles as angles
import pyhpm.utils as utils
from pyhpm.model.skeleton import CSGO

logger = logging.getLogger(__name__)

"""
 Head tilt
  pitch runs from 90 (looking down) to -90 (looking up). Remapped by
   (-pitch + 90) / 2
  to 0 (down) .. 90 (up) it traces the quarter circle the head makes: no z
  factor when looking down, all z factor and no x/y factor when looking up.
  The head is flat looking down but leans back a little looking up, which the
  pose dependent mul/add pair compensates for
"""

def pose_offsets(duck,skel=CSGO):
    """
     blends the pose dependent constants of skel by duck amount
    :param duck: duck amount, 0 = standing, 1 = crouched (not clamped)
    :param skel: the PlayerSkeleton
    :return: tuple t = (add,mul,neck_down,head_fwd)
    """
    return (
        utils.lerp(skel.angle_add_stand,skel.angle_add_duck,duck),
        utils.lerp(skel.angle_mul_stand,skel.angle_mul_duck,duck),
        utils.lerp(skel.neck_down_stand,skel.neck_down_duck,duck),
        utils.lerp(skel.head_fwd_stand,skel.head_fwd_duck,duck),
    )

def adjusted_pitch(pitch,duck,skel=CSGO):
    """ head tilt (degrees) above the horizontal for view pitch (degrees) """
    add,mul,_,_ = pose_offsets(duck,skel)
    return (pitch*-1.+90.)/2.*mul + add

def head_position(eye,view,duck,skel=CSGO):
    """
     estimates the world position of the head center
    :param eye: eye position (x,y,z) or an (n,3) array of them
    :param view: view angles [yaw,pitch] in degrees or an (n,2) array of them
    :param duck: duck amount or an (n,) array of them
    :param skel: the PlayerSkeleton
    :return: head position (x,y,z) or an (n,3) array of them
      x = eye_x + cos(adj)*u_x*head_fwd
      y = eye_y + cos(adj)*u_y*head_fwd
      z = eye_z - neck_down + sin(adj)*head_fwd
     where adj is the adjusted pitch and u the unit view direction in the xy
     plane. Looking exactly straight up or down leaves no xy direction, u is
     then zero and the head only moves along z
    """
    eye = mdl.as_vec(eye,3,'eye')
    view = mdl.as_vec(view,2,'view')
    duck = mdl.as_duck(duck)
    mdl.batch_shape(eye.shape[:-1],view.shape[:-1],duck.shape)

    _,_,neck_down,head_fwd = pose_offsets(duck,skel)
    adj = utils.d2r(adjusted_pitch(view[...,mdl.IPITCH],duck,skel))

    # unit vec of just x and y (z handled by the tilt)
    u,ok = utils.horizontal_unit(angles.direction(utils.d2r(view)))
    if not np.all(ok):
        logger.debug("no horizontal view direction for %d view(s)",np.size(ok)-np.count_nonzero(ok))

    return eye + np.stack(
        np.broadcast_arrays(
            np.cos(adj)*u[...,mdl.IX]*head_fwd,
            np.cos(adj)*u[...,mdl.IY]*head_fwd,
            np.sin(adj)*head_fwd - neck_down,
        ),axis=-1
    )
