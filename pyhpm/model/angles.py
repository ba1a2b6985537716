#!/usr/bin/env python
""" angles.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the view angle to forward vector conversion

 Source engine QAngles are plain Euler angles, see
  https://developer.valvesoftware.com/wiki/QAngle
 and AngleVectors in mathlib_base.cpp of the Source SDK 2013. Roll does not
 move the forward vector and is not modeled
"""

#__name__ = 'angles'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import numpy as np
import pyhpm.model as mdl
import pyhpm.utils as utils

def direction(angles):
    """
     converts view angle(s) to forward vector(s)
    :param angles: [yaw,pitch] in radians or an (n,2) array of them
    :return: the forward vector (x,y,z) or an (n,3) array of them where
      x = cos(pitch)*cos(yaw)
      y = cos(pitch)*sin(yaw)
      z = -sin(pitch)
     i.e. increasing pitch lowers z
    """
    angles = mdl.as_vec(angles,2,'angles')
    yaw = angles[...,mdl.IYAW]
    pitch = angles[...,mdl.IPITCH]
    sy,cy = np.sin(yaw),np.cos(yaw)
    sp,cp = np.sin(pitch),np.cos(pitch)
    return np.stack([cp*cy,cp*sy,-sp],axis=-1)

def forward(angles):
    """ as direction but with [yaw,pitch] in degrees """
    return direction(utils.d2r(mdl.as_vec(angles,2,'angles')))
