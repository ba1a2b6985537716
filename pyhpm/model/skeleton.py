#!/usr/bin/env python
""" skeleton.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the standing and crouching offsets of the modeled player. Values were
measured empirically against the CS:GO player model, all distances are in
engine units and all angles in degrees
"""

#__name__ = 'skeleton'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Production'

import math
import numbers
from dataclasses import dataclass, fields
import numpy as np
from pyhpm import PyHPMException

class SkeletonException(PyHPMException):
    def __init__(self,msg): super().__init__(msg)

# CS:GO player data

HF_STAND = 12.5  # head center forward of the eye, standing
HF_DUCK  = 11.0  # head center forward of the eye, crouched
ND_STAND = 8.5   # neck joint below the eye, standing
ND_DUCK  = 3.75  # neck joint below the eye, crouched
HA_STAND = 2.5   # head angle adjustment add, standing (deg)
HA_DUCK  = 17.5  # head angle adjustment add, crouched (deg)
HM_STAND = 1.1   # head angle adjustment mul, standing
HM_DUCK  = 0.75  # head angle adjustment mul, crouched
PH_STAND = 72.0  # hull height, standing
PH_DUCK  = 54.0  # hull height, crouched
PW       = 32.0  # hull width (x and y)
EH_STAND = 64.0  # eye above the foot (view offset), standing
EH_DUCK  = 46.0  # eye above the foot (view offset), crouched

@dataclass(frozen=True)
class PlayerSkeleton:
    """
     PlayerSkeleton holds every pose dependent constant of one game's player
     model. Each pair is blended by duck amount, see pyhpm.utils.lerp
    """
    head_fwd_stand: float = HF_STAND
    head_fwd_duck: float = HF_DUCK
    neck_down_stand: float = ND_STAND
    neck_down_duck: float = ND_DUCK
    angle_add_stand: float = HA_STAND
    angle_add_duck: float = HA_DUCK
    angle_mul_stand: float = HM_STAND
    angle_mul_duck: float = HM_DUCK
    height_stand: float = PH_STAND
    height_duck: float = PH_DUCK
    width: float = PW
    eye_stand: float = EH_STAND
    eye_duck: float = EH_DUCK

    def __post_init__(self):
        for f in fields(self):
            v = getattr(self,f.name)
            # numpy scalars register as numbers.Real, bools do not count
            if isinstance(v,(bool,np.bool_)) or not isinstance(v,numbers.Real) or not math.isfinite(v):
                raise SkeletonException(
                    "Invalid '{}' ({}), expected a finite number".format(f.name,v)
                )
        for name in ('head_fwd_stand','head_fwd_duck','height_stand','height_duck','width'):
            if getattr(self,name) <= 0:
                raise SkeletonException(
                    "Invalid '{}' ({}), must be positive".format(name,getattr(self,name))
                )

    @classmethod
    def from_dict(cls,d):
        """
         builds a skeleton from mapping d, missing keys keep the CS:GO values
        :param d: dict of field name -> value
        :return: a PlayerSkeleton
        """
        names = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - names)
        if unknown:
            raise SkeletonException("Unknown skeleton field(s) {}".format(unknown))
        flags = sorted(k for k,v in d.items() if isinstance(v,(bool,np.bool_)))
        if flags:
            raise SkeletonException("Invalid skeleton value(s) {}, expected numbers".format(flags))
        try:
            vs = {k:float(v) for k,v in d.items()}
        except (TypeError,ValueError) as e:
            raise SkeletonException("Invalid skeleton value: {}".format(e)) from e
        return cls(**vs)

CSGO = PlayerSkeleton()
