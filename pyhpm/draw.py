#!/usr/bin/env python
""" draw.py
Copyright (C) 2026 PyHPM developers

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines funtions to plot the head model, side view (forward vs up) with the
eye at the origin
"""

#__name__ = 'draw'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2026'
__author__ = 'PyHPM developers'
__maintainer__ = 'PyHPM developers'
__status__ = 'Development'

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import pyhpm.model as mdl
import pyhpm.model.head as head
import pyhpm.model.hull as hull
from pyhpm.model.skeleton import CSGO

def head_trace(duck,n=37,skel=CSGO):
    """
     head offsets from the eye over a pitch sweep, looking along +x
    :param duck: duck amount
    :param n: number of pitches from -90 to 90
    :param skel: the PlayerSkeleton
    :return: tuple t = (ps,fs,us) of pitches, forward offsets and up offsets
    """
    ps = np.linspace(-90.,90.,n)
    vs = np.stack([np.zeros_like(ps),ps],axis=-1)
    hs = head.head_position([0.,0.,0.],vs,duck,skel)
    return ps,hs[:,mdl.IX],hs[:,mdl.IZ]

def plot_head_trace(ducks=(0.,1.),n=37,skel=CSGO,ttl='',show=True):
    """
     plots the head trace of each duck amount in ducks
    :param ducks: duck amounts to plot, one line each
    :param n: number of pitches per line
    :param skel: the PlayerSkeleton
    :param ttl: title if any of the chart
    :param show: draw it
    :return: tuple t = (fig,ax)
    """
    fig,ax = plt.subplots()
    ax.plot([0.],[0.],'ok',label='eye')
    for duck in ducks:
        ps,fs,us = head_trace(duck,n,skel)
        ax.plot(fs,us,'-',label='duck {:.2f}'.format(duck))
        # mark looking straight down/up
        ax.plot([fs[0],fs[-1]],[us[0],us[-1]],'x',color=ax.lines[-1].get_color())

    # format plot
    if ttl: plt.title(ttl)
    plt.xlabel('forward (units)')
    plt.ylabel('up (units)')
    ax.set_aspect('equal')
    ax.legend(loc='lower left')
    plt.tight_layout()

    # draw it
    if show: plt.show()
    return fig,ax

def plot_hull(duck=0.,pitch=0.,skel=CSGO,ttl='',show=True):
    """
     plots the hull and head of a player standing at the origin, looking along
     +x
    :param duck: duck amount
    :param pitch: view pitch (degrees)
    :param skel: the PlayerSkeleton
    :param ttl: title if any of the chart
    :param show: draw it
    :return: tuple t = (fig,ax)
    """
    mn,mx = hull.player_aabb([0.,0.,0.],duck,skel)
    eye = hull.eye_position([0.,0.,0.],duck,skel)
    hd = head.head_position(eye,[0.,pitch],duck,skel)

    fig,ax = plt.subplots()
    ax.add_patch(
        Rectangle(
            (mn[mdl.IX],mn[mdl.IZ]),mx[mdl.IX]-mn[mdl.IX],mx[mdl.IZ]-mn[mdl.IZ],
            fill=False,edgecolor='gray',label='hull'
        )
    )
    ax.plot([eye[mdl.IX]],[eye[mdl.IZ]],'ok',label='eye')
    ax.plot([hd[mdl.IX]],[hd[mdl.IZ]],'or',label='head')

    # format plot
    if ttl: plt.title(ttl)
    plt.xlabel('x (units)')
    plt.ylabel('z (units)')
    ax.set_xlim(mn[mdl.IX]-skel.width/2,mx[mdl.IX]+skel.width/2)
    ax.set_ylim(mn[mdl.IZ]-4.,mx[mdl.IZ]+skel.width/2)
    ax.set_aspect('equal')
    ax.legend(loc='lower right')
    plt.tight_layout()

    # draw it
    if show: plt.show()
    return fig,ax
