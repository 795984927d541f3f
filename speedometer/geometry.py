'''
Copyright (C) 2021-2023 Scott Pakin, scott-ink@pakin.org

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program; if not, write to the Free Software
Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
02110-1301, USA.
'''

import math


# ----------------------------------------------------------------------

# All angles are in degrees unless a name says otherwise.  Angle 0 points
# along the positive x axis, and angles increase clockwise because the
# y axis of every drawing surface points down.

def degrees_to_radians(degrees):
    'Convert an angle in degrees to an angle in radians.'
    return degrees*math.pi/180


def radians_to_degrees(radians):
    'Convert an angle in radians to an angle in degrees.'
    return radians*180/math.pi


def polar_offset(center, angle, distance):
    '''Return the point that lies distance units from center in the
    direction of angle.  Neither the angle nor the distance is normalized,
    so a negative distance reflects the point through the center.'''
    x, y = center
    rads = degrees_to_radians(angle)
    return (x + distance*math.cos(rads), y + distance*math.sin(rads))


def arc_sweep(start, end, clockwise=True):
    '''Return the signed number of degrees an arc from start to end covers
    when drawn in the given direction.  Positive sweeps are clockwise.
    The rules match those of the HTML canvas arc() method: a sweep of at
    least one full turn in the drawing direction becomes a full circle, and
    anything less is reduced modulo 360.'''
    if clockwise:
        if end - start >= 360:
            return 360.0
        return float((end - start) % 360)
    if start - end >= 360:
        return -360.0
    return -float((start - end) % 360)
