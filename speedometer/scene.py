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
from .drawing import draw_arc, draw_dot, draw_line, draw_text, draw_triangle
from .geometry import polar_offset


# Radii of the dial's parts as fractions of the dial radius.
RIM_RADIUS = 0.70
TRACK_RADIUS = 0.75
MINOR_TICK_RADIUS = 0.65
MAJOR_TICK_RADIUS = 0.575
LABEL_RADIUS = 0.50
NEEDLE_LENGTH = 0.75

# Stroke widths in pixels.
RIM_WIDTH = 2
TRACK_WIDTH = 20
MINOR_TICK_WIDTH = 1
MAJOR_TICK_WIDTH = 2


def readout_text(value_text):
    '''Normalize the text of the numeric readout.  Integral values lose
    any fractional part, and text that is not a finite number reads "0".'''
    try:
        value = float(value_text)
    except (TypeError, ValueError):
        return '0'
    if not math.isfinite(value):
        return '0'
    if value == int(value):
        return str(int(value))
    return '%g' % value


def centered_x(center_x, msg, size):
    '''Return the x coordinate at which to start msg so that it appears
    horizontally centered, assuming each glyph is half as wide as the
    font size.'''
    return center_x - (size/2)*len(msg)/2


# ----------------------------------------------------------------------

def render_frame(surface, config, needle_angle, value_text):
    '''Clear the surface then draw a complete speedometer with its needle
    at needle_angle and value_text in the numeric readout.'''
    geom = config.derive()
    center = geom.center
    cx, cy = center
    radius = geom.radius
    surface.clear()

    # Draw the rim, the background track, and the highlighted part of the
    # track, which always ends at the needle.
    draw_arc(surface, center, radius*RIM_RADIUS,
             config.start_angle, config.end_angle,
             color=config.range_color, width=RIM_WIDTH)
    draw_arc(surface, center, radius*TRACK_RADIUS,
             config.start_angle, config.end_angle,
             color=config.range_color, width=TRACK_WIDTH)
    draw_arc(surface, center, radius*TRACK_RADIUS,
             config.start_angle, needle_angle,
             color=config.highlight_color, width=TRACK_WIDTH)

    # Draw the minor ticks.
    for angle in geom.minor_tick_angles():
        draw_line(surface,
                  polar_offset(center, angle, radius*RIM_RADIUS),
                  polar_offset(center, angle, radius*MINOR_TICK_RADIUS),
                  color=config.needle_color, width=MINOR_TICK_WIDTH)

    # Draw the major ticks, each followed by its label.
    half_label = config.step_text_size/2
    for idx, angle in enumerate(geom.major_tick_angles()):
        draw_line(surface,
                  polar_offset(center, angle, radius*RIM_RADIUS),
                  polar_offset(center, angle, radius*MAJOR_TICK_RADIUS),
                  color=config.needle_color, width=MAJOR_TICK_WIDTH)
        x, y = polar_offset(center, angle, radius*LABEL_RADIUS)
        draw_text(surface, (x - half_label, y + half_label),
                  str(idx*config.label_step),
                  size=config.step_text_size, color=config.needle_color,
                  font=config.font_family)

    # Draw the hub and a needle that tapers from the hub to the track.
    draw_dot(surface, center, radius=config.hub_radius,
             color=config.needle_color)
    draw_triangle(surface,
                  [polar_offset(center, needle_angle + 90,
                                config.needle_width),
                   polar_offset(center, needle_angle - 90,
                                config.needle_width),
                   polar_offset(center, needle_angle,
                                radius*NEEDLE_LENGTH)],
                  color=config.needle_color)

    # Draw the readout and, beneath it, the units.
    msg = readout_text(value_text)
    value_size = config.value_text_size
    draw_text(surface,
              (centered_x(cx, msg, value_size), cy + (value_size/2)*3),
              msg, size=value_size, color=config.needle_color,
              font=config.font_family)
    unit = config.unit_text
    draw_text(surface,
              (centered_x(cx, unit, config.unit_text_size),
               cy + (value_size/2)*4.5),
              unit, size=config.unit_text_size, color=config.needle_color,
              font=config.font_family)
