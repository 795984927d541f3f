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

from inkex.localization import inkex_gettext as _
from .geometry import arc_sweep


# ----------------------------------------------------------------------

# Each drawing primitive accepts its style as keyword arguments.  The
# following dictionaries list every accepted keyword along with its
# default value.

_dot_style = {'radius': 5,
              'color': 'black'}

_line_style = {'color': 'black',
               'width': 2}

_arc_style = {'color': 'black',
              'width': 2,
              'direction': 'clockwise'}

_text_style = {'size': 12,
               'color': 'black',
               'font': 'Arial'}

_triangle_style = {'color': 'black'}


def _construct_style(base_style, new_style):
    '''Combine a primitive's default style with a caller-specified style
    and return the result as a dictionary.  A value of None selects the
    default.'''
    style = base_style.copy()
    for k, v in new_style.items():
        if k not in base_style:
            raise ValueError(_('Unknown style "%s"; expected one of %s') %
                             (k, ', '.join(sorted(base_style))))
        if v is not None:
            style[k] = v
    return style


# ----------------------------------------------------------------------

def draw_dot(surface, center, **style):
    'Draw a filled circle.'
    style = _construct_style(_dot_style, style)
    surface.fill_circle(center, style['radius'], style['color'])


def draw_line(surface, start, end, **style):
    'Draw a straight line from start to end.'
    style = _construct_style(_line_style, style)
    surface.stroke_line(start, end, style['color'], style['width'])


def draw_arc(surface, center, radius, start_angle, end_angle, **style):
    '''Draw a circular arc from start_angle to end_angle, both in degrees.
    The direction style, either "clockwise" or "counterclockwise", selects
    which of the two possible arcs is drawn.'''
    style = _construct_style(_arc_style, style)
    direction = style['direction']
    if direction not in ['clockwise', 'counterclockwise']:
        raise ValueError(_('Invalid arc direction "%s"') % str(direction))
    sweep = arc_sweep(start_angle, end_angle, direction == 'clockwise')
    surface.stroke_arc(center, radius, start_angle, sweep,
                       style['color'], style['width'])


def draw_text(surface, anchor, msg, **style):
    '''Draw a piece of text with its baseline starting at anchor.  The
    text is not centered.'''
    style = _construct_style(_text_style, style)
    surface.fill_text(anchor, str(msg), style['size'], style['color'],
                      style['font'])


def draw_triangle(surface, vertices, **style):
    'Draw a filled triangle with no outline.'
    if len(vertices) != 3:
        raise ValueError(_('A triangle must have exactly three vertices, '
                           'not %d') % len(vertices))
    style = _construct_style(_triangle_style, style)
    surface.fill_polygon(list(vertices), style['color'])
