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

import copy
import functools
import io
import math
import PIL.Image
import PIL.ImageDraw
import PIL.ImageFont
import inkex
from inkex.localization import inkex_gettext as _
from .geometry import polar_offset


class SurfaceError(inkex.AbortExtension):
    'Report a drawing surface that cannot be used.'
    pass


def _python_to_svg_str(val):
    'Convert a Python value to a string suitable for use in an SVG attribute.'
    if isinstance(val, str):
        return val
    if isinstance(val, float):
        # Floats are converted using a fair number of significant digits.
        return '%.10g' % val
    return str(val)


# ----------------------------------------------------------------------

class Surface():
    '''Define the operations the drawing layer needs from a 2D drawing
    surface.  Subclasses fill in each method.'''

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise SurfaceError(_('A drawing surface must have a positive '
                                 'width and height, not %sx%s') %
                               (width, height))
        self.width = width
        self.height = height

    def __repr__(self):
        return '<%s %sx%s>' % (self.__class__.__name__,
                               self.width, self.height)

    def clear(self):
        'Erase everything drawn so far.'
        raise NotImplementedError

    def fill_circle(self, center, radius, color):
        'Draw a filled circle.'
        raise NotImplementedError

    def stroke_line(self, start, end, color, width):
        'Draw a straight line segment.'
        raise NotImplementedError

    def stroke_arc(self, center, radius, start, sweep, color, width):
        '''Draw a circular arc beginning at angle start and covering sweep
        degrees.  Positive sweeps run clockwise.'''
        raise NotImplementedError

    def fill_text(self, anchor, msg, size, color, font):
        'Draw text whose baseline begins at anchor.'
        raise NotImplementedError

    def fill_polygon(self, points, color):
        'Draw a closed, filled, unstroked polygon.'
        raise NotImplementedError

    def snapshot(self):
        'Return an independent copy of what has been drawn so far.'
        raise NotImplementedError


# ----------------------------------------------------------------------

class SvgSurface(Surface):
    '''Draw by appending inkex objects to an SVG group.  If no group is
    given, a new SVG document is created with a single layer.'''

    def __init__(self, width, height, group=None):
        super().__init__(width, height)
        if group is None:
            doc = inkex.load_svg(io.BytesIO(
                ('<svg xmlns="http://www.w3.org/2000/svg" '
                 'xmlns:inkscape='
                 '"http://www.inkscape.org/namespaces/inkscape" '
                 'width="%s" height="%s" viewBox="0 0 %s %s"/>' %
                 (width, height, width, height)).encode('utf-8')))
            self.svg_root = doc.getroot()
            group = inkex.Layer.new('Speedometer')
            self.svg_root.append(group)
        else:
            self.svg_root = None
        self.group = group

    def _append(self, obj, style):
        'Assign a style to an inkex object and add it to the group.'
        obj.style = ';'.join(['%s:%s' % (k, _python_to_svg_str(v))
                              for k, v in style.items()])
        self.group.append(obj)
        return obj

    def clear(self):
        for child in list(self.group):
            self.group.remove(child)

    def fill_circle(self, center, radius, color):
        obj = inkex.Circle(cx=_python_to_svg_str(center[0]),
                           cy=_python_to_svg_str(center[1]),
                           r=_python_to_svg_str(radius))
        return self._append(obj, {'fill': color, 'stroke': 'none'})

    def stroke_line(self, start, end, color, width):
        obj = inkex.Line(x1=_python_to_svg_str(start[0]),
                         y1=_python_to_svg_str(start[1]),
                         x2=_python_to_svg_str(end[0]),
                         y2=_python_to_svg_str(end[1]))
        return self._append(obj, {'stroke': color,
                                  'stroke-width': width})

    def stroke_arc(self, center, radius, start, sweep, color, width):
        # Split the arc into pieces of at most 90 degrees each so that
        # every SVG arc command is unambiguous.
        p = [inkex.paths.Move(*polar_offset(center, start, radius))]
        n_segs = max(1, int(math.ceil(abs(sweep)/90.0)))
        if sweep != 0:
            for s in range(n_segs):
                x1, y1 = polar_offset(center, start + sweep*(s + 1)/n_segs,
                                      radius)
                p.append(inkex.paths.Arc(radius, radius, 0, False, sweep > 0,
                                         x1, y1))
        if abs(sweep) >= 360:
            p.append(inkex.paths.ZoneClose())
        obj = inkex.PathElement()
        obj.path = inkex.Path(p)
        return self._append(obj, {'fill': 'none',
                                  'stroke': color,
                                  'stroke-width': width})

    def fill_text(self, anchor, msg, size, color, font):
        obj = inkex.TextElement(x=_python_to_svg_str(anchor[0]),
                                y=_python_to_svg_str(anchor[1]))
        obj.set('xml:space', 'preserve')
        obj.text = msg
        return self._append(obj, {'font-size': '%spx' % size,
                                  'font-family': font,
                                  'fill': color})

    def fill_polygon(self, points, color):
        pts = ' '.join(['%s,%s' % (_python_to_svg_str(x),
                                   _python_to_svg_str(y))
                        for x, y in points])
        obj = inkex.Polygon(points=pts)
        return self._append(obj, {'fill': color, 'stroke': 'none'})

    def snapshot(self):
        return copy.deepcopy(self.group)

    def tostring(self):
        'Return the SVG document this surface created as bytes.'
        if self.svg_root is None:
            raise SurfaceError(_('This surface draws into an existing '
                                 'document'))
        return self.svg_root.tostring()


# ----------------------------------------------------------------------

@functools.lru_cache(maxsize=None)
def _load_font(family, size):
    'Find a font by name and fall back to the Pillow default font.'
    try:
        return PIL.ImageFont.truetype(family, size)
    except OSError:
        return PIL.ImageFont.load_default(size)


class RasterSurface(Surface):
    'Draw into an RGBA Pillow image.'

    def __init__(self, width, height, background='white'):
        super().__init__(int(width), int(height))
        self.background = background
        self.image = PIL.Image.new('RGBA', (self.width, self.height),
                                   background)
        self.draw = PIL.ImageDraw.Draw(self.image)

    @staticmethod
    def _pixels(width):
        'Convert a stroke width to a whole number of pixels.'
        return max(1, int(round(width)))

    def clear(self):
        self.draw.rectangle([0, 0, self.width, self.height],
                            fill=self.background)

    def fill_circle(self, center, radius, color):
        x, y = center
        self.draw.ellipse([x - radius, y - radius, x + radius, y + radius],
                          fill=color)

    def stroke_line(self, start, end, color, width):
        self.draw.line([tuple(start), tuple(end)], fill=color,
                       width=self._pixels(width))

    def stroke_arc(self, center, radius, start, sweep, color, width):
        if sweep == 0:
            return
        # Pillow strokes arcs inward from the bounding box, so grow the box
        # by half the stroke width to center the stroke on the radius.
        pix = self._pixels(width)
        r = radius + pix/2
        x, y = center
        bbox = [x - r, y - r, x + r, y + r]
        if abs(sweep) >= 360:
            self.draw.arc(bbox, 0, 360, fill=color, width=pix)
        elif sweep > 0:
            self.draw.arc(bbox, start, start + sweep, fill=color, width=pix)
        else:
            self.draw.arc(bbox, start + sweep, start, fill=color, width=pix)

    def fill_text(self, anchor, msg, size, color, font):
        self.draw.text(tuple(anchor), msg, fill=color,
                       font=_load_font(font, int(round(size))), anchor='ls')

    def fill_polygon(self, points, color):
        self.draw.polygon([tuple(pt) for pt in points], fill=color)

    def snapshot(self):
        return self.image.copy()
