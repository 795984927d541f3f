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
import PIL.ImageColor
import inkex
from inkex.localization import inkex_gettext as _


class ConfigError(inkex.AbortExtension):
    'Report a dial configuration that cannot be drawn.'
    pass


# ----------------------------------------------------------------------

class DialConfig():
    '''Hold the visual constants that define a speedometer dial.  A
    DialConfig is validated when it is constructed and is not meant to be
    modified afterwards.'''

    # Map each tunable to its default value.  The order here is also the
    # order in which command-line options are listed.
    defaults = {
        'width': 500,
        'height': 500,
        'start_angle': 135.0,
        'end_angle': 405.0,
        'needle_angle': 335.0,
        'small_steps': 4,
        'big_steps': 11,
        'label_step': 10,
        'step_text_size': 12,
        'needle_width': 6.0,
        'hub_radius': 10.0,
        'value_text': '72',
        'value_text_size': 50,
        'unit_text': 'km/h',
        'unit_text_size': 30,
        'animation_step': 1.0,
        'font_family': 'Arial',
        'range_color': 'lightgray',
        'highlight_color': '#944be3',
        'needle_color': 'black',
        'background_color': 'white',
    }

    def __init__(self, **kwargs):
        for k in kwargs:
            if k not in self.defaults:
                raise ConfigError(_('Unknown dial setting "%s"') % k)
        for k, v in self.defaults.items():
            setattr(self, k, kwargs.get(k, v))
        self.validate()

    def __repr__(self):
        changed = ['%s=%r' % (k, getattr(self, k))
                   for k, v in self.defaults.items()
                   if getattr(self, k) != v]
        return '<%s %s>' % (self.__class__.__name__, ' '.join(changed))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def as_dict(self):
        'Return all tunables as a dictionary.'
        return {k: getattr(self, k) for k in self.defaults}

    def replace(self, **kwargs):
        'Return a new DialConfig with some tunables changed.'
        settings = self.as_dict()
        settings.update(kwargs)
        return DialConfig(**settings)

    def validate(self):
        'Abort if the dial cannot be drawn or animated.'
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(_('The canvas must have a positive width '
                                'and height, not %sx%s') %
                              (self.width, self.height))
        if self.start_angle >= self.end_angle:
            raise ConfigError(_('The start angle (%s) must be less than '
                                'the end angle (%s)') %
                              (self.start_angle, self.end_angle))
        if self.big_steps < 2:
            raise ConfigError(_('A dial needs at least two big steps, '
                                'not %d') % self.big_steps)
        if self.small_steps < 0:
            raise ConfigError(_('The number of small steps cannot be '
                                'negative (%d)') % self.small_steps)
        if self.animation_step <= 0:
            raise ConfigError(_('The animation step must be positive, '
                                'not %s') % self.animation_step)
        for name in ['step_text_size', 'value_text_size', 'unit_text_size']:
            if getattr(self, name) <= 0:
                raise ConfigError(_('The %s setting must be positive') %
                                  name)
        for name in ['range_color', 'highlight_color', 'needle_color',
                     'background_color']:
            try:
                PIL.ImageColor.getrgb(getattr(self, name))
            except ValueError:
                raise ConfigError(_('Unrecognized %s "%s"') %
                                  (name, getattr(self, name)))

    @classmethod
    def from_options(cls, options):
        '''Construct a DialConfig from an argparse namespace produced by a
        parser prepared with add_dial_arguments.'''
        settings = {}
        for k in cls.defaults:
            v = getattr(options, k, None)
            if v is not None:
                settings[k] = v
        return cls(**settings)

    def derive(self):
        'Return the geometry implied by this configuration.'
        return DerivedGeometry(self)


class DerivedGeometry():
    'Store the values computed from a DialConfig.'

    def __init__(self, config):
        self.sweep_angle = config.end_angle - config.start_angle
        self.minor_increment = self.sweep_angle/((config.small_steps + 1) *
                                                 (config.big_steps - 1))
        self.major_increment = self.sweep_angle/(config.big_steps - 1)
        self.center = (config.width/2, config.height/2)
        self.radius = min(config.width, config.height)/2
        self._start_angle = config.start_angle
        self._big_steps = config.big_steps

    def minor_tick_angles(self):
        '''Return the angle of every minor tick.  Both ends of the sweep
        receive a tick.  Angles are computed from an index rather than
        accumulated so rounding errors cannot add or drop the final one.'''
        n_ticks = int(math.floor(self.sweep_angle/self.minor_increment +
                                 1e-9)) + 1
        return [self._start_angle + i*self.minor_increment
                for i in range(n_ticks)]

    def major_tick_angles(self):
        'Return the angle of every major tick, in increasing order.'
        return [self._start_angle + i*self.major_increment
                for i in range(self._big_steps)]


# ----------------------------------------------------------------------

def add_dial_arguments(pars):
    'Register one command-line option per DialConfig tunable.'
    helps = {
        'width': 'Canvas width in pixels',
        'height': 'Canvas height in pixels',
        'start_angle': 'Angle in degrees at which the dial begins',
        'end_angle': 'Angle in degrees at which the dial ends',
        'needle_angle': 'Angle in degrees at which the needle comes to rest',
        'small_steps': 'Number of minor ticks between two major ticks',
        'big_steps': 'Number of major (labeled) ticks',
        'label_step': 'Value difference between adjacent major ticks',
        'step_text_size': 'Size in pixels of the tick labels',
        'needle_width': 'Half the width of the needle base in pixels',
        'hub_radius': 'Radius in pixels of the needle hub',
        'value_text': 'Value shown when the dial is drawn without animation',
        'value_text_size': 'Size in pixels of the numeric readout',
        'unit_text': 'Caption shown beneath the numeric readout',
        'unit_text_size': 'Size in pixels of the caption',
        'animation_step': 'Degrees the needle moves per frame',
        'font_family': 'Font family for all text',
        'range_color': 'Color of the dial rim and track',
        'highlight_color': 'Color of the progress arc',
        'needle_color': 'Color of the needle, ticks, and text',
        'background_color': 'Color used to clear raster frames',
    }
    for k, v in DialConfig.defaults.items():
        pars.add_argument('--' + k.replace('_', '-'), dest=k, type=type(v),
                          default=v, help=helps[k])
