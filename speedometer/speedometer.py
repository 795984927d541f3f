#! /usr/bin/env python

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

import inkex
from .animation import record_frames
from .config import DialConfig, add_dial_arguments
from .scene import render_frame
from .surfaces import SvgSurface


# ----------------------------------------------------------------------

# The following class is needed only until inkex gets around to
# providing its own version.

class Animate(inkex.BaseElement):
    'Represent an <animate> element.'
    tag_name = 'animate'


def _debug_print(*args):
    'Implement print in terms of inkex.utils.debug.'
    inkex.utils.debug(' '.join([str(a) for a in args]))


def frame_timing(idx, n_frames):
    '''Return the display values and key times that make frame idx of
    n_frames visible during its own time slot only.  The final frame stays
    visible once the animation ends.'''
    start = idx/n_frames
    end = (idx + 1)/n_frames
    if idx == 0:
        values, key_times = ['inline', 'none'], [0, end]
    elif idx == n_frames - 1:
        values, key_times = ['none', 'inline'], [0, start]
    else:
        values, key_times = ['none', 'inline', 'none'], [0, start, end]
    return '; '.join(values), '; '.join(['%.5g' % v for v in key_times])


# ----------------------------------------------------------------------

class SpeedometerEffect(inkex.EffectExtension):
    'Draw a speedometer, optionally animated, into the current layer.'

    def add_arguments(self, pars):
        'Process program parameters passed in from the UI.'
        pars.add_argument('--tab', dest='tab',
                          help='The selected UI tab when OK was pressed')
        add_dial_arguments(pars)
        pars.add_argument('--animate', type=inkex.Boolean, default=False,
                          help='Record the needle sweep as an SVG animation')
        pars.add_argument('--frame-duration', type=float, default=1/60,
                          help='Seconds each animation frame is shown')
        pars.add_argument('--verbose', type=inkex.Boolean, default=False,
                          help='Report progress in the message window')

    def find_attach_point(self):
        '''Return a suitable point in the SVG XML tree at which to attach
        new objects.'''
        # The Inkscape GUI automatically adds a <sodipodi:namedview> element
        # with an inkscape:current-layer attribute, and this will name either
        # an actual layer or the <svg> element itself.  In this case, we return
        # the layer pointed to by inkscape:current-layer.
        svg = self.svg
        try:
            namedview = svg.findone('sodipodi:namedview')
            cur_layer_name = namedview.get('inkscape:current-layer')
            return svg.xpath('//*[@id="%s"]' % cur_layer_name)[0]
        except (AttributeError, IndexError):
            pass

        # When run from the command line, the input may lack a namedview or
        # a current layer.  Use the topmost layer, assuming one exists.
        try:
            return svg.xpath('//svg:g[@inkscape:groupmode="layer"]')[-1]
        except IndexError:
            pass

        # A very minimal SVG input may contain no layers at all.
        return svg

    def log(self, *args):
        'Report a message if verbose output was requested.'
        if self.options.verbose:
            _debug_print(*args)

    def effect(self):
        'Draw the speedometer.'
        config = DialConfig.from_options(self.options)
        dial = inkex.Group.new('Speedometer')
        self.find_attach_point().append(dial)
        if not self.options.animate:
            surface = SvgSurface(config.width, config.height, dial)
            render_frame(surface, config, config.needle_angle,
                         config.value_text)
            self.log('Drew a static speedometer with %r' % config)
            return

        # Render every frame into its own group, and show each group only
        # during its time slot.
        frames = record_frames(config,
                               SvgSurface(config.width, config.height))
        n_frames = len(frames)
        duration = self.options.frame_duration*n_frames
        for idx, snapshot in enumerate(frames):
            frame = inkex.Group.new('Frame %d' % (idx + 1), *snapshot)
            if n_frames > 1:
                values, key_times = frame_timing(idx, n_frames)
                anim = Animate()
                anim.set('attributeName', 'display')
                anim.set('values', values)
                anim.set('keyTimes', key_times)
                anim.set('dur', '%.10gs' % duration)
                anim.set('calcMode', 'discrete')
                anim.set('fill', 'freeze')
                frame.append(anim)
            if idx < n_frames - 1:
                # Without SMIL support, only the final frame is visible.
                frame.set('style', 'display:none')
            dial.append(frame)
        self.log('Recorded %d frames lasting %.3g seconds' %
                 (n_frames, duration))


def main():
    SpeedometerEffect().run()


if __name__ == '__main__':
    main()
