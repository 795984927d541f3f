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

import argparse
import sys
import inkex
from .animation import record_frames
from .config import DialConfig, add_dial_arguments
from .scene import render_frame
from .surfaces import RasterSurface


def save_gif(file, config=None, frame_duration=1/60):
    '''Render the complete needle sweep as an animated GIF.  file can be
    either a filename or an open binary file object.  The GIF plays once.
    Return the number of frames written.'''
    config = config or DialConfig()
    surface = RasterSurface(config.width, config.height,
                            config.background_color)
    frames = [img.convert('RGB') for img in record_frames(config, surface)]
    frames[0].save(file, format='GIF', save_all=True,
                   append_images=frames[1:],
                   duration=int(round(frame_duration*1000)))
    return len(frames)


def save_png(file, config=None):
    'Render a static speedometer, with its needle at rest, as a PNG image.'
    config = config or DialConfig()
    surface = RasterSurface(config.width, config.height,
                            config.background_color)
    render_frame(surface, config, config.needle_angle, config.value_text)
    surface.image.save(file, format='PNG')


# ----------------------------------------------------------------------

def parse_arguments(args=None):
    'Parse the command line.'
    pars = argparse.ArgumentParser(
        description='Render an animated speedometer as a GIF or PNG image.')
    pars.add_argument('output', metavar='OUTPUT',
                      help='Name of the image file to write')
    pars.add_argument('--static', type=inkex.Boolean, default=False,
                      help='Write one PNG frame with the needle at rest')
    pars.add_argument('--frame-duration', type=float, default=1/60,
                      help='Seconds each animation frame is shown')
    pars.add_argument('--verbose', type=inkex.Boolean, default=False,
                      help='Report what was written')
    add_dial_arguments(pars)
    return pars.parse_args(args)


def main(args=None):
    options = parse_arguments(args)
    try:
        config = DialConfig.from_options(options)
        if options.static:
            save_png(options.output, config)
            n_frames = 1
        else:
            n_frames = save_gif(options.output, config,
                                options.frame_duration)
    except inkex.AbortExtension as err:
        inkex.utils.errormsg(str(err))
        sys.exit(1)
    if options.verbose:
        inkex.utils.debug('Wrote %d frame(s) to %s' %
                          (n_frames, options.output))


if __name__ == '__main__':
    main()
