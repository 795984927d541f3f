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

import collections
import math
import time
from inkex.localization import inkex_gettext as _
from .scene import render_frame


# Animator states
RUNNING = 'running'
PAUSED = 'paused'
STOPPED = 'stopped'

# A Frame is everything needed to render one step of an animation.
Frame = collections.namedtuple('Frame', ['needle_angle', 'value_text'])


def round_half_up(value):
    'Round to the nearest integer, with halves rounding towards +infinity.'
    return int(math.floor(value + 0.5))


class AnimationState():
    '''Represent the progress of a speedometer animation.  The needle angle
    and display value are computed from the frame index.'''

    def __init__(self, frame_index, needle_angle, display_value):
        self.frame_index = frame_index
        self.needle_angle = needle_angle
        self.display_value = display_value

    @classmethod
    def at(cls, config, frame_index):
        'Return the state an animation reaches after frame_index frames.'
        return cls(frame_index,
                   config.start_angle + frame_index*config.animation_step,
                   frame_index*value_increment(config))

    @classmethod
    def initial(cls, config):
        'Return the state in which every animation begins.'
        return cls.at(config, 0)

    def __repr__(self):
        return '<%s frame=%d angle=%g value=%g>' % (self.__class__.__name__,
                                                    self.frame_index,
                                                    self.needle_angle,
                                                    self.display_value)

    def _key(self):
        return (self.frame_index, self.needle_angle, self.display_value)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    @property
    def display_text(self):
        'Return the display value as the readout should show it.'
        return str(round_half_up(self.display_value))


def value_increment(config):
    '''Return how much the display value grows per frame.  The display
    value reaches the largest label exactly when the needle has swept the
    whole dial.'''
    sweep = config.end_angle - config.start_angle
    top = (config.big_steps - 1)*config.label_step
    return top/sweep*config.animation_step


def step(state, config):
    '''Return the frame to render for state and the state that follows
    it.  The state is not modified.'''
    frame = Frame(state.needle_angle, state.display_text)
    return frame, AnimationState.at(config, state.frame_index + 1)


def is_finished(state, config):
    'Say whether an animation in the given state should render no more.'
    travel = config.needle_angle - config.start_angle
    return state.frame_index*config.animation_step > travel + 1e-9


def frame_states(config):
    'Iterate over every frame a complete animation renders.'
    state = AnimationState.initial(config)
    while True:
        frame, state = step(state, config)
        yield frame
        if is_finished(state, config):
            break


# ----------------------------------------------------------------------

class ImmediateScheduler():
    '''Run animation callbacks one after another, optionally waiting
    interval seconds between consecutive callbacks.'''

    def __init__(self, interval=0):
        self.interval = interval
        self.pending = collections.deque()
        self.frames_run = 0

    def __call__(self, callback):
        'Request that callback run before the next repaint.'
        self.pending.append(callback)

    def run(self):
        'Run callbacks until none remain.'
        while self.pending:
            if self.frames_run > 0 and self.interval > 0:
                time.sleep(self.interval)
            callback = self.pending.popleft()
            self.frames_run += 1
            callback()


class Animator():
    '''Sweep a speedometer's needle from its start angle to its rest angle,
    redrawing the surface once per frame.  The schedule argument is called
    with a callback that it must invoke before the next repaint.  If given,
    on_frame is called with each Frame right after it is drawn.'''

    def __init__(self, surface, config, schedule, on_frame=None):
        self.surface = surface
        self.config = config
        self.schedule = schedule
        self.on_frame = on_frame
        self.state = AnimationState.initial(config)
        self.status = None
        self.frames_rendered = 0
        self._pending = False

    def __repr__(self):
        return '<%s %s %r>' % (self.__class__.__name__, self.status,
                               self.state)

    def _request_frame(self):
        'Schedule the next frame unless one is already pending.'
        if not self._pending:
            self._pending = True
            self.schedule(self.tick)

    def start(self):
        'Begin the animation.'
        if self.status is not None:
            raise RuntimeError(_('An animation can be started only once'))
        self.status = RUNNING
        self._request_frame()

    def pause(self):
        'Stop drawing frames until resume is called.'
        if self.status != RUNNING:
            raise RuntimeError(_('Only a running animation can be paused'))
        self.status = PAUSED

    def resume(self):
        'Continue a paused animation from where it left off.'
        if self.status != PAUSED:
            raise RuntimeError(_('Only a paused animation can be resumed'))
        self.status = RUNNING
        self._request_frame()

    def tick(self):
        'Draw one frame and advance the animation.'
        self._pending = False
        if self.status != RUNNING:
            return
        frame, self.state = step(self.state, self.config)
        render_frame(self.surface, self.config,
                     frame.needle_angle, frame.value_text)
        self.frames_rendered += 1
        if self.on_frame is not None:
            self.on_frame(frame)
        if is_finished(self.state, self.config):
            self.status = STOPPED
        else:
            self._request_frame()


def record_frames(config, surface, interval=0):
    '''Run a complete animation on surface and return a snapshot of the
    surface taken after each frame.'''
    snapshots = []
    scheduler = ImmediateScheduler(interval)
    animator = Animator(surface, config, scheduler,
                        on_frame=lambda frame: snapshots.append(
                            surface.snapshot()))
    animator.start()
    scheduler.run()
    return snapshots
