from .geometry import arc_sweep, degrees_to_radians, polar_offset, \
    radians_to_degrees
from .config import ConfigError, DerivedGeometry, DialConfig, \
    add_dial_arguments
from .surfaces import RasterSurface, Surface, SurfaceError, SvgSurface
from .drawing import draw_arc, draw_dot, draw_line, draw_text, draw_triangle
from .scene import readout_text, render_frame
from .animation import AnimationState, Animator, Frame, ImmediateScheduler, \
    PAUSED, RUNNING, STOPPED, frame_states, is_finished, record_frames, step
from .export import save_gif, save_png
from .speedometer import SpeedometerEffect, main
