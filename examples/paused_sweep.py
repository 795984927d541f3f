#####################################################################
# Drive a speedometer animation by hand, pausing halfway through    #
# the sweep and saving what the dial showed at that moment.         #
#####################################################################

from speedometer import Animator, DialConfig, ImmediateScheduler, \
    RasterSurface

cfg = DialConfig()
surface = RasterSurface(cfg.width, cfg.height, cfg.background_color)
scheduler = ImmediateScheduler(interval=1/60)


def watch(frame):
    'Pause when the needle reaches the middle of the dial.'
    if frame.needle_angle == 270:
        animator.pause()
        surface.image.save('halfway.png')


animator = Animator(surface, cfg, scheduler, on_frame=watch)
animator.start()
scheduler.run()

# Finish the sweep.
animator.resume()
scheduler.run()
surface.image.save('final.png')
