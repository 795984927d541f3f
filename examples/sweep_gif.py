#####################################################################
# Write the speedometer's needle sweep as an animated GIF, using a  #
# mph dial that reads from 0 to 160.                                #
#####################################################################

from speedometer import DialConfig, save_gif

# Define the dial.
cfg = DialConfig(big_steps=9, label_step=20, small_steps=3,
                 unit_text='mph', highlight_color='#d45500',
                 needle_angle=380)

# Render every frame and write them all out.
n_frames = save_gif('sweep.gif', cfg, frame_duration=1/30)
print('Wrote %d frames to sweep.gif' % n_frames)
