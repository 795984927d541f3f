#####################################################################
# Draw a single speedometer frame into a new SVG document.          #
#####################################################################

from speedometer import DialConfig, SvgSurface, render_frame

cfg = DialConfig(needle_angle=250, value_text='42')
surface = SvgSurface(cfg.width, cfg.height)
render_frame(surface, cfg, cfg.needle_angle, cfg.value_text)
with open('speedometer.svg', 'wb') as w:
    w.write(surface.tostring())
