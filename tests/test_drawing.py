##############################################
# Define a set of unit tests for the drawing #
# primitives and the drawing surfaces.       #
##############################################

from speedometer.drawing import draw_arc, draw_dot, draw_line, draw_text, \
    draw_triangle
from speedometer.surfaces import RasterSurface, SurfaceError, SvgSurface
from inkex.tester import TestCase
from recording_surface import RecordingSurface
import inkex
from lxml import etree


class DrawingPrimitiveTest(TestCase):
    'Test how primitives translate styles into surface operations.'

    def setUp(self):
        super().setUp()
        self.surface = RecordingSurface()

    def test_dot_defaults(self):
        draw_dot(self.surface, (10, 20))
        self.assertEqual(self.surface.calls,
                         [('circle', {'center': (10, 20), 'radius': 5,
                                      'color': 'black'})])

    def test_partial_style(self):
        draw_line(self.surface, (0, 0), (5, 5), color='red')
        (args,) = self.surface.named('line')
        self.assertEqual(args['color'], 'red')
        self.assertEqual(args['width'], 2)

    def test_none_selects_default(self):
        draw_dot(self.surface, (0, 0), radius=None, color='blue')
        (args,) = self.surface.named('circle')
        self.assertEqual(args['radius'], 5)

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            draw_line(self.surface, (0, 0), (1, 1), stroke_width=3)

    def test_arc_directions(self):
        draw_arc(self.surface, (0, 0), 10, 135, 405)
        draw_arc(self.surface, (0, 0), 10, 135, 405,
                 direction='counterclockwise')
        sweeps = [args['sweep'] for args in self.surface.named('arc')]
        self.assertEqual(sweeps, [270, -90])

    def test_bad_arc_direction(self):
        with self.assertRaises(ValueError):
            draw_arc(self.surface, (0, 0), 10, 0, 90, direction='sideways')

    def test_text_is_not_centered(self):
        draw_text(self.surface, (100, 200), 40, size=12)
        (args,) = self.surface.named('text')
        self.assertEqual(args['anchor'], (100, 200))
        self.assertEqual(args['msg'], '40')
        self.assertEqual(args['font'], 'Arial')

    def test_triangle(self):
        draw_triangle(self.surface, [(0, 0), (10, 0), (5, 8)], color='green')
        (args,) = self.surface.named('polygon')
        self.assertEqual(args['points'], [(0, 0), (10, 0), (5, 8)])
        self.assertEqual(args['color'], 'green')
        with self.assertRaises(ValueError):
            draw_triangle(self.surface, [(0, 0), (10, 0)])

    def test_offscreen_geometry(self):
        surface = RasterSurface(50, 50)
        draw_line(surface, (-100, -100), (500, 20))
        draw_dot(surface, (1000, 1000), radius=30)
        draw_arc(surface, (25, 25), 300, 0, 90)


class SvgSurfaceTest(TestCase):
    'Test drawing into SVG documents.'

    def test_new_document(self):
        surface = SvgSurface(300, 200)
        self.assertEqual(surface.svg_root.get('width'), '300')
        self.assertEqual(surface.svg_root.get('viewBox'), '0 0 300 200')
        self.assertIn(b'Speedometer', surface.tostring())

    def test_layer_uses_inkscape_prefix(self):
        out = SvgSurface(300, 200).tostring()
        self.assertIn(b'xmlns:inkscape=', out)
        self.assertIn(b'inkscape:groupmode="layer"', out)
        self.assertNotIn(b'xmlns:ns', out)

    def test_elements(self):
        surface = SvgSurface(100, 100)
        draw_dot(surface, (50, 50), radius=4, color='red')
        draw_line(surface, (0, 0), (10, 10), width=3)
        draw_arc(surface, (50, 50), 20, 0, 180, color='blue')
        draw_text(surface, (5, 95), 'km/h', size=30)
        draw_triangle(surface, [(0, 0), (10, 0), (5, 8)])
        tags = [etree.QName(child).localname for child in surface.group]
        self.assertEqual(tags, ['circle', 'line', 'path', 'text', 'polygon'])
        circle = surface.group.xpath('./svg:circle')[0]
        self.assertEqual(circle.get('r'), '4')
        self.assertIn('fill:red', circle.get('style'))
        text = surface.group.xpath('./svg:text')[0]
        self.assertEqual(text.text, 'km/h')
        self.assertIn('font-size:30px', text.get('style'))

    def test_arc_path(self):
        surface = SvgSurface(100, 100)
        draw_arc(surface, (50, 50), 20, 0, 270)
        path = surface.group.xpath('./svg:path')[0].path
        self.assertEqual(len(path), 4)   # One move and three arcs
        end = path[-1]
        self.assertAlmostEqual(end.x, 50)
        self.assertAlmostEqual(end.y, 30)

    def test_clear_and_snapshot(self):
        surface = SvgSurface(100, 100, inkex.Group())
        draw_dot(surface, (1, 1))
        snap = surface.snapshot()
        surface.clear()
        self.assertEqual(len(surface.group), 0)
        self.assertEqual(len(snap), 1)

    def test_existing_group_has_no_document(self):
        surface = SvgSurface(100, 100, inkex.Group())
        with self.assertRaises(SurfaceError):
            surface.tostring()

    def test_bad_size(self):
        with self.assertRaises(SurfaceError):
            SvgSurface(0, 100)
        with self.assertRaises(SurfaceError):
            RasterSurface(100, -1)


class RasterSurfaceTest(TestCase):
    'Test drawing into Pillow images.'

    def test_clear(self):
        surface = RasterSurface(20, 20, background='white')
        draw_dot(surface, (10, 10), radius=5, color='black')
        self.assertEqual(surface.image.getpixel((10, 10)), (0, 0, 0, 255))
        surface.clear()
        self.assertEqual(surface.image.getpixel((10, 10)),
                         (255, 255, 255, 255))

    def test_snapshot_is_independent(self):
        surface = RasterSurface(20, 20)
        snap = surface.snapshot()
        draw_dot(surface, (10, 10), radius=5, color='black')
        self.assertEqual(snap.getpixel((10, 10)), (255, 255, 255, 255))

    def test_triangle_fill(self):
        surface = RasterSurface(40, 40)
        draw_triangle(surface, [(0, 0), (39, 0), (0, 39)], color='red')
        self.assertEqual(surface.image.getpixel((5, 5)), (255, 0, 0, 255))
        self.assertEqual(surface.image.getpixel((35, 35)),
                         (255, 255, 255, 255))

    def test_arc_stroke_is_centered(self):
        surface = RasterSurface(100, 100)
        draw_arc(surface, (50, 50), 30, 0, 360, width=10, color='blue')
        self.assertEqual(surface.image.getpixel((80, 50)), (0, 0, 255, 255))
        self.assertEqual(surface.image.getpixel((50, 50)),
                         (255, 255, 255, 255))

    def test_zero_sweep_draws_nothing(self):
        surface = RasterSurface(100, 100)
        before = surface.image.tobytes()
        draw_arc(surface, (50, 50), 30, 135, 135, width=10)
        self.assertEqual(surface.image.tobytes(), before)
