##############################################
# Define a set of unit tests for the         #
# speedometer Inkscape extension.            #
##############################################

from speedometer.speedometer import SpeedometerEffect, frame_timing
from inkex.tester import TestCase


class SpeedometerEffectTest(TestCase):
    'Run the extension on a default Inkscape document.'
    effect_class = SpeedometerEffect

    def run_effect(self, *args):
        return self.assertEffect('svg', 'default-inkscape-SVG.svg',
                                 args=list(args))

    def dial(self, effect):
        (dial,) = effect.svg.xpath('//svg:g[@inkscape:label="Speedometer"]')
        return dial

    def test_static(self):
        dial = self.dial(self.run_effect())
        self.assertEqual(dial.getparent().get('id'), 'layer1')
        self.assertEqual(len(dial.xpath('./svg:path')), 3)
        self.assertEqual(len(dial.xpath('./svg:line')), 62)
        texts = dial.xpath('./svg:text')
        self.assertEqual([t.text for t in texts[-2:]], ['72', 'km/h'])

    def test_static_options(self):
        dial = self.dial(self.run_effect('--value-text=12',
                                         '--unit-text=mph',
                                         '--big-steps=6',
                                         '--small-steps=1'))
        self.assertEqual(len(dial.xpath('./svg:line')), 11 + 6)
        texts = [t.text for t in dial.xpath('./svg:text')]
        self.assertEqual(texts, ['0', '10', '20', '30', '40', '50',
                                 '12', 'mph'])

    def test_animation(self):
        dial = self.dial(self.run_effect('--animate=true',
                                         '--animation-step=50',
                                         '--frame-duration=0.5'))
        frames = dial.xpath('./svg:g')
        self.assertEqual([f.get('inkscape:label') for f in frames],
                         ['Frame %d' % i for i in range(1, 6)])
        for frame in frames[:-1]:
            self.assertEqual(frame.get('style'), 'display:none')
        self.assertIsNone(frames[-1].get('style'))
        readouts = [f.xpath('./svg:text')[-2].text for f in frames]
        self.assertEqual(readouts, ['0', '19', '37', '56', '74'])
        anim = frames[1].xpath('./svg:animate')[0]
        self.assertEqual(anim.get('attributeName'), 'display')
        self.assertEqual(anim.get('values'), 'none; inline; none')
        self.assertEqual(anim.get('keyTimes'), '0; 0.2; 0.4')
        self.assertEqual(anim.get('dur'), '2.5s')
        self.assertEqual(anim.get('calcMode'), 'discrete')

    def test_bad_configuration(self):
        with self.assertRaises(SystemExit):
            self.run_effect('--start-angle=400', '--end-angle=100')


class FrameTimingTest(TestCase):
    'Test the SMIL timing of recorded frames.'

    def test_first_middle_last(self):
        self.assertEqual(frame_timing(0, 4), ('inline; none', '0; 0.25'))
        self.assertEqual(frame_timing(2, 4),
                         ('none; inline; none', '0; 0.5; 0.75'))
        self.assertEqual(frame_timing(3, 4), ('none; inline', '0; 0.75'))
