###############################################
# Define a set of unit tests for drawing tree #
# primitives as SVG elements.                 #
###############################################

from simpinktree.svg_surface import parse_font, SvgSurface
from inkex.tester import TestCase
from io import BytesIO
import inkex


class SvgSurfaceTestBase(TestCase):
    'Provide a fresh 700x320 document for each test.'

    def setUp(self):
        super().setUp()
        doc = inkex.load_svg(self.data_file('svg', 'tree-canvas.svg'))
        self.svg = doc.getroot()
        self.surface = SvgSurface(self.svg)


class SvgSurfaceCanvasTest(SvgSurfaceTestBase):
    'Test how the surface finds its canvas.'

    def test_attach_to_current_layer(self):
        assert self.surface.svg_attach.get('id') == 'layer1'

    def test_attach_to_bare_root(self):
        svg = inkex.load_svg(BytesIO(
            b'<svg xmlns="http://www.w3.org/2000/svg"'
            b' width="400" height="200"/>')).getroot()
        surface = SvgSurface(svg)
        assert surface.svg_attach is svg

    def test_explicit_attach_point(self):
        group = inkex.Group()
        self.svg.append(group)
        surface = SvgSurface(self.svg, group)
        surface.draw_line((0, 0), (1, 1), 'black')
        assert len(group) == 1

    def test_canvas_size_from_viewbox(self):
        assert self.surface.width == 700
        assert self.surface.viewbox == [0, 0, 700, 320]

    def test_canvas_size_without_viewbox(self):
        svg = inkex.load_svg(BytesIO(
            b'<svg xmlns="http://www.w3.org/2000/svg"'
            b' width="400" height="200"/>')).getroot()
        surface = SvgSurface(svg)
        assert surface.width == 400


class SvgSurfaceShapeTest(SvgSurfaceTestBase):
    'Test the line and circle primitives.'

    def test_draw_line(self):
        obj = self.surface.draw_line(inkex.Vector2d(10, 20.5), (30, 40),
                                     '#ffffff')
        assert obj.getparent().get('id') == 'layer1'
        assert obj.get('x1') == '10'
        assert obj.get('y1') == '20.5'
        assert obj.get('x2') == '30'
        assert obj.get('y2') == '40'
        assert obj.get('style') == 'stroke:#ffffff'

    def test_draw_circle(self):
        obj = self.surface.draw_circle(inkex.Vector2d(350, 77), 12,
                                       '#ff0000', '#ffffff')
        assert obj.get('cx') == '350'
        assert obj.get('cy') == '77'
        assert obj.get('r') == '12'
        assert obj.get('style') == 'fill:#ff0000;stroke:#ffffff'

    def test_draw_circle_without_outline(self):
        obj = self.surface.draw_circle((5, 5), 2, 'blue')
        assert obj.get('style') == 'fill:blue'

    def test_drawing_order_is_document_order(self):
        self.surface.draw_line((0, 0), (10, 10), 'white')
        self.surface.draw_circle((10, 10), 3, 'red')
        tags = [el.TAG for el in self.surface.svg_attach]
        assert tags == ['line', 'circle']


class SvgSurfaceTextTest(SvgSurfaceTestBase):
    'Test font handling and text placement.'

    def test_parse_font(self):
        assert parse_font('Arial,15') == ('Arial', 15.0)
        assert parse_font('DejaVu Sans, 12.5') == ('DejaVu Sans', 12.5)
        assert parse_font('Serif') == ('Serif', 15.0)

    def test_parse_font_bad_size(self):
        with self.assertRaises(ValueError):
            parse_font('Arial,big')

    def test_parse_font_size_must_be_positive(self):
        for font in ['Arial,nan', 'Arial,inf', 'Arial,0', 'Arial,-4']:
            with self.assertRaises(ValueError):
                parse_font(font)

    def test_fonts_are_cached(self):
        font = self.surface.load_font('Arial,15')
        assert self.surface.load_font('Arial,15') is font

    def test_measure_text(self):
        wd1, ht1 = self.surface.measure_text('Arial,15', '1')
        wd2, ht2 = self.surface.measure_text('Arial,15', '1234')
        assert wd1 > 0
        assert wd2 > wd1
        assert ht1 == ht2
        assert ht1 > 0

    def test_measure_text_scales_with_size(self):
        small = self.surface.measure_text('Arial,10', '123')
        large = self.surface.measure_text('Arial,30', '123')
        assert large[0] > small[0]
        assert large[1] > small[1]

    def test_draw_text(self):
        ascent, _ = self.surface.load_font('Arial,15').getmetrics()
        obj = self.surface.draw_text(inkex.Vector2d(100, 50), '12',
                                     'white', 'Arial,15')
        assert obj.text == '12'
        assert float(obj.get('x')) == 100
        assert float(obj.get('y')) == 50 + ascent
        style = obj.get('style')
        assert 'fill:white' in style
        assert 'font-family:Arial' in style
        assert 'font-size:15px' in style


class SvgSurfaceDocumentTest(SvgSurfaceTestBase):
    'Test whole-document operations.'

    def test_fill_background(self):
        self.surface.draw_circle((10, 10), 3, 'red')
        rect = self.surface.fill_background('#000000', '#1e5a8c')
        assert self.surface.svg_attach[0] is rect
        assert rect.get('width') == '700'
        assert rect.get('height') == '320'
        grads = self.svg.xpath('//svg:linearGradient')
        assert len(grads) == 1
        assert 'fill:url(#%s)' % grads[0].get('id') in rect.get('style')
        stops = [s.get('stop-color') for s in grads[0]]
        assert stops == ['#000000', '#1e5a8c']

    def test_svg_output(self):
        self.surface.draw_circle((10, 10), 3, 'red')
        out = self.surface.svg()
        assert '<circle' in out
        assert 'layer1' in out
        pretty = self.surface.svg(pretty_print=True)
        assert '<circle' in pretty
        assert '\n' in pretty
