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

import math

import inkex
import lxml.etree
import PIL.ImageFont


# Labels fall back to this size when a font string omits one.
_default_font_size = 15.0

# Try this font file when the requested family cannot be found.
_fallback_font_file = 'DejaVuSans.ttf'


def _python_to_svg_str(val):
    'Convert a Python value to a string suitable for use in an SVG attribute.'
    if isinstance(val, str):
        # Strings are used unmodified.
        return val
    if isinstance(val, bool):
        # Booleans are converted to lowercase strings.
        return str(val).lower()
    if isinstance(val, float):
        # Floats are converted using a fair number of significant digits.
        return '%.10g' % val
    return str(val)  # Everything else is converted to a string as usual.


def _style_str(**style):
    '''Convert keyword arguments to an SVG style string, mapping
    underscores to hyphens and dropping keys whose value is None.'''
    style = {k.replace('_', '-'): _python_to_svg_str(v)
             for k, v in style.items() if v is not None}
    return ';'.join(['%s:%s' % kv for kv in style.items()])


def parse_font(font):
    '''Split a font string of the form "Family,size" into a family name
    and a size in pixels.'''
    family, _, size = font.partition(',')
    family = family.strip()
    size = size.strip()
    if size == '':
        return family, _default_font_size
    try:
        size = float(size)
    except ValueError:
        size = math.nan
    if not (math.isfinite(size) and size > 0):
        raise ValueError('Font size must be a positive number in "%s"' % font)
    return family, size


class SvgSurface():
    'Issue primitive drawing commands as SVG elements.'

    def __init__(self, svg_root, attach=None):
        self.svg_root = svg_root
        if attach is None:
            attach = self.find_attach_point()
        self.svg_attach = attach
        self._fonts = {}

    def find_attach_point(self):
        '''Return a suitable point in the SVG XML tree at which to attach
        new objects.'''
        # The Inkscape GUI automatically adds a <sodipodi:namedview> element
        # with an inkscape:current-layer attribute, and this will name either
        # an actual layer or the <svg> element itself.  In this case, we return
        # the layer pointed to by inkscape:current-layer.
        svg = self.svg_root
        try:
            namedview = svg.findone('sodipodi:namedview')
            cur_layer_name = namedview.get('inkscape:current-layer')
            return svg.xpath('//*[@id="%s"]' % cur_layer_name)[0]
        except (AttributeError, IndexError):
            pass

        # Documents produced outside the GUI may lack a namedview or the
        # current-layer attribute.  Fall back to the topmost layer.
        try:
            return svg.xpath('//svg:g[@inkscape:groupmode="layer"]')[-1]
        except IndexError:
            pass

        # A very minimal SVG input may contain no layers at all.
        return svg

    @property
    def viewbox(self):
        'Return the viewbox as a list of four floats.'
        vbox = self.svg_root.get_viewbox()
        if vbox == [0, 0, 0, 0]:
            try:
                # Inkscape 1.2+
                vbox = [0, 0,
                        self.svg_root.viewport_width,
                        self.svg_root.viewport_height]
            except AttributeError:
                # Inkscape 1.1
                vbox = [0, 0, self.svg_root.width, self.svg_root.height]
        return vbox

    @property
    def width(self):
        'Return the width of the canvas in user units.'
        return self.viewbox[2]

    def _append(self, obj, **style):
        'Style an inkex object and attach it to the document.'
        style_str = _style_str(**style)
        if style_str != '':
            obj.style = style_str
        self.svg_attach.append(obj)
        return obj

    def draw_line(self, pt1, pt2, color):
        'Draw a line between two points.'
        pt1, pt2 = inkex.Vector2d(pt1), inkex.Vector2d(pt2)
        obj = inkex.Line(x1=_python_to_svg_str(float(pt1.x)),
                         y1=_python_to_svg_str(float(pt1.y)),
                         x2=_python_to_svg_str(float(pt2.x)),
                         y2=_python_to_svg_str(float(pt2.y)))
        return self._append(obj, stroke=color)

    def draw_circle(self, center, radius, fill, stroke=None):
        'Draw a filled circle, optionally outlined.'
        center = inkex.Vector2d(center)
        obj = inkex.Circle(cx=_python_to_svg_str(float(center.x)),
                           cy=_python_to_svg_str(float(center.y)),
                           r=_python_to_svg_str(float(radius)))
        return self._append(obj, fill=fill, stroke=stroke)

    def load_font(self, font):
        'Return a Pillow font matching a "Family,size" string.'
        try:
            return self._fonts[font]
        except KeyError:
            pass
        family, size = parse_font(font)
        pil_font = None
        for fname in [family, _fallback_font_file]:
            try:
                pil_font = PIL.ImageFont.truetype(fname, size)
                break
            except OSError:
                pass
        if pil_font is None:
            # Neither font file exists.  Use Pillow's own scalable font.
            pil_font = PIL.ImageFont.load_default(size)
        self._fonts[font] = pil_font
        return pil_font

    def measure_text(self, font, msg):
        'Return the width and height of a string rendered in a given font.'
        pil_font = self.load_font(font)
        ascent, descent = pil_font.getmetrics()
        return pil_font.getlength(msg), float(ascent + descent)

    def draw_text(self, top_left, msg, color, font):
        '''Typeset a string so that its measured box begins at a given
        upper-left corner.'''
        top_left = inkex.Vector2d(top_left)
        family, size = parse_font(font)
        ascent, _ = self.load_font(font).getmetrics()

        # SVG positions text by its baseline, not its top.
        obj = inkex.TextElement(x=_python_to_svg_str(float(top_left.x)),
                                y=_python_to_svg_str(float(top_left.y +
                                                           ascent)))
        obj.set('xml:space', 'preserve')
        obj.text = msg
        return self._append(obj, fill=color, font_family=family,
                            font_size='%spx' % _python_to_svg_str(size))

    def fill_background(self, top_color, bottom_color):
        '''Cover the canvas with a rectangle whose color fades vertically
        from top_color to bottom_color.'''
        grad = inkex.LinearGradient()
        grad.set('x1', '0')
        grad.set('y1', '0')
        grad.set('x2', '0')
        grad.set('y2', '1')
        for ofs, color in [(0, top_color), (1, bottom_color)]:
            stop = inkex.Stop()
            stop.offset = ofs
            stop.set('stop-color', color)
            grad.append(stop)
        self.svg_root.defs.append(grad)

        # Draw the rectangle beneath everything else on the canvas.
        vbox = self.viewbox
        obj = inkex.Rectangle(x=_python_to_svg_str(float(vbox[0])),
                              y=_python_to_svg_str(float(vbox[1])),
                              width=_python_to_svg_str(float(vbox[2])),
                              height=_python_to_svg_str(float(vbox[3])))
        obj.style = _style_str(fill=grad.get_id(as_url=2), stroke='none')
        self.svg_attach.insert(0, obj)
        return obj

    def svg(self, pretty_print=False):
        'Return the entire document as a string.'
        if pretty_print:
            return lxml.etree.tostring(self.svg_root,
                                       encoding='unicode',
                                       pretty_print=True)
        return self.svg_root.tostring().decode('utf-8')
