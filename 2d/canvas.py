import logging
import math
import numbers

import imageio
import numpy as np
import pygame

from geometry import Colour, Point

logger = logging.getLogger(__name__)


class PixelOutOfRange(IndexError):
    pass


def round_half_up(value):
    return math.floor(value + 0.5)


class Canvas:
    """
    RGBA pixel buffer addressed in centered coordinates:
    (0, 0) is the center, (-x, -y) the bottom left, (x, y) the top right.

    The buffer holds 4 bytes per pixel, row by row from the top left:
    pixel(sx, sy) = buffer[4 * sx + 4 * width * sy]
    """

    def __init__(self, width, height, strict=False):
        if not isinstance(width, numbers.Integral)\
                or not isinstance(height, numbers.Integral)\
                or width <= 0 or height <= 0:
            raise ValueError(f'canvas size must be positive, got {width}x{height}')
        self.BYTES_PER_PIXEL = 4
        self.width = width
        self.height = height
        self.strict = strict
        self.buffer_size = width * height * self.BYTES_PER_PIXEL
        self.primitives = []
        self.new_buffer()

    @property
    def pixels(self):
        return self.buffer.reshape((self.height, self.width,
                                    self.BYTES_PER_PIXEL))

    def new_buffer(self):
        self.buffer = np.zeros(self.buffer_size, dtype='uint8')

    def draw_buffer(self, surface):
        """
        Copy the buffer onto SURFACE at (0, 0). Pixels are replaced, not
        blended; the alpha channel is copied too when SURFACE has one.
        """
        w = min(self.width, surface.get_width())
        h = min(self.height, surface.get_height())
        rgb = pygame.surfarray.pixels3d(surface)
        rgb[:w, :h] = self.pixels[:h, :w, :3].transpose(1, 0, 2)
        del rgb
        if surface.get_flags() & pygame.SRCALPHA:
            alpha = pygame.surfarray.pixels_alpha(surface)
            alpha[:w, :h] = self.pixels[:h, :w, 3].T
            del alpha

    def interpolate(self, i0, d0, i1, d1):
        """
        Dependent values for each integer step of the independent variable
        from I0 up to, but excluding, I1. Values are left as floats.
        """
        if i0 == i1:
            return [d0]

        values = []
        a = (d1 - d0) / (i1 - i0)
        d = d0
        for i in range(i0, i1):
            values.append(d)
            d = d + a
        return values

    def draw_line(self, p0, p1, colour=None):
        p0, p1 = Point(*p0), Point(*p1)
        if p0 == p1:
            self.put_pixel(p0.x, p0.y, colour)
            return

        if abs(p1.x - p0.x) > abs(p1.y - p0.y):
            # horizontal-ish, step along x
            if p0.x > p1.x:
                p0, p1 = p1, p0
            ys = self.interpolate(p0.x, p0.y, p1.x, p1.y)
            for x in range(p0.x, p1.x):
                self.put_pixel(x, ys[x - p0.x], colour)
        else:
            # vertical-ish, step along y
            if p0.y > p1.y:
                p0, p1 = p1, p0
            xs = self.interpolate(p0.y, p0.x, p1.y, p1.x)
            for y in range(p0.y, p1.y):
                self.put_pixel(xs[y - p0.y], y, colour)

    def put_pixel(self, x, y, colour=None):
        # y is flipped, buffer rows grow downwards
        fx = self.width / 2 + x
        fy = self.height / 2 - y
        in_range = math.isfinite(fx) and math.isfinite(fy)
        if in_range:
            sx = round_half_up(fx)
            sy = round_half_up(fy)
            in_range = 0 <= sx < self.width and 0 <= sy < self.height

        if not in_range:
            if self.strict:
                raise PixelOutOfRange(f'pixel ({x}, {y}) is outside '
                                      f'{self.width}x{self.height}')
            logger.warning('pixel out of range: (%s, %s)', x, y)
            return

        if colour is None:
            colour = Colour.BLACK
        offset = self.BYTES_PER_PIXEL * sx\
            + self.BYTES_PER_PIXEL * self.width * sy
        self.buffer[offset:offset + self.BYTES_PER_PIXEL] = colour.rgba

    def add_line(self, p0, p1):
        (x0, y0), (x1, y1) = p0, p1
        return self._add_primitive_struct('line', [x0, y0, x1, y1])

    def _add_primitive_struct(self, prim_name, args):
        struct = (prim_name, args)
        self.primitives.append(struct)
        return struct

    def clear_primitives(self):
        self.primitives = []

    def render_canvas(self, colour=None):
        self.new_buffer()
        for command_name, command_args in self.primitives:
            if command_name == 'line':
                x0, y0, x1, y1 = command_args
                self.draw_line(Point(x0, y0), Point(x1, y1), colour)
        return self.buffer

    def write_spec(self, filename='spec'):
        with open(f'{filename}.txt', 'w') as spec_file:
            for command_name, command_args in self.primitives:
                spec_file.write(f'{command_name}{tuple(command_args)}\n')
            spec_file.write('\n')

    def save_canvas(self, filename='img'):
        FILETYPE = 'png'
        imageio.imwrite(f'{filename}.{FILETYPE}', self.pixels)
        return filename
