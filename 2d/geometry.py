from collections import namedtuple

from PIL import ImageColor

# (0, 0) is the center of the canvas, y grows upwards
Point = namedtuple('Point', ['x', 'y'])


class Colour:
    def __init__(self, r, g, b, a=255):
        for channel in (r, g, b, a):
            if channel < 0 or channel > 255:
                raise ValueError(f'colour channel out of range: {channel}')
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    @property
    def rgba(self):
        return (self.r, self.g, self.b, self.a)

    @property
    def packed(self):
        """
        32-bit 0xRRGGBBAA value.
        """
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def from_packed(cls, value):
        if value < 0 or value > 0xFFFFFFFF:
            raise ValueError(f'packed colour out of range: {value:#x}')
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF,
                   (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_string(cls, name):
        return cls(*ImageColor.getcolor(name, 'RGBA'))

    def __eq__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return self.rgba == other.rgba

    def __hash__(self):
        return hash(self.rgba)

    def __repr__(self):
        return f'Colour{self.rgba}'


Colour.BLACK = Colour(0, 0, 0, 255)
Colour.WHITE = Colour(255, 255, 255, 255)
