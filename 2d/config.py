import pathlib

import yaml

from canvas import Canvas
from geometry import Colour


class CanvasSpec:
    """
    Canvas and window settings, loadable from and savable to a yaml file.
    """

    def __init__(self, width=400, height=400, strict=False,
                 line_colour='#000000', background='#ffffff', fps=30,
                 title='canvas'):
        """
        STRICT makes the canvas raise on out of range pixels instead of
        dropping them. LINE_COLOUR and BACKGROUND are any colour string
        Pillow understands; BACKGROUND is the window fill behind the canvas.
        """
        self.width = width
        self.height = height
        self.strict = strict
        self.line_colour = line_colour
        self.background = background
        self.fps = fps
        self.title = title

    def from_yaml(self, filename):
        d = yaml.safe_load(pathlib.Path(filename).read_text()) or {}
        unknown = [key for key in d if key not in vars(self)]
        if unknown:
            raise ValueError(f'unknown canvas settings: {", ".join(map(str, unknown))}')
        for key in d:
            setattr(self, key, d[key])
        return self

    def save_file(self, filename):
        with open(filename, 'w+') as ff:
            yaml.safe_dump(dict(vars(self)), ff)

    def make_canvas(self):
        return Canvas(self.width, self.height, strict=self.strict)

    @property
    def line_rgba(self):
        return Colour.from_string(self.line_colour)

    @property
    def background_rgba(self):
        return Colour.from_string(self.background)
