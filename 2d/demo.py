import argparse
import logging
import math

from config import CanvasSpec
from display import PygameDisplay
from geometry import Point

logger = logging.getLogger(__name__)


def border_points(width, height, n):
    """
    N points evenly spaced in angle around the origin, pushed out to the
    canvas border.
    """
    half_w = width // 2 - 1
    half_h = height // 2 - 1
    points = []
    for k in range(n):
        theta = 2 * math.pi * k / n
        dx, dy = math.cos(theta), math.sin(theta)
        scale = min(half_w / abs(dx) if dx else math.inf,
                    half_h / abs(dy) if dy else math.inf)
        points.append(Point(int(dx * scale), int(dy * scale)))
    return points


def draw_fan(canvas, n=16, colour=None):
    origin = Point(0, 0)
    for point in border_points(canvas.width, canvas.height, n):
        canvas.add_line(origin, point)
    return canvas.render_canvas(colour)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Draw a fan of lines.')
    parser.add_argument('--config', help='yaml file with canvas settings')
    parser.add_argument('--lines', type=int, default=16)
    parser.add_argument('--save', metavar='NAME',
                        help='write NAME.png and NAME.txt instead of opening a window')
    args = parser.parse_args(argv)

    spec = CanvasSpec()
    if args.config:
        spec.from_yaml(args.config)
    canvas = spec.make_canvas()
    draw_fan(canvas, args.lines, spec.line_rgba)
    logger.info('drew %d lines on a %dx%d canvas',
                len(canvas.primitives), canvas.width, canvas.height)

    if args.save:
        canvas.save_canvas(args.save)
        canvas.write_spec(args.save)
        return

    display = PygameDisplay(spec)
    try:
        while display.poll():
            display.show(canvas)
    finally:
        display.close()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    main()
