import logging

import pygame

logger = logging.getLogger(__name__)


class PygameDisplay:
    """
    Window that presents a canvas buffer once per frame.
    """

    def __init__(self, spec):
        self.spec = spec
        pygame.init()
        pygame.display.init()
        pygame.display.set_caption(spec.title)
        self.window = pygame.display.set_mode((spec.width, spec.height))
        # canvas pixels are copied here, then composited over the background
        self.layer = pygame.Surface((spec.width, spec.height), pygame.SRCALPHA)
        self.clock = pygame.time.Clock()
        logger.debug('opened %dx%d window', spec.width, spec.height)

    def show(self, canvas):
        self.window.fill(self.spec.background_rgba.rgba[:3])
        canvas.draw_buffer(self.layer)
        self.window.blit(self.layer, (0, 0))
        pygame.display.flip()
        self.clock.tick(self.spec.fps)

    def poll(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug('window closed')
                return False
        return True

    def close(self):
        pygame.display.quit()
        pygame.quit()