""" pygame host: a drawing panel on the left, the epicycle animation on the right """

import logging

import pygame

from epicycles.config import settings
from epicycles.geometry import GridCell, distance
from epicycles.playback import TickQueue
from epicycles.session import Session

logger = logging.getLogger(__name__)

black = 0, 0, 0
white = 255, 255, 255
background_color = white
pixel_color = black
arm_color = 155, 0, 155, 77         # translucent purple
circle_color = 60, 60, 60, 40
path_color = black
fade_color = 255, 255, 255, 26      # white at 10% opacity, leaves a short afterimage
divider_color = 200, 200, 200
arm_width = 5
path_width = 3
joint_size = 4


class DrawPanel:
    """ the drawing surface: turns pointer positions into grid cells and paints them """

    def __init__(self, size, cell_size):
        self.size = size
        self.cell_size = cell_size
        self.surface = pygame.Surface((size, size))
        self.clear()

    def get_cell(self, pos):
        """ returns the cell under a pixel position, clamped to the panel """
        x = min(max(pos[0], 0), self.size - 1)
        y = min(max(pos[1], 0), self.size - 1)
        return GridCell(int(y // self.cell_size), int(x // self.cell_size))

    def contains(self, pos):
        return 0 <= pos[0] < self.size and 0 <= pos[1] < self.size

    def draw_cells(self, cells):
        for cell in cells:
            left = int(cell.col * self.cell_size)
            top = int(cell.row * self.cell_size)
            width = max(1, int((cell.col + 1) * self.cell_size) - left)    # cells are fractional pixels wide
            height = max(1, int((cell.row + 1) * self.cell_size) - top)
            pygame.draw.rect(self.surface, pixel_color, pygame.Rect(left, top, width, height))

    def clear(self):
        self.surface.fill(background_color)


class AnimationPanel:
    """ the playback surface: renders each RenderFrame over a slowly fading background """

    def __init__(self, size, draw_circles=False):
        self.size = size
        self.draw_circles = draw_circles
        self.surface = pygame.Surface((size, size))
        self.fade = pygame.Surface((size, size), pygame.SRCALPHA)
        self.fade.fill(fade_color)
        self.clear()

    @property
    def origin(self):
        """ pixel position the arm chain starts from """
        return self.size / 2, self.size / 2

    def render(self, frame):
        """ draws the arm chain from the origin and the trail traced so far """
        self.surface.blit(self.fade, (0, 0))

        overlay = pygame.Surface((self.size, self.size), pygame.SRCALPHA)
        x, y = frame.origin
        for px, py in frame.arms:
            if self.draw_circles:
                radius = int(distance((x, y), (px, py)))
                if radius > 1:
                    pygame.draw.circle(overlay, circle_color, (int(x), int(y)), radius, 1)
            pygame.draw.line(overlay, arm_color, (x, y), (px, py), arm_width)
            overlay.fill(arm_color, pygame.Rect(int(px) - joint_size // 2, int(py) - joint_size // 2, joint_size, joint_size))
            x, y = px, py
        self.surface.blit(overlay, (0, 0))

        if len(frame.trail) > 1:
            pygame.draw.lines(self.surface, path_color, False, [tuple(p) for p in frame.trail], path_width)

    def clear(self):
        self.surface.fill(background_color)


def main():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    pygame.init()
    size = settings.window_size
    screen = pygame.display.set_mode((2 * size, size))
    pygame.display.set_caption("Epicycles")
    clock = pygame.time.Clock()

    draw_panel = DrawPanel(size, settings.cell_size)
    anim_panel = AnimationPanel(size, settings.draw_circles)
    ticks = TickQueue()
    session = Session.from_settings(ticks, anim_panel.render, settings, anim_panel.origin)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                return
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and draw_panel.contains(event.pos):
                draw_panel.draw_cells(session.sketch.gesture_start(draw_panel.get_cell(event.pos)))
            if event.type == pygame.MOUSEMOTION and session.sketch.drawing:
                draw_panel.draw_cells(session.sketch.gesture_extend(draw_panel.get_cell(event.pos)))
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                session.sketch.gesture_end()
            if event.type == pygame.WINDOWFOCUSLOST:
                session.sketch.gesture_cancel()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit()
                    return
                if event.key in (pygame.K_RETURN, pygame.K_g):
                    anim_panel.clear()
                    session.generate()
                if event.key in (pygame.K_r, pygame.K_c):
                    session.reset_all()
                    draw_panel.clear()
                    anim_panel.clear()

        ticks.run_pending()

        screen.blit(draw_panel.surface, (0, 0))
        screen.blit(anim_panel.surface, (size, 0))
        pygame.draw.line(screen, divider_color, (size, 0), (size, size), 1)
        pygame.display.flip()
        clock.tick(settings.fps)


if __name__ == "__main__":
    main()
