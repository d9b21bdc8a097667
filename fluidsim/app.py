"""Window setup and the main simulation loop."""

from __future__ import annotations

import argparse

from fluidsim.constants import HEIGHT, WIDTH, SPHConstants
from fluidsim.control import WaterControl
from fluidsim.water import Water

TITLE = "FLUIDSIM BY GENIUS"
FRAME_RATE = 60
BACKGROUND = (0, 0, 0)


def create_window():
    """Initialise pygame and open the simulation window."""
    import pygame

    pygame.init()
    surface = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    return surface


def default_water() -> Water:
    """The water body the simulation starts with."""
    return Water(4, 25, SPHConstants(50.0, 2000.0, 1000.0, 625000.0))


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="fluidsim", description="2D SPH fluid simulation.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames instead of running until the window closes",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the simulation until the window is closed."""
    import pygame

    args = _parse_args(argv)
    surface = create_window()
    water = default_water()
    control = WaterControl(water)
    clock = pygame.time.Clock()
    dt = 1 / FRAME_RATE
    frame = 0

    try:
        running = True
        while running and (args.frames is None or frame < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    control.set_mouse_position(*event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    control.set_button(event.button, True)
                elif event.type == pygame.MOUSEBUTTONUP:
                    control.set_button(event.button, False)
            if not running:
                break

            surface.fill(BACKGROUND)
            water.draw(surface)
            water.update(dt)
            control.update()
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frame += 1
    finally:
        pygame.quit()

    return 0