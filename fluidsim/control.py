"""Mouse interaction that pulls particles towards or pushes them from the cursor."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from fluidsim.constants import HEIGHT, WIDTH
from fluidsim.water import Water

INFLUENCE_RADIUS = 120.0
PUSH_SPEED = 120.0


class MouseButton(IntEnum):
    """Mouse buttons as numbered by pygame events."""

    LEFT = 1
    RIGHT = 3


class WaterControl:
    """Tracks the mouse and applies its influence to a body of water."""

    def __init__(self, water: Water) -> None:
        self.water = water
        self.is_left_mouse_pressed = False
        self.is_right_mouse_pressed = False
        self.mouse_pos = (0.0, 0.0)

    def set_mouse_position(self, x: float, y: float) -> None:
        """Record the cursor position in window pixels."""
        self.mouse_pos = (float(x), float(y))

    def set_button(self, button: int, pressed: bool) -> None:
        """Record the state of a mouse button; other buttons are ignored."""
        if button == MouseButton.LEFT:
            self.is_left_mouse_pressed = bool(pressed)
        if button == MouseButton.RIGHT:
            self.is_right_mouse_pressed = bool(pressed)

    def update(self) -> None:
        """Apply the effect of whichever buttons are held."""
        if self.is_left_mouse_pressed:
            self.attract_particles()
        if self.is_right_mouse_pressed:
            self.push_away_particles()

    def _mouse_world(self) -> np.ndarray:
        x, y = self.mouse_pos
        return np.array([x - WIDTH // 2, HEIGHT // 2 - y, 0.0])

    def _nudge(self, sign: float) -> None:
        mouse = self._mouse_world()
        for particle in self.water.particles:
            direct = particle.position - mouse
            distance = float(np.linalg.norm(direct))
            # A particle exactly under the cursor has no direction to move in.
            if distance == 0 or distance > INFLUENCE_RADIUS:
                continue
            particle.velocity += sign * (direct / distance) * PUSH_SPEED

    def attract_particles(self) -> None:
        """Pull nearby particles towards the cursor."""
        self._nudge(-1.0)

    def push_away_particles(self) -> None:
        """Push nearby particles away from the cursor."""
        self._nudge(1.0)