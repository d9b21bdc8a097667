"""Particles of the fluid and the SPH kernel, density and pressure helpers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from fluidsim.constants import HEIGHT, WIDTH, SPHConstants

log = logging.getLogger(__name__)

GRAVITY = 980.0
_COLOR_SPEED_SCALE = 150.0
_DRAW_SEGMENTS = 30


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3).copy()


def _zero3() -> np.ndarray:
    return np.zeros(3)


def generate_circle_vertices(
    center_x: float, center_y: float, radius: float, num_segments: int
) -> list[tuple[float, float]]:
    """Return the outline of a circle in normalised device coordinates."""
    step = 2.0 * math.pi / num_segments
    half_w = WIDTH // 2
    half_h = HEIGHT // 2
    return [
        (
            (center_x + radius * math.cos(k * step)) / half_w,
            (center_y + radius * math.sin(k * step)) / half_h,
        )
        for k in range(num_segments)
    ]


def _sigma(smooth_radius: float) -> float:
    return 10.0 / (7.0 * math.pi * smooth_radius * smooth_radius)


def kernel_function(distance: float, smooth_radius: float) -> float:
    """Cubic spline smoothing kernel in two dimensions."""
    q = distance / smooth_radius
    sigma = _sigma(smooth_radius)
    if 0 <= q < 1:
        return sigma * (1 - 1.5 * q * q + 0.75 * q * q * q)
    if 1 <= q < 2:
        return sigma * ((2 - q) ** 3 / 4.0)
    return 0.0


def gradient_kernel_function(d, smooth_radius: float) -> np.ndarray:
    """Gradient of the cubic spline kernel with respect to the offset ``d``."""
    d = _vec3(d)
    r = float(np.linalg.norm(d))
    if r < 1e-5:
        return _zero3()
    q = r / smooth_radius
    sigma = _sigma(smooth_radius)
    if 0 <= q < 1:
        dw_dq = sigma * (-3.0 * q + 2.25 * q * q)
    elif 1 <= q < 2:
        dw_dq = sigma * -0.75 * (2.0 - q) ** 2
    else:
        return _zero3()
    return (dw_dq / smooth_radius) * (d / r)


def calc_density_field(circles: Sequence[Circle], config: SPHConstants) -> list[float]:
    """Density at every particle, floored at a tenth of the rest density."""
    cutoff = 2.0 * config.smooth_radius
    floor = config.density * 0.1
    densities = []
    for circle in circles:
        total = 0.0
        for other in circles:
            if other is circle:
                continue
            dist = float(np.linalg.norm(circle.position - other.position))
            if dist < cutoff:
                total += config.mass_particle * kernel_function(dist, config.smooth_radius)
        value = max(total, floor)
        log.debug("density %s", value)
        densities.append(value)
    return densities


def calc_pressure_field(density_field: Sequence[float], config: SPHConstants) -> list[float]:
    """Pressure from density by the linear equation of state."""
    return [config.rigidity * (rho - config.density) for rho in density_field]


def pressure_force(
    circles: Sequence[Circle],
    current: int,
    density_field: Sequence[float],
    pressure_field: Sequence[float],
    config: SPHConstants,
) -> np.ndarray:
    """Pressure force acting on the particle at index ``current``."""
    here = circles[current].position
    own = pressure_field[current] / (density_field[current] ** 2)
    total = _zero3()
    for index, (other, rho, pressure) in enumerate(zip(circles, density_field, pressure_field)):
        if index == current:
            continue
        part = own - pressure / (rho * rho)
        total += config.mass_particle * part * gradient_kernel_function(
            here - other.position, config.smooth_radius
        )
    log.debug("pressure force %s", total)
    return -total


@dataclass(eq=False)
class Circle:
    """A single fluid particle drawn as a filled circle."""

    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    radius: float
    color: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.velocity = _vec3(self.velocity)
        self.acceleration = _vec3(self.acceleration)
        self.color = _vec3(self.color)
        self.radius = float(self.radius)

    def update(self, dt: float) -> None:
        """Advance velocity, then position, by one time step."""
        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt

    def physical(self, others: Sequence[Circle], config: SPHConstants) -> None:
        """Apply walls, collisions, gravity and SPH pressure from ``others``."""
        half_w = WIDTH // 2
        half_h = HEIGHT // 2
        floor = -half_h + self.radius
        if self.position[1] < floor:
            self.position[1] = floor
            self.velocity[1] = 0.0
        if self.position[0] < -half_w:
            self.position[0] = -half_w
            self.velocity[0] = 0.0
        if self.position[0] > half_w:
            self.position[0] = half_w
            self.velocity[0] = 0.0

        self.acceleration = np.array([0.0, -GRAVITY, 0.0])

        for index, other in enumerate(others):
            direct = self.position - other.position
            distance = float(np.linalg.norm(direct))
            if distance == 0:
                continue

            contact = self.radius + other.radius
            if distance < contact:
                self.position -= (direct / distance) * (distance - contact)
                self.velocity = _zero3()

            densities = calc_density_field(others, config)
            pressures = calc_pressure_field(densities, config)
            force = pressure_force(others, index, densities, pressures, config)
            self.acceleration += force / config.mass_particle

        fade = 1.0 - float(np.linalg.norm(self.velocity)) / _COLOR_SPEED_SCALE
        self.color[1] = fade
        self.color[2] = fade

    def draw(self, surface) -> None:
        """Draw the particle as a filled polygon on a pygame surface."""
        import pygame

        width, height = surface.get_size()
        points = [
            ((x + 1.0) * width / 2.0, (1.0 - y) * height / 2.0)
            for x, y in generate_circle_vertices(
                self.position[0], self.position[1], self.radius, _DRAW_SEGMENTS
            )
        ]
        rgb = tuple(int(round(c * 255)) for c in np.clip(self.color, 0.0, 1.0))
        pygame.draw.polygon(surface, rgb, points)