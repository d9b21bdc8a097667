"""A body of water made of a square grid of particles."""

from __future__ import annotations

from fluidsim.circle import Circle
from fluidsim.constants import SPHConstants

PARTICLE_RADIUS = 5.0


class Water:
    """All particles of the fluid together with the SPH parameters they share."""

    def __init__(self, count_particles_root: int, gap: float, config: SPHConstants) -> None:
        offset = -(count_particles_root // 2)
        spacing = gap + 1
        self.particles: list[Circle] = [
            Circle(
                position=(offset + i * spacing, offset + j * spacing, 0.0),
                velocity=(0.0, 0.0, 0.0),
                acceleration=(0.0, 0.0, 0.0),
                radius=PARTICLE_RADIUS,
            )
            for i in range(count_particles_root)
            for j in range(count_particles_root)
        ]
        self.config = config

    def update(self, dt: float) -> None:
        """Integrate every particle, then apply the physics to each in turn."""
        for particle in self.particles:
            particle.update(dt)
        for particle in self.particles:
            particle.physical(self.particles, self.config)

    def draw(self, surface) -> None:
        """Draw every particle on a pygame surface."""
        for particle in self.particles:
            particle.draw(surface)