"""Screen dimensions and smoothed-particle-hydrodynamics parameters."""

from dataclasses import dataclass

WIDTH = 800
HEIGHT = 600


@dataclass(frozen=True)
class SPHConstants:
    """Parameters of the SPH model shared by every particle."""

    smooth_radius: float
    rigidity: float
    density: float
    mass_particle: float