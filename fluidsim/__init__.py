"""Interactive 2D SPH water simulation with pygame display and mouse control."""

__version__ = "0.1.0"
__all__ = ["__version__"]