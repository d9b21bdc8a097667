# fluidsim

A small interactive water simulation based on smoothed-particle
hydrodynamics (SPH), drawn with pygame.

A square block of particles falls under gravity (980 px/s²) in an 800×600
window. The floor and the left and right walls stop the particles; there is
no ceiling. Overlapping particles are pushed apart, and pressure forces from
a cubic spline kernel act between them. Each particle starts white and turns
red as it speeds up.

## Installation

```
pip install .
```

## Running

```
fluidsim
```

This opens a window titled "FLUIDSIM BY GENIUS" and advances the simulation
by a fixed step of 1/60 s per frame, at up to 60 frames per second.

- Hold the **left mouse button** to pull particles within 120 px toward the
  cursor.
- Hold the **right mouse button** to push them away.
- Close the window to quit.

Options:

- `--frames N` stops after `N` frames instead of running until the window is
  closed.

## Using the library

```python
from fluidsim.constants import SPHConstants
from fluidsim.water import Water

config = SPHConstants(smooth_radius=50.0, rigidity=2000.0,
                      density=1000.0, mass_particle=625000.0)
water = Water(4, 25, config)

for _ in range(60):
    water.update(1 / 60)

for particle in water.particles:
    print(particle.position, particle.velocity)
```

`Water(count_particles_root, gap, config)` lays out a
`count_particles_root × count_particles_root` grid of particles with radius 5,
spaced `gap + 1` apart. `Water.update(dt)` first moves every particle, then
applies walls, collisions, gravity and pressure to each one.
`Water.draw(surface)` draws the particles on a pygame surface.

The SPH building blocks live in `fluidsim.circle`:

- `Circle`: one particle, with `position`, `velocity`, `acceleration`
  (NumPy 3-vectors), `radius` and `color`. It has `update(dt)`,
  `physical(others, config)` and `draw(surface)`.
- `kernel_function` and `gradient_kernel_function`: the cubic spline kernel
  and its gradient.
- `calc_density_field`, `calc_pressure_field` and `pressure_force`: the
  density, pressure and force steps. Densities are floored at a tenth of the
  rest density.
- `generate_circle_vertices`: the outline of a circle in normalised screen
  coordinates.

Densities and pressure forces are written to the `fluidsim.circle` logger at
debug level.

`fluidsim.control.WaterControl` applies mouse interaction to a `Water`
instance. Drive it from any event source with `set_mouse_position(x, y)`
(window pixels) and `set_button(button, pressed)` (pygame button numbers:
1 for left, 3 for right). Then call `update()`. A particle exactly under the
cursor is left alone. `fluidsim.app.default_water()` builds the same setup
that the `fluidsim` command uses.

## Limitations

The simulation is only shown on screen. It cannot record frames or save or
load particle states. The pressure step recomputes the whole density field for
every particle pair, so it slows down quickly as the number of particles grows.

## Tests

```
pip install .[test]
pytest
```