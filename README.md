# antcolony

A small ant colony foraging simulation. Ants leave a nest and wander in
search of food. While looking for food they lay a "home" pheromone, stronger
the closer they are to the nest. When an ant reaches a food source it takes
one unit of food, turns around and heads home, laying a "food" pheromone that
is stronger the farther it is from the nest. On every step each ant samples
the grid a few cells ahead over a fan of headings; if the strongest trail for
what it is looking for is strong enough, it usually steers onto it, otherwise
it wanders. All trails fade by a fixed factor on every update, and a food
source is removed once its food is used up.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running the simulation

```
antcolony
```

This opens a 1280×720 window titled "Ants" that runs at up to 60 frames per
second. Close the window or press Escape to quit. The command takes no
options apart from `--help`.

On screen:

- Ants looking for food are blue. Ants carrying food home are red.
- The nest is the green circle.
- Food sources are red circles. The number on each one is the food it has left.
- Trails are drawn per grid cell as a half-transparent overlay. The red
  channel shows food pheromone and the green channel shows home pheromone.
  Cells where both are below 0.05 are not drawn.

The window always uses the same settings: 5×5 pixel cells, 1000 ants, an
evaporation factor of 0.995, a deposit of 0.1, ant speed 120 pixels per
second, a nest of radius 30 and one food source of radius 20 holding 1000
units of food. The nest and the food source are placed at random in the
middle half of the window. To run with other settings, drive `Simulation`
from your own code as shown below.

## Using the library

The simulation needs no window. It can be driven on its own:

```python
import random

from antcolony.geometry import Vec2
from antcolony.simulation import Simulation

sim = Simulation(
    width=1280,
    height=720,
    size_cell=Vec2(5, 5),
    count_ants=1000,
    evaporation_rate=0.995,
    pheromone_deposit=0.1,
    speed_ant=120.0,
    radius_home=30,
    count_food_sources=1,
    radius_food_source=20,
    count_food_to_source=1000,
    supply_pheromone=500.0,
    rng=random.Random(42),
)
sim.init()
for _ in range(600):
    sim.update(1 / 60)

remaining = sum(source.count_food for source in sim.food_sources)
print(f"food left: {remaining}")
```

`init()` places the nest, the ants, the pheromone grid (`sim.grid`, a list of
rows of `Cell`) and the food sources. `update(dt)` advances the simulation by
`dt` seconds. A seeded `random.Random` passed as `rng` makes a run
repeatable; without one a shared module-level generator is used.

Modules:

- `antcolony.geometry`: the immutable `Vec2` and the small vector helpers
  `vec_length`, `distance`, `direction_between`, `direction_from_angle`,
  `random_float`, `out_of_bounds` and `circle_collision`.
- `antcolony.entities`: the `Ant`, `Cell`, `FoodSource` and `DirectionOption`
  data classes and the `Target` enum (`HOME`, `FOOD`).
- `antcolony.simulation`: the `Simulation` class with `init()` and
  `update(dt)`.
- `antcolony.app`: pygame drawing (`render`, `cell_color`, `ant_color`) and
  the `main` entry point behind the `antcolony` command.