# skirmish

This package provides building blocks for a deterministic real-time strategy
simulation. It covers units, move commands, rectangular formations, and a game
session that connects them to a simulation that you supply.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `skirmish.formation`

- `Vec2(x, y)` is an immutable vector. It supports `+`, `-`, unary `-`,
  multiplication and division by a number, and `length_sq()`.
- `FormationSlot(position)` holds one position in a formation.
- `FormationLayout` holds `center`, `spacing`, `rows`, `columns` and `slots`.
  It has the methods `clear()`, `is_empty()` and `slot_count()`.
- `build_rectangular(center, unit_count, spacing)` lays out `unit_count` slots
  in a grid centred on `center`, with neighbouring slots `spacing` apart:
  - The number of columns is the smallest one whose square holds every unit.
  - Slots are filled row by row, starting from the lowest x and y.
  - A count of zero gives an empty layout.
  - A negative count raises `ValueError`.

### `skirmish.units`

- `Entity(index, generation)` is a handle. `Entity.invalid()` returns the
  invalid handle, and `is_valid()` tests a handle.
- `MovementTarget(position)` is the place a unit moves to.
- `MovementState` holds `position`, `velocity`, `desired_velocity`, `target`,
  `max_speed`, `radius` and `has_target`.
- `Unit` holds an entity, its movement state and the grid cell it occupies. It
  has the methods `is_valid()`, `set_occupied_cell(cell)` and
  `clear_occupied_cell()`.

### `skirmish.commands`

- `Command` is the base class for queued commands.
- `MoveCommand(entity, target_position)` orders an entity to move.

### `skirmish.planner`

- `build_move_formation(units, center, spacing)` builds a rectangular layout
  with one slot per unit and returns a `FormationPlan`.
- The plan holds `layout` and `assignments`, a list of `FormationAssignment`.
  It has the methods `clear()`, `is_empty()` and `assignment_count()`.
- Units are served in the order given. Each unit gets the nearest free slot,
  and when two slots are equally near, the lower slot index wins.
- `None` entries and invalid units are skipped.

### `skirmish.session`

`GameSession(simulation, mover, cell_of)` manages the units of a simulation.

- `create_unit(position, max_speed, radius)` creates an entity and a
  stationary unit for it.
- `queue_move_command(entity, target_position)` queues a `MoveCommand`. If
  `command_recorder` is set, it also records the order with a tick counted
  from `command_recording_base_tick`.
- `queue_group_move_command(entities, target_center, spacing)` places the
  known units in a formation around `target_center`:
  - Unknown or dead entities are ignored.
  - A single unit is sent straight to the centre.
- `apply_queued_commands()` sets the movement target of each unit named by a
  `MoveCommand` in the simulation's current commands. Other command types are
  ignored.
- `tick(delta_time)` first drops units whose entities are no longer alive. It
  then calls `mover(unit.movement, delta_time)` for each live unit and keeps
  `occupancy` up to date, if one is set.
- `try_get_unit(entity)` returns the unit of a live entity, or `None`.

## Example

```python
from skirmish.formation import Vec2, build_rectangular

layout = build_rectangular(Vec2(10, 10), 4, 2)
print(layout.rows, layout.columns)                 # 2 2
print([slot.position for slot in layout.slots])
```

Every step is deterministic. The same inputs always produce the same layouts,
assignments and queued commands.

## What this package does not include

`GameSession` works against objects that you provide, and the package ships
none of them:

- **A simulation.** It needs an `entities` registry with `create()` and
  `is_alive(entity)`. It also needs `current_tick`, `current_commands` and
  `enqueue_command(command)`.
- **A movement integrator.** You pass it as `mover`.
- **A world-to-grid mapping.** You pass it as `cell_of`.
- **An occupancy grid.** It needs `is_inside`, `set_dynamic_occupied` and
  `clear_dynamic_occupied`.
- **A command recorder.** It needs `record_move`.

The package has no pathfinding, replay playback, rendering or command-line
program.