"""A game session: the units of a simulation and the commands that drive them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Protocol

from skirmish.commands import Command, MoveCommand
from skirmish.formation import Vec2
from skirmish.planner import build_move_formation
from skirmish.units import Entity, MovementState, MovementTarget, Unit

Cell = Any

_U32_MASK = 0xFFFFFFFF


class EntityRegistry(Protocol):
    def create(self) -> Entity: ...

    def is_alive(self, entity: Entity) -> bool: ...


class Simulation(Protocol):
    """What a session needs from the simulation it runs on."""

    entities: EntityRegistry
    current_tick: int
    current_commands: Iterable[Command]

    def enqueue_command(self, command: Command) -> None: ...


class Occupancy(Protocol):
    """A grid that records which entity occupies which cell."""

    def is_inside(self, cell: Cell) -> bool: ...

    def set_dynamic_occupied(self, cell: Cell, entity: Entity) -> None: ...

    def clear_dynamic_occupied(self, cell: Cell) -> None: ...


class CommandRecorder(Protocol):
    def record_move(self, tick: int, entity: Entity, target_position: Vec2) -> None: ...


Mover = Callable[[MovementState, float], None]
CellOf = Callable[[Vec2], Cell]


class GameSession:
    """Owns the units of a simulation, turns orders into commands and steps movement.

    ``mover`` advances one unit's movement state by a time step, and ``cell_of``
    maps a world position to a grid cell. An ``occupancy`` grid and a
    ``command_recorder`` may be attached at any time.
    """

    def __init__(self, simulation: Simulation, mover: Mover, cell_of: CellOf) -> None:
        self.simulation = simulation
        self.units: list[Unit] = []
        self.occupancy: Occupancy | None = None
        self.command_recorder: CommandRecorder | None = None
        self.command_recording_base_tick = 0
        self._mover = mover
        self._cell_of = cell_of

    def create_unit(self, position: Vec2, max_speed: float, radius: float) -> Entity:
        """Create an entity and a stationary unit for it at ``position``."""
        entity = self.simulation.entities.create()
        unit = Unit(
            entity=entity,
            movement=MovementState(
                position=position,
                velocity=Vec2(),
                desired_velocity=Vec2(),
                target=MovementTarget(position),
                max_speed=max_speed,
                radius=radius,
                has_target=False,
            ),
        )
        self.units.append(unit)
        self._register_occupancy(unit)
        return entity

    def queue_move_command(self, entity: Entity, target_position: Vec2) -> None:
        """Queue a move order for the next tick, recording it if a recorder is attached."""
        if self.command_recorder is not None:
            relative_tick = (
                self.simulation.current_tick - self.command_recording_base_tick
            ) & _U32_MASK
            self.command_recorder.record_move(relative_tick, entity, target_position)
        self.simulation.enqueue_command(MoveCommand(entity, target_position))

    def queue_group_move_command(
        self, entities: Iterable[Entity], target_center: Vec2, spacing: float
    ) -> None:
        """Queue move orders that place the known units in a formation around a point."""
        selected = [
            unit
            for unit in (self.try_get_unit(entity) for entity in entities)
            if unit is not None
        ]
        if not selected:
            return
        if len(selected) == 1:
            self.queue_move_command(selected[0].entity, target_center)
            return

        plan = build_move_formation(selected, target_center, spacing)
        for assignment in plan.assignments:
            self.queue_move_command(assignment.entity, assignment.target_position)

    def apply_queued_commands(self) -> None:
        """Apply this tick's move commands; other command types are ignored."""
        for command in self.simulation.current_commands:
            if isinstance(command, MoveCommand):
                self._apply_move(command)

    def tick(self, delta_time: float) -> None:
        """Drop destroyed units, then advance every live unit's movement."""
        self._remove_destroyed_units()
        alive = self.simulation.entities.is_alive
        for unit in self.units:
            if not alive(unit.entity):
                continue
            self._mover(unit.movement, delta_time)
            self._update_occupancy(unit)

    def try_get_unit(self, entity: Entity) -> Unit | None:
        """Return the unit of a live entity, or ``None``."""
        if not self.simulation.entities.is_alive(entity):
            return None
        return next((unit for unit in self.units if unit.entity == entity), None)

    def _register_occupancy(self, unit: Unit) -> None:
        if self.occupancy is None:
            return
        cell = self._cell_of(unit.movement.position)
        if not self.occupancy.is_inside(cell):
            unit.clear_occupied_cell()
            return
        self.occupancy.set_dynamic_occupied(cell, unit.entity)
        unit.set_occupied_cell(cell)

    def _update_occupancy(self, unit: Unit) -> None:
        if self.occupancy is None:
            return
        new_cell = self._cell_of(unit.movement.position)
        if not self.occupancy.is_inside(new_cell):
            if unit.has_occupied_cell:
                self.occupancy.clear_dynamic_occupied(unit.occupied_cell)
                unit.clear_occupied_cell()
            return
        if unit.has_occupied_cell and unit.occupied_cell == new_cell:
            return
        if unit.has_occupied_cell:
            self.occupancy.clear_dynamic_occupied(unit.occupied_cell)
        self.occupancy.set_dynamic_occupied(new_cell, unit.entity)
        unit.set_occupied_cell(new_cell)

    def _unregister_occupancy(self, unit: Unit) -> None:
        if self.occupancy is None:
            unit.clear_occupied_cell()
            return
        if not unit.has_occupied_cell:
            return
        self.occupancy.clear_dynamic_occupied(unit.occupied_cell)
        unit.clear_occupied_cell()

    def _remove_destroyed_units(self) -> None:
        alive = self.simulation.entities.is_alive
        survivors = []
        for unit in self.units:
            if alive(unit.entity):
                survivors.append(unit)
            else:
                self._unregister_occupancy(unit)
        self.units = survivors

    def _apply_move(self, command: MoveCommand) -> None:
        unit = self.try_get_unit(command.entity)
        if unit is None:
            return
        unit.movement.target = MovementTarget(command.target_position)
        unit.movement.has_target = True