"""Entities, movement state and units."""

from __future__ import annotations

from dataclasses import dataclass, field

from skirmish.formation import Vec2

INVALID_INDEX = 0xFFFFFFFF


@dataclass(frozen=True)
class Entity:
    """A generational handle to a simulation entity."""

    index: int
    generation: int = 0

    @staticmethod
    def invalid() -> Entity:
        return Entity(INVALID_INDEX, 0)

    def is_valid(self) -> bool:
        return self.index != INVALID_INDEX


@dataclass(frozen=True)
class MovementTarget:
    """A destination for a moving unit."""

    position: Vec2 = field(default_factory=Vec2)


@dataclass
class MovementState:
    """Kinematic state of a moving unit."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    desired_velocity: Vec2 = field(default_factory=Vec2)
    target: MovementTarget = field(default_factory=MovementTarget)
    max_speed: float = 0
    radius: float = 0
    has_target: bool = False


@dataclass
class Unit:
    """A unit: an entity, its movement, and the grid cell it occupies."""

    entity: Entity = field(default_factory=Entity.invalid)
    movement: MovementState = field(default_factory=MovementState)
    occupied_cell: tuple[int, int] | None = None
    has_occupied_cell: bool = False

    def is_valid(self) -> bool:
        return self.entity.is_valid()

    def clear_occupied_cell(self) -> None:
        self.occupied_cell = None
        self.has_occupied_cell = False

    def set_occupied_cell(self, cell: tuple[int, int]) -> None:
        self.occupied_cell = cell
        self.has_occupied_cell = True