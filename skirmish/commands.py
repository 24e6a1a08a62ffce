"""Commands that can be queued into the simulation."""

from __future__ import annotations

from dataclasses import dataclass

from skirmish.formation import Vec2
from skirmish.units import Entity


class Command:
    """Base class for every simulation command."""


@dataclass(frozen=True)
class MoveCommand(Command):
    """Order an entity to move to a target position."""

    entity: Entity
    target_position: Vec2