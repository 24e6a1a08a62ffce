"""Assignment of units to formation slots for group moves."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from skirmish.formation import FormationLayout, Vec2, build_rectangular
from skirmish.units import Entity, Unit


@dataclass(frozen=True)
class FormationAssignment:
    """The slot position an entity should move to."""

    entity: Entity = field(default_factory=Entity.invalid)
    target_position: Vec2 = field(default_factory=Vec2)


@dataclass
class FormationPlan:
    """A formation layout and the unit assignments within it."""

    layout: FormationLayout = field(default_factory=FormationLayout)
    assignments: list[FormationAssignment] = field(default_factory=list)

    def clear(self) -> None:
        self.layout.clear()
        self.assignments.clear()

    def is_empty(self) -> bool:
        return not self.assignments

    def assignment_count(self) -> int:
        return len(self.assignments)


def build_move_formation(
    units: Sequence[Unit | None] | Iterable[Unit | None],
    center: Vec2,
    spacing: float,
) -> FormationPlan:
    """Build a rectangular formation and greedily give each unit its nearest free slot.

    Units are served in the given order; ``None`` and invalid units are skipped.
    Ties in distance go to the lowest slot index.
    """
    units = list(units)
    plan = FormationPlan()
    if not units:
        return plan

    plan.layout = build_rectangular(center, len(units), spacing)
    free = list(range(plan.layout.slot_count()))

    for unit in units:
        if unit is None or not unit.is_valid() or not free:
            continue
        position = unit.movement.position
        best = min(
            free,
            key=lambda index: (
                (plan.layout.slots[index].position - position).length_sq(),
                index,
            ),
        )
        free.remove(best)
        plan.assignments.append(
            FormationAssignment(unit.entity, plan.layout.slots[best].position)
        )

    return plan