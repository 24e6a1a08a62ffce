from skirmish.formation import Vec2
from skirmish.units import Entity, MovementState, MovementTarget, Unit


def test_invalid_entity_is_not_valid():
    assert not Entity.invalid().is_valid()
    assert Entity.invalid() == Entity.invalid()


def test_regular_entity_is_valid():
    assert Entity(0, 0).is_valid()
    assert Entity(42, 7).is_valid()


def test_entities_compare_by_index_and_generation():
    assert Entity(1, 0) == Entity(1, 0)
    assert Entity(1, 0) != Entity(1, 1)
    assert Entity(1, 0) != Entity(2, 0)


def test_default_unit_is_invalid_without_cell():
    unit = Unit()
    assert not unit.is_valid()
    assert unit.entity == Entity.invalid()
    assert unit.has_occupied_cell is False
    assert unit.occupied_cell is None


def test_unit_with_entity_is_valid():
    unit = Unit(Entity(3, 1))
    assert unit.is_valid()
    assert unit.entity == Entity(3, 1)


def test_set_and_clear_occupied_cell():
    unit = Unit(Entity(0, 0))
    unit.set_occupied_cell((2, 5))
    assert unit.has_occupied_cell
    assert unit.occupied_cell == (2, 5)
    unit.clear_occupied_cell()
    assert not unit.has_occupied_cell
    assert unit.occupied_cell is None


def test_default_movement_state_is_at_rest():
    state = MovementState()
    assert state.position == Vec2()
    assert state.velocity == Vec2()
    assert state.desired_velocity == Vec2()
    assert state.target == MovementTarget(Vec2())
    assert state.has_target is False


def test_units_have_independent_movement_state():
    a = Unit(Entity(0, 0))
    b = Unit(Entity(1, 0))
    a.movement.position = Vec2(4, 4)
    assert b.movement.position == Vec2()