import dataclasses

import pytest

from skirmish.commands import Command, MoveCommand
from skirmish.formation import Vec2
from skirmish.units import Entity


def test_move_command_keeps_its_data():
    command = MoveCommand(Entity(10, 2), Vec2(7, 9))
    assert command.entity == Entity(10, 2)
    assert command.target_position == Vec2(7, 9)


def test_move_command_is_a_command():
    command = MoveCommand(Entity(3, 1), Vec2(4, 5))
    assert isinstance(command, Command)
    moved = dataclasses.replace(command, target_position=Vec2(6, 7))
    assert moved.entity == Entity(3, 1)
    assert moved.target_position == Vec2(6, 7)
    assert command.target_position == Vec2(4, 5)


def test_move_command_is_immutable():
    command = MoveCommand(Entity(0, 0), Vec2(1, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.target_position = Vec2(2, 2)


def test_move_commands_compare_by_value():
    assert MoveCommand(Entity(1, 0), Vec2(1, 2)) == MoveCommand(Entity(1, 0), Vec2(1, 2))
    assert MoveCommand(Entity(1, 0), Vec2(1, 2)) != MoveCommand(Entity(2, 0), Vec2(1, 2))