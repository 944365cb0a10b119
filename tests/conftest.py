# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum, auto

import pytest

from declstate import MachineBuilder, StateMachine


class Movement(Enum):
    STANDING = auto()
    WALKING = auto()
    RUNNING = auto()


class Move(Enum):
    WALK = auto()
    RUN = auto()
    HOLD = auto()


@pytest.fixture
def movement():
    """The state enum used by the movement machine."""
    return Movement


@pytest.fixture
def move():
    """The event enum used by the movement machine."""
    return Move


@pytest.fixture
def movement_builder():
    """An unbuilt builder declaring the standing/walking/running machine."""
    return (
        MachineBuilder()
        .state(Movement.STANDING, initial=True)
        .state(Movement.WALKING)
        .state(Movement.RUNNING)
        .event(Move.WALK, lambda e: e.transitions(Movement.STANDING, Movement.WALKING))
        .event(Move.RUN, lambda e: e.transitions([Movement.STANDING, Movement.WALKING], Movement.RUNNING))
        .event(Move.HOLD, lambda e: e.transitions([Movement.WALKING, Movement.RUNNING], Movement.STANDING))
    )


@pytest.fixture
def movement_machine(movement_builder):
    """A machine class that records every state change it is notified of."""

    class MovementState(StateMachine):
        definition = movement_builder.build()

        def __init__(self, initial_state=None):
            self.changes = []
            super().__init__(initial_state)

        def state_changed(self, event, old_state, new_state):
            self.changes.append((event, old_state, new_state))

    return MovementState


class Host:
    """Minimal stand-in for a machine instance, used by registry-level tests."""

    def __init__(self, state, **attrs):
        self.state = state
        self.changes = []
        self.__dict__.update(attrs)

    def set_state(self, name):
        self.state = name

    def state_changed(self, event, old_state, new_state):
        self.changes.append((event, old_state, new_state))


@pytest.fixture
def host_factory():
    return Host
