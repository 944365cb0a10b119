# tests/unit/test_builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import unittest
from enum import Enum, auto

from declstate.builder import MachineBuilder
from declstate.definition import MachineDefinition
from declstate.errors import DefinitionFrozen, DuplicateInitialState, InvalidStateValue, UndefinedEvent, UndefinedState


class Door(Enum):
    OPEN = auto()
    CLOSED = auto()
    LOCKED = auto()


class Action(Enum):
    OPEN = auto()
    CLOSE = auto()
    LOCK = auto()


class TestMachineBuilder(unittest.TestCase):
    """Test cases for MachineBuilder.

    Tests verify:
    1. Declarations chain
    2. Build produces a frozen definition
    3. Declaration errors surface from the builder
    """

    def setUp(self):
        self.builder = (
            MachineBuilder()
            .state(Door.CLOSED, initial=True)
            .state(Door.OPEN)
            .state(Door.LOCKED)
            .event(Action.OPEN, lambda e: e.transitions(Door.CLOSED, Door.OPEN))
            .event(Action.CLOSE, lambda e: e.transitions(Door.OPEN, Door.CLOSED))
            .event(Action.LOCK, lambda e: e.transitions(Door.CLOSED, Door.LOCKED))
        )

    def test_declarations_chain(self):
        builder = MachineBuilder()
        self.assertIs(builder.state(Door.OPEN), builder)
        self.assertIs(builder.event(Action.OPEN), builder)

    def test_build(self):
        definition = self.builder.build()

        self.assertIsInstance(definition, MachineDefinition)
        self.assertEqual(definition.states, frozenset(Door))
        self.assertIs(definition.initial_state, Door.CLOSED)
        self.assertEqual(list(definition.events), [Action.OPEN, Action.CLOSE, Action.LOCK])
        self.assertEqual(
            [t.endpoints for t in definition.events[Action.LOCK]],
            [(Door.CLOSED, Door.LOCKED)],
        )

    def test_build_is_idempotent(self):
        self.assertIs(self.builder.build(), self.builder.build())

    def test_definition_is_read_only(self):
        definition = self.builder.build()

        with self.assertRaises(TypeError):
            definition.events[Action.OPEN] = ()
        with self.assertRaises(DefinitionFrozen):
            self.builder.state(Door.OPEN)
        with self.assertRaises(DefinitionFrozen):
            self.builder.event(Action.OPEN)
        with self.assertRaises(DefinitionFrozen):
            definition.event(Action.OPEN).transitions(Door.LOCKED, Door.OPEN)

    def test_event_lookup(self):
        definition = self.builder.build()

        self.assertIs(definition.event(Action.OPEN).name, Action.OPEN)
        with self.assertRaises(UndefinedEvent) as ctx:
            MachineBuilder().build().event(Action.OPEN)
        self.assertEqual(str(ctx.exception), "Event OPEN is undefined")

    def test_errors_surface_from_builder(self):
        with self.assertRaises(InvalidStateValue):
            MachineBuilder().state("standing")
        with self.assertRaises(DuplicateInitialState):
            MachineBuilder().state(Door.OPEN, initial=True).state(Door.CLOSED, initial=True)
        with self.assertRaises(UndefinedState):
            MachineBuilder().state(Door.OPEN).event(Action.CLOSE, lambda e: e.transitions(Door.OPEN, Door.CLOSED))

    def test_no_initial_state(self):
        definition = MachineBuilder().state(Door.OPEN).build()
        self.assertIsNone(definition.initial_state)

    def test_repr(self):
        self.assertEqual(repr(self.builder.build()), "MachineDefinition(states=3, events=3, initial=CLOSED)")
