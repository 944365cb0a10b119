# declstate/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, Optional

from declstate.definition import MachineDefinition
from declstate.events import Event, EventRegistry
from declstate.states import StateRegistry
from declstate.types import EventName, StateName


class MachineBuilder:
    """Builds state machine definitions.

    MachineBuilder collects state and event declarations, validating each one
    as it arrives, and produces an immutable MachineDefinition. States must be
    declared before the transitions that reference them.

    Example::

        definition = (
            MachineBuilder()
            .state(Movement.STANDING, initial=True)
            .state(Movement.WALKING)
            .event(Move.WALK, lambda e: e.transitions(Movement.STANDING, Movement.WALKING))
            .build()
        )
    """

    def __init__(self) -> None:
        self._states = StateRegistry()
        self._events = EventRegistry(self._states)
        self._definition: Optional[MachineDefinition] = None

    def state(self, name: StateName, initial: bool = False) -> "MachineBuilder":
        """Declare a state.

        Args:
            name: Enum member naming the state
            initial: Whether new instances start in this state

        Returns:
            The builder, so declarations can be chained
        """
        self._states.register(name, initial=initial)
        return self

    def event(self, name: EventName, build: Optional[Callable[[Event], Any]] = None) -> "MachineBuilder":
        """Declare an event.

        Args:
            name: Enum member naming the event
            build: Callable receiving the Event; it declares transitions
                with ``event.transitions(source, target, when=...)``

        Returns:
            The builder, so declarations can be chained
        """
        self._events.define(name, build)
        return self

    def build(self) -> MachineDefinition:
        """Freeze the declarations into a MachineDefinition.

        Building twice returns the same definition.
        """
        if self._definition is None:
            self._definition = MachineDefinition(self._states, self._events)
        return self._definition
