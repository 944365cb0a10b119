# declstate/definition.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from declstate.errors import UndefinedEvent
from declstate.events import Event, EventRegistry
from declstate.states import StateRegistry
from declstate.transitions import Transition
from declstate.types import EventName, StateName


class MachineDefinition:
    """
    Immutable descriptor of a state machine: the state set, the initial state
    and the ordered transitions of every event. One definition is shared by
    all instances of the machine classes bound to it.
    """

    def __init__(self, states: StateRegistry, events: EventRegistry) -> None:
        states.freeze()
        events.freeze()
        self._state_registry = states
        self._event_registry = events
        self._states = frozenset(states)
        self._events = MappingProxyType({event.name: event.transitions_list for event in events})

    @property
    def state_registry(self) -> StateRegistry:
        return self._state_registry

    @property
    def event_registry(self) -> EventRegistry:
        return self._event_registry

    @property
    def states(self) -> FrozenSet[StateName]:
        return self._states

    @property
    def initial_state(self) -> Optional[StateName]:
        return self._state_registry.initial

    @property
    def events(self) -> Mapping[EventName, Tuple[Transition, ...]]:
        """Read-only map of event name to its transitions in declaration order."""
        return self._events

    def event(self, name: Any) -> Event:
        """
        Look up a declared event.

        :raises UndefinedEvent: If no event with this name is declared.
        """
        event = self._event_registry.get(name)
        if event is None:
            raise UndefinedEvent(f"Event {getattr(name, 'name', repr(name))} is undefined")
        return event

    def __repr__(self) -> str:
        initial = self.initial_state.name if self.initial_state is not None else None
        return f"MachineDefinition(states={len(self._states)}, events={len(self._events)}, initial={initial})"
