# declstate/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from declstate.errors import (
    DefinitionFrozen,
    DuplicateEventDefinition,
    DuplicateTransition,
    InvalidEventName,
    InvalidTransition,
    NoMatchingTransition,
)
from declstate.guards import GuardSpecOrGuard, as_guard
from declstate.states import StateRegistry
from declstate.transitions import Transition
from declstate.types import EventName, StateChange, StateName, StateSpec, is_symbol

logger = logging.getLogger(__name__)


class Event:
    """
    A named trigger owning an ordered list of transitions. Transitions are
    tried in declaration order and the first eligible one wins.
    """

    def __init__(self, name: EventName, states: StateRegistry) -> None:
        """
        :param name: Enum member naming the event.
        :param states: Registry of the definition this event belongs to.
        """
        self._name = name
        self._states = states
        self._transitions: List[Transition] = []
        self._frozen = False

    @property
    def name(self) -> EventName:
        return self._name

    @property
    def transitions_list(self) -> Tuple[Transition, ...]:
        """The declared transitions, in declaration order."""
        return tuple(self._transitions)

    def transitions(self, source: StateSpec, target: StateName, when: Optional[GuardSpecOrGuard] = None) -> "Event":
        """
        Declare transitions into ``target``. This is the method called from an
        event's build callable.

        :param source: A state, or a list of states expanded in the given order.
        :param target: The state entered when the transition fires.
        :param when: Optional guard: a callable, a method name or a Guard.
        :return: This event, so declarations can be chained.
        """
        self.add_transition(source, target, when)
        return self

    def add_transition(self, source: StateSpec, target: StateName, guard: Optional[GuardSpecOrGuard] = None) -> None:
        """
        Append one transition per source state. Each one is validated before
        it is appended, so a failure leaves earlier expansions in place.

        :raises InvalidStateValue: If a state is not an Enum member.
        :raises UndefinedState: If a state is not registered.
        :raises InvalidTransition: If source equals target.
        :raises DuplicateTransition: If the pair is already declared on this event.
        :raises InvalidGuardType: If the guard is not usable.
        """
        if self._frozen:
            raise DefinitionFrozen("Cannot add transitions after the definition has been built")
        guard_obj = as_guard(guard)
        sources = list(source) if isinstance(source, (list, tuple)) else [source]
        for from_state in sources:
            transition = Transition(from_state, target, guard_obj)
            self._validate(transition)
            self._transitions.append(transition)
            logger.debug("Event %s: added %r", self._name.name, transition)

    def find_matching_transition(self, instance: Any) -> Optional[Transition]:
        """
        Return the first transition whose source is the instance's current
        state and whose guard passes, or None.
        """
        for transition in self._transitions:
            if transition.source != instance.state:
                continue
            if transition.applies_to(instance):
                return transition
            logger.debug("Event %s: guard rejected %r", self._name.name, transition)
        return None

    def can_execute(self, instance: Any) -> bool:
        """
        Check whether executing this event would succeed. Never mutates.

        :raises UndefinedState: If the instance's state is not registered.
        """
        self._states.require(instance.state)
        return self.find_matching_transition(instance) is not None

    def execute(self, instance: Any) -> StateChange:
        """
        Apply the first matching transition, then notify the instance's
        ``state_changed`` hook.

        :raises UndefinedState: If the instance's state is not registered.
        :raises NoMatchingTransition: If no transition matches. The instance
            is left untouched.
        :return: The (source, target) pair of the applied transition.
        """
        self._states.require(instance.state)
        transition = self.find_matching_transition(instance)
        if transition is None:
            raise NoMatchingTransition(self._name, instance.state)

        source = instance.state
        instance.set_state(transition.target)
        logger.debug("Event %s: %s -> %s", self._name.name, source.name, transition.target.name)
        instance.state_changed(self._name, source, transition.target)
        return StateChange(source, transition.target)

    def freeze(self) -> None:
        self._frozen = True

    def _validate(self, transition: Transition) -> None:
        self._states.require(transition.source)
        self._states.require(transition.target)
        if transition.source == transition.target:
            raise InvalidTransition(f"Transition {transition.source.name} -> {transition.target.name} is invalid")
        # guards are not part of the identity of a transition
        for existing in self._transitions:
            if existing.endpoints == transition.endpoints:
                raise DuplicateTransition(
                    f"Transition is already defined {transition.source.name} -> {transition.target.name}"
                )

    def __repr__(self) -> str:
        return f"Event({self._name.name}, transitions={len(self._transitions)})"


class EventRegistry:
    """
    Holds the named events of one machine definition, in declaration order.
    """

    def __init__(self, states: StateRegistry) -> None:
        self._states = states
        self._events: Dict[EventName, Event] = {}
        self._frozen = False

    def define(self, name: EventName, build: Optional[Callable[[Event], Any]] = None) -> Event:
        """
        Define an event and evaluate its build callable against it.

        :param name: Enum member naming the event.
        :param build: Optional callable receiving the Event under construction.
            An event defined without one has no transitions.
        :raises InvalidEventName: If name is not an Enum member.
        :raises DuplicateEventDefinition: If the event is already defined.
        """
        if self._frozen:
            raise DefinitionFrozen("Cannot define events after the definition has been built")
        if not is_symbol(name):
            raise InvalidEventName(f"Event name must be an Enum member. Given {type(name).__name__}: {name!r}")
        if name in self._events:
            raise DuplicateEventDefinition(f"Event {name.name} is already defined")

        event = Event(name, self._states)
        if build is not None:
            build(event)
        self._events[name] = event
        logger.debug("Defined event %s with %d transition(s)", name.name, len(event.transitions_list))
        return event

    def get(self, name: Any) -> Optional[Event]:
        if not is_symbol(name):
            return None
        return self._events.get(name)

    def freeze(self) -> None:
        self._frozen = True
        for event in self._events.values():
            event.freeze()

    def __contains__(self, name: Any) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events.values())

    def __len__(self) -> int:
        return len(self._events)
