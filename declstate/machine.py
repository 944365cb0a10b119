# declstate/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union

from declstate.builder import MachineBuilder
from declstate.definition import MachineDefinition
from declstate.errors import (
    AccessorConflict,
    InvalidDefinition,
    InvalidGuardType,
    InvalidStateValue,
    MissingDefinition,
)
from declstate.executor import EventExecutor
from declstate.types import EventName, StateChange, StateName, accessor_name

logger = logging.getLogger(__name__)

_GENERATED = "_declstate_generated"
_MISSING = object()


class StateMachine:
    """
    Base class for host objects driven by a declarative state machine.

    A subclass binds a definition through its ``definition`` class attribute,
    either a built MachineDefinition or a MachineBuilder (built on binding).
    Binding generates one predicate per state (``is_<state>()``) and a
    trigger/check pair per event (``<event>()`` and ``can_<event>()``). The
    uniform ``is_state``, ``fire`` and ``can_fire`` API is always available.

    Override ``state_changed`` to observe every successful transition.
    """

    definition: ClassVar[Optional[Union[MachineDefinition, MachineBuilder]]] = None
    _executor: ClassVar[Optional[EventExecutor]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__.get("definition")
        if declared is None:
            return
        if isinstance(declared, MachineBuilder):
            declared = declared.build()
        if not isinstance(declared, MachineDefinition):
            raise InvalidDefinition(
                f"{cls.__name__}.definition must be a MachineDefinition or MachineBuilder, "
                f"not {type(declared).__name__}"
            )

        cls.definition = declared
        cls._executor = EventExecutor(declared)
        _bind_accessors(cls, declared)
        _check_guard_methods(cls, declared)
        logger.debug("Bound %r to %s", declared, cls.__name__)

    def __init__(self, initial_state: Optional[StateName] = None) -> None:
        """
        :param initial_state: Starting state; defaults to the definition's
            initial state.
        :raises MissingDefinition: If the class has no bound definition.
        :raises InvalidStateValue: If no state is given and none is initial,
            or the value is not an Enum member.
        :raises UndefinedState: If the state is not registered.
        """
        if type(self)._executor is None:
            raise MissingDefinition(f"{type(self).__name__} has no machine definition")
        resolved = initial_state if initial_state is not None else self.definition.initial_state
        if resolved is None:
            raise InvalidStateValue(f"{type(self).__name__} has no initial state and none was given")
        self.set_state(resolved)

    @property
    def state(self) -> StateName:
        """The current state."""
        return self._state

    @state.setter
    def state(self, name: StateName) -> None:
        self.set_state(name)

    def set_state(self, name: StateName) -> None:
        """
        Assign the current state directly. This is not an event, so
        ``state_changed`` is not called.

        :raises InvalidStateValue: If name is not an Enum member.
        :raises UndefinedState: If name is not registered.
        """
        self.definition.state_registry.require(name)
        self._state = name

    def state_changed(self, event: EventName, old_state: StateName, new_state: StateName) -> None:
        """Hook called after every successful transition. Does nothing by default."""

    def is_state(self, name: StateName) -> bool:
        """
        Check whether the machine is currently in the given state.

        :raises UndefinedState: If name is not registered.
        """
        self.definition.state_registry.require(name)
        return self._state == name

    def fire(self, event: EventName) -> StateChange:
        """
        Trigger an event unconditionally.

        :raises UndefinedEvent: If the event is not declared.
        :raises NoMatchingTransition: If no transition matches.
        """
        return self._executor.fire(self, event)

    def can_fire(self, event: EventName) -> bool:
        """
        Check whether triggering the event would succeed. Never raises
        NoMatchingTransition and never mutates.

        :raises UndefinedEvent: If the event is not declared.
        """
        return self._executor.can_fire(self, event)

    def available_events(self) -> List[EventName]:
        """Names of the events that can currently fire, in declaration order."""
        return self._executor.available_events(self)

    def __repr__(self) -> str:
        state = getattr(self, "_state", None)
        return f"<{type(self).__name__} state={state.name if state is not None else None}>"


def _bind_accessors(cls: type, definition: MachineDefinition) -> None:
    accessors: Dict[str, Callable] = {}
    for state in definition.state_registry:
        _collect(accessors, f"is_{accessor_name(state)}", _state_predicate(state))
    for name in definition.events:
        stem = accessor_name(name)
        _collect(accessors, stem, _event_trigger(name))
        _collect(accessors, f"can_{stem}", _event_check(name))

    for attr, func in accessors.items():
        existing = getattr(cls, attr, _MISSING)
        if existing is not _MISSING and not getattr(existing, _GENERATED, False):
            raise AccessorConflict(f"Generated accessor {attr!r} conflicts with {cls.__name__}.{attr}")
    for attr, func in accessors.items():
        func.__qualname__ = f"{cls.__qualname__}.{attr}"
        setattr(cls, attr, func)


def _check_guard_methods(cls: type, definition: MachineDefinition) -> None:
    for event, transitions in definition.events.items():
        for transition in transitions:
            if transition.guard is None:
                continue
            for name in transition.guard.method_names:
                if not callable(getattr(cls, name, None)):
                    raise InvalidGuardType(
                        f"Guard method {name!r} of event {event.name} is not a method of {cls.__name__}"
                    )


def _collect(accessors: Dict[str, Callable], attr: str, func: Callable) -> None:
    if attr in accessors:
        raise AccessorConflict(f"Generated accessor {attr!r} is produced twice")
    func.__name__ = attr
    setattr(func, _GENERATED, True)
    accessors[attr] = func


def _state_predicate(state: StateName) -> Callable:
    def predicate(self) -> bool:
        return self.is_state(state)

    predicate.__doc__ = f"Return True if the current state is {state.name}."
    return predicate


def _event_trigger(event: EventName) -> Callable:
    def trigger(self) -> StateChange:
        return self.fire(event)

    trigger.__doc__ = f"Trigger {event.name}; raises NoMatchingTransition if it cannot fire."
    return trigger


def _event_check(event: EventName) -> Callable:
    def check(self) -> bool:
        return self.can_fire(event)

    check.__doc__ = f"Return True if {event.name} can fire from the current state."
    return check
