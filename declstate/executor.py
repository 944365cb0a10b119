# declstate/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, List

from declstate.definition import MachineDefinition
from declstate.errors import NoMatchingTransition
from declstate.types import EventName, StateChange

logger = logging.getLogger(__name__)


class EventExecutor:
    """
    Dispatches event names to the events of a machine definition. One
    executor is shared by every instance of a machine class; it holds no
    per-instance data.
    """

    def __init__(self, definition: MachineDefinition) -> None:
        """
        :param definition: The built definition whose events are dispatched.
        """
        self._definition = definition

    @property
    def definition(self) -> MachineDefinition:
        return self._definition

    def fire(self, instance: Any, name: EventName) -> StateChange:
        """
        Execute the named event on the instance.

        :raises UndefinedEvent: If the event is not declared.
        :raises NoMatchingTransition: If no transition matches.
        """
        event = self._definition.event(name)
        try:
            return event.execute(instance)
        except NoMatchingTransition as e:
            logger.info("%s rejected by %s: %s", name.name, type(instance).__name__, e)
            raise

    def can_fire(self, instance: Any, name: EventName) -> bool:
        """
        Check whether the named event would succeed on the instance.

        :raises UndefinedEvent: If the event is not declared.
        """
        return self._definition.event(name).can_execute(instance)

    def available_events(self, instance: Any) -> List[EventName]:
        """Return the names of the events that can fire, in declaration order."""
        return [event.name for event in self._definition.event_registry if event.can_execute(instance)]
