# declstate/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional

from declstate.errors import (
    DefinitionFrozen,
    DuplicateInitialState,
    DuplicateStateDefinition,
    InvalidStateValue,
    UndefinedState,
)
from declstate.types import StateName, is_symbol

logger = logging.getLogger(__name__)


class StateRegistry:
    """
    Holds the set of valid states of one machine definition and the single
    initial state. Declaration order is kept for introspection only; lookups
    are set based.
    """

    def __init__(self) -> None:
        # dict used as an insertion-ordered set
        self._states: Dict[StateName, None] = {}
        self._initial: Optional[StateName] = None
        self._frozen = False

    def register(self, name: StateName, initial: bool = False) -> None:
        """
        Add a state to the registry.

        :param name: Enum member naming the state.
        :param initial: Mark this state as the initial state.
        :raises InvalidStateValue: If name is not an Enum member.
        :raises DuplicateStateDefinition: If the state is already registered.
        :raises DuplicateInitialState: If another state is already initial.
        """
        self._ensure_not_frozen()
        self.validate_value(name)
        if name in self._states:
            raise DuplicateStateDefinition(f"State {name.name} is already defined")
        if initial and self._initial is not None:
            raise DuplicateInitialState(f"Initial state is already set to {self._initial.name}")

        self._states[name] = None
        if initial:
            self._initial = name
        logger.debug("Registered state %s%s", name.name, " (initial)" if initial else "")

    def contains(self, name: Any) -> bool:
        return is_symbol(name) and name in self._states

    @property
    def initial(self) -> Optional[StateName]:
        """The initial state, or None if no state was marked initial."""
        return self._initial

    @staticmethod
    def validate_value(name: Any) -> None:
        """
        Check that a value is usable as a state name.

        :raises InvalidStateValue: If name is not an Enum member.
        """
        if not is_symbol(name):
            raise InvalidStateValue(f"State must be an Enum member. Given {type(name).__name__}: {name!r}")

    def require(self, name: Any) -> None:
        """
        Check that a value is a valid, registered state name.

        :raises InvalidStateValue: If name is not an Enum member.
        :raises UndefinedState: If name is not registered.
        """
        self.validate_value(name)
        if name not in self._states:
            raise UndefinedState(f"State {name.name} is undefined")

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _ensure_not_frozen(self) -> None:
        if self._frozen:
            raise DefinitionFrozen("Cannot register states after the definition has been built")

    def __contains__(self, name: Any) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[StateName]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        names = ", ".join(s.name for s in self._states)
        initial = self._initial.name if self._initial is not None else None
        return f"StateRegistry([{names}], initial={initial})"
