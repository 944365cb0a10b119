"""
Type definitions shared across the state machine implementation.

Design:
- No runtime dependencies on other modules
- Only contains type aliases and small predicates
- Used by states.py, guards.py, events.py and machine.py
"""

from enum import Enum
from typing import Any, NamedTuple, Sequence, Union

# States and events are named by Enum members, Python's closest match to an
# opaque symbol: hashable, comparable and never a free-form string.
StateName = Enum
EventName = Enum

StateSpec = Union[StateName, Sequence[StateName]]


class StateChange(NamedTuple):
    """Result of a successful trigger: the state left and the state entered."""

    source: StateName
    target: StateName


def is_symbol(value: Any) -> bool:
    """Return True if value may be used as a state or event name."""
    return isinstance(value, Enum)


def accessor_name(value: Enum) -> str:
    """Derive the generated accessor stem for a state or event name."""
    return value.name.lower()
