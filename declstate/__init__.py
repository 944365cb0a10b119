"""declstate: declarative finite state machines for Python classes

A host class declares its states, its single initial state and its events
(ordered, optionally guarded transitions) once, through a MachineBuilder.
Every instance then tracks one current state and exposes predicates,
triggers and feasibility checks generated from that definition.

Responsibilities:
    - Declaration and validation of states, events and transitions
    - First-match-wins transition selection with guards
    - Per-instance state tracking and change notification

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at MachineError
        - Definition mistakes fail while the class is being defined

    Logging:
        - Standard library logging under the ``declstate`` logger
        - No handlers are configured by the library

    Thread Safety:
        - Definitions are frozen once built and safe to share
        - Instances are not synchronized; one event at a time per instance
"""

from declstate.builder import MachineBuilder
from declstate.definition import MachineDefinition
from declstate.errors import (
    AccessorConflict,
    DefinitionFrozen,
    DuplicateEventDefinition,
    DuplicateInitialState,
    DuplicateStateDefinition,
    DuplicateTransition,
    InvalidEventName,
    InvalidDefinition,
    InvalidGuardType,
    InvalidStateValue,
    InvalidTransition,
    MachineError,
    MissingDefinition,
    NoMatchingTransition,
    StateNotFoundError,
    TransitionError,
    UndefinedEvent,
    UndefinedState,
    ValidationError,
)
from declstate.events import Event, EventRegistry
from declstate.executor import EventExecutor
from declstate.guards import Guard, as_guard
from declstate.machine import StateMachine
from declstate.states import StateRegistry
from declstate.transitions import Transition
from declstate.types import StateChange

__version__ = "0.1.0"

__all__ = [
    # Definition
    "MachineBuilder",
    "MachineDefinition",
    "StateRegistry",
    "EventRegistry",
    "Event",
    "Transition",
    "Guard",
    "as_guard",
    # Runtime
    "StateMachine",
    "EventExecutor",
    "StateChange",
    # Errors
    "MachineError",
    "ValidationError",
    "InvalidStateValue",
    "InvalidEventName",
    "InvalidGuardType",
    "InvalidDefinition",
    "DuplicateStateDefinition",
    "DuplicateInitialState",
    "DuplicateEventDefinition",
    "InvalidTransition",
    "DuplicateTransition",
    "AccessorConflict",
    "DefinitionFrozen",
    "MissingDefinition",
    "StateNotFoundError",
    "UndefinedState",
    "UndefinedEvent",
    "TransitionError",
    "NoMatchingTransition",
]
