# declstate/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class MachineError(Exception):
    """
    Base exception class for errors within the declarative state machine library.
    """


class ValidationError(MachineError):
    """
    Raised when a machine definition violates a declaration rule. These are
    programmer mistakes and abort construction of the defining type.
    """


class InvalidStateValue(ValidationError, TypeError):
    """
    Raised when a value that is not an Enum member is used as a state name.
    """


class InvalidEventName(ValidationError, TypeError):
    """
    Raised when a value that is not an Enum member is used as an event name.
    """


class InvalidGuardType(ValidationError, TypeError):
    """
    Raised when a guard is neither a callable predicate nor a resolvable
    named-method reference.
    """


class DuplicateStateDefinition(ValidationError):
    """Raised when a state is registered twice on one definition."""


class DuplicateInitialState(ValidationError):
    """Raised when a second state is marked initial."""


class DuplicateEventDefinition(ValidationError):
    """Raised when an event name is defined twice on one definition."""


class InvalidTransition(ValidationError):
    """Raised when a transition leads from a state back to itself."""


class DuplicateTransition(ValidationError):
    """Raised when the same (source, target) pair is declared twice on one event."""


class AccessorConflict(ValidationError):
    """
    Raised when a generated accessor name would shadow an existing attribute
    of the machine class or another generated accessor.
    """


class DefinitionFrozen(ValidationError):
    """Raised when a definition is modified after it has been built."""


class MissingDefinition(ValidationError):
    """Raised when a machine class without a definition is instantiated."""


class InvalidDefinition(ValidationError, TypeError):
    """Raised when a machine class binds something other than a definition or builder."""


class StateNotFoundError(MachineError):
    """
    Raised when a requested state does not exist in the machine definition.
    """


class UndefinedState(StateNotFoundError):
    """
    Raised when an unregistered state is referenced by a transition
    declaration or assigned to an instance.
    """


class UndefinedEvent(MachineError, KeyError):
    """Raised when dispatching an event name the definition does not declare."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class TransitionError(MachineError):
    """
    Raised when an attempted state transition cannot be completed.
    """


class NoMatchingTransition(TransitionError):
    """
    Raised by an unconditional trigger when no transition of the event
    matches the current state and guards.
    """

    def __init__(self, event, state) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Event {_label(event)} has no transition from state {_label(state)}")


def _label(value) -> str:
    return getattr(value, "name", repr(value))
