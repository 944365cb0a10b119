# declstate/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from declstate.guards import Guard
from declstate.types import StateName


@dataclass(frozen=True)
class Transition:
    """
    A directed edge from one state to another under a single event, optionally
    gated by a guard. Transitions are immutable once declared.
    """

    source: StateName
    target: StateName
    guard: Optional[Guard] = None

    @property
    def endpoints(self) -> tuple:
        """The (source, target) pair used for duplicate detection."""
        return (self.source, self.target)

    def applies_to(self, instance: Any) -> bool:
        """
        Check whether this transition may fire for the instance: its source
        must equal the current state and its guard, if any, must pass.

        :param instance: The machine instance to evaluate against.
        :return: True if the transition is eligible.
        """
        if instance.state != self.source:
            return False
        return self.guard is None or self.guard.evaluate(instance)

    def __repr__(self) -> str:
        guard = f", when={self.guard!r}" if self.guard is not None else ""
        return f"Transition({self.source.name} -> {self.target.name}{guard})"
