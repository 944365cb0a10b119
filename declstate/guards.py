# declstate/guards.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Union

from declstate.errors import InvalidGuardType

_MISSING = object()


class Guard:
    """Represents a guard condition for a transition.

    A guard is a predicate over the machine instance. Callables are invoked
    with the instance; named-method guards look the method up on the instance
    and call it without arguments. The result is coerced with ``bool``.

    Guards compose with ``&``, ``|`` and ``~``. Composite guards
    short-circuit the same way the Python operators do.
    """

    def __init__(
        self,
        predicate: Callable[[Any], Any],
        description: Optional[str] = None,
        method_names: Tuple[str, ...] = (),
    ) -> None:
        """Initialize a Guard instance.

        Args:
            predicate: Function that takes the instance and returns a truthy value
            description: Optional label used in repr and log output
            method_names: Instance methods the predicate calls by name
        """
        if not callable(predicate):
            raise InvalidGuardType(f"Guard predicate must be callable. Given {type(predicate).__name__}")
        self._predicate = predicate
        self._description = description or getattr(predicate, "__name__", repr(predicate))
        self._method_names = tuple(method_names)

    @classmethod
    def method(cls, name: str) -> "Guard":
        """Create a guard that calls the instance method called ``name``.

        Raises:
            InvalidGuardType: If name is not a valid identifier
        """
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidGuardType(f"Guard method name must be an identifier. Given {name!r}")

        def _call_method(instance: Any) -> Any:
            target = getattr(instance, name, _MISSING)
            if target is _MISSING or not callable(target):
                raise InvalidGuardType(f"Guard method {name!r} is not a method of {type(instance).__name__}")
            return target()

        return cls(_call_method, description=name, method_names=(name,))

    @property
    def description(self) -> str:
        return self._description

    @property
    def method_names(self) -> Tuple[str, ...]:
        """Names of the instance methods this guard resolves, including composed guards."""
        return self._method_names

    def evaluate(self, instance: Any) -> bool:
        """Evaluate the guard against the instance.

        Exceptions raised by the predicate propagate unchanged.

        Returns:
            True if the guard is satisfied, False otherwise
        """
        return bool(self._predicate(instance))

    __call__ = evaluate

    def __and__(self, other: "GuardSpecOrGuard") -> "Guard":
        other_guard = _require(other)
        return Guard(
            lambda instance: self.evaluate(instance) and other_guard.evaluate(instance),
            description=f"({self.description} & {other_guard.description})",
            method_names=self._method_names + other_guard.method_names,
        )

    def __or__(self, other: "GuardSpecOrGuard") -> "Guard":
        other_guard = _require(other)
        return Guard(
            lambda instance: self.evaluate(instance) or other_guard.evaluate(instance),
            description=f"({self.description} | {other_guard.description})",
            method_names=self._method_names + other_guard.method_names,
        )

    def __invert__(self) -> "Guard":
        return Guard(
            lambda instance: not self.evaluate(instance),
            description=f"~{self.description}",
            method_names=self._method_names,
        )

    def __repr__(self) -> str:
        return f"Guard({self._description})"


GuardSpecOrGuard = Union[Guard, Callable[[Any], Any], str]


def as_guard(spec: Optional[GuardSpecOrGuard]) -> Optional[Guard]:
    """Normalize a guard specification.

    Args:
        spec: None, a Guard, a callable taking the instance, or a method name

    Returns:
        A Guard, or None when no guard is given

    Raises:
        InvalidGuardType: If spec is none of the accepted kinds
    """
    if spec is None or isinstance(spec, Guard):
        return spec
    if isinstance(spec, str):
        return Guard.method(spec)
    if callable(spec):
        return Guard(spec)
    raise InvalidGuardType(
        f"Guard must be a callable or a method name. Given {type(spec).__name__}: {spec!r}"
    )


def _require(spec: GuardSpecOrGuard) -> Guard:
    guard = as_guard(spec)
    if guard is None:
        raise InvalidGuardType("Cannot compose a guard with None")
    return guard
