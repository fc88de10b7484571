"""Type matcher registry: resolves a type descriptor to a conformance predicate.

A descriptor is one of:
    - a primitive tag: "array", "boolean", "float", "integer", "number", "object", "string"
    - a class, matched with ``isinstance`` unless it defines ``is_type`` as a
      classmethod or staticmethod
    - any other object exposing ``is_type(value)`` (the TypeMatcher capability)
"""

import inspect
from typing import Any, Callable, Optional, Protocol, runtime_checkable

Predicate = Callable[[Any, Any], bool]

_SCALARS = (bool, int, float, complex, str, bytes)


@runtime_checkable
class TypeMatcher(Protocol):
    """Descriptor that decides conformance itself."""

    def is_type(self, value: Any) -> bool:
        ...


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


PRIMITIVE_MATCHERS: dict[str, Predicate] = {
    "array": lambda value, _: isinstance(value, (list, tuple)),
    "boolean": lambda value, _: isinstance(value, bool),
    "float": lambda value, _: _is_number(value),
    "integer": lambda value, _: isinstance(value, int) and not isinstance(value, bool),
    "number": lambda value, _: _is_number(value),
    "object": lambda value, _: value is not None and not isinstance(value, _SCALARS),
    "string": lambda value, _: isinstance(value, str),
}


def _custom(value: Any, descriptor: TypeMatcher) -> bool:
    return bool(descriptor.is_type(value))


def _instance_of(value: Any, descriptor: type) -> bool:
    return isinstance(value, descriptor)


def format_type_name(descriptor: Any) -> str:
    return getattr(descriptor, "__name__", None) or str(descriptor)


def format_value_type_name(value: Any) -> str:
    return type(value).__name__


class TypeMatcherRegistry:
    """Maps type descriptors to predicates; extendable with custom tags."""

    def __init__(self, matchers: Optional[dict[str, Predicate]] = None):
        self._matchers: dict[str, Predicate] = dict(PRIMITIVE_MATCHERS)
        if matchers:
            self._matchers.update(matchers)

    @property
    def tags(self) -> list[str]:
        return sorted(self._matchers)

    def register(self, tag: str, predicate: Predicate) -> None:
        """Add or replace the predicate for a primitive tag."""
        self._matchers[tag] = predicate

    def resolve(self, descriptor: Any) -> Optional[Predicate]:
        """Find the predicate for a descriptor, or None if it cannot be matched."""
        if isinstance(descriptor, str):
            return self._matchers.get(descriptor)
        if isinstance(descriptor, type):
            # Classes opt in with a class- or staticmethod; an instance method is_type
            # describes instances, not the class.
            matcher = inspect.getattr_static(descriptor, "is_type", None)
            if isinstance(matcher, (classmethod, staticmethod)):
                return _custom
            return _instance_of
        if isinstance(descriptor, TypeMatcher):
            return _custom
        return None

    def matches(self, descriptor: Any, value: Any) -> bool:
        predicate = self.resolve(descriptor)
        return predicate is not None and predicate(value, descriptor)


# Module-level singleton
type_matchers = TypeMatcherRegistry()
