"""Default initializer: populate unset properties from their default policies."""

from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable

from properium.schema.spec import PropertySpec


def _slot_names(instance: Any) -> list[str]:
    names = []
    for klass in type(instance).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if slot not in ("__dict__", "__weakref__"))
    return names


def has_own(instance: Any, name: str) -> bool:
    """True if ``name`` is set directly on the instance.

    Mappings (read-only included) are checked by key. Other objects count
    their ``__dict__`` entries and any assigned ``__slots__``; class
    attributes and properties never count.
    """
    if isinstance(instance, Mapping):
        return name in instance
    if name in getattr(instance, "__dict__", {}):
        return True
    return name in _slot_names(instance) and hasattr(instance, name)


def get_own(instance: Any, name: str) -> Any:
    if isinstance(instance, Mapping):
        return instance[name]
    own = getattr(instance, "__dict__", {})
    if name in own:
        return own[name]
    return getattr(instance, name)


def set_own(instance: Any, name: str, value: Any) -> None:
    """Assign an own property. Read-only mappings raise TypeError."""
    if isinstance(instance, MutableMapping):
        instance[name] = value
    elif isinstance(instance, Mapping):
        raise TypeError(f"cannot assign '{name}' on read-only {type(instance).__name__}")
    else:
        setattr(instance, name, value)


def own_names(instance: Any) -> list[str]:
    """Names of all own properties: mapping keys, or ``__dict__`` entries then assigned slots."""
    if isinstance(instance, Mapping):
        return [str(key) for key in instance]
    names = list(getattr(instance, "__dict__", {}))
    names.extend(slot for slot in _slot_names(instance) if slot not in names and hasattr(instance, slot))
    return names


def initialize_defaults(instance: Any, schema: Iterable[PropertySpec]) -> Any:
    """Assign a fresh default to every unset property that declares one.

    Properties already set on the instance are left untouched.

    Returns:
        The same instance
    """
    for spec in schema:
        if spec.has_default and not has_own(instance, spec.name):
            set_own(instance, spec.name, spec.resolve_default())
    return instance
