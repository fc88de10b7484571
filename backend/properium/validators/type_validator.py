"""Type rule: checks a value against the spec's type descriptor."""

from typing import Any

from properium.errors import Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule
from properium.validators.types import format_type_name, format_value_type_name


class TypeRule(BaseRule):
    """Fails when no predicate resolves for the descriptor or the predicate rejects the value."""

    @property
    def name(self) -> str:
        return "TypeRule"

    def check(self, path: LocationPath, value: Any, spec: PropertySpec, engine) -> None:
        descriptor = spec.type
        if descriptor is None:
            return

        if not engine.type_matchers.matches(descriptor, value):
            self._fail(
                path,
                Reason.INVALID_TYPE,
                f"expected {format_type_name(descriptor)}, but is {format_value_type_name(value)}",
            )
