"""Length rule: exact length or an inclusive [min, max] range."""

from collections.abc import Sized
from typing import Any

from properium.errors import Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule
from properium.validators.types import format_value_type_name


class LengthRule(BaseRule):
    """Checks ``len(value)`` against ``spec.length``.

    A missing bound in a range means unbounded on that side.
    """

    @property
    def name(self) -> str:
        return "LengthRule"

    def check(self, path: LocationPath, value: Any, spec: PropertySpec, engine) -> None:
        length = spec.length
        if length is None:
            return

        if not isinstance(value, Sized):
            self._fail(path, Reason.INVALID_LENGTH, f"length expected for type {format_value_type_name(value)}")

        actual = len(value)
        if isinstance(length, tuple):
            low, high = length
            if (low is not None and actual < low) or (high is not None and actual > high):
                self._fail(
                    path,
                    Reason.INVALID_LENGTH,
                    f"expected [{'' if low is None else low}..{'' if high is None else high}], but is {actual}",
                )
        elif actual != length:
            self._fail(path, Reason.INVALID_LENGTH, f"expected {length}, but is {actual}")
