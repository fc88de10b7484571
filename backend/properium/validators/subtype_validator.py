"""Subtype rule: validates every element of a sequence against an element type."""

from typing import Any

from properium.errors import Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule
from properium.validators.types import format_value_type_name


class SubtypeRule(BaseRule):
    """Requires a list/tuple value and checks each element as ``{type: subtype}``.

    Elements are located at ``<prop>.[index]``; a failing element reports its
    own rule (usually ``invalid type``), not ``invalid subtype``.
    """

    @property
    def name(self) -> str:
        return "SubtypeRule"

    def check(self, path: LocationPath, value: Any, spec: PropertySpec, engine) -> None:
        subtype = spec.subtype
        if subtype is None:
            return

        if not isinstance(value, (list, tuple)):
            self._fail(path, Reason.INVALID_SUBTYPE, f"subtype given for type {format_value_type_name(value)}")

        element_spec = PropertySpec(name=f"{spec.name}[]", type=subtype)
        for index, element in enumerate(value):
            engine.validate_value(path.index(index), element, element_spec)
