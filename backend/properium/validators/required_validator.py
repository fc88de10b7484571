"""Required rule: rejects a missing (None) value."""

from typing import Any

from properium.errors import Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule


class RequiredRule(BaseRule):
    """Fails when a required property holds None."""

    @property
    def name(self) -> str:
        return "RequiredRule"

    def check(self, path: LocationPath, value: Any, spec: PropertySpec, engine) -> None:
        if spec.required and value is None:
            self._fail(path, Reason.REQUIRED_VALUE)
