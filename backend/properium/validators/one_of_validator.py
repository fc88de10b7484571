"""One-of rule: restricts a value to an enumerated set."""

from typing import Any

from properium.errors import Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule


def _same_value(option: Any, value: Any) -> bool:
    # bool never equals a number here, matching the "integer"/"number" tags
    return isinstance(option, bool) == isinstance(value, bool) and option == value


class OneOfRule(BaseRule):
    """Fails when the value is not a member of ``spec.one_of``."""

    @property
    def name(self) -> str:
        return "OneOfRule"

    def check(self, path: LocationPath, value: Any, spec: PropertySpec, engine) -> None:
        allowed = spec.one_of
        if allowed is None:
            return

        if not any(_same_value(option, value) for option in allowed):
            self._fail(
                path,
                Reason.UNKNOWN_VALUE,
                f"expected oneOf [{', '.join(str(option) for option in allowed)}], but is {value}",
            )
