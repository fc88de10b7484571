"""Base rule: abstract class implementing the Strategy Pattern.

Each rule checks one constraint of a PropertySpec against a resolved value.
New rules are added to an engine without modifying it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NoReturn, Optional, Union

from properium.errors import ProperiumError, Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec

if TYPE_CHECKING:
    from properium.validators.engine import ValidationEngine


class Validatable(ABC):
    """Capability of values that validate themselves when nested in a graph."""

    @abstractmethod
    def validate(self, path: Union[LocationPath, str, None] = None) -> Any:
        """Validate, raising ProperiumError located under ``path`` on failure."""
        ...


class BaseRule(ABC):
    """Abstract base for all property rules.

    Contract:
        - check() returns None when the value conforms
        - check() raises ProperiumError on the first violation
        - check() is a no-op when its constraint is not set on the spec
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(
        self,
        path: LocationPath,
        value: Any,
        spec: PropertySpec,
        engine: "ValidationEngine",
    ) -> None:
        """Check one constraint.

        Args:
            path: Location of the value
            value: Resolved property value
            spec: Specification the value is checked against
            engine: Engine running the rule, for type lookup and recursion
        """
        ...

    # ── Helper Methods ──

    def _fail(self, path: LocationPath, reason: Reason, details: Optional[str] = None) -> NoReturn:
        ProperiumError.fail(path, reason, details)
