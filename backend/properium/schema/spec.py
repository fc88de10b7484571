"""Property specifications and default-value policies.

A schema author picks the default policy explicitly:

    Person.define_prop("pet", default=constructor(Pet))
    Person.define_prop("token", default=factory(make_token))
    Person.define_prop("friends", default=[])        # literal, deep-copied per instance
"""

import copy
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

LengthConstraint = Union[int, tuple[Optional[int], Optional[int]]]


class ConstructorDefault(BaseModel):
    """Default produced by instantiating a class with no arguments."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["constructor"] = "constructor"
    cls: type[Any]

    def resolve(self) -> Any:
        return self.cls()


class FactoryDefault(BaseModel):
    """Default produced by calling a zero-argument function."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["factory"] = "factory"
    func: Callable[[], Any]

    def resolve(self) -> Any:
        return self.func()


class LiteralDefault(BaseModel):
    """Default value deep-cloned for every use."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["literal"] = "literal"
    value: Any

    def resolve(self) -> Any:
        return copy.deepcopy(self.value)


DefaultValue = Annotated[
    Union[ConstructorDefault, FactoryDefault, LiteralDefault],
    Field(discriminator="kind"),
]

_DEFAULT_KINDS = (ConstructorDefault, FactoryDefault, LiteralDefault)


def constructor(cls: type) -> ConstructorDefault:
    return ConstructorDefault(cls=cls)


def factory(func: Callable[[], Any]) -> FactoryDefault:
    return FactoryDefault(func=func)


def literal(value: Any) -> LiteralDefault:
    return LiteralDefault(value=value)


class PropertySpec(BaseModel):
    """Constraints for one named property. Immutable once built.

    Fields:
        name: Property name, unique within one schema
        type: Primitive tag ("string", "integer", ...), a class, or a TypeMatcher
        required: Reject a ``None`` value
        one_of: Allowed values
        length: Exact length, or an inclusive ``(min, max)`` pair with optional sides
        subtype: Type descriptor every element of a sequence value must match
        default: Default policy applied at construction and on missing properties
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    type: Any = None
    required: bool = False
    one_of: Optional[tuple[Any, ...]] = None
    length: Optional[LengthConstraint] = None
    subtype: Any = None
    default: Optional[DefaultValue] = None

    @field_validator("default", mode="before")
    @classmethod
    def _wrap_literal_default(cls, value: Any) -> Any:
        # Raw values are always literals; constructor/factory must be tagged.
        if value is None or isinstance(value, _DEFAULT_KINDS):
            return value
        return LiteralDefault(value=value)

    @field_validator("length")
    @classmethod
    def _check_length(cls, value: Optional[LengthConstraint]) -> Optional[LengthConstraint]:
        if value is None:
            return value
        if isinstance(value, int):
            if value < 0:
                raise ValueError("length must not be negative")
            return value

        low, high = value
        if (low is not None and low < 0) or (high is not None and high < 0):
            raise ValueError("length bounds must not be negative")
        if low is not None and high is not None and low > high:
            raise ValueError(f"length lower bound {low} exceeds upper bound {high}")
        return value

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def resolve_default(self) -> Any:
        """Produce a fresh default value according to this spec's policy."""
        if self.default is None:
            raise ValueError(f"property '{self.name}' has no default")
        return self.default.resolve()
