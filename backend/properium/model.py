"""Entity base class: schema declaration, defaults at construction, self-validation."""

from typing import Any, ClassVar, Optional, Union

from properium.config import UnknownPropPolicy
from properium.defaults import initialize_defaults
from properium.path import LocationPath
from properium.schema.registry import schema_registry
from properium.schema.spec import PropertySpec
from properium.validators.base import Validatable
from properium.validators.engine import validation_engine


class Model(Validatable):
    """Base for entity types that declare properties with ``define_prop``.

    Subclasses inherit their parent's properties; properties defined on a
    subclass never leak back into the parent.

        class Person(Model):
            pass

        Person.define_prop("name", type="string", required=True)
        Person.define_prop("friends", type="array", subtype="string", default=[])

        Person().validate("person")
    """

    # None defers to PROPERIUM_UNKNOWN_PROPS
    unknown_props: ClassVar[Optional[UnknownPropPolicy]] = None

    @classmethod
    def define_prop(cls, name: str, **rules: Any) -> PropertySpec:
        return schema_registry.define_property(cls, name, **rules)

    @classmethod
    def props(cls) -> tuple[PropertySpec, ...]:
        return schema_registry.schema_of(cls)

    def __init__(self):
        initialize_defaults(self, type(self).props())

    def validate(self, path: Union[LocationPath, str, None] = None) -> "Model":
        """Validate this instance, prefixing every location with ``path``.

        Returns:
            self, for chaining

        Raises:
            ProperiumError: on the first violation
        """
        cls = type(self)
        return validation_engine.validate(path, self, cls.props(), unknown_props=cls.unknown_props)
