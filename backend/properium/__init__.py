"""Properium: declarative property schemas with defaults and recursive validation.

Usage:
    from properium import Model, ProperiumError

    class Person(Model):
        pass

    Person.define_prop("name", type="string", required=True)

    person = Person()
    person.name = "ALICE"
    person.validate("person")
"""

from properium.errors import ProperiumError, Reason
from properium.model import Model
from properium.path import LocationPath
from properium.schema import (
    PropertySpec,
    SchemaRegistry,
    constructor,
    factory,
    literal,
    schema_registry,
)
from properium.validators import TypeMatcher, Validatable, ValidationEngine, validation_engine

__all__ = [
    "Model",
    "ProperiumError",
    "Reason",
    "LocationPath",
    "PropertySpec",
    "SchemaRegistry",
    "schema_registry",
    "constructor",
    "factory",
    "literal",
    "Validatable",
    "TypeMatcher",
    "ValidationEngine",
    "validation_engine",
]
