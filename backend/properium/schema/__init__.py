"""Schema declaration: property specifications and the per-type registry."""

from properium.schema.registry import SchemaRegistry, schema_registry
from properium.schema.spec import (
    ConstructorDefault,
    DefaultValue,
    FactoryDefault,
    LiteralDefault,
    PropertySpec,
    constructor,
    factory,
    literal,
)

__all__ = [
    "SchemaRegistry",
    "schema_registry",
    "PropertySpec",
    "DefaultValue",
    "ConstructorDefault",
    "FactoryDefault",
    "LiteralDefault",
    "constructor",
    "factory",
    "literal",
]
