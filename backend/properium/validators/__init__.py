"""Recursive validator: rule chain, type matching and the validation engine.

Usage:
    from properium.validators import validation_engine

    validation_engine.validate("root", instance, schema)
"""

from properium.validators.base import BaseRule, Validatable
from properium.validators.engine import ValidationEngine, validation_engine
from properium.validators.length_validator import LengthRule
from properium.validators.one_of_validator import OneOfRule
from properium.validators.required_validator import RequiredRule
from properium.validators.subtype_validator import SubtypeRule
from properium.validators.type_validator import TypeRule
from properium.validators.types import TypeMatcher, TypeMatcherRegistry, type_matchers

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "BaseRule",
    "Validatable",
    "RequiredRule",
    "OneOfRule",
    "TypeRule",
    "LengthRule",
    "SubtypeRule",
    "TypeMatcher",
    "TypeMatcherRegistry",
    "type_matchers",
]
