"""Validation Engine: walks a schema against a live object and fails fast.

For each PropertySpec, in schema order:
    1. presence: the property must be set on the object, unless it has a default
    2. rules: required, one_of, type, length, subtype (in that order)
    3. nested: a Validatable value validates itself under the property's path

The first violation raises ProperiumError and aborts the whole pass.

Usage:
    engine = ValidationEngine()
    engine.validate("root", instance, schema)
"""

import time
from contextvars import ContextVar
from typing import Any, Iterable, Optional, Union

import structlog

from properium.config import UnknownPropPolicy, get_settings
from properium.defaults import get_own, has_own, own_names, set_own
from properium.errors import ProperiumError, Reason
from properium.path import LocationPath
from properium.schema.spec import PropertySpec
from properium.validators.base import BaseRule, Validatable
from properium.validators.length_validator import LengthRule
from properium.validators.one_of_validator import OneOfRule
from properium.validators.required_validator import RequiredRule
from properium.validators.subtype_validator import SubtypeRule
from properium.validators.type_validator import TypeRule
from properium.validators.types import TypeMatcherRegistry, type_matchers as default_type_matchers

logger = structlog.get_logger()

PathLike = Union[LocationPath, str, None]

# Nesting depth of validate() calls in the current context
_depth: ContextVar[int] = ContextVar("properium_validate_depth", default=0)


class ValidationEngine:
    """Applies an ordered rule chain to objects, values and nested graphs."""

    def __init__(
        self,
        rules: Optional[list[BaseRule]] = None,
        type_matchers: Optional[TypeMatcherRegistry] = None,
        unknown_props: Optional[UnknownPropPolicy] = None,
    ):
        """Initialize with the default rule chain or a custom one.

        Args:
            rules: Optional ordered rule list. If None, uses all defaults.
            type_matchers: Registry used to resolve type descriptors.
            unknown_props: "ignore" or "reject"; None defers to settings.
        """
        self.rules = rules if rules is not None else self._default_rules()
        self.type_matchers = type_matchers or default_type_matchers
        self.unknown_props = unknown_props

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        """Create the default rule chain in execution order."""
        return [
            RequiredRule(),
            OneOfRule(),
            TypeRule(),
            LengthRule(),
            SubtypeRule(),  # Recurses into elements, must run last
        ]

    def validate_value(self, path: PathLike, value: Any, spec: PropertySpec) -> Any:
        """Validate an already-resolved value against one spec.

        Returns:
            The value, unchanged
        """
        path = LocationPath.of(path)
        for rule in self.rules:
            rule.check(path, value, spec, self)

        if isinstance(value, Validatable):
            value.validate(path)

        return value

    def validate_prop(self, path: PathLike, obj: Any, spec: PropertySpec) -> Any:
        """Validate the property ``spec.name`` of ``obj``.

        A missing property receives a fresh default when the spec declares one;
        otherwise the pass fails with ``undefined prop``.

        Returns:
            The object, unchanged apart from any default written into it
        """
        prop_path = LocationPath.of(path).child(spec.name)

        if not has_own(obj, spec.name):
            if not spec.has_default:
                ProperiumError.fail(prop_path, Reason.UNDEFINED_PROP)
            set_own(obj, spec.name, spec.resolve_default())

        self.validate_value(prop_path, get_own(obj, spec.name), spec)
        return obj

    def validate(
        self,
        path: PathLike,
        instance: Any,
        schema: Iterable[PropertySpec],
        unknown_props: Optional[UnknownPropPolicy] = None,
    ) -> Any:
        """Validate every property of ``instance`` against ``schema``.

        Args:
            path: Root label or path prefixing every property location
            instance: Object (attributes and slots) or mapping (keys) to validate
            schema: Ordered property specifications
            unknown_props: Overrides the engine's unknown-property policy

        Returns:
            The same instance

        Raises:
            ProperiumError: on the first violation
        """
        start_time = time.perf_counter()
        root = LocationPath.of(path)
        schema = tuple(schema)
        policy = unknown_props or self.unknown_props or get_settings().UNKNOWN_PROPS

        outermost = _depth.get() == 0
        token = _depth.set(_depth.get() + 1)
        try:
            if policy == "reject":
                self._reject_unknown(root, instance, schema)
            for spec in schema:
                self.validate_prop(root, instance, spec)
        except ProperiumError as e:
            # Nested passes re-raise the same failure; report it once
            if outermost:
                logger.debug("validation_failed", prop=e.prop, reason=e.text, details=e.details)
            raise
        finally:
            _depth.reset(token)

        logger.debug(
            "validation_complete",
            entity=type(instance).__name__,
            root=str(root),
            props=len(schema),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return instance

    def _reject_unknown(self, root: LocationPath, instance: Any, schema: tuple[PropertySpec, ...]) -> None:
        """Fail on the first own property not named in the schema; private names are skipped."""
        known = {spec.name for spec in schema}
        for name in own_names(instance):
            if name.startswith("_"):
                continue
            if name not in known:
                ProperiumError.fail(root.child(name), Reason.UNKNOWN_PROP)

    def add_rule(self, rule: BaseRule) -> None:
        """Append a custom rule to the chain."""
        self.rules.append(rule)

    def remove_rule(self, rule_name: str) -> None:
        """Remove a rule by name."""
        self.rules = [r for r in self.rules if r.name != rule_name]


# Module-level singleton
validation_engine = ValidationEngine()
