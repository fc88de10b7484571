"""Schema registry: per-type ordered property specifications with inheritance.

Each entity type may own a schema record. A type without its own record
uses the record of its nearest ancestor in MRO order. The first property
registered directly on a type materializes a private deep copy of the
inherited list, so parents and siblings never see the new entry.
"""

import copy
from typing import Any, Optional

import structlog

from properium.schema.spec import PropertySpec

logger = structlog.get_logger()


class SchemaRegistry:
    """Arena of schema records keyed by entity type."""

    def __init__(self):
        self._records: dict[type, list[PropertySpec]] = {}

    def _owner_of(self, entity_type: type) -> Optional[type]:
        """Nearest type in the MRO that owns a record."""
        for klass in entity_type.__mro__:
            if klass in self._records:
                return klass
        return None

    def has_own_schema(self, entity_type: type) -> bool:
        return entity_type in self._records

    def schema_of(self, entity_type: type) -> tuple[PropertySpec, ...]:
        """Ordered specifications visible to ``entity_type``, ancestors first."""
        owner = self._owner_of(entity_type)
        if owner is None:
            return ()
        return tuple(self._records[owner])

    def _own_record(self, entity_type: type) -> list[PropertySpec]:
        record = self._records.get(entity_type)
        if record is None:
            inherited = self.schema_of(entity_type)
            record = copy.deepcopy(list(inherited))
            self._records[entity_type] = record
            logger.debug(
                "schema_materialized",
                entity=entity_type.__name__,
                inherited=len(record),
            )
        return record

    def define_property(self, entity_type: type, name: str, **rules: Any) -> PropertySpec:
        """Append a property specification to ``entity_type``'s own schema.

        Args:
            entity_type: Class that owns the schema
            name: Property name
            **rules: PropertySpec fields (type, required, one_of, length, subtype, default)

        Returns:
            The registered PropertySpec

        Raises:
            pydantic.ValidationError: if the rules are malformed
        """
        spec = PropertySpec(name=name, **rules)
        self.register(entity_type, spec)
        return spec

    def register(self, entity_type: type, spec: PropertySpec) -> None:
        """Append an already-built specification."""
        self._own_record(entity_type).append(spec)
        logger.debug("property_defined", entity=entity_type.__name__, prop=spec.name)


# Module-level singleton
schema_registry = SchemaRegistry()
