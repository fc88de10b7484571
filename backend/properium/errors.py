"""Failure signal: the single error type raised by validation.

Every failure carries the dotted location of the offending property,
a short reason text and optional human-readable details.
"""

from enum import Enum
from typing import Iterable, NoReturn, Optional, Union


class Reason(str, Enum):
    """Reason codes for every built-in validation rule."""

    UNDEFINED_PROP = "undefined prop"
    UNKNOWN_PROP = "unknown prop"
    REQUIRED_VALUE = "required value"
    UNKNOWN_VALUE = "unknown value"
    INVALID_TYPE = "invalid type"
    INVALID_LENGTH = "invalid length"
    INVALID_SUBTYPE = "invalid subtype"


def _flatten(parts) -> Iterable[str]:
    if parts is None:
        return
    if isinstance(parts, str):
        yield parts
        return
    try:
        items = iter(parts)
    except TypeError:
        yield str(parts)
        return
    for part in items:
        yield from _flatten(part)


def join_path(parts) -> str:
    """Flatten nested path parts and join the non-empty ones with dots."""
    return ".".join(part for part in _flatten(parts) if part)


class ProperiumError(Exception):
    """A validation failure at a specific location in an object graph."""

    @classmethod
    def fail(cls, parts, text: Union[Reason, str], details: Optional[str] = None) -> NoReturn:
        """Build the location from ``parts`` and raise immediately.

        Args:
            parts: Path parts (strings, None, nested sequences or a LocationPath)
            text: Reason text, usually a ``Reason`` member
            details: Optional human-readable details

        Raises:
            ProperiumError: always
        """
        raise cls(join_path(parts), text, details)

    def __init__(self, prop: str, text: Union[Reason, str], details: Optional[str] = None):
        if not prop:
            raise ValueError("prop must be set")
        if not text:
            raise ValueError("text must be set")

        self.reason: Optional[Reason] = text if isinstance(text, Reason) else None
        self.prop = prop
        self.text = text.value if isinstance(text, Reason) else text
        self.details = details

        message = f"{self.prop}: {self.text}"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)
