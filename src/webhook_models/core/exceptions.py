"""
Custom exception classes for webhook_models.

Provides structured error handling with domain-specific exceptions
for decoding, field access, record registration and schema loading.
"""

from typing import Any, List, Optional, Tuple

from pydantic import ValidationError


Problem = Tuple[str, str]


class WebhookModelsException(Exception):
    """Base exception class for all webhook_models exceptions."""

    pass


class MalformedInputError(WebhookModelsException):
    """
    Raised when decode input does not match the expected record shape.

    This happens when:
    - The payload is not valid JSON, or not a JSON object
    - A field value has the wrong JSON type (e.g. number where a string is expected)
    - A nested record, list or mapping cannot be parsed

    No partial record is returned. ``problems`` holds one ``(location, message)``
    pair per offending field, with locations written as dotted wire keys.

    Example:
        >>> raise MalformedInputError(
        ...     record="EventTypeUpdate",
        ...     problems=[("featureFlag", "Input should be a valid string")],
        ... )
    """

    def __init__(self, record: str, problems: Optional[List[Problem]] = None):
        self.record = record
        self.problems = list(problems or [])
        message = f"Malformed {record} input"
        if self.problems:
            details = "; ".join(f"{loc or '<root>'}: {msg}" for loc, msg in self.problems)
            message += f" - {details}"
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, record: str, exc: ValidationError) -> "MalformedInputError":
        """Build the matching error from a pydantic ValidationError.

        Returns a MissingRequiredError when every problem is a missing key.
        """
        errors = exc.errors(include_url=False)
        problems = [(_format_loc(err.get("loc", ())), err.get("msg", "")) for err in errors]
        if errors and all(err.get("type") == "missing" for err in errors):
            return MissingRequiredError(record, problems)
        return cls(record, problems)


class MissingRequiredError(MalformedInputError):
    """Raised when decode input lacks one or more required keys."""

    @property
    def missing(self) -> List[str]:
        return [loc for loc, _ in self.problems]


class FieldAccessError(WebhookModelsException):
    """Raised when a field name is unknown or its kind cannot hold the requested state."""

    def __init__(self, record: str, field: str, reason: str):
        self.record = record
        self.field = field
        self.reason = reason
        super().__init__(f"{record}.{field}: {reason}")


class RecordRegistryError(RuntimeError, WebhookModelsException):
    """Raised on duplicate registration or lookup of an unknown record type."""

    pass


class SchemaConfigError(WebhookModelsException):
    """Raised when a schema document cannot be loaded or turned into record types."""

    pass


def _format_loc(loc: Any) -> str:
    return ".".join(str(part) for part in loc)
