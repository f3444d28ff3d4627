from typing import Any, Mapping, Optional


class MappingError(Exception):
    """Raised when an object cannot be mapped between its entity and DTO shapes.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field, raw value, validation info)
        code: optional machine-readable error code
    """

    default_code = "mapping_error"

    def __init__(self, message: str = "Mapping failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class FormatError(MappingError):
    """Raised when a DTO string cannot be parsed back into a typed entity value.

    Carries the offending ``field`` (dotted path for collection elements) and the
    ``raw_value`` exactly as it was found on the DTO.
    """

    default_code = "format_error"

    def __init__(self, field: str, raw_value: Any, reason: Optional[str] = None):
        message = f"Cannot parse field '{field}' from {raw_value!r}"
        if reason:
            message = f"{message}: {reason}"
        details: dict[str, Any] = {"field": field, "raw_value": raw_value}
        if reason:
            details["reason"] = reason
        super().__init__(message, details=details)
        self.field = field
        self.raw_value = raw_value
        self.reason = reason

    def under(self, parent: str) -> "FormatError":
        return FormatError(f"{parent}.{self.field}", self.raw_value, self.reason)


class MissingReferenceError(MappingError):
    """Raised when a computed field needs a nested source object that is absent.

    Attributes:
        field: target field being computed
        reference: dotted path of the missing source reference
    """

    default_code = "missing_reference"

    def __init__(self, field: str, reference: str):
        super().__init__(
            f"Cannot compute field '{field}': source reference '{reference}' is missing",
            details={"field": field, "reference": reference},
        )
        self.field = field
        self.reference = reference

    def under(self, parent: str) -> "MissingReferenceError":
        return MissingReferenceError(f"{parent}.{self.field}", self.reference)
