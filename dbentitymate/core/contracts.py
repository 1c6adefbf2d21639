# ============================================================================
# BASE CONTRACTS - LOGICAL TYPES & ERRORS
# ============================================================================
# STATUS: Foundation - Logical type tags and error taxonomy
# PURPOSE: Shared vocabulary between metadata models and dialect providers
# CREATED: 18 OCT 2026
# EXPORTS: LogicalType, MetadataError, NullInputError, InvalidArgumentError,
#          FieldNotFoundError
# ============================================================================
"""
Base contracts for entity metadata and DDL generation.

Logical types are database-neutral tags stored on FieldMetadata.Type.
Dialect providers map them to native column types.
"""

from enum import Enum
from typing import Any, Optional


# ============================================================================
# LOGICAL TYPES
# ============================================================================

class LogicalType(str, Enum):
    """
    Canonical logical field types.

    Tags are matched case-insensitively; several aliases resolve to
    the same canonical type (see LogicalType.parse).
    """
    STRING = "string"
    INT = "int"
    LONG = "long"
    SHORT = "short"
    DECIMAL = "decimal"
    DOUBLE = "double"
    FLOAT = "float"
    BOOL = "bool"
    DATETIME = "datetime"
    GUID = "guid"
    BINARY = "binary"

    @classmethod
    def parse(cls, tag: Any) -> Optional["LogicalType"]:
        """
        Resolve a type tag to its canonical LogicalType.

        Returns None for blank or unrecognized tags; callers decide
        the fallback.
        """
        if isinstance(tag, LogicalType):
            return tag
        if tag is None:
            return None
        key = str(tag).strip().lower()
        if not key:
            return None
        return _ALIASES.get(key)


_ALIASES = {
    "string": LogicalType.STRING,
    "int": LogicalType.INT,
    "int32": LogicalType.INT,
    "integer": LogicalType.INT,
    "long": LogicalType.LONG,
    "int64": LogicalType.LONG,
    "short": LogicalType.SHORT,
    "int16": LogicalType.SHORT,
    "decimal": LogicalType.DECIMAL,
    "double": LogicalType.DOUBLE,
    "float": LogicalType.FLOAT,
    "bool": LogicalType.BOOL,
    "boolean": LogicalType.BOOL,
    "datetime": LogicalType.DATETIME,
    "guid": LogicalType.GUID,
    "byte[]": LogicalType.BINARY,
    "binary": LogicalType.BINARY,
}


# ============================================================================
# EXCEPTIONS
# ============================================================================

class MetadataError(Exception):
    """Base exception for metadata and DDL generation errors."""
    pass


class NullInputError(MetadataError, TypeError):
    """Raised when a required object reference is None."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class InvalidArgumentError(MetadataError, ValueError):
    """Raised when a required attribute is missing or blank."""

    def __init__(self, message: str, argument: str = None, attribute: str = None):
        self.argument = argument
        self.attribute = attribute
        super().__init__(message)


class FieldNotFoundError(MetadataError, KeyError):
    """Raised when a record field store has no value for a key."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(field_name)

    def __str__(self) -> str:
        return f"Field '{self.field_name}' not found"


__all__ = [
    "LogicalType",
    "MetadataError",
    "NullInputError",
    "InvalidArgumentError",
    "FieldNotFoundError",
]
