# ============================================================================
# DBENTITYMATE
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Entity metadata model and dialect-specific DDL generation
# CREATED: 18 OCT 2026
# ============================================================================
"""
dbentitymate - generate idempotent DDL from entity metadata.

Usage:
    from dbentitymate import EntityMetadata, FieldMetadata, get_dialect

    entity = EntityMetadata(name="Customer", table_name="Customers")
    entity.add_field(FieldMetadata(name="Id", type="string", length=32, is_required=True))
    entity.add_field(FieldMetadata(name="Email", type="string", length=255, is_unique=True))

    provider = get_dialect("postgresql")
    for statement in provider.schema_statements([entity]):
        print(statement)
"""

from dbentitymate.__version__ import __version__
from dbentitymate.core import (
    LogicalType,
    MetadataError,
    NullInputError,
    InvalidArgumentError,
    FieldNotFoundError,
    KeyProvider,
    GuidKeyProvider,
    RecordBase,
    EntityMetadata,
    FieldMetadata,
)
from dbentitymate.dialects import (
    DialectProvider,
    PostgreSQLDialectProvider,
    DialectNotFoundError,
    get_dialect,
    list_dialects,
    register_dialect,
)

__all__ = [
    "__version__",
    # Contracts
    "LogicalType",
    "MetadataError",
    "NullInputError",
    "InvalidArgumentError",
    "FieldNotFoundError",
    # Metadata
    "KeyProvider",
    "GuidKeyProvider",
    "RecordBase",
    "EntityMetadata",
    "FieldMetadata",
    # Dialects
    "DialectProvider",
    "PostgreSQLDialectProvider",
    "DialectNotFoundError",
    "get_dialect",
    "list_dialects",
    "register_dialect",
]
