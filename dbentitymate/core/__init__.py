# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export contracts, keys, record store and metadata models
# CREATED: 18 OCT 2026
# ============================================================================

from dbentitymate.core.contracts import (
    LogicalType,
    MetadataError,
    NullInputError,
    InvalidArgumentError,
    FieldNotFoundError,
)
from dbentitymate.core.keys import KeyProvider, GuidKeyProvider
from dbentitymate.core.record import RecordBase
from dbentitymate.core.models import EntityMetadata, FieldMetadata

__all__ = [
    # Contracts
    "LogicalType",
    "MetadataError",
    "NullInputError",
    "InvalidArgumentError",
    "FieldNotFoundError",
    # Keys
    "KeyProvider",
    "GuidKeyProvider",
    # Records
    "RecordBase",
    "EntityMetadata",
    "FieldMetadata",
]
