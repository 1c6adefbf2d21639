# ============================================================================
# DIALECTS MODULE
# ============================================================================
# STATUS: Core - Dialect providers
# PURPOSE: Export the provider abstraction, registry and built-in dialects
# CREATED: 18 OCT 2026
# ============================================================================

from dbentitymate.dialects.base import DialectProvider
from dbentitymate.dialects.registry import (
    DialectError,
    DialectNotFoundError,
    DuplicateDialectError,
    register_dialect,
    get_dialect,
    list_dialects,
    is_registered,
)

# Built-in dialects register themselves on import
from dbentitymate.dialects.postgresql import PostgreSQLDialectProvider

__all__ = [
    "DialectProvider",
    "PostgreSQLDialectProvider",
    "DialectError",
    "DialectNotFoundError",
    "DuplicateDialectError",
    "register_dialect",
    "get_dialect",
    "list_dialects",
    "is_registered",
]
