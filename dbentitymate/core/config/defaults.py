# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Dialect limits and constraint naming conventions
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Limits and conventions used by the dialect providers. These can be
overridden via environment variables or by passing explicit instances
to a provider.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ConstraintDefaults:
    """
    Constraint naming conventions shared by all dialects.

    Primary keys always target key_column; foreign keys always reference
    key_column on the parent table.
    """
    key_column: str = "Id"
    primary_key_prefix: str = "PK"
    foreign_key_prefix: str = "FK"

    def primary_key_name(self, table_name: str) -> str:
        """PK_<Table>"""
        return f"{self.primary_key_prefix}_{table_name}"

    def foreign_key_name(self, table_name: str, field_name: str, parent_table: str) -> str:
        """FK_<Table>_<Field>_<ParentTable>"""
        return f"{self.foreign_key_prefix}_{table_name}_{field_name}_{parent_table}"

    @classmethod
    def from_env(cls) -> "ConstraintDefaults":
        """Create from environment variables."""
        return cls(
            key_column=os.getenv("ENTITYMATE_KEY_COLUMN", "Id"),
        )


@dataclass(frozen=True)
class PostgresDefaults:
    """
    PostgreSQL type limits.

    VARCHAR is capped at 10485760 characters; lengths at or above the cap
    (or absent) emit TEXT. NUMERIC defaults are the engine's documented
    digit limits before/after the decimal point.
    """
    varchar_max_length: int = 10485760
    numeric_max_precision: int = 131072
    numeric_max_scale: int = 16383

    @classmethod
    def from_env(cls) -> "PostgresDefaults":
        """Create from environment variables."""
        return cls(
            varchar_max_length=int(os.getenv("ENTITYMATE_PG_VARCHAR_MAX", 10485760)),
            numeric_max_precision=int(os.getenv("ENTITYMATE_PG_NUMERIC_MAX_PRECISION", 131072)),
            numeric_max_scale=int(os.getenv("ENTITYMATE_PG_NUMERIC_MAX_SCALE", 16383)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    constraints: ConstraintDefaults = field(default_factory=ConstraintDefaults)
    postgres: PostgresDefaults = field(default_factory=PostgresDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            constraints=ConstraintDefaults.from_env(),
            postgres=PostgresDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


__all__ = [
    "ConstraintDefaults",
    "PostgresDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
