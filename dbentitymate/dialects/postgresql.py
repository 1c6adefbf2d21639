# ============================================================================
# POSTGRESQL DIALECT PROVIDER
# ============================================================================
# STATUS: Core - PostgreSQL DDL generation
# PURPOSE: PostgreSQL type table and pg_constraint-guarded constraints
# CREATED: 18 OCT 2026
# EXPORTS: PostgreSQLDialectProvider
# DEPENDENCIES: psycopg
# ============================================================================
"""
PostgreSQL Dialect Provider.

Type mapping:
    string    VARCHAR(n) for 1 <= n < 10485760, else TEXT
    decimal   NUMERIC(Precision, Length)   -- scale comes from Length
    double    DOUBLE PRECISION
    float     REAL
    int       INTEGER
    long      BIGINT
    short     SMALLINT
    bool      BOOLEAN
    datetime  TIMESTAMP
    guid      UUID
    binary    BYTEA
    other     TEXT

Constraints are added inside DO $$ ... END $$; blocks that check
pg_constraint first, so scripts can be re-applied safely.
"""

from typing import Optional

from dbentitymate.core.config import ConstraintDefaults, PostgresDefaults, get_defaults
from dbentitymate.core.contracts import LogicalType
from dbentitymate.core.models import FieldMetadata
from dbentitymate.dialects.base import DialectProvider
from dbentitymate.dialects.ddl_utils import ConstraintBuilder, render
from dbentitymate.dialects.ddl_utils import quote_identifier as pg_quote_identifier
from dbentitymate.dialects.registry import register_dialect


@register_dialect("postgresql", aliases=("postgres", "pg", "npgsql"))
class PostgreSQLDialectProvider(DialectProvider):
    """
    Generate PostgreSQL DDL from entity metadata.

    Usage:
        provider = PostgreSQLDialectProvider()
        ddl = provider.create_table_statement(entity)
    """

    name = "postgresql"

    TYPE_MAP = {
        LogicalType.DOUBLE: "DOUBLE PRECISION",
        LogicalType.FLOAT: "REAL",
        LogicalType.INT: "INTEGER",
        LogicalType.LONG: "BIGINT",
        LogicalType.SHORT: "SMALLINT",
        LogicalType.BOOL: "BOOLEAN",
        LogicalType.DATETIME: "TIMESTAMP",
        LogicalType.GUID: "UUID",
        LogicalType.BINARY: "BYTEA",
    }
    FALLBACK_TYPE = "TEXT"

    def __init__(
        self,
        limits: Optional[PostgresDefaults] = None,
        constraints: Optional[ConstraintDefaults] = None,
    ):
        super().__init__(constraints=constraints)
        self.limits = limits or get_defaults().postgres

    def quote_identifier(self, name: str) -> str:
        return pg_quote_identifier(name)

    def string_type(self, field: FieldMetadata) -> str:
        cap = self.limits.varchar_max_length
        length = field.length
        if length is None or length < 1:
            length = cap
        if length < cap:
            return f"VARCHAR({length})"
        return "TEXT"

    def decimal_type(self, field: FieldMetadata) -> str:
        # Defaults are the internal NUMERIC limits, not valid declared ones
        # (declared precision <= 1000, scale <= precision). Lower them via
        # PostgresDefaults when the output must apply as-is.
        precision = field.precision
        if precision is None or precision < 1:
            precision = self.limits.numeric_max_precision
        scale = field.length
        if scale is None or scale < 0:
            scale = self.limits.numeric_max_scale
        return f"NUMERIC({precision},{scale})"

    def render_primary_key(self, table_name: str, constraint_name: str, key_column: str) -> str:
        return render(ConstraintBuilder.primary_key(table_name, constraint_name, key_column))

    def render_foreign_key(
        self,
        table_name: str,
        column: str,
        constraint_name: str,
        parent_table: str,
        parent_column: str,
    ) -> str:
        return render(ConstraintBuilder.foreign_key(
            table_name, column, constraint_name, parent_table, parent_column
        ))


__all__ = ["PostgreSQLDialectProvider"]
