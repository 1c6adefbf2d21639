# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - Shared PostgreSQL DDL composition helpers
# PURPOSE: Identifier quoting and guarded constraint blocks via psycopg.sql
# CREATED: 18 OCT 2026
# EXPORTS: render, quote_identifier, stored_identifier, ConstraintBuilder
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Utilities - PostgreSQL Composition Patterns.

Statements are composed with psycopg.sql so identifiers and literals are
escaped by the driver rather than by string concatenation, then rendered
to plain text without a connection (the caller decides where and when to
execute them).

Usage:
    from dbentitymate.dialects.ddl_utils import ConstraintBuilder, render

    stmt = ConstraintBuilder.primary_key("Customers", "PK_Customers", "Id")
    print(render(stmt))
"""

from psycopg import sql


# NAMEDATALEN - 1: longer identifiers are truncated by the server
MAX_IDENTIFIER_BYTES = 63


def render(statement: sql.Composable) -> str:
    """Render a composed statement to text without a connection."""
    return statement.as_string(None)


def quote_identifier(name: str) -> str:
    """Double-quote an identifier, doubling embedded quotes."""
    return render(sql.Identifier(name))


def stored_identifier(name: str) -> str:
    """
    The identifier as the server stores it in the catalogs.

    Cut to MAX_IDENTIFIER_BYTES of UTF-8 without splitting a character.
    """
    encoded = name.encode("utf-8")
    if len(encoded) <= MAX_IDENTIFIER_BYTES:
        return name
    return encoded[:MAX_IDENTIFIER_BYTES].decode("utf-8", errors="ignore")


# ============================================================================
# CONSTRAINT BUILDER
# ============================================================================

_GUARD_TEMPLATE = """DO $$
BEGIN
    IF NOT EXISTS (
        SELECT 1
        FROM pg_constraint
        WHERE conname = {constraint_literal}
    ) THEN
        {body}
    END IF;
END $$;"""


class ConstraintBuilder:
    """
    Builder for idempotent PostgreSQL constraint DDL.

    Every statement is wrapped in a DO block that checks pg_constraint
    for the constraint name before ALTER TABLE ... ADD CONSTRAINT, so
    re-running it after the first success is a no-op.
    """

    @staticmethod
    def guarded(constraint_name: str, body: sql.Composable) -> sql.Composed:
        """Wrap body in an existence check on the stored form of constraint_name."""
        return sql.SQL(_GUARD_TEMPLATE).format(
            constraint_literal=sql.Literal(stored_identifier(constraint_name)),
            body=body,
        )

    @staticmethod
    def primary_key(table: str, constraint_name: str, key_column: str) -> sql.Composed:
        """ALTER TABLE ... ADD CONSTRAINT ... PRIMARY KEY, guarded."""
        body = sql.SQL("ALTER TABLE {table} ADD CONSTRAINT {name} PRIMARY KEY ({column});").format(
            table=sql.Identifier(table),
            name=sql.Identifier(constraint_name),
            column=sql.Identifier(key_column),
        )
        return ConstraintBuilder.guarded(constraint_name, body)

    @staticmethod
    def foreign_key(
        table: str,
        column: str,
        constraint_name: str,
        parent_table: str,
        parent_column: str,
    ) -> sql.Composed:
        """ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY ... REFERENCES, guarded."""
        body = sql.SQL(
            "ALTER TABLE {table}\n"
            "        ADD CONSTRAINT {name} FOREIGN KEY ({column}) "
            "REFERENCES {parent}({parent_column});"
        ).format(
            table=sql.Identifier(table),
            name=sql.Identifier(constraint_name),
            column=sql.Identifier(column),
            parent=sql.Identifier(parent_table),
            parent_column=sql.Identifier(parent_column),
        )
        return ConstraintBuilder.guarded(constraint_name, body)


__all__ = [
    "render",
    "quote_identifier",
    "stored_identifier",
    "MAX_IDENTIFIER_BYTES",
    "ConstraintBuilder",
]
