# ============================================================================
# DIALECT REGISTRY & CONFIGURATION TESTS
# ============================================================================
# STATUS: Tests - Provider lookup, polymorphism, env-driven defaults
# PURPOSE: Verify registry behavior and that the base engine is dialect-neutral
# CREATED: 18 OCT 2026
# ============================================================================
"""
Dialect Registry & Configuration Tests

Unit tests for:
- get_dialect() name/alias resolution
- Duplicate and missing dialect errors
- A minimal custom dialect built on DialectProvider
- Defaults loaded from environment variables

Run with:
    pytest tests/test_dialect_registry.py -v
"""

import pytest

from dbentitymate.core.config import Defaults, get_defaults, reset_defaults
from dbentitymate.core.contracts import LogicalType
from dbentitymate.core.models import EntityMetadata, FieldMetadata
from dbentitymate.dialects import (
    DialectNotFoundError,
    DialectProvider,
    DuplicateDialectError,
    PostgreSQLDialectProvider,
    get_dialect,
    is_registered,
    list_dialects,
    register_dialect,
)


# ============================================================================
# HELPERS
# ============================================================================

@register_dialect("backtick-test")
class BacktickDialect(DialectProvider):
    """Minimal dialect: backtick quoting, no guards, tiny type table."""

    name = "backtick-test"
    TYPE_MAP = {LogicalType.INT: "INT", LogicalType.BOOL: "TINYINT(1)"}
    FALLBACK_TYPE = "LONGTEXT"

    def quote_identifier(self, name):
        return f"`{name}`"

    def string_type(self, field):
        return f"VARCHAR({field.length or 255})"

    def decimal_type(self, field):
        return f"DECIMAL({field.precision or 18},{field.length or 0})"

    def render_primary_key(self, table_name, constraint_name, key_column):
        return f"ALTER TABLE `{table_name}` ADD CONSTRAINT `{constraint_name}` PRIMARY KEY (`{key_column}`);"

    def render_foreign_key(self, table_name, column, constraint_name, parent_table, parent_column):
        return (
            f"ALTER TABLE `{table_name}` ADD CONSTRAINT `{constraint_name}` "
            f"FOREIGN KEY (`{column}`) REFERENCES `{parent_table}`(`{parent_column}`);"
        )


@pytest.fixture
def clean_defaults():
    reset_defaults()
    yield
    reset_defaults()


# ============================================================================
# REGISTRY
# ============================================================================

class TestRegistry:
    @pytest.mark.parametrize("name", ["postgresql", "PostgreSQL", "postgres", "pg", "npgsql"])
    def test_postgresql_names(self, name):
        assert isinstance(get_dialect(name), PostgreSQLDialectProvider)

    def test_fresh_instance_per_call(self):
        assert get_dialect("postgresql") is not get_dialect("postgresql")

    def test_kwargs_forwarded(self):
        from dbentitymate.core.config import PostgresDefaults

        provider = get_dialect("pg", limits=PostgresDefaults(varchar_max_length=10))
        assert provider.limits.varchar_max_length == 10

    def test_unknown_dialect(self):
        with pytest.raises(DialectNotFoundError) as exc_info:
            get_dialect("oracle")
        assert exc_info.value.dialect_name == "oracle"

    def test_empty_name(self):
        with pytest.raises(DialectNotFoundError):
            get_dialect("")

    def test_duplicate_alias_rejected(self):
        with pytest.raises(DuplicateDialectError):
            @register_dialect("another-pg", aliases=("PG",))
            class AnotherPostgres(PostgreSQLDialectProvider):
                pass

        assert not is_registered("another-pg")

    def test_list_dialects(self):
        names = list_dialects()
        assert "postgresql" in names
        assert "backtick-test" in names
        assert "pg" not in names

    def test_is_registered(self):
        assert is_registered("Postgres")
        assert not is_registered("sqlserver")


# ============================================================================
# CUSTOM DIALECT
# ============================================================================

class TestCustomDialect:
    def _entity(self):
        entity = EntityMetadata(table_name="Flags")
        entity.add_field(FieldMetadata(name="Id", type="int", is_required=True))
        entity.add_field(FieldMetadata(name="Enabled", type="boolean"))
        entity.add_field(FieldMetadata(name="Payload", type="json"))
        entity.add_field(FieldMetadata(name="OwnerId", type="int", parent_entity_name="Owners"))
        return entity

    def test_shared_assembly_with_own_type_table(self):
        ddl = get_dialect("backtick-test").create_table_statement(self._entity())
        assert ddl == (
            "CREATE TABLE IF NOT EXISTS `Flags` (\n"
            "    `Id` INT NOT NULL,\n"
            "    `Enabled` TINYINT(1),\n"
            "    `Payload` LONGTEXT,\n"
            "    `OwnerId` INT\n"
            ");"
        )

    def test_missing_type_map_entry_uses_fallback(self):
        field = FieldMetadata(name="When", type="datetime")
        assert BacktickDialect().native_type(field) == "LONGTEXT"

    def test_constraint_naming_is_shared(self):
        statements = BacktickDialect().schema_statements([self._entity()])
        assert "`PK_Flags`" in statements[1]
        assert "`FK_Flags_OwnerId_Owners`" in statements[2]


# ============================================================================
# CONFIGURATION
# ============================================================================

class TestDefaults:
    def test_builtin_values(self):
        defaults = Defaults()
        assert defaults.postgres.varchar_max_length == 10485760
        assert defaults.postgres.numeric_max_precision == 131072
        assert defaults.postgres.numeric_max_scale == 16383
        assert defaults.constraints.key_column == "Id"

    def test_constraint_names(self):
        constraints = Defaults().constraints
        assert constraints.primary_key_name("Orders") == "PK_Orders"
        assert constraints.foreign_key_name("Orders", "CustomerId", "Customers") == (
            "FK_Orders_CustomerId_Customers"
        )

    def test_from_env(self, clean_defaults, monkeypatch):
        monkeypatch.setenv("ENTITYMATE_PG_VARCHAR_MAX", "4000")
        monkeypatch.setenv("ENTITYMATE_KEY_COLUMN", "RowId")

        defaults = get_defaults()
        assert defaults.postgres.varchar_max_length == 4000
        assert defaults.constraints.key_column == "RowId"

    def test_provider_picks_up_env_defaults(self, clean_defaults, monkeypatch):
        monkeypatch.setenv("ENTITYMATE_PG_NUMERIC_MAX_PRECISION", "38")
        monkeypatch.setenv("ENTITYMATE_PG_NUMERIC_MAX_SCALE", "6")

        provider = PostgreSQLDialectProvider()
        assert provider.native_type(FieldMetadata(name="Amount", type="decimal")) == "NUMERIC(38,6)"

    def test_defaults_cached(self, clean_defaults):
        assert get_defaults() is get_defaults()
