# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Logging context and formatters
# PURPOSE: Verify context propagation into generator log records
# CREATED: 18 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

from dbentitymate.core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)
from dbentitymate.core.models import EntityMetadata, FieldMetadata
from dbentitymate.dialects.postgresql import PostgreSQLDialectProvider
from dbentitymate.dialects.registry import register_dialect


def _record(message="hello"):
    return logging.LogRecord(
        name="dbentitymate.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLogContext:
    def test_nested_context_merges(self):
        with log_context(dialect="postgresql"):
            with log_context(table="Orders", extra={"n": 1}):
                context = get_current_context().to_dict()
                assert context == {"dialect": "postgresql", "table": "Orders", "n": 1}
            assert get_current_context().to_dict() == {"dialect": "postgresql"}
        assert get_current_context().to_dict() == {}

    def test_context_attached_to_records(self, caplog):
        logger = get_logger("dbentitymate.test.context")
        with caplog.at_level(logging.DEBUG, logger="dbentitymate.test.context"):
            with log_context(table="Orders"):
                logger.info("built", extra={"count": 2})

        record = caplog.records[-1]
        assert record.extra == {"count": 2, "table": "Orders"}

    def test_component_attached_to_records(self, caplog):
        logger = get_logger("dbentitymate.test.component", ComponentType.DIALECT)
        with caplog.at_level(logging.DEBUG, logger="dbentitymate.test.component"):
            logger.info("built", extra={"count": 1})

        assert caplog.records[-1].extra == {"component": "dialect", "count": 1}


class TestFormatters:
    def test_structured_formatter_is_json(self):
        with log_context(dialect="postgresql", column="Email"):
            output = StructuredFormatter().format(_record())
        data = json.loads(output)

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["context"] == {"dialect": "postgresql", "column": "Email"}

    def test_human_formatter_inlines_context(self):
        with log_context(dialect="postgresql", table="Orders"):
            output = HumanFormatter().format(_record())
        assert "[dialect=postgresql, table=Orders]" in output
        assert output.endswith("dbentitymate.test [dialect=postgresql, table=Orders]: hello")


class TestGeneratorLogging:
    def test_create_table_logs_with_context(self, caplog):
        entity = EntityMetadata(name="Order", table_name="Orders")
        entity.add_field(FieldMetadata(name="Id", type="string", length=32))

        with caplog.at_level(logging.DEBUG, logger="dbentitymate.dialects.base"):
            PostgreSQLDialectProvider().create_table_statement(entity)

        record = next(r for r in caplog.records if "CREATE TABLE" in r.getMessage())
        assert record.extra["table"] == "Orders"
        assert record.extra["dialect"] == "postgresql"
        assert record.extra["operation"] == "create_table"
        assert record.extra["component"] == "dialect"

    def test_schema_statements_logs_total(self, caplog):
        entity = EntityMetadata(name="Order", table_name="Orders")
        entity.add_field(FieldMetadata(name="Id", type="string", length=32))

        with caplog.at_level(logging.INFO, logger="dbentitymate.dialects.base"):
            PostgreSQLDialectProvider().schema_statements([entity])

        assert any("Generated 2 DDL statements" in r.getMessage() for r in caplog.records)

    def test_registration_logs_registry_component(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dbentitymate.dialects.registry"):
            @register_dialect("component-log-test")
            class ComponentLogDialect(PostgreSQLDialectProvider):
                pass

        record = next(r for r in caplog.records if "component-log-test" in r.getMessage())
        assert record.extra["component"] == "registry"
