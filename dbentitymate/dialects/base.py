# ============================================================================
# DIALECT PROVIDER BASE
# ============================================================================
# STATUS: Core - DDL generation engine
# PURPOSE: Map entity/field metadata to idempotent DDL for one dialect
# CREATED: 18 OCT 2026
# EXPORTS: DialectProvider
# ============================================================================
"""
Dialect Provider Base

A DialectProvider turns EntityMetadata/FieldMetadata into DDL text for one
target database. The public operations are pure: they never execute SQL,
never mutate metadata, and validate their input before building anything.

    create_table_statement(entity)  CREATE TABLE IF NOT EXISTS ...
    primary_key_statement(entity)   guarded ADD CONSTRAINT PK_<Table>
    foreign_key_statement(field)    guarded ADD CONSTRAINT FK_<T>_<F>_<P>, or ""

Subclasses declare the data-driven parts:
    TYPE_MAP        LogicalType -> native type for fixed-size types
    FALLBACK_TYPE   native type for unrecognized logical types
    string_type()   sized text type from Length
    decimal_type()  fixed-point type from Precision and Length (scale)
    quote_identifier(), render_primary_key(), render_foreign_key()
"""

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Dict, Iterable, List, Optional

from dbentitymate.core.config import ConstraintDefaults, get_defaults
from dbentitymate.core.contracts import InvalidArgumentError, LogicalType, NullInputError
from dbentitymate.core.logging import ComponentType, get_logger, log_context
from dbentitymate.core.models import EntityMetadata, FieldMetadata

logger = get_logger(__name__, ComponentType.DIALECT)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class DialectProvider(ABC):
    """
    Base class for dialect-specific DDL generators.

    Instances hold only immutable configuration and are safe to share
    between threads.
    """

    name: ClassVar[str] = ""
    TYPE_MAP: ClassVar[Dict[LogicalType, str]] = {}
    FALLBACK_TYPE: ClassVar[str] = "TEXT"
    INDENT: ClassVar[str] = "    "

    def __init__(self, constraints: Optional[ConstraintDefaults] = None):
        self.constraints = constraints or get_defaults().constraints

    # =========================================================================
    # DIALECT HOOKS
    # =========================================================================

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Quote a table or column name."""
        pass

    @abstractmethod
    def string_type(self, field: FieldMetadata) -> str:
        """Native text type; Length selects the cap."""
        pass

    @abstractmethod
    def decimal_type(self, field: FieldMetadata) -> str:
        """Native fixed-point type; scale is read from Length."""
        pass

    @abstractmethod
    def render_primary_key(self, table_name: str, constraint_name: str, key_column: str) -> str:
        """Guarded ADD CONSTRAINT ... PRIMARY KEY."""
        pass

    @abstractmethod
    def render_foreign_key(
        self,
        table_name: str,
        column: str,
        constraint_name: str,
        parent_table: str,
        parent_column: str,
    ) -> str:
        """Guarded ADD CONSTRAINT ... FOREIGN KEY."""
        pass

    # =========================================================================
    # TYPE MAPPING
    # =========================================================================

    def _sized_types(self) -> Dict[LogicalType, Callable[[FieldMetadata], str]]:
        return {
            LogicalType.STRING: self.string_type,
            LogicalType.DECIMAL: self.decimal_type,
        }

    def native_type(self, field: FieldMetadata) -> str:
        """
        Map a field's logical type to this dialect's native type.

        Unrecognized types degrade to FALLBACK_TYPE instead of failing.
        """
        if field is None:
            raise NullInputError("field")
        if _is_blank(field.type):
            raise InvalidArgumentError(
                f"Field '{field.name}' has no Type.", argument="field", attribute="Type"
            )

        logical = field.logical_type
        if logical is None:
            logger.debug(f"Unrecognized type '{field.type}' on '{field.name}', using {self.FALLBACK_TYPE}")
            return self.FALLBACK_TYPE

        sized = self._sized_types().get(logical)
        if sized is not None:
            return sized(field)
        return self.TYPE_MAP.get(logical, self.FALLBACK_TYPE)

    def column_definition(self, field: FieldMetadata) -> str:
        """Quoted name, native type, then NOT NULL and UNIQUE when flagged."""
        if field is None:
            raise NullInputError("field")
        if _is_blank(field.name):
            raise InvalidArgumentError("Field Name is required.", argument="field", attribute="Name")

        parts = [self.quote_identifier(field.name), self.native_type(field)]
        if field.is_required:
            parts.append("NOT NULL")
        if field.is_unique:
            parts.append("UNIQUE")
        return " ".join(parts)

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def create_table_statement(self, entity: EntityMetadata) -> str:
        """
        CREATE TABLE IF NOT EXISTS with one column per field, in field order.

        Raises:
            NullInputError: entity is None
            InvalidArgumentError: no TableName, no fields, or a field without Name/Type
        """
        self._require_table(entity)
        if not entity.fields:
            raise InvalidArgumentError(
                "Entity must have at least one field.", argument="entity", attribute="Fields"
            )

        with log_context(dialect=self.name, entity=entity.name, table=entity.table_name,
                         operation="create_table"):
            columns = [self.column_definition(field) for field in entity.fields]

            lines = [f"CREATE TABLE IF NOT EXISTS {self.quote_identifier(entity.table_name)} ("]
            for index, column in enumerate(columns):
                separator = "," if index < len(columns) - 1 else ""
                lines.append(f"{self.INDENT}{column}{separator}")
            lines.append(");")

            logger.debug(f"Generated CREATE TABLE with {len(columns)} columns")
            return "\n".join(lines)

    def primary_key_statement(self, entity: EntityMetadata) -> str:
        """
        Guarded primary key on the fixed key column (default "Id").

        Raises:
            NullInputError: entity is None
            InvalidArgumentError: no TableName
        """
        self._require_table(entity)
        table_name = entity.table_name
        constraint_name = self.constraints.primary_key_name(table_name)

        with log_context(dialect=self.name, entity=entity.name, table=table_name,
                         operation="primary_key"):
            logger.debug(f"Generated primary key {constraint_name}")
            return self.render_primary_key(table_name, constraint_name, self.constraints.key_column)

    def foreign_key_statement(self, field: FieldMetadata) -> str:
        """
        Guarded foreign key from field to its parent entity's key column.

        Returns "" when the field declares no ParentEntityName.

        Raises:
            NullInputError: field is None
            InvalidArgumentError: field has no TableName or no Name
        """
        if field is None:
            raise NullInputError("field")
        if _is_blank(field.table_name):
            raise InvalidArgumentError(
                "Field TableName is required.", argument="field", attribute="TableName"
            )
        return self._foreign_key(field.table_name, field)

    def _foreign_key(self, table_name: str, field: FieldMetadata) -> str:
        if _is_blank(field.name):
            raise InvalidArgumentError("Field Name is required.", argument="field", attribute="Name")
        if not field.has_parent:
            return ""

        parent_table = field.parent_entity_name
        constraint_name = self.constraints.foreign_key_name(table_name, field.name, parent_table)

        with log_context(dialect=self.name, table=table_name, column=field.name,
                         operation="foreign_key"):
            logger.debug(f"Generated foreign key {constraint_name}")
            return self.render_foreign_key(
                table_name,
                field.name,
                constraint_name,
                parent_table,
                self.constraints.key_column,
            )

    def schema_statements(self, entities: Iterable[EntityMetadata]) -> List[str]:
        """
        Ordered script for a set of entities.

        All CREATE TABLE statements first, then primary keys, then foreign
        keys, so every referenced table and key exists before it is used.
        A field without TableName takes its entity's table name.
        """
        entities = list(entities)
        for entity in entities:
            if entity is None:
                raise NullInputError("entity")

        statements = [self.create_table_statement(entity) for entity in entities]
        statements.extend(self.primary_key_statement(entity) for entity in entities)

        for entity in entities:
            for field in entity.fields:
                owner = field.table_name if not _is_blank(field.table_name) else entity.table_name
                statement = self._foreign_key(owner, field)
                if statement:
                    statements.append(statement)

        logger.info(f"Generated {len(statements)} DDL statements for {len(entities)} entities",
                    extra={"dialect": self.name})
        return statements

    # =========================================================================
    # VALIDATION
    # =========================================================================

    @staticmethod
    def _require_table(entity: EntityMetadata) -> None:
        if entity is None:
            raise NullInputError("entity")
        if _is_blank(entity.table_name):
            raise InvalidArgumentError(
                "TableName is required.", argument="entity", attribute="TableName"
            )


__all__ = ["DialectProvider"]
