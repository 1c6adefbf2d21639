# ============================================================================
# ENTITY METADATA MODEL
# ============================================================================
# STATUS: Core model - One table
# PURPOSE: Typed view over the record store for table attributes
# CREATED: 18 OCT 2026
# EXPORTS: EntityMetadata
# ============================================================================
"""
Entity Metadata

Describes one table. Field order is significant: it is the column order
of the generated CREATE TABLE statement.
"""

from typing import Any, Iterable, List, Optional

from dbentitymate.core.contracts import NullInputError
from dbentitymate.core.keys import KeyProvider
from dbentitymate.core.models.field_metadata import FieldMetadata
from dbentitymate.core.record import RecordBase


class EntityMetadata(RecordBase):
    """
    Metadata for a single table.

    Example:
        entity = EntityMetadata(name="Customer", table_name="Customers")
        entity.add_field(FieldMetadata(name="Id", type="string", length=32))
    """

    def __init__(self, key_provider: Optional[KeyProvider] = None, **values: Any):
        fields = values.pop("fields", None)
        super().__init__(key_provider, **values)
        self.fields = fields if fields is not None else []

    @property
    def name(self) -> str:
        return self.get_typed("Name", str) or ""

    @name.setter
    def name(self, value: str) -> None:
        self["Name"] = value

    @property
    def description(self) -> Optional[str]:
        return self.get_typed("Description", str)

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self["Description"] = value

    @property
    def table_name(self) -> Optional[str]:
        return self.get_typed("TableName", str)

    @table_name.setter
    def table_name(self, value: Optional[str]) -> None:
        self["TableName"] = value

    @property
    def schema(self) -> Optional[str]:
        return self.get_typed("Schema", str)

    @schema.setter
    def schema(self, value: Optional[str]) -> None:
        self["Schema"] = value

    @property
    def fields(self) -> List[FieldMetadata]:
        """Ordered column list (the stored list, not a copy)."""
        fields = self.get_value("Fields")
        if fields is None:
            fields = []
            self["Fields"] = fields
        return fields

    @fields.setter
    def fields(self, value: Iterable[FieldMetadata]) -> None:
        self["Fields"] = list(value) if value is not None else []

    def add_field(self, field: FieldMetadata) -> FieldMetadata:
        """
        Append a field, attaching this entity's table name when the field
        has none.
        """
        if field is None:
            raise NullInputError("field")
        if not field.table_name and self.table_name:
            field.table_name = self.table_name
        self.fields.append(field)
        return field

    def get_field(self, name: str) -> Optional[FieldMetadata]:
        """Case-insensitive lookup by field name."""
        folded = name.casefold()
        for field in self.fields:
            if field.name.casefold() == folded:
                return field
        return None

    def __repr__(self) -> str:
        return (
            f"EntityMetadata(name={self.name!r}, table_name={self.table_name!r}, "
            f"fields={len(self.fields)})"
        )


__all__ = ["EntityMetadata"]
