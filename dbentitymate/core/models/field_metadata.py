# ============================================================================
# FIELD METADATA MODEL
# ============================================================================
# STATUS: Core model - One column of an entity
# PURPOSE: Typed view over the record store for column attributes
# CREATED: 18 OCT 2026
# EXPORTS: FieldMetadata
# ============================================================================
"""
Field Metadata

Describes one column. Schema attributes (Name, Type, Length, Precision,
IsRequired, IsUnique, ParentEntityName, TableName) drive DDL generation.
Documentation attributes (DisplayName, Description, SampleValues,
Synonyms) are carried for tooling and never affect DDL.

Length is overloaded:
    string   -> maximum character length
    decimal  -> scale (digits after the decimal point)
"""

from typing import Optional, Union

from dbentitymate.core.contracts import LogicalType
from dbentitymate.core.record import RecordBase


class FieldMetadata(RecordBase):
    """
    Metadata for a single column.

    Example:
        FieldMetadata(name="Total", type="decimal", precision=10, length=2)
    """

    # =========================================================================
    # SCHEMA ATTRIBUTES
    # =========================================================================

    @property
    def name(self) -> str:
        return self.get_typed("Name", str) or ""

    @name.setter
    def name(self, value: str) -> None:
        self["Name"] = value

    @property
    def type(self) -> Optional[str]:
        """Logical type tag as stored (case preserved)."""
        return self.get_typed("Type", str)

    @type.setter
    def type(self, value: Union[LogicalType, str, None]) -> None:
        self["Type"] = value.value if isinstance(value, LogicalType) else value

    @property
    def logical_type(self) -> Optional[LogicalType]:
        """Parsed type tag; None when blank or unrecognized."""
        return LogicalType.parse(self.type)

    @property
    def length(self) -> Optional[int]:
        return self.get_typed("Length", int)

    @length.setter
    def length(self, value: Optional[int]) -> None:
        self["Length"] = value

    @property
    def precision(self) -> Optional[int]:
        return self.get_typed("Precision", int)

    @precision.setter
    def precision(self, value: Optional[int]) -> None:
        self["Precision"] = value

    @property
    def is_required(self) -> bool:
        return bool(self.get_typed("IsRequired", bool))

    @is_required.setter
    def is_required(self, value: bool) -> None:
        self["IsRequired"] = value

    @property
    def is_unique(self) -> bool:
        return bool(self.get_typed("IsUnique", bool))

    @is_unique.setter
    def is_unique(self, value: bool) -> None:
        self["IsUnique"] = value

    @property
    def parent_entity_name(self) -> Optional[str]:
        """Referenced table; presence signals a foreign key."""
        return self.get_typed("ParentEntityName", str)

    @parent_entity_name.setter
    def parent_entity_name(self, value: Optional[str]) -> None:
        self["ParentEntityName"] = value

    @property
    def table_name(self) -> Optional[str]:
        """Owning table, attached by the caller or EntityMetadata.add_field()."""
        return self.get_typed("TableName", str)

    @table_name.setter
    def table_name(self, value: Optional[str]) -> None:
        self["TableName"] = value

    @property
    def has_parent(self) -> bool:
        parent = self.parent_entity_name
        return bool(parent and parent.strip())

    # =========================================================================
    # DOCUMENTATION ATTRIBUTES
    # =========================================================================

    @property
    def display_name(self) -> Optional[str]:
        return self.get_typed("DisplayName", str)

    @display_name.setter
    def display_name(self, value: Optional[str]) -> None:
        self["DisplayName"] = value

    @property
    def description(self) -> Optional[str]:
        return self.get_typed("Description", str)

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self["Description"] = value

    @property
    def sample_values(self) -> Optional[str]:
        return self.get_typed("SampleValues", str)

    @sample_values.setter
    def sample_values(self, value: Optional[str]) -> None:
        self["SampleValues"] = value

    @property
    def synonyms(self) -> Optional[str]:
        return self.get_typed("Synonyms", str)

    @synonyms.setter
    def synonyms(self, value: Optional[str]) -> None:
        self["Synonyms"] = value

    def __repr__(self) -> str:
        return f"FieldMetadata(name={self.name!r}, type={self.type!r})"


__all__ = ["FieldMetadata"]
