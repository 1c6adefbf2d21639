# ============================================================================
# KEYED RECORD STORE
# ============================================================================
# STATUS: Core - Case-insensitive field store underlying all metadata
# PURPOSE: Typed get/set over a string-keyed value map, JSON serialization
# CREATED: 18 OCT 2026
# EXPORTS: RecordBase
# DEPENDENCIES: pydantic
# ============================================================================
"""
Keyed Record Store

RecordBase is a case-insensitive map from field name to value plus the
identity/audit attributes every metadata record carries:

    Id              Opaque key from a KeyProvider, assigned once
    UtcCreatedOn    Set at construction
    UtcModifiedOn   Set at construction, refreshed by touch()
    Version         Starts at 1, incremented by touch()

Mutating the field store does NOT refresh UtcModifiedOn or Version.
Callers that track revisions call touch() themselves. Audit keys read and
write through the store like fields; writes are converted to the attribute
type or rejected.

Usage:
    record = RecordBase()
    record["Name"] = "Customer"
    record["name"]                      # "Customer"
    record.get_typed("Length", int)     # None when missing or unconvertible
    print(record.to_json())
"""

import base64
import json
from datetime import date, datetime, timezone
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from dbentitymate.core.contracts import FieldNotFoundError, InvalidArgumentError
from dbentitymate.core.keys import GuidKeyProvider, KeyProvider

T = TypeVar("T")


# Audit attributes exposed through the store: folded key -> (serialized name, attribute, type)
_AUDIT_KEYS = {
    "id": ("Id", "id", str),
    "utccreatedon": ("UtcCreatedOn", "created_at", datetime),
    "utcmodifiedon": ("UtcModifiedOn", "modified_at", datetime),
    "version": ("Version", "version", int),
}


@lru_cache(maxsize=64)
def _adapter_for(as_type: Any) -> TypeAdapter:
    """Cached lax validator used by get_typed()."""
    if as_type is str:
        return TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))
    return TypeAdapter(as_type)


def _fold(name: str) -> str:
    return name.casefold()


class RecordBase:
    """
    Base class for metadata records.

    Field names are unique under case-insensitive comparison; the first
    spelling used for a key is the one serialized.
    """

    def __init__(self, key_provider: Optional[KeyProvider] = None, **values: Any):
        provider = key_provider if key_provider is not None else GuidKeyProvider()
        self._fields: Dict[str, Tuple[str, Any]] = {}
        self._id: str = provider.generate_key()

        now = datetime.now(timezone.utc)
        self.created_at: datetime = now
        self.modified_at: datetime = now
        self.version: int = 1

        for attr, value in values.items():
            if not isinstance(getattr(type(self), attr, None), property):
                raise TypeError(
                    f"{type(self).__name__}() got an unexpected keyword argument '{attr}'"
                )
            setattr(self, attr, value)

    # =========================================================================
    # IDENTITY & AUDIT
    # =========================================================================

    @property
    def id(self) -> str:
        """Opaque identifier assigned at construction."""
        return self._id

    def touch(self) -> None:
        """Record a revision: refresh modified_at and bump version."""
        self.modified_at = datetime.now(timezone.utc)
        self.version += 1

    # =========================================================================
    # FIELD STORE
    # =========================================================================

    def __getitem__(self, name: str) -> Any:
        folded = _fold(name)
        if folded in _AUDIT_KEYS:
            return getattr(self, _AUDIT_KEYS[folded][1])
        try:
            return self._fields[folded][1]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def __setitem__(self, name: str, value: Any) -> None:
        folded = _fold(name)
        if folded == "id":
            raise InvalidArgumentError(
                "Id is assigned at creation and cannot be changed",
                argument="name",
                attribute="Id",
            )
        if folded in _AUDIT_KEYS:
            key, attr, as_type = _AUDIT_KEYS[folded]
            setattr(self, attr, _coerce_audit(key, value, as_type))
            return
        existing = self._fields.get(folded)
        key = existing[0] if existing else name
        self._fields[folded] = (key, value)

    def __delitem__(self, name: str) -> None:
        folded = _fold(name)
        if folded in _AUDIT_KEYS:
            key = _AUDIT_KEYS[folded][0]
            raise InvalidArgumentError(
                f"{key} is an audit attribute and cannot be removed",
                argument="name",
                attribute=key,
            )
        try:
            del self._fields[folded]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        folded = _fold(name)
        return folded in _AUDIT_KEYS or folded in self._fields

    def __len__(self) -> int:
        return len(_AUDIT_KEYS) + len(self._fields)

    def keys(self) -> List[str]:
        """Audit names (Id, UtcCreatedOn, UtcModifiedOn, Version), then stored field names."""
        audit = [key for key, _, _ in _AUDIT_KEYS.values()]
        return audit + [key for key, _ in self._fields.values()]

    def items(self) -> Iterator[Tuple[str, Any]]:
        """(name, value) pairs in keys() order."""
        audit = [(key, getattr(self, attr)) for key, attr, _ in _AUDIT_KEYS.values()]
        return iter(audit + list(self._fields.values()))

    def field_names(self) -> List[str]:
        """Stored field names only."""
        return [key for key, _ in self._fields.values()]

    def get_value(self, name: str, default: Any = None) -> Any:
        """Raw value, or default when the key is absent."""
        try:
            return self[name]
        except FieldNotFoundError:
            return default

    def get_typed(self, name: str, as_type: Type[T]) -> Optional[T]:
        """
        Best-effort typed read.

        Uses pydantic lax validation, so "50" -> 50, 50.0 -> 50,
        "true" -> True and ISO strings -> datetime. Returns None when the
        key is missing, the value is None, or conversion fails.
        """
        value = self.get_value(name)
        if value is None:
            return None
        try:
            return _adapter_for(as_type).validate_python(value)
        except ValidationError:
            return None

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible dict of audit attributes and stored fields."""
        return _to_jsonable(self, set())

    def to_json(self, indent: int = 2) -> str:
        """
        Indented JSON. Reference cycles are written as null.
        """
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, fields={len(self._fields)})"


def _coerce_audit(key: str, value: Any, as_type: type) -> Any:
    """
    Convert a value written to an audit key, or raise InvalidArgumentError.

    Naive datetimes are taken as UTC.
    """
    try:
        converted = _adapter_for(as_type).validate_python(value)
    except ValidationError:
        raise InvalidArgumentError(
            f"{key} expects {as_type.__name__}, got {value!r}",
            argument="value",
            attribute=key,
        ) from None
    if isinstance(converted, datetime) and converted.tzinfo is None:
        converted = converted.replace(tzinfo=timezone.utc)
    return converted


# ============================================================================
# JSON CONVERSION
# ============================================================================

def _to_jsonable(value: Any, path: Set[int]) -> Any:
    """
    Convert value to JSON-compatible data.

    `path` holds ids of containers currently being walked; revisiting one
    of them is a cycle and yields None. Shared but acyclic references are
    serialized in full at each occurrence.
    """
    if value is None or isinstance(value, (bool, int, float, str)) and not isinstance(value, Enum):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")

    marker = id(value)
    if marker in path:
        return None

    path.add(marker)
    try:
        if isinstance(value, RecordBase):
            return {key: _to_jsonable(item, path) for key, item in value.items()}
        if isinstance(value, BaseModel):
            return _to_jsonable(value.model_dump(), path)
        if isinstance(value, dict):
            return {str(k): _to_jsonable(v, path) for k, v in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [_to_jsonable(item, path) for item in value]
        return str(value)
    finally:
        path.discard(marker)


__all__ = ["RecordBase"]
