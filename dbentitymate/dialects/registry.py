# ============================================================================
# DIALECT REGISTRY
# ============================================================================
# STATUS: Core - Dialect registration and lookup
# PURPOSE: Register and discover dialect providers by name
# CREATED: 18 OCT 2026
# ============================================================================
"""
Dialect Registry

Central registry for dialect providers. Callers resolve a provider from a
configuration string instead of importing a concrete class.

Design:
- Providers are registered at import time via decorator
- Registry is a simple dict (dialect_name -> provider class)
- Names and aliases are case-insensitive
- Fail-fast on duplicate registration
"""

from typing import Any, Callable, Dict, Iterable, List, Type, TypeVar

from dbentitymate.core.logging import ComponentType, get_logger
from dbentitymate.dialects.base import DialectProvider

logger = get_logger(__name__, ComponentType.REGISTRY)

P = TypeVar("P", bound=Type[DialectProvider])


# ============================================================================
# EXCEPTIONS
# ============================================================================

class DialectError(Exception):
    """Base exception for dialect registry errors."""
    pass


class DialectNotFoundError(DialectError):
    """Raised when a dialect is not found in the registry."""
    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Dialect not found: {dialect_name}")


class DuplicateDialectError(DialectError):
    """Raised when a dialect name or alias is already registered."""
    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Dialect already registered: {dialect_name}")


# ============================================================================
# REGISTRY
# ============================================================================

_dialects: Dict[str, Type[DialectProvider]] = {}
_canonical: Dict[str, str] = {}


def register_dialect(name: str, *, aliases: Iterable[str] = ()) -> Callable[[P], P]:
    """
    Decorator to register a dialect provider class.

    Example:
        @register_dialect("postgresql", aliases=("postgres", "pg"))
        class PostgreSQLDialectProvider(DialectProvider):
            ...
    """
    def decorator(cls: P) -> P:
        keys = [name, *aliases]
        for key in keys:
            if key.lower() in _dialects:
                raise DuplicateDialectError(key)
        for key in keys:
            _dialects[key.lower()] = cls
            _canonical[key.lower()] = name.lower()
        logger.debug(f"Registered dialect: {name}")
        return cls

    return decorator


def get_dialect(name: str, **kwargs: Any) -> DialectProvider:
    """
    Create a provider for a registered dialect.

    Args:
        name: Dialect name or alias (case-insensitive)
        **kwargs: Passed to the provider constructor

    Raises:
        DialectNotFoundError: If no provider is registered under name
    """
    cls = _dialects.get(name.lower()) if name else None
    if cls is None:
        raise DialectNotFoundError(name)
    return cls(**kwargs)


def list_dialects() -> List[str]:
    """Canonical names of registered dialects."""
    return sorted(set(_canonical.values()))


def is_registered(name: str) -> bool:
    """Check if a dialect name or alias is registered."""
    return bool(name) and name.lower() in _dialects


__all__ = [
    "DialectError",
    "DialectNotFoundError",
    "DuplicateDialectError",
    "register_dialect",
    "get_dialect",
    "list_dialects",
    "is_registered",
]
