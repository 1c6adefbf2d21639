# ============================================================================
# KEY PROVIDERS
# ============================================================================
# STATUS: Core - Pluggable identifier generation
# PURPOSE: Stamp new metadata records with a durable opaque Id
# CREATED: 18 OCT 2026
# ============================================================================
"""
Key Providers

A KeyProvider is called exactly once per record, at construction time.
"""

import uuid
from abc import ABC, abstractmethod


class KeyProvider(ABC):
    """Strategy producing unique opaque string identifiers."""

    @abstractmethod
    def generate_key(self) -> str:
        """Return a new identifier."""
        pass


class GuidKeyProvider(KeyProvider):
    """
    Random 128-bit keys.

    Format: 32 uppercase hexadecimal characters, no dashes
    (e.g. "3F2504E04F8941D39A0C0305E82C3301").
    """

    def generate_key(self) -> str:
        return uuid.uuid4().hex.upper()


__all__ = ["KeyProvider", "GuidKeyProvider"]
