# ============================================================================
# METADATA MODELS
# ============================================================================
# STATUS: Core - Entity and field descriptors
# PURPOSE: Export metadata models consumed by dialect providers
# CREATED: 18 OCT 2026
# ============================================================================

from dbentitymate.core.models.entity_metadata import EntityMetadata
from dbentitymate.core.models.field_metadata import FieldMetadata

__all__ = [
    "EntityMetadata",
    "FieldMetadata",
]
