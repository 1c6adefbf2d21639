# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides dialect limits and constraint naming defaults.
"""

from dbentitymate.core.config.defaults import (
    ConstraintDefaults,
    PostgresDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "ConstraintDefaults",
    "PostgresDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
