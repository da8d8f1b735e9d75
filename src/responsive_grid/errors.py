"""Error types for responsive-grid."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised for malformed configuration: bad layouts, unknown breakpoints, missing columns."""
