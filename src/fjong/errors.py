"""
Exceptions raised by Fjong.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised for an invalid match configuration or an unknown preset name."""
