"""Application settings management.

This package provides:
- DisplaySettings: User-configurable presentation settings loaded from config.yaml
"""

from weatherkit.settings.user import PREFERRED_UNITS, DisplaySettings

__all__ = ["PREFERRED_UNITS", "DisplaySettings"]
