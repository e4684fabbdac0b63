"""AnnoVault Shared Module.

This package contains shared constants, protocols, types, and error handling
used across AnnoVault.
"""

__all__ = ["cache_utils", "constants", "errors", "logging", "protocols", "types"]
