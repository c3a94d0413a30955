"""WizyBot - single-turn shopping assistant with tool dispatch.

Note: Import `app` directly from `wizybot.main` to avoid circular imports.
"""

__version__ = "1.0.0"

__all__ = ["main", "api", "core", "models", "providers", "services", "tools"]
