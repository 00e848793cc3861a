"""Service configuration loaded from the environment.

Application code gets the cached instance from
``infrastructure.services.get_settings()`` rather than building Settings.
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
