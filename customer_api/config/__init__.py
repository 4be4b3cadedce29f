"""Configuration loading for the customer API.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from customer_api.config import get_settings

    settings = get_settings()
    max_page_size = settings.customers.max_page_size
"""

from functools import lru_cache

from customer_api.config.loader import load_config
from customer_api.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    A missing ``config/default.toml`` is not an error: model defaults and
    environment variables still apply. The result is cached for the
    lifetime of the process; call ``get_settings.cache_clear()`` to reload.
    """
    try:
        set_toml_config(load_config())
    except FileNotFoundError:
        set_toml_config({})

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
