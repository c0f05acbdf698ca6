from .loader import ConfigError, Settings, VariantSettings, default_settings, load_config

__all__ = [
    "ConfigError",
    "Settings",
    "VariantSettings",
    "default_settings",
    "load_config",
]
