from .loader import DEFAULT_CONFIG_PATH, ConfigError, load_config, load_config_or_default

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]
