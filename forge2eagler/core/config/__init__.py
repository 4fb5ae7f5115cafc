from .config_loader import (
    ConverterSettings,
    get_config_path,
    load_settings,
)

__all__ = [
    "ConverterSettings",
    "get_config_path",
    "load_settings",
]
