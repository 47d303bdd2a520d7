from .config import (
    Config,
    CounterSettings,
    DisplayConfig,
    ExtractionSettings,
    MonitoringConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "Config",
    "CounterSettings",
    "DisplayConfig",
    "ExtractionSettings",
    "MonitoringConfig",
    "find_config_file",
    "load_config",
]
