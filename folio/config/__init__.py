# folio/config/__init__.py
from .loader import (
    deep_merge,
    get_config_source,
    load_config_dict,
    load_folio_config,
    load_yaml,
)
from .schema import ContentConfig, FolioConfig, LoggingConfig, ValidationConfig

__all__ = [
    "FolioConfig",
    "ContentConfig",
    "ValidationConfig",
    "LoggingConfig",
    "load_folio_config",
    "load_config_dict",
    "load_yaml",
    "deep_merge",
    "get_config_source",
]
