"""Configuration services."""

from .export_config import ExportConfig, build_export_config
from .ini_config_service import IniConfigService

__all__ = ["ExportConfig", "IniConfigService", "build_export_config"]
