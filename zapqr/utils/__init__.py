"""App constants and utilities."""

from .constants import APP_NAME, APP_ORG
from .logging_config import setup_logging

__all__ = ["APP_ORG", "APP_NAME", "setup_logging"]
