from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from zapqr.domain.interfaces import IConfigService

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/ZapQR/config.ini or %LOCALAPPDATA%\ZapQR\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = "ZapQR"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error) as e:
                # A broken file must not stop exports; try the next candidate.
                logger.warning("Ignoring config file %s: %s", path, e)
                continue
            self._parser = parser
            self._loaded_from = path
            break

        if "export" not in self._parser:
            self._parser["export"] = {}

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        snap: dict[str, dict[str, str]] = {}
        for sect in self._parser.sections():
            snap[sect] = dict(self._parser[sect])
        return snap

    @property
    def loaded_from(self) -> Path | None:
        """For diagnostics."""
        return self._loaded_from
