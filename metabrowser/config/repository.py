"""Locate, read and validate the metabrowser config file."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from metabrowser.config.models import Config
from metabrowser.config.schema import ConfigSchemaRepository
from metabrowser.constants import (
    CONFIG_DIRNAME,
    CONFIG_FILENAMES,
    CONFIG_PATH_ENV,
    PROFILE_TOKEN,
    URL_TOKEN,
)
from metabrowser.errors import (
    InvalidConfigError,
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    MissingConfigFileError,
)
from metabrowser.utils import read_structured_safe

logger = logging.getLogger(__name__)


def default_config_root() -> Path:
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / CONFIG_DIRNAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / CONFIG_DIRNAME
    return Path.home() / ".config" / CONFIG_DIRNAME


class ConfigRepository:
    def __init__(
        self,
        root: Path | None = None,
        config_path: Path | None = None,
        schema_repository: ConfigSchemaRepository | None = None,
    ) -> None:
        self._root = root or default_config_root()
        self._explicit_path = config_path
        self._schema_repository = schema_repository or ConfigSchemaRepository()

    @classmethod
    def from_environment(cls, config_path: Path | None = None) -> "ConfigRepository":
        if config_path is None and os.environ.get(CONFIG_PATH_ENV):
            config_path = Path(os.environ[CONFIG_PATH_ENV])
        return cls(config_path=config_path)

    @property
    def root(self) -> Path:
        if self._explicit_path is not None:
            return self._explicit_path.expanduser().parent
        return self._root

    @property
    def config_path(self) -> Path:
        if self._explicit_path is not None:
            return self._explicit_path.expanduser()
        for name in CONFIG_FILENAMES:
            candidate = self._root / name
            if candidate.exists():
                return candidate
        return self._root / CONFIG_FILENAMES[0]

    def load_payload(self) -> dict[str, Any]:
        path = self.config_path
        if not path.exists():
            raise MissingConfigFileError(path)
        payload, error = read_structured_safe(path)
        if error is not None:
            raise InvalidConfigFormatError(path, error)
        if payload is None:
            raise InvalidConfigFormatError(path, "file is empty")
        if not isinstance(payload, dict):
            raise InvalidConfigSchemaError(path, "must be an object")
        return payload

    def load_config(self) -> Config:
        path = self.config_path
        payload = self.load_payload()

        schema_error = self._schema_repository.first_error(payload)
        if schema_error is not None:
            raise InvalidConfigSchemaError(path, schema_error)

        config = Config.from_payload(payload, source_path=path)
        self.validate(config)
        logger.debug("Loaded config from %s (%d rules)", path, len(config.rules))
        return config

    def validate(self, config: Config) -> None:
        path = config.source_path or self.config_path

        targets = [config.default] + [rule.open_in for rule in config.rules]
        for target in targets:
            if target.browser not in config.browsers:
                raise InvalidConfigError(
                    path, f"browser definition for '{target.browser}' is missing"
                )

        for browser, template in config.browsers.items():
            if not template:
                raise InvalidConfigError(
                    path, f"browser definition for '{browser}' has empty command template"
                )
            args = template[1:]
            if not any(PROFILE_TOKEN in part for part in args):
                raise InvalidConfigError(
                    path,
                    f"browser definition for '{browser}' is missing "
                    f"{PROFILE_TOKEN} in command template",
                )
            if not any(URL_TOKEN in part for part in args):
                raise InvalidConfigError(
                    path,
                    f"browser definition for '{browser}' is missing "
                    f"{URL_TOKEN} in command template",
                )
