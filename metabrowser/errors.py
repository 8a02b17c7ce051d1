from pathlib import Path
from typing import Sequence


class MetabrowserError(Exception):
    """Base user-facing application error."""


class ConfigFileError(MetabrowserError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(ConfigFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing config file")


class InvalidConfigFormatError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class InvalidConfigError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config ({detail})")


class EmptyCommandTemplateError(MetabrowserError):
    def __init__(self, browser: str) -> None:
        self.browser = browser
        super().__init__(f"Browser definition for '{browser}' has empty command template")


class LaunchError(MetabrowserError):
    def __init__(self, argv: Sequence[str], detail: str) -> None:
        self.argv = list(argv)
        self.detail = detail
        program = argv[0] if argv else "<none>"
        super().__init__(f"Failed to launch {program} ({detail})")


class UnsupportedPlatformError(MetabrowserError):
    def __init__(self, feature: str, platform: str) -> None:
        self.feature = feature
        self.platform = platform
        super().__init__(f"{feature} is not supported on {platform}")
