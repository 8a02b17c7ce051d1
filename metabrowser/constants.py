from typing import Final


APP_NAME: Final[str] = "metabrowser"
APP_DESCRIPTION: Final[str] = "Open URLs in specific browsers based on rules"

CONFIG_DIRNAME: Final[str] = "metabrowser"
CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "config.json",
    "config.yaml",
    "config.yml",
)
YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")

CONFIG_PATH_ENV: Final[str] = "METABROWSER_CONFIG"
LOG_LEVEL_ENV: Final[str] = "METABROWSER_LOG_LEVEL"

PROFILE_TOKEN: Final[str] = "{profile}"
URL_TOKEN: Final[str] = "{url}"
