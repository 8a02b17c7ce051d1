"""Register metabrowser as a web browser for the current Windows user."""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Final, Optional, Sequence

from metabrowser.constants import APP_DESCRIPTION, APP_NAME
from metabrowser.install.registry import IRegistry

logger = logging.getLogger(__name__)

PROG_ID: Final[str] = "metabrowserHTML"
APP_COMPANY: Final[str] = "Barret Rennie"

CLASSES_KEY: Final[str] = "SOFTWARE\\Classes"
CLASS_KEY: Final[str] = f"{CLASSES_KEY}\\{PROG_ID}"
CLIENT_KEY: Final[str] = f"Software\\Clients\\StartMenuInternet\\{PROG_ID}"
CAPABILITIES_KEY: Final[str] = f"{CLIENT_KEY}\\Capabilities"
REGISTERED_APPLICATIONS_KEY: Final[str] = "SOFTWARE\\RegisteredApplications"

URL_SCHEMES: Final[tuple[str, ...]] = ("http", "https")

DEFAULT_PROGRAMS_COMMAND: Final[tuple[str, ...]] = (
    "control.exe",
    "/name",
    "Microsoft.DefaultPrograms",
    "/page",
    "pageDefaultProgram",
)


def program_command() -> tuple[str, ...]:
    """Command that starts this program, for the shell open verb."""
    argv0 = Path(sys.argv[0])
    if argv0.name == "__main__.py":
        return (sys.executable, "-m", APP_NAME)
    if not argv0.suffix and argv0.with_suffix(".exe").exists():
        argv0 = argv0.with_suffix(".exe")
    return (str(argv0.resolve()),)


def open_command(program: Sequence[str]) -> str:
    return " ".join([f'"{program[0]}"', *program[1:], "open", '"%1"'])


class InstallService:
    def __init__(
        self, registry: IRegistry, program: Optional[Sequence[str]] = None
    ) -> None:
        self._registry = registry
        self._program = tuple(program) if program else program_command()

    def install(self) -> None:
        reg = self._registry

        reg.set_value(CLASS_KEY, "", f"{APP_NAME} HTML Document")
        reg.set_value(CLASS_KEY, "AppUserModelId", APP_NAME)

        application_key = f"{CLASS_KEY}\\Application"
        reg.set_value(application_key, "", f"{APP_NAME} HTML document")
        reg.set_value(application_key, "AppUserModelId", APP_NAME)
        reg.set_value(application_key, "ApplicationName", APP_NAME)
        reg.set_value(application_key, "ApplicationDescription", APP_DESCRIPTION)
        reg.set_value(application_key, "ApplicationCompany", APP_COMPANY)

        reg.set_value(
            f"{CLASS_KEY}\\shell\\open\\command", "", open_command(self._program)
        )
        reg.set_value(f"{CLASSES_KEY}\\.html\\OpenWithProgids", PROG_ID, "")

        reg.set_value(CAPABILITIES_KEY, "ApplicationName", APP_NAME)
        reg.set_value(CAPABILITIES_KEY, "ApplicationDescription", APP_DESCRIPTION)
        for scheme in URL_SCHEMES:
            reg.set_value(f"{CAPABILITIES_KEY}\\URLAssociations", scheme, PROG_ID)

        reg.set_value(REGISTERED_APPLICATIONS_KEY, APP_NAME, CAPABILITIES_KEY)
        logger.info("Registered %s as %s", " ".join(self._program), PROG_ID)

    def uninstall(self) -> list[str]:
        """Remove registry entries; return the ones that were actually present."""
        removed: list[str] = []
        if self._registry.delete_tree(CLASS_KEY):
            removed.append(CLASS_KEY)
        if self._registry.delete_tree(CLIENT_KEY):
            removed.append(CLIENT_KEY)
        if self._registry.delete_value(REGISTERED_APPLICATIONS_KEY, APP_NAME):
            removed.append(f"{REGISTERED_APPLICATIONS_KEY}\\{APP_NAME}")
        return removed

    def open_default_programs(self) -> subprocess.Popen:
        return subprocess.Popen(list(DEFAULT_PROGRAMS_COMMAND))
