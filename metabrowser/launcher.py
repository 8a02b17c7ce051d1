import logging
import subprocess
import sys
from typing import Sequence

from metabrowser.config.models import BrowserTarget
from metabrowser.constants import PROFILE_TOKEN, URL_TOKEN
from metabrowser.errors import EmptyCommandTemplateError, LaunchError

logger = logging.getLogger(__name__)


def build_command(
    command_template: Sequence[str], open_in: BrowserTarget, url: str
) -> list[str]:
    if not command_template:
        raise EmptyCommandTemplateError(open_in.browser)

    argv = [command_template[0]]
    for arg in command_template[1:]:
        if PROFILE_TOKEN in arg:
            arg = arg.replace(PROFILE_TOKEN, open_in.profile)
        if URL_TOKEN in arg:
            arg = arg.replace(URL_TOKEN, url)
        argv.append(arg)
    return argv


def format_command(argv: Sequence[str]) -> str:
    return " ".join(argv)


class BrowserLauncher:
    def launch(self, argv: Sequence[str]) -> subprocess.Popen:
        logger.info("Launching %s", format_command(argv))
        kwargs: dict = {"stdin": subprocess.DEVNULL}
        if sys.platform != "win32":
            kwargs["start_new_session"] = True
        try:
            return subprocess.Popen(list(argv), **kwargs)
        except OSError as exc:
            raise LaunchError(argv, str(exc)) from exc
