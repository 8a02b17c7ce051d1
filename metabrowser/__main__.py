import sys
from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console

from metabrowser import __version__
from metabrowser.config.models import BrowserTarget, Config
from metabrowser.config.repository import ConfigRepository
from metabrowser.constants import APP_NAME, CONFIG_PATH_ENV
from metabrowser.errors import MetabrowserError
from metabrowser.launcher import BrowserLauncher, build_command, format_command
from metabrowser.logger import setup_logging
from metabrowser.rules.resolver import resolve_match
from metabrowser.tui import MetabrowserConsoleUI
from metabrowser.utils import compact_home_paths_in_text


class DefaultOpenGroup(click.Group):
    """Group that treats an unknown first argument as a URL for ``open``."""

    default_command = "open"

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and self.get_command(ctx, args[0]) is None:
            command = self.get_command(ctx, self.default_command)
            if command is not None:
                return self.default_command, command, args
        return super().resolve_command(ctx, args)


def _app_error(exc: MetabrowserError) -> click.ClickException:
    return click.ClickException(compact_home_paths_in_text(str(exc)))


def _repository_from_obj(obj: Dict[str, Any]) -> ConfigRepository:
    return ConfigRepository.from_environment(config_path=obj.get("config_path"))


def _load_config(obj: Dict[str, Any]) -> Config:
    try:
        return _repository_from_obj(obj).load_config()
    except MetabrowserError as exc:
        raise _app_error(exc)


def _build_argv(config: Config, target: BrowserTarget, url: str) -> list[str]:
    try:
        return build_command(config.command_template(target), target, url)
    except MetabrowserError as exc:
        raise _app_error(exc)


@click.group(
    cls=DefaultOpenGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar=CONFIG_PATH_ENV,
    default=None,
    help="Path to the config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--check", "check_flag", is_flag=True, hidden=True)
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(
    ctx: click.Context, config_path: Path | None, verbose: bool, check_flag: bool
) -> None:
    """Open URLs in specific browsers based on rules."""
    setup_logging("DEBUG" if verbose else None)
    ctx.obj = {"config_path": config_path, "check": check_flag}


@cli.command("open", help="Open a URL in the browser profile selected by the rules.")
@click.argument("url")
@click.option("--check", is_flag=True, help="Print the command instead of running it.")
@click.pass_obj
def open_url(obj: Dict[str, Any], url: str, check: bool) -> None:
    ui = MetabrowserConsoleUI(Console())
    config = _load_config(obj)
    resolution = resolve_match(config.rule_set, url)
    argv = _build_argv(config, resolution.target, url)

    if check or obj.get("check"):
        ui.render_command(format_command(argv))
        return

    try:
        BrowserLauncher().launch(argv)
    except MetabrowserError as exc:
        raise _app_error(exc)


@cli.command(help="Show which rule and browser a URL would open with.")
@click.argument("url")
@click.pass_obj
def check(obj: Dict[str, Any], url: str) -> None:
    ui = MetabrowserConsoleUI(Console())
    config = _load_config(obj)
    resolution = resolve_match(config.rule_set, url)
    argv = _build_argv(config, resolution.target, url)
    ui.render_check(resolution, url=url, command=format_command(argv))


@cli.command(help="List rules in evaluation order.")
@click.option("--verbose", "show_regex", is_flag=True, help="Show compiled patterns.")
@click.pass_obj
def rules(obj: Dict[str, Any], show_regex: bool) -> None:
    ui = MetabrowserConsoleUI(Console())
    config = _load_config(obj)
    ui.render_rules(config, verbose=show_regex)


@cli.group(help="Inspect the config file.")
def config() -> None:
    pass


@config.command("path", help="Print the config file location.")
@click.pass_obj
def config_path(obj: Dict[str, Any]) -> None:
    ui = MetabrowserConsoleUI(Console())
    path = _repository_from_obj(obj).config_path
    ui.render_config_path(path, exists=path.exists())


@config.command("validate", help="Load and validate the config file.")
@click.pass_obj
def config_validate(obj: Dict[str, Any]) -> None:
    ui = MetabrowserConsoleUI(Console())
    ui.render_config_valid(_load_config(obj))


if sys.platform == "win32":
    from metabrowser.install import InstallService, WinRegistry

    @cli.command(help="Install metabrowser as a web browser.")
    @click.option(
        "--set-default",
        is_flag=True,
        help="Open the control panel to make metabrowser the default browser.",
    )
    def install(set_default: bool) -> None:
        ui = MetabrowserConsoleUI(Console())
        try:
            service = InstallService(WinRegistry())
            service.install()
        except (MetabrowserError, OSError) as exc:
            raise click.ClickException(f"Install failed: {exc}")
        ui.render_installed(set_default)
        if set_default:
            service.open_default_programs()

    @cli.command(help="Uninstall metabrowser as a web browser.")
    def uninstall() -> None:
        ui = MetabrowserConsoleUI(Console())
        try:
            removed = InstallService(WinRegistry()).uninstall()
        except (MetabrowserError, OSError) as exc:
            raise click.ClickException(f"Uninstall failed: {exc}")
        ui.render_uninstalled(removed)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
