from pathlib import Path

from rich.console import Console
from rich.markup import escape

from metabrowser.config.models import Config
from metabrowser.rules.resolver import Resolution
from metabrowser.tui.enums import UIStyle
from metabrowser.tui.sections import UISection
from metabrowser.tui.tables import ConfigTable, ResolutionTable, RulesTable
from metabrowser.utils import compact_home_path


class MetabrowserConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_command(self, command: str) -> None:
        self.console.print(command, markup=False, highlight=False, soft_wrap=True)

    def render_check(self, resolution: Resolution, url: str, command: str) -> None:
        style = UIStyle.GREEN.value if resolution.matched else UIStyle.YELLOW.value
        self.console.print(
            UISection.wrap(
                "check",
                ResolutionTable.summary_block(resolution, url=url, command=command),
                style=style,
            )
        )

    def render_rules(self, config: Config, verbose: bool = False) -> None:
        rule_set = config.rule_set
        if rule_set.rules:
            self.console.print(
                UISection.wrap(
                    "rules",
                    RulesTable.rules_table(rule_set, verbose=verbose),
                    style=UIStyle.CYAN.value,
                    subtitle="first match wins",
                )
            )
        else:
            self.console.print(
                UISection.note("rules", "No rules configured.", style=UIStyle.DIM.value)
            )
        self.console.print(
            UISection.wrap(
                "default",
                RulesTable.default_block(rule_set),
                style=UIStyle.BLUE.value,
            )
        )

    def render_config_valid(self, config: Config) -> None:
        source = compact_home_path(config.source_path) if config.source_path else "<memory>"
        self.console.print(ConfigTable.browsers_table(config))
        self.console.print(
            UISection.note(
                "config",
                f"Config OK: [bold]{escape(source)}[/bold]\n"
                f"{len(config.browsers)} browsers, {len(config.rules)} rules",
                style=UIStyle.GREEN.value,
            )
        )

    def render_config_path(self, path: Path, exists: bool) -> None:
        self.console.print(str(path), markup=False, highlight=False, soft_wrap=True)
        if not exists:
            self.console.print(
                UISection.note(
                    "config",
                    "File does not exist yet.",
                    style=UIStyle.YELLOW.value,
                )
            )

    def render_installed(self, set_default: bool) -> None:
        body = "metabrowser registered as a web browser."
        if set_default:
            body += "\nOpening control panel so you can set your default browser."
        self.console.print(UISection.note("install", body, style=UIStyle.GREEN.value))

    def render_uninstalled(self, removed: list[str]) -> None:
        if not removed:
            self.console.print(
                UISection.note(
                    "uninstall",
                    "Nothing to remove.",
                    style=UIStyle.DIM.value,
                )
            )
            return
        body = "\n".join([f"- {escape(item)}" for item in removed])
        self.console.print(UISection.note("uninstall", body, style=UIStyle.YELLOW.value))
