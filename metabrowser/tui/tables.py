from rich.markup import escape
from rich.table import Column, Table

from metabrowser.config.models import Config, RuleSet
from metabrowser.rules.patterns import compile_url_patterns
from metabrowser.rules.resolver import Resolution
from metabrowser.tui.enums import UIStyle


class RulesTable:
    @staticmethod
    def rules_table(rule_set: RuleSet, verbose: bool = False) -> Table:
        columns = [
            Column(header="#", width=4, justify="right"),
            Column(header="Browser", overflow="ellipsis"),
            Column(header="Profile", overflow="ellipsis"),
            Column(header="Patterns", overflow="fold"),
        ]
        if verbose:
            columns.append(Column(header="Regex", overflow="fold"))
        table = Table(*columns, expand=True, header_style="bold")

        for index, rule in enumerate(rule_set.rules):
            if rule.url_patterns:
                patterns = "\n".join(escape(item) for item in rule.url_patterns)
            else:
                patterns = f"[{UIStyle.DIM.value}](none, never matches)[/{UIStyle.DIM.value}]"
            row = [str(index), escape(rule.open_in.browser), escape(rule.open_in.profile), patterns]
            if verbose:
                matcher = compile_url_patterns(rule.url_patterns)
                row.append(escape(matcher.pattern) if matcher is not None else "")
            table.add_row(*row)
        return table

    @staticmethod
    def default_block(rule_set: RuleSet):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Browser", escape(rule_set.default.browser))
        table.add_row("Profile", escape(rule_set.default.profile))
        return table


class ResolutionTable:
    @staticmethod
    def summary_block(resolution: Resolution, url: str, command: str):
        if resolution.matched:
            source = f"rule #{resolution.rule_index}"
        else:
            source = "default"
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("URL", escape(url))
        table.add_row("Matched", source)
        table.add_row("Browser", escape(resolution.target.browser))
        table.add_row("Profile", escape(resolution.target.profile))
        table.add_row("Command", escape(command))
        return table


class ConfigTable:
    @staticmethod
    def browsers_table(config: Config) -> Table:
        table = Table(
            Column(header="Browser", width=16),
            Column(header="Command template", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for name in sorted(config.browsers):
            table.add_row(escape(name), escape(" ".join(config.browsers[name])))
        return table
