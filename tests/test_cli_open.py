"""Tests for the open / check CLI commands."""

from pathlib import Path

from metabrowser.__main__ import cli


def test_open_check_prints_command(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["open", "--check", "https://docs.example.com/page"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "firefox -P work --new-tab https://docs.example.com/page"
    )


def test_open_check_uses_default(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["open", "https://news.ycombinator.com", "--check"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "firefox -P personal --new-tab https://news.ycombinator.com"
    )


def test_open_check_later_rule(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["open", "--check", "mail.google.com/mail/u/0"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "chrome --profile-directory=Default mail.google.com/mail/u/0"
    )


def test_url_without_subcommand_opens(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["https://github.com/example/repo", "--check"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "firefox -P work --new-tab https://github.com/example/repo"
    )


def test_check_before_url_without_subcommand(
    sample_config: Path, cli_runner, popen_calls: list[list[str]]
) -> None:
    result = cli_runner.invoke(cli, ["--check", "https://docs.example.com"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "firefox -P work --new-tab https://docs.example.com"
    )
    assert popen_calls == []


def test_check_before_open_subcommand(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["--check", "open", "a.org"])
    assert result.exit_code == 0
    assert result.output.strip() == "firefox -P personal --new-tab a.org"


def test_open_launches_browser(
    sample_config: Path, cli_runner, popen_calls: list[list[str]]
) -> None:
    result = cli_runner.invoke(cli, ["open", "https://EXAMPLE.com"])
    assert result.exit_code == 0
    assert popen_calls == [
        ["firefox", "-P", "work", "--new-tab", "https://EXAMPLE.com"]
    ]


def test_bare_url_launches_browser(
    sample_config: Path, cli_runner, popen_calls: list[list[str]]
) -> None:
    result = cli_runner.invoke(cli, ["example.com.evil.net"])
    assert result.exit_code == 0
    assert popen_calls == [
        ["firefox", "-P", "personal", "--new-tab", "example.com.evil.net"]
    ]


def test_open_launch_failure(sample_config: Path, cli_runner, monkeypatch) -> None:
    def _raise(*_args, **_kwargs):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr("metabrowser.launcher.subprocess.Popen", _raise)
    result = cli_runner.invoke(cli, ["open", "example.com"])
    assert result.exit_code != 0
    assert "Failed to launch firefox" in result.output


def test_open_missing_config(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["open", "--check", "example.com"])
    assert result.exit_code != 0
    assert "Missing config file" in result.output


def test_open_invalid_config(config_root: Path, cli_runner, write_json) -> None:
    write_json(config_root / "config.json", {"browsers": {}})
    result = cli_runner.invoke(cli, ["open", "--check", "example.com"])
    assert result.exit_code != 0
    assert "Invalid config schema" in result.output


def test_config_option_selects_file(
    tmp_path: Path, cli_runner, sample_payload: dict, write_json
) -> None:
    sample_payload["default"]["profile"] = "elsewhere"
    path = tmp_path / "custom" / "mb.json"
    write_json(path, sample_payload)

    result = cli_runner.invoke(cli, ["--config", str(path), "open", "--check", "a.org"])
    assert result.exit_code == 0
    assert result.output.strip() == "firefox -P elsewhere --new-tab a.org"


def test_config_env_selects_file(
    tmp_path: Path, cli_runner, sample_payload: dict, write_json
) -> None:
    sample_payload["default"]["profile"] = "from-env"
    path = tmp_path / "env.json"
    write_json(path, sample_payload)

    result = cli_runner.invoke(
        cli, ["open", "--check", "a.org"], env={"METABROWSER_CONFIG": str(path)}
    )
    assert result.exit_code == 0
    assert result.output.strip() == "firefox -P from-env --new-tab a.org"


def test_check_shows_matched_rule(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["check", "github.com/example"])
    assert result.exit_code == 0
    assert "rule #0" in result.output
    assert "work" in result.output


def test_check_shows_default(sample_config: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["check", "github.com/other"])
    assert result.exit_code == 0
    assert "default" in result.output
    assert "personal" in result.output


def test_no_arguments_shows_help(cli_runner) -> None:
    result = cli_runner.invoke(cli, [])
    assert "Usage" in result.output
