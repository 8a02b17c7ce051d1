import sys
import json
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


SAMPLE_CONFIG: dict[str, Any] = {
    "browsers": {
        "firefox": ["firefox", "-P", "{profile}", "--new-tab", "{url}"],
        "chrome": ["chrome", "--profile-directory={profile}", "{url}"],
    },
    "default": {"browser": "firefox", "profile": "personal"},
    "rules": [
        {
            "open_in": {"browser": "firefox", "profile": "work"},
            "url_patterns": ["*.example.com", "github.com/example"],
        },
        {
            "open_in": {"browser": "chrome", "profile": "Profile 2"},
            "url_patterns": [],
        },
        {
            "open_in": {"browser": "chrome", "profile": "Default"},
            "url_patterns": ["mail.google.com", "*.example.com"],
        },
    ],
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.delenv("METABROWSER_CONFIG", raising=False)
    monkeypatch.delenv("METABROWSER_LOG_LEVEL", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "metabrowser"


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return json.loads(json.dumps(SAMPLE_CONFIG))


@pytest.fixture
def sample_config(config_root: Path, sample_payload: dict[str, Any], write_json) -> Path:
    path = config_root / "config.json"
    write_json(path, sample_payload)
    return path


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()


@pytest.fixture
def popen_calls(monkeypatch) -> list[list[str]]:
    calls: list[list[str]] = []

    class FakePopen:
        def __init__(self, argv: list[str], **kwargs: Any) -> None:
            calls.append(list(argv))
            self.args = argv
            self.kwargs = kwargs

    monkeypatch.setattr("metabrowser.launcher.subprocess.Popen", FakePopen)
    return calls
