import json
from pathlib import Path
from typing import Any

import yaml

from metabrowser.constants import YAML_SUFFIXES


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_structured(path: Path) -> Any:
    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(path)
    return read_json(path)


def read_structured_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_structured(path), None
    except (ValueError, yaml.YAMLError, OSError) as exc:
        return None, str(exc)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
