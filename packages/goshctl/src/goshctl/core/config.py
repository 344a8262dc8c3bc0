"""Optional YAML configuration file support."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from ..contracts.schema.validate import validate
from .errors import ScriptError
from .exit_codes import ERR_CONFIG

CONFIG_SCHEMA = "goshctl.config.v1"
CONFIG_CANDIDATES = ("goshctl.yaml", ".goshctl.yaml")


@dataclass(frozen=True)
class ConfigFile:
    path: Path | None = None
    formatter: tuple[str, ...] | None = None
    shell: str | None = None
    suffixes: tuple[str, ...] = ()
    write: bool = False


def discover_config(root: Path) -> Path | None:
    for name in CONFIG_CANDIDATES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(explicit: str | None, root: Path) -> ConfigFile:
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = root / path
        if not path.is_file():
            raise ScriptError(f"config file not found: {path}", ERR_CONFIG, "config")
    else:
        path = discover_config(root)
        if path is None:
            return ConfigFile()
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ScriptError(f"{path}: invalid yaml: {exc}", ERR_CONFIG, "config") from exc
    validate(CONFIG_SCHEMA, payload, code=ERR_CONFIG)
    formatter = payload.get("formatter")
    return ConfigFile(
        path=path,
        formatter=tuple(str(part) for part in formatter) if formatter is not None else None,
        shell=payload.get("shell"),
        suffixes=tuple(
            s if s.startswith(".") else f".{s}" for s in (str(item) for item in payload.get("suffixes", []))
        ),
        write=bool(payload.get("write", False)),
    )
