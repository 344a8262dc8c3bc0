from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from ...core.errors import ScriptError
from ...core.exit_codes import ERR_VALIDATION
from .schemas import schemas_root


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


_SCHEMA_FILE_RE = re.compile(r"^(goshctl\.[a-z0-9][a-z0-9._-]*\.v([1-9][0-9]*))\.schema\.json$")


def catalog_path() -> Path:
    return schemas_root() / "catalog.json"


def list_catalog_entries() -> list[CatalogEntry]:
    raw = json.loads(catalog_path().read_text(encoding="utf-8"))
    rows: list[CatalogEntry] = []
    for row in raw.get("schemas", []):
        name = str(row.get("name", "")).strip()
        file_name = str(row.get("file", "")).strip()
        if not name or not file_name:
            continue
        rows.append(CatalogEntry(name=name, version=int(row["version"]), file=file_name))
    return rows


def load_catalog() -> dict[str, CatalogEntry]:
    return {row.name: row for row in list_catalog_entries()}


def schema_path_for(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION, "validation")
    return schemas_root() / entry.file


def lint_catalog() -> list[str]:
    errors: list[str] = []
    entries = list_catalog_entries()
    names = [e.name for e in entries]
    if names != sorted(names):
        errors.append("schema catalog order must be sorted by schema name")
    if len(names) != len(set(names)):
        errors.append("schema catalog contains duplicate schema names")
    for entry in entries:
        match = _SCHEMA_FILE_RE.match(entry.file)
        if not match or match.group(1) != entry.name:
            errors.append(f"{entry.name}: schema file name mismatch {entry.file}")
        elif int(match.group(2)) != entry.version:
            errors.append(f"schema version mismatch for {entry.name}: catalog version={entry.version}")
        if not (schemas_root() / entry.file).exists():
            errors.append(f"{entry.name}: missing schema file {entry.file}")
    disk_files = {path.name for path in schemas_root().glob("*.schema.json")}
    missing = sorted(disk_files - {e.file for e in entries})
    if missing:
        errors.append(f"schema files not in catalog: {missing}")
    return sorted(errors)
