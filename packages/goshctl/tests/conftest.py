from __future__ import annotations

import socket
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from goshctl.core.context import RunContext

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[3]
_HYPOTHESIS_DB = _ROOT / "artifacts/goshctl/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("goshctl", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("goshctl")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture(autouse=True)
def clean_goshctl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GOSHCTL_RUN_ID", "GOSHCTL_FORMATTER", "GOSHCTL_SHELL", "GOSHCTL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_ctx(tmp_path: Path) -> Callable[..., RunContext]:
    def _make(**overrides: object) -> RunContext:
        fields: dict[str, object] = {
            "run_id": "pytest-run",
            "cwd": tmp_path,
            "write": False,
            "output_format": "text",
            "formatter": (),
            "shell": "sh",
            "suffixes": (".go",),
            "verbose": False,
            "quiet": True,
            "log_json": False,
        }
        fields.update(overrides)
        return RunContext(**fields)  # type: ignore[arg-type]

    return _make
