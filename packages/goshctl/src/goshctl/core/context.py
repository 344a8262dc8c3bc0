from __future__ import annotations

import shlex
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .config import ConfigFile, load_config
from .env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]

DEFAULT_FORMATTER: tuple[str, ...] = ("gofmt",)
DEFAULT_SHELL = "sh"
DEFAULT_SUFFIXES: tuple[str, ...] = (".go",)


@dataclass(frozen=True)
class RunContext:
    run_id: str
    cwd: Path
    write: bool
    output_format: OutputFormat
    formatter: tuple[str, ...]
    shell: str
    suffixes: tuple[str, ...]
    verbose: bool
    quiet: bool
    log_json: bool
    config_path: Path | None = None

    @property
    def formatting_enabled(self) -> bool:
        return bool(self.formatter)

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        write: bool | None = None,
        output_format: OutputFormat = "text",
        formatter: str | None = None,
        no_format: bool = False,
        shell: str | None = None,
        suffixes: list[str] | None = None,
        config: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        cwd: Path | None = None,
    ) -> "RunContext":
        root = (cwd or Path.cwd()).resolve()
        cfg = load_config(config, root)
        default_run = f"gosh-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or getenv("GOSHCTL_RUN_ID") or default_run,
            cwd=root,
            write=bool(write) if write is not None else cfg.write,
            output_format=output_format,
            formatter=_resolve_formatter(formatter, no_format, cfg),
            shell=shell or getenv("GOSHCTL_SHELL") or cfg.shell or DEFAULT_SHELL,
            suffixes=_normalize_suffixes(suffixes) or cfg.suffixes or DEFAULT_SUFFIXES,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or getenv_flag("GOSHCTL_LOG_JSON"),
            config_path=cfg.path,
        )


def _resolve_formatter(cli_value: str | None, no_format: bool, cfg: ConfigFile) -> tuple[str, ...]:
    if no_format:
        return ()
    if cli_value is not None:
        return tuple(shlex.split(cli_value))
    env_value = getenv("GOSHCTL_FORMATTER")
    if env_value is not None:
        return tuple(shlex.split(env_value))
    if cfg.formatter is not None:
        return cfg.formatter
    return DEFAULT_FORMATTER


def _normalize_suffixes(raw: list[str] | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(s if s.startswith(".") else f".{s}" for s in raw)
