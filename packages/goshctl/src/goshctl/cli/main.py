from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.discovery import discover_files
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL
from ..core.logging import log_event
from ..engine import run
from .output import emit_report, render_error


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="goshctl",
        description="Run shell commands embedded in source comments and splice their output back in.",
    )
    p.add_argument("--version", action="version", version=f"goshctl {__version__}")
    p.add_argument("-w", "--write", action="store_true", default=None, help="write result back to source file instead of stdout")
    p.add_argument("--json", action="store_true", help="emit a JSON run report")
    p.add_argument("--formatter", help="formatter command that reads source on stdin (default: gofmt)")
    p.add_argument("--no-format", action="store_true", help="skip reformatting rewritten source")
    p.add_argument("--shell", help="shell used to run commands (default: sh)")
    p.add_argument("--suffix", action="append", dest="suffixes", help="source file suffix to scan in directories (repeatable)")
    p.add_argument("--config", help="path to a goshctl.yaml config file")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug log events")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    p.add_argument("paths", nargs="*", help="files or directories to process (default: .)")
    return p


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    as_json = bool(ns.json)
    ctx: RunContext | None = None
    try:
        ctx = RunContext.from_args(
            run_id=ns.run_id,
            write=ns.write,
            output_format="json" if as_json else "text",
            formatter=ns.formatter,
            no_format=ns.no_format,
            shell=ns.shell,
            suffixes=ns.suffixes,
            config=ns.config,
            verbose=ns.verbose,
            quiet=ns.quiet,
            log_json=ns.log_json,
        )
        paths = discover_files(ns.paths or ["."], ctx.suffixes, ctx.cwd)
        log_event(ctx, "debug", "cli", "start", files=len(paths), write=ctx.write, formatter=" ".join(ctx.formatter))
        report = run(paths, ctx)
        emit_report(ctx, report)
        log_event(ctx, "debug", "cli", "finish", rc=report.exit_code)
        return report.exit_code
    except ScriptError as exc:
        print(
            render_error(
                as_json=as_json,
                message=str(exc),
                code=exc.code,
                kind=exc.kind,
                run_id=(ctx.run_id if ctx else ""),
            ),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=as_json,
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                run_id=(ctx.run_id if ctx else ""),
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
