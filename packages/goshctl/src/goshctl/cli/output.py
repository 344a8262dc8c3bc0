"""CLI payload output helpers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..contracts.schema.validate import validate
from ..core.serialize import dumps_json

if TYPE_CHECKING:
    from ..core.context import RunContext
    from ..engine import RunReport

RUN_SCHEMA = "goshctl.run.v1"
ERROR_SCHEMA = "goshctl.error.v1"


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if as_json:
        payload = {
            "schema_name": ERROR_SCHEMA,
            "schema_version": 1,
            "tool": "goshctl",
            "status": "error",
            "run_id": run_id,
            "errors": [{"code": code, "kind": kind, "message": message}],
        }
        validate(ERROR_SCHEMA, payload)
        return dumps_json(payload, pretty=False)
    return message


def render_preview(report: RunReport) -> str:
    chunks: list[str] = []
    for outcome in report.files:
        if outcome.failed or outcome.output is None:
            continue
        chunks.append(f"-- {outcome.display} --\n")
        chunks.append(outcome.output.decode("utf-8", errors="surrogateescape"))
    return "".join(chunks)


def build_run_payload(ctx: RunContext, report: RunReport) -> dict[str, object]:
    files: list[dict[str, object]] = []
    for outcome in report.files:
        row: dict[str, object] = {"path": outcome.display, "status": outcome.status, "edits": outcome.edits}
        if outcome.error is not None:
            row["error"] = {"code": outcome.error.code, "kind": outcome.error.kind, "message": str(outcome.error)}
        elif outcome.output is not None and not ctx.write:
            row["output"] = outcome.output.decode("utf-8", errors="replace")
        files.append(row)
    payload: dict[str, object] = {
        "schema_name": RUN_SCHEMA,
        "schema_version": 1,
        "tool": "goshctl",
        "status": "error" if report.first_error is not None else "ok",
        "run_id": ctx.run_id,
        "write": ctx.write,
        "files": files,
    }
    validate(RUN_SCHEMA, payload)
    return payload


def emit_report(ctx: RunContext, report: RunReport) -> None:
    if ctx.output_format == "json":
        print(dumps_json(build_run_payload(ctx, report), pretty=False))
        return
    if not ctx.write:
        sys.stdout.write(render_preview(report))
    for outcome in report.files:
        if outcome.error is not None:
            print(render_error(as_json=False, message=str(outcome.error), code=outcome.error.code), file=sys.stderr)
