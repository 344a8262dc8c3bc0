from __future__ import annotations

import pytest

from goshctl.scan.commands import extract_prompt, render_result


@pytest.mark.parametrize(
    ("literal", "prompt"),
    [
        ("// % echo ok", "echo ok"),
        ("// %   ls -1 | wc -l  ", "ls -1 | wc -l"),
        ("/* % echo ok\nreally, it's fine\n  foo\n*/", "echo ok"),
        ("/* # echo ok\nok\n*/", None),
        ("/* % date */", "date"),
        ("// %echo ok", None),
        ("//% echo ok", None),
        ("// echo ok", None),
        ("// 100% sure", None),
    ],
)
def test_extract_prompt(literal: str, prompt: str | None) -> None:
    assert extract_prompt(literal) == prompt


def test_render_result_uses_result_sigil() -> None:
    assert render_result("echo ok", "ok\n") == "/* # echo ok\nok\n*/"
    assert render_result("true", "") == "/* # true\n*/"
