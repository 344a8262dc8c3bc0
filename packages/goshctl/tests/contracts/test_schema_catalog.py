from __future__ import annotations

import pytest

from goshctl.contracts.schema.catalog import lint_catalog, load_catalog
from goshctl.contracts.schema.validate import validate
from goshctl.core.errors import ScriptError
from goshctl.core.exit_codes import ERR_VALIDATION


def test_catalog_is_consistent() -> None:
    assert lint_catalog() == []
    assert set(load_catalog()) == {"goshctl.config.v1", "goshctl.error.v1", "goshctl.run.v1"}


def test_validation_failure_reports_location() -> None:
    with pytest.raises(ScriptError) as info:
        validate("goshctl.config.v1", {"suffixes": [1]})
    assert info.value.code == ERR_VALIDATION
    assert "suffixes/0" in str(info.value)


def test_unknown_schema_name() -> None:
    with pytest.raises(ScriptError):
        validate("goshctl.nope.v1", {})
