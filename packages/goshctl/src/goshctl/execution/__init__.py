"""Command execution, edit splicing and reformatting."""

from __future__ import annotations

from .edits import Edit, apply_edits
from .executor import OrderedTasks, collect_edits, execute_request
from .formatter import reformat

__all__ = ["Edit", "OrderedTasks", "apply_edits", "collect_edits", "execute_request", "reformat"]
