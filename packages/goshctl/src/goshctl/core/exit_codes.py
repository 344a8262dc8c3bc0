from __future__ import annotations

OK = 0
ERR_CONFIG = 2
ERR_DIRECTIVE = 3
ERR_EXEC = 4
ERR_FORMAT = 5
ERR_VALIDATION = 6
ERR_IO = 7
ERR_INTERNAL = 70

__all__ = [
    "ERR_CONFIG",
    "ERR_DIRECTIVE",
    "ERR_EXEC",
    "ERR_FORMAT",
    "ERR_INTERNAL",
    "ERR_IO",
    "ERR_VALIDATION",
    "OK",
]
