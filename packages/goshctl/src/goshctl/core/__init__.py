"""Shared runtime primitives: errors, context, logging and process helpers."""
