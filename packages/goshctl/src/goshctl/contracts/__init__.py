"""Versioned JSON contracts for goshctl payloads."""
