"""Shared primitives: result values, exit codes, config, untyped data helpers."""
