"""User-facing callers of the editing engine."""
