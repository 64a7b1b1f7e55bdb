"""
Core utilities shared across the match tracker API.

This package hosts configuration helpers (env vars, storage paths, feature
flags) and low level primitives such as the reader/writer lock guarding the
in-memory store.
"""
