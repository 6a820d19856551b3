"""
Core utilities shared across the GTTC records package.

This package hosts:
- configuration helpers (env vars, storage paths, slot names)
- small date helpers used by the aggregation and backup layers

Services and repositories should depend on these primitives instead of
reading os.environ directly.
"""
