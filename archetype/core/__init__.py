"""Snapshot engine internals: paths, diffing, canonical rendering."""
