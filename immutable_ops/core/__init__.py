"""Core Layer — pure operations, no IO, no config, no logging setup.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - All functions are pure and deterministic; none mutates an argument
"""
