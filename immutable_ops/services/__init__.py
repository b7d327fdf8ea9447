"""Services Layer — cheatsheet verification and rendering.

Invariants:
    - Services call core/ operations; they never reimplement them
    - Logging happens here, not in core/ (core only emits DEBUG records)
"""
