"""Live game-state model for a broadcast overlay: events, player snapshots, deltas and glyph boxes in captures."""

__version__ = "0.1.0"