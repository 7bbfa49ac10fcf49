"""TaskBoard: a small to-do board mirrored to a demo REST endpoint."""

__version__ = "0.1.0"
