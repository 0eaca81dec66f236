"""Core infrastructure: XDG paths, configuration, and operation locking."""
