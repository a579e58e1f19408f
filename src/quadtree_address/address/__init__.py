"""Address text validation, codecs and neighbor computation."""
