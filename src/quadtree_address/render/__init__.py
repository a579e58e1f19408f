"""Rendering of address tiles for map display."""
