"""Command-line interface for pyAOC."""
