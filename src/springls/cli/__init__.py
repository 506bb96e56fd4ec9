"""Command line interface for springls."""
