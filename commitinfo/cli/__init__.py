"""Command line interface for commitinfo."""
