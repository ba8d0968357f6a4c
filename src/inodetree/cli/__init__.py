"""Command-line interface for the inodetree demonstration."""
