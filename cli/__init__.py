"""Subcommand parsers and handlers for the bmpf CLI."""
