"""Command line tools for WineStock."""
