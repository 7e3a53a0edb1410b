"""Command line tools for building puzzle datasets."""
