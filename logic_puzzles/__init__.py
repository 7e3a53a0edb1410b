"""Logic puzzle generators."""

__version__ = "0.1.0"
