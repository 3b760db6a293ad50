"""Building blocks for interactive line editors: history queries, highlighting, styles and edit commands."""

__version__ = "0.41.0"