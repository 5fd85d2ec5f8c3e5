"""Shell history helpers: formatting, statistics, filtering, key bindings and search input handling."""

__version__ = "0.1.0"