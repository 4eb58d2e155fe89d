"""Redis command builders, error classification and command rendering."""

__version__ = "0.1.0"