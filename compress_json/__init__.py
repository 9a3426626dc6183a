"""Space-efficient compressed representation of JSON-like data, with round-trip decompression."""

__version__ = "0.1.0"