"""blogcat: content ingestion and multilingual post catalog."""

__version__ = "0.3.0"
