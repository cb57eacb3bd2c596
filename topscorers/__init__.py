"""Score ingestion and top-scorer queries over CSV and HTTP."""

__version__ = "1.0.0"
