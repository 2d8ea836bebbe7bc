"""Prompt gallery — ingestion, caching and filtering of a static prompt collection."""

__version__ = "0.1.0"
