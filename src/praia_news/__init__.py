"""Praia Grande news curation and publishing pipeline."""

__version__ = "0.1.0"
