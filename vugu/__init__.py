"""Data hashing, DOM event support, HTML atoms and charset detection for virtual-DOM web UIs."""

__version__ = "0.1.0"