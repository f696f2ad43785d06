"""DOS country detection from the host locale."""

__version__ = "0.1.0"
