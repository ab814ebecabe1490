"""Vehicle inspection record-keeping service."""

__version__ = "1.0.0"
