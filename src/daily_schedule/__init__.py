"""In-memory daily task scheduler with overlap-conflict checking."""

__version__ = "0.1.0"
