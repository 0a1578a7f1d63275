"""Building blocks for messaging servers: ring buffers and pools, a data pipeline, slot bitmaps, rate limiters, AES helpers and utilities."""

__version__ = "0.1.0"