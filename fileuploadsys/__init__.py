"""Split byte streams into on-disk chunk files and serve a minimal upload endpoint."""

__version__ = "0.1.0"

__all__ = ["chunker", "cli", "datastore", "server"]