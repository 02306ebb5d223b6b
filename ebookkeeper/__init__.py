"""List, hash, rename and de-duplicate e-book files, with a SQLite hash index."""

__version__ = "0.1.0"
__all__ = ["sha256", "helper", "db", "cli"]