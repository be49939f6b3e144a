"""
Persistence subsystem.

Components:
- codec.py: JSON encode/decode of StoreState (strict on decode)
- slots.py: key-value slot backends (SQLite, JSON file, in-memory)
"""

from .slots import (
    JsonFilePersistence,
    KeyValuePersistence,
    MemoryPersistence,
    SqlitePersistence,
)

__all__ = [
    "JsonFilePersistence",
    "KeyValuePersistence",
    "MemoryPersistence",
    "SqlitePersistence",
]
