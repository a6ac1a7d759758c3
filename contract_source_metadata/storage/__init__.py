"""Slot-keyed storage backends for the metadata record."""
from .backend import InMemoryStorage, JsonFileStorage, StorageBackend, metadata_slot

__all__ = ["InMemoryStorage", "JsonFileStorage", "StorageBackend", "metadata_slot"]
