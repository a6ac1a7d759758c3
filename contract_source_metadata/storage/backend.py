"""
Storage backends for the metadata record.

The host contract's persistence engine is modeled as a flat key-value store
of raw bytes keyed by 32-byte slots. Only the accessor touches the slot that
holds the record.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from web3 import Web3

from ..constants import METADATA_SLOT_NAME
from ..errors import StorageError

logger = logging.getLogger(__name__)


def metadata_slot(name: str = METADATA_SLOT_NAME) -> bytes:
    """
    Derive the fixed storage slot for a reserved name.

    Args:
        name: Reserved slot name

    Returns:
        32-byte keccak-256 digest of the name
    """
    return bytes(Web3.keccak(text=name))


class StorageBackend(ABC):
    """Minimal get/set/delete interface over slot-keyed byte blobs."""

    @abstractmethod
    def read(self, slot: bytes) -> Optional[bytes]:
        """Return the blob stored at `slot`, or None if the slot is empty."""

    @abstractmethod
    def write(self, slot: bytes, data: bytes):
        """Store `data` at `slot`, replacing any previous value."""

    @abstractmethod
    def delete(self, slot: bytes):
        """Clear `slot`. Clearing an empty slot is a no-op."""


class InMemoryStorage(StorageBackend):
    """Process-local storage, used by tests and simulated hosts."""

    def __init__(self):
        self._slots: Dict[bytes, bytes] = {}

    def read(self, slot: bytes) -> Optional[bytes]:
        return self._slots.get(slot)

    def write(self, slot: bytes, data: bytes):
        self._slots[slot] = bytes(data)

    def delete(self, slot: bytes):
        self._slots.pop(slot, None)

    def __len__(self) -> int:
        return len(self._slots)


class JsonFileStorage(StorageBackend):
    """
    Storage persisted to a JSON file.

    Slots are written as 0x-prefixed hex keys and blobs as 0x-prefixed hex
    values. The file is rewritten in full on every change.

    Args:
        path: Location of the JSON file; created on first write
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r') as f:
                slots = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read storage file {self.path}: {e}") from e

        if not isinstance(slots, dict):
            raise StorageError(f"Storage file {self.path} does not hold a slot map")
        return slots

    def _save(self, slots: Dict[str, str]):
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w') as f:
                json.dump(slots, f, indent=2, sort_keys=True)
            tmp_path.replace(self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Cannot write storage file {self.path}: {e}") from e

    def read(self, slot: bytes) -> Optional[bytes]:
        value = self._load().get(Web3.to_hex(slot))
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Corrupted value in storage file {self.path}")

        try:
            return bytes(Web3.to_bytes(hexstr=value))
        except (TypeError, ValueError) as e:
            raise StorageError(f"Corrupted value in storage file {self.path}: {e}") from e

    def write(self, slot: bytes, data: bytes):
        slots = self._load()
        slots[Web3.to_hex(slot)] = Web3.to_hex(data)
        self._save(slots)
        logger.debug("Wrote %d bytes to %s", len(data), self.path)

    def delete(self, slot: bytes):
        slots = self._load()
        if slots.pop(Web3.to_hex(slot), None) is not None:
            self._save(slots)
