"""
Read/write access to the metadata record held by a host contract.

The accessor is the only code that touches the reserved storage slot. The
host calls `initialize` from its deployment or migration routine; anyone may
call `contract_source_metadata` to read the current record.
"""

import logging
from typing import Any, Dict, Optional

from ..errors import AlreadyInitializedError, StorageError
from ..record import MetadataRecord
from ..storage.backend import StorageBackend, metadata_slot

logger = logging.getLogger(__name__)


class MetadataAccessor:
    """
    Bridge between a host contract's storage and its MetadataRecord.

    Args:
        storage: Backend providing slot-keyed get/set of byte blobs
        allow_overwrite: Host policy; if True, `initialize` replaces an
            existing record without the caller asking for it
        slot: Storage slot to use instead of the reserved default
        default: Record built from constants baked into the host; served
            while the slot is empty and never written to storage
    """

    def __init__(
        self,
        storage: StorageBackend,
        allow_overwrite: bool = False,
        slot: Optional[bytes] = None,
        default: Optional[MetadataRecord] = None
    ):
        self.storage = storage
        self.allow_overwrite = allow_overwrite
        self.slot = slot if slot is not None else metadata_slot()
        self.default = default if default is not None else MetadataRecord.empty()

    def initialize(self, record: MetadataRecord, replace: bool = False):
        """
        Store the record in the host contract's state.

        The record is fully encoded before the single storage write, so a
        failed call leaves any previously stored record untouched.

        Args:
            record: Record to store
            replace: Explicitly request replacement of an existing record

        Raises:
            AlreadyInitializedError: If a record exists and neither `replace`
                nor the host's `allow_overwrite` policy permits overwriting
            StorageError: If the backend fails to read or write the slot
        """
        if not isinstance(record, MetadataRecord):
            raise TypeError(f"Expected MetadataRecord, got {type(record).__name__}")

        duplicates = record.duplicate_standards()
        if duplicates:
            logger.warning(
                "Metadata declares standards more than once: %s",
                ", ".join(duplicates),
            )

        existing = self._read_raw()
        if existing is not None and not (replace or self.allow_overwrite):
            raise AlreadyInitializedError(
                "Contract source metadata is already initialized; "
                "pass replace=True from the upgrade path to overwrite it"
            )

        self.storage.write(self.slot, record.to_json())

        if existing is None:
            logger.info("Initialized contract source metadata (version=%s)", record.version)
        else:
            logger.info("Replaced contract source metadata (version=%s)", record.version)

    def get_metadata(self) -> MetadataRecord:
        """
        Get the current record.

        Returns:
            The stored record, or the default record (all fields absent
            unless the host supplied one) if none was ever stored

        Raises:
            StorageError: If the slot cannot be read or its bytes do not
                decode to a valid record
        """
        data = self._read_raw()
        if data is None:
            logger.debug("No contract source metadata stored; returning default record")
            return self.default

        try:
            return MetadataRecord.from_json(data)
        except (ValueError, RecursionError) as e:
            raise StorageError(f"Stored contract source metadata is corrupted: {e}") from e

    def contract_source_metadata(self) -> Dict[str, Any]:
        """Public query: the current record's public view."""
        return self.get_metadata().to_public_view()

    def is_initialized(self) -> bool:
        return self._read_raw() is not None

    def teardown(self):
        """Clear the stored record, e.g. when a migration retires it."""
        self.storage.delete(self.slot)
        logger.info("Cleared contract source metadata")

    def _read_raw(self) -> Optional[bytes]:
        return self.storage.read(self.slot)
