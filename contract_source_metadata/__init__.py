"""
Contract Source Metadata

Provides the metadata record a deployed smart contract exposes through its
`contract_source_metadata` query, the accessor that stores it in the host
contract's state, and tooling to check declared standards.
"""

__version__ = "1.0.0"
__author__ = "StartEngine"

from .errors import (
    ContractMetadataError,
    ValidationError,
    AlreadyInitializedError,
    StorageError
)

from .record import MetadataRecord, StandardEntry
from .contracts.accessor import MetadataAccessor
from .storage.backend import InMemoryStorage, JsonFileStorage, StorageBackend
from .artifacts.loader import load_metadata_file, validate_metadata_file
from .standards import missing_capabilities

__all__ = [
    'ContractMetadataError',
    'ValidationError',
    'AlreadyInitializedError',
    'StorageError',
    'MetadataRecord',
    'StandardEntry',
    'MetadataAccessor',
    'InMemoryStorage',
    'JsonFileStorage',
    'StorageBackend',
    'load_metadata_file',
    'validate_metadata_file',
    'missing_capabilities',
]
