"""
Exception types raised by the contract source metadata package.

Every error derives from ContractMetadataError so hosts can catch the whole
family at their deployment boundary.
"""

from typing import Optional


class ContractMetadataError(Exception):
    """Base class for all contract source metadata errors."""


class ValidationError(ContractMetadataError, ValueError):
    """
    A metadata record or standard entry failed validation.

    Attributes:
        field: Name of the offending field (e.g. 'standard', 'version')
        index: Position of the offending entry in the standards list, if any
    """

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.field = field
        self.index = index


class AlreadyInitializedError(ContractMetadataError):
    """initialize() was called on a slot that already holds a record."""


class StorageError(ContractMetadataError):
    """The persisted record could not be read, written or decoded."""


__all__ = [
    "ContractMetadataError",
    "ValidationError",
    "AlreadyInitializedError",
    "StorageError",
]
