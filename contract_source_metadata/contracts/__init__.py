"""Host-contract side of the contract source metadata record."""
from .accessor import MetadataAccessor
from .interface import CONTRACT_SOURCE_METADATA_ABI, get_function_selector, prepare_query

__all__ = [
    "MetadataAccessor",
    "CONTRACT_SOURCE_METADATA_ABI",
    "get_function_selector",
    "prepare_query",
]
