"""Loading utilities for build-time metadata descriptors."""
from .loader import load_descriptor, load_metadata_file, validate_metadata_file

__all__ = ["load_descriptor", "load_metadata_file", "validate_metadata_file"]
