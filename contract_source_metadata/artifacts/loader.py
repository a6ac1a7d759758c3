"""
Loader for build-time metadata descriptors.

Deployers typically generate a small JSON file at build time (commit hash,
repository URL, declared standards) and feed it to the contract's
initialization routine. This module reads and checks such files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import ValidationError
from ..record import MetadataRecord

logger = logging.getLogger(__name__)


def load_descriptor(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load the raw JSON descriptor.

    Args:
        path: Path to the descriptor file

    Returns:
        Decoded JSON object

    Raises:
        FileNotFoundError: If the descriptor file doesn't exist
        ValueError: If the file is not a JSON object
    """
    descriptor_path = Path(path)

    if not descriptor_path.exists():
        raise FileNotFoundError(f"Metadata descriptor not found: {descriptor_path}")

    with open(descriptor_path, 'r', encoding='utf-8') as f:
        descriptor = json.load(f)

    if not isinstance(descriptor, dict):
        raise ValueError(f"Metadata descriptor {descriptor_path} must hold a JSON object")

    return descriptor


def load_metadata_file(path: Union[str, Path]) -> MetadataRecord:
    """
    Load a descriptor file into a validated record.

    Args:
        path: Path to the descriptor file

    Returns:
        MetadataRecord built from the descriptor

    Raises:
        FileNotFoundError: If the descriptor file doesn't exist
        ValidationError: If the descriptor is not a valid record
    """
    record = MetadataRecord.from_public_view(load_descriptor(path))

    duplicates = record.duplicate_standards()
    if duplicates:
        logger.warning(
            "Metadata descriptor %s declares standards more than once: %s",
            path,
            ", ".join(duplicates),
        )

    return record


def validate_metadata_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Check a descriptor file without raising.

    Args:
        path: Path to the descriptor file

    Returns:
        Dictionary with 'valid', 'errors', 'warnings' and, when the file
        loads, the normalized 'metadata' view
    """
    report: Dict[str, Any] = {
        'path': str(path),
        'valid': False,
        'errors': [],
        'warnings': [],
    }

    try:
        record = load_metadata_file(path)
    except OSError as e:
        report['errors'].append(str(e))
        return report
    except ValidationError as e:
        report['errors'].append(str(e))
        return report
    except ValueError as e:
        report['errors'].append(f"Invalid JSON: {e}")
        return report

    for standard in record.duplicate_standards():
        report['warnings'].append(f"Standard '{standard}' is declared more than once")

    if record.standards is not None and not record.is_self_declared():
        report['warnings'].append("Standards list does not declare the metadata standard itself")

    report['valid'] = True
    report['metadata'] = record.to_public_view()
    return report
