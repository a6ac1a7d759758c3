"""
Capability checks linking declared standards to implemented methods.

A record's `standards` list is a claim. For the well-known standards below,
the claim can be checked against the method names a contract actually
exposes. The check is advisory: it reports gaps and never rejects a record.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from .constants import METADATA_STANDARD, QUERY_METHOD
from .record import MetadataRecord

logger = logging.getLogger(__name__)

# Standard identifier -> methods a conforming contract must expose
KNOWN_STANDARDS: Dict[str, Tuple[str, ...]] = {
    METADATA_STANDARD: (QUERY_METHOD,),
    # Non-fungible tokens
    "nep171": ("nft_transfer", "nft_transfer_call", "nft_token"),
    "nep177": ("nft_metadata",),
    "nep178": ("nft_approve", "nft_revoke", "nft_revoke_all", "nft_is_approved"),
    "nep181": ("nft_total_supply", "nft_tokens", "nft_supply_for_owner", "nft_tokens_for_owner"),
    "nep199": ("nft_payout", "nft_transfer_payout"),
    # Fungible tokens
    "nep141": ("ft_transfer", "ft_transfer_call", "ft_total_supply", "ft_balance_of"),
    "nep148": ("ft_metadata",),
    # Storage management
    "nep145": (
        "storage_deposit",
        "storage_withdraw",
        "storage_unregister",
        "storage_balance_bounds",
        "storage_balance_of",
    ),
}


def required_methods(standard: str) -> Tuple[str, ...]:
    """
    Get the methods a standard requires.

    Args:
        standard: Standard identifier (e.g. 'nep171')

    Returns:
        Required method names; empty for unknown standards
    """
    return KNOWN_STANDARDS.get(standard, ())


def missing_capabilities(
    record: MetadataRecord,
    methods: Iterable[str]
) -> Dict[str, List[str]]:
    """
    Compare a record's declared standards with the methods a contract exposes.

    Args:
        record: Metadata record to check
        methods: Method names the contract implements

    Returns:
        Mapping of declared standard to the required methods that are not
        implemented. Standards that are fully covered, or unknown, are left out.
    """
    implemented = set(methods)
    missing: Dict[str, List[str]] = {}

    for entry in record.standards or ():
        if entry.standard not in KNOWN_STANDARDS:
            logger.debug("No capability table for standard %s", entry.standard)
            continue

        gaps = [m for m in required_methods(entry.standard) if m not in implemented]
        if gaps and entry.standard not in missing:
            missing[entry.standard] = gaps

    return missing


def undeclared_standards(record: MetadataRecord, methods: Iterable[str]) -> List[str]:
    """
    List well-known standards a contract fully implements but does not declare.

    Args:
        record: Metadata record to check
        methods: Method names the contract implements

    Returns:
        Standard identifiers, in table order
    """
    implemented = set(methods)
    return [
        standard
        for standard, required in KNOWN_STANDARDS.items()
        if set(required) <= implemented and not record.declares(standard)
    ]
