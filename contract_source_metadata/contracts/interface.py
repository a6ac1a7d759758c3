"""
Description of the `contract_source_metadata` query for external tooling.

Hosts that expose an ABI (EVM-style chains) publish the query as a view
function returning the record's JSON encoding. This module provides that ABI
fragment, its function selector and a prepared-call helper.
"""

from typing import Any, Dict, List, Optional

from web3 import Web3

from ..constants import QUERY_METHOD

CONTRACT_SOURCE_METADATA_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": QUERY_METHOD,
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    },
]


def get_function_abi(function_name: str = QUERY_METHOD) -> Optional[Dict[str, Any]]:
    """
    Find a function entry in the query ABI.

    Args:
        function_name: Name of the function

    Returns:
        ABI entry, or None if not found
    """
    for item in CONTRACT_SOURCE_METADATA_ABI:
        if item.get('type') == 'function' and item.get('name') == function_name:
            return item
    return None


def get_function_selector(function_name: str = QUERY_METHOD) -> Optional[str]:
    """
    Get the function selector (4-byte signature) for a query function.

    Args:
        function_name: Name of the function

    Returns:
        Selector as a 0x-prefixed hex string, or None if not found
    """
    item = get_function_abi(function_name)
    if item is None:
        return None

    inputs = ','.join([inp['type'] for inp in item.get('inputs', [])])
    signature = f"{function_name}({inputs})"

    return Web3.to_hex(Web3.keccak(text=signature)[:4])


def prepare_query(function_name: str = QUERY_METHOD) -> Dict[str, Any]:
    """
    Prepare a read-only call to the metadata query.

    Args:
        function_name: Name of the query function

    Returns:
        Prepared call dictionary with the function ABI and selector

    Raises:
        ValueError: If the function is not part of the query ABI
    """
    function_abi = get_function_abi(function_name)
    if not function_abi:
        raise ValueError(f"Function {function_name} not found in ABI")

    return {
        "function": function_name,
        "args": (),
        "abi": function_abi,
        "data": get_function_selector(function_name),
    }
