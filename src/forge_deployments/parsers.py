"""Parsers for artifact files, Forge build output and broadcast logs."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import CREATION_TRANSACTION_TYPES
from .types import Artifact, CompiledContract, CreationTransaction


def parse_artifact(file_path: Path) -> Artifact:
    """
    Parse a deployment artifact JSON file.

    Args:
        file_path: Path to deployments/<context>/<name>.json

    Returns:
        Artifact with hardhat-deploy field names mapped to attributes

    Raises:
        KeyError: If the required address or abi fields are missing
    """
    with open(file_path) as f:
        data = json.load(f)

    return artifact_from_json(data)


def artifact_from_json(data: Dict[str, Any]) -> Artifact:
    """Build an Artifact from its decoded JSON document."""
    return Artifact(
        address=data["address"],
        abi=data["abi"],
        constructor_args=data.get("args") or [],
        bytecode=data.get("bytecode", "0x"),
        deployed_bytecode=data.get("deployedBytecode", "0x"),
        devdoc=data.get("devdoc") or {},
        userdoc=data.get("userdoc") or {},
        metadata=data.get("metadata", ""),
        storage_layout=data.get("storageLayout") or {},
        receipt=data.get("receipt") or {},
        transaction_hash=data.get("transactionHash"),
        num_deployments=data.get("numDeployments", 0),
        solc_input_hash=data.get("solcInputHash", ""),
    )


def _bytecode_object(value: Any) -> str:
    # Forge nests bytecode as {"object": "0x..", "sourceMap": ..}
    if isinstance(value, dict):
        return value.get("object", "0x")
    if value is None:
        return "0x"
    return value


def parse_compiled_contract(file_path: Path, name: str) -> CompiledContract:
    """
    Parse a Forge artifact (compiler output) JSON file.

    Documentation is taken from top-level devdoc/userdoc when Forge was asked
    for them as extra output, otherwise from metadata.output.

    Args:
        file_path: Path to <out>/<Name>.sol/<Name>.json
        name: Contract name the file was looked up by

    Returns:
        CompiledContract for the file

    Raises:
        KeyError: If the abi field is missing
    """
    with open(file_path) as f:
        data = json.load(f)

    metadata = data.get("metadata")
    metadata_output: Dict[str, Any] = {}
    if isinstance(metadata, dict):
        metadata_output = metadata.get("output", {})

    if "rawMetadata" in data:
        raw_metadata = data["rawMetadata"]
    elif isinstance(metadata, str):
        raw_metadata = metadata
    elif metadata is not None:
        raw_metadata = json.dumps(metadata, separators=(",", ":"))
    else:
        raw_metadata = ""

    return CompiledContract(
        name=name,
        abi=data["abi"],
        bytecode=_bytecode_object(data.get("bytecode")),
        deployed_bytecode=_bytecode_object(data.get("deployedBytecode")),
        devdoc=data.get("devdoc") or metadata_output.get("devdoc", {}),
        userdoc=data.get("userdoc") or metadata_output.get("userdoc", {}),
        metadata=raw_metadata,
        storage_layout=data.get("storageLayout") or {"storage": [], "types": {}},
    )


def parse_creation_transaction(tx: Dict[str, Any]) -> Optional[CreationTransaction]:
    """
    Parse a broadcast transaction record if it created a contract.

    Args:
        tx: One element of a broadcast log's "transactions" array

    Returns:
        CreationTransaction, or None for calls and records without an address
    """
    if tx.get("transactionType") not in CREATION_TRANSACTION_TYPES:
        return None
    if not tx.get("contractAddress"):
        return None

    return CreationTransaction(
        contract_address=tx["contractAddress"],
        transaction_type=tx["transactionType"],
        contract_name=tx.get("contractName") or "",
        arguments=tx.get("arguments"),
        hash=tx.get("hash", ""),
    )
