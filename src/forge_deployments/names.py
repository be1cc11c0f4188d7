"""Contract name normalization and well-known address lookup."""

import re

from .constants import PREDEPLOYS, ZERO_ADDRESS

_VERSION_SUFFIX = re.compile(r"\.\d+\.\d+\.\d+")


def strip_version_suffix(name: str) -> str:
    """
    Remove embedded compiler version suffixes from a contract name.

    Forge writes one artifact per compiler version when a contract is built
    with several solc versions, e.g. "Greeter.0.8.15". Every ".X.Y.Z" run is
    removed, so "Greeter.0.8.15" and "Greeter" normalize to the same name.

    Args:
        name: Contract name, possibly versioned

    Returns:
        Name with version suffixes removed
    """
    return _VERSION_SUFFIX.sub("", name)


def contract_basename(qualified_name: str) -> str:
    """
    Reduce a fully qualified name ("src/Greeter.sol:Greeter") to "Greeter".

    Unqualified names are returned as-is.
    """
    return qualified_name.rsplit(":", 1)[-1]


def well_known_address(name: str) -> str:
    """
    Look up a protocol-reserved predeploy address by exact name.

    Args:
        name: Logical contract name (case-sensitive)

    Returns:
        Predeploy address, or ZERO_ADDRESS if the name is not well known
    """
    return PREDEPLOYS.get(name, ZERO_ADDRESS)


def same_address(a: str, b: str) -> bool:
    """Compare two hex addresses ignoring checksum casing."""
    return a.lower() == b.lower()
