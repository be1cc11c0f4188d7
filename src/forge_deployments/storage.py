"""Initializer guard inspection through contract storage."""

from typing import Any, Callable, Dict

import requests

from .compiled import CompiledOutputStore
from .constants import INITIALIZED_LABEL, INITIALIZED_TYPES
from .exceptions import StorageSlotNotFoundError
from .registry import DeploymentRegistry
from .types import StorageSlot

# (address, slot) -> 32-byte storage word
StorageReader = Callable[[str, int], int]


def find_initialized_slot(storage_layout: Dict[str, Any]) -> StorageSlot:
    """
    Find the initializer guard in a solc storage layout.

    Args:
        storage_layout: Layout with a "storage" list, as emitted by solc

    Returns:
        StorageSlot of the first single-byte "_initialized" variable

    Raises:
        StorageSlotNotFoundError: If the layout has no such variable
    """
    for entry in storage_layout.get("storage", []):
        if entry.get("label") == INITIALIZED_LABEL and entry.get("type") in INITIALIZED_TYPES:
            return StorageSlot(
                id=entry.get("astId", 0),
                contract=entry.get("contract", ""),
                label=entry["label"],
                offset=int(entry.get("offset", 0)),
                slot=str(entry["slot"]),
                type=entry["type"],
            )

    raise StorageSlotNotFoundError(
        f"No {INITIALIZED_LABEL} slot of type {' or '.join(INITIALIZED_TYPES)} in storage layout"
    )


def extract_byte(word: int, offset: int) -> int:
    """Byte at a storage offset, counted from the low-order end of the word."""
    return (word >> (offset * 8)) & 0xFF


def read_storage_word(rpc_url: str, address: str, slot: int) -> int:
    """
    Read a raw storage word via eth_getStorageAt.

    Args:
        rpc_url: RPC endpoint URL
        address: Contract address
        slot: Storage slot index

    Returns:
        Storage word as an integer

    Raises:
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_getStorageAt",
                "params": [address, hex(slot), "latest"],
                "id": 1,
            },
            timeout=30,
        )

        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"], 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def rpc_storage_reader(rpc_url: str) -> StorageReader:
    """Bind read_storage_word to an endpoint."""

    def reader(address: str, slot: int) -> int:
        return read_storage_word(rpc_url, address, slot)

    return reader


class InitializedSlotReader:
    """Reads the initializer guard byte of deployed contracts."""

    def __init__(
        self,
        registry: DeploymentRegistry,
        compiled: CompiledOutputStore,
        storage_reader: StorageReader,
    ):
        self._registry = registry
        self._compiled = compiled
        self._read = storage_reader

    def slot(self, contract_name: str) -> StorageSlot:
        return find_initialized_slot(self._compiled.get(contract_name).storage_layout)

    def load(self, contract_name: str, is_proxy: bool = False) -> int:
        """
        Read the "_initialized" value of a deployed contract.

        The slot comes from the implementation's layout. For proxied
        contracts the value is read from the "<contract_name>Proxy"
        deployment, where the proxy keeps the implementation's storage.

        Args:
            contract_name: Contract whose storage layout defines the slot
            is_proxy: Read from the contract's proxy instead of the contract

        Returns:
            The initialized value (0-255)

        Raises:
            DeploymentDoesNotExistError: If the target deployment does not resolve
            StorageSlotNotFoundError: If the contract has no initializer guard
        """
        slot = self.slot(contract_name)
        target = f"{contract_name}Proxy" if is_proxy else contract_name
        address = self._registry.must_get_address(target)

        word = self._read(address, int(slot.slot))
        return extract_byte(word, slot.offset)
