"""Data types and dataclasses for forge-deployments library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class InvalidDeploymentReason(Enum):
    """
    Why a deployment could not be saved.

    Value strings are the reason names reported in error messages.
    """

    EMPTY_NAME = "EmptyName"
    ALREADY_EXISTS = "AlreadyExists"


@dataclass(frozen=True)
class Deployment:
    """A named contract deployment."""

    name: str
    address: str


@dataclass
class Artifact:
    """Durable record of a deployment combined with its compiled output."""

    # Required fields
    address: str
    abi: List[Dict[str, Any]]

    # Compiled output
    constructor_args: List[Any] = field(default_factory=list)
    bytecode: str = "0x"
    deployed_bytecode: str = "0x"
    devdoc: Dict[str, Any] = field(default_factory=dict)
    userdoc: Dict[str, Any] = field(default_factory=dict)
    metadata: str = ""
    storage_layout: Dict[str, Any] = field(default_factory=dict)

    # From the transaction log
    receipt: Dict[str, Any] = field(default_factory=dict)
    transaction_hash: Optional[str] = None

    num_deployments: int = 0
    solc_input_hash: str = ""

    def to_json(self) -> Dict[str, Any]:
        """Serialize using hardhat-deploy field names."""
        return {
            "address": self.address,
            "abi": self.abi,
            "args": self.constructor_args,
            "bytecode": self.bytecode,
            "deployedBytecode": self.deployed_bytecode,
            "devdoc": self.devdoc,
            "metadata": self.metadata,
            "numDeployments": self.num_deployments,
            "receipt": self.receipt,
            "solcInputHash": self.solc_input_hash,
            "storageLayout": self.storage_layout,
            "transactionHash": self.transaction_hash,
            "userdoc": self.userdoc,
        }


@dataclass(frozen=True)
class StorageSlot:
    """A single entry of a solc storage layout."""

    id: int  # AST id
    contract: str  # e.g., "src/Greeter.sol:Greeter"
    label: str  # Variable name
    offset: int  # Byte offset within the slot
    slot: str  # Slot index as a decimal string
    type: str  # Type tag, e.g., "t_uint8"


@dataclass
class CompiledContract:
    """Compiler output for one contract."""

    name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    deployed_bytecode: str
    devdoc: Dict[str, Any] = field(default_factory=dict)
    userdoc: Dict[str, Any] = field(default_factory=dict)
    metadata: str = ""
    storage_layout: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreationTransaction:
    """A transaction log entry that instantiated a contract."""

    contract_address: str
    transaction_type: str  # "CREATE" or "CREATE2"
    contract_name: str
    arguments: Optional[List[Any]]  # None when logged as an explicit null
    hash: str


@dataclass
class SyncResult:
    """Outcome of a synchronization pass, in ledger order."""

    synced: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)  # No creation transaction
    failed: List[str] = field(default_factory=list)  # No compiled output

    @property
    def processed(self) -> int:
        return len(self.synced)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped) + len(self.failed)
