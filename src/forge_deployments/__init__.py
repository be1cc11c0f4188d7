"""
forge-deployments: deployment registry and artifact synchronizer for Foundry deploy scripts
"""

from importlib.metadata import PackageNotFoundError, version

from .artifacts import ArtifactStore
from .broadcast import TransactionLog
from .compiled import CompiledOutputStore
from .config import DeployConfig
from .deployments import Deployer
from .exceptions import (
    ArtifactNotFoundError,
    ChainMismatchError,
    CompiledOutputNotFoundError,
    DeploymentDoesNotExistError,
    DeploymentError,
    InvalidDeploymentError,
    LedgerError,
    StorageSlotNotFoundError,
    TransactionLogNotFoundError,
)
from .ledger import TempLedger
from .registry import DeploymentRegistry
from .sync import Synchronizer
from .types import Artifact, Deployment, InvalidDeploymentReason, StorageSlot, SyncResult

try:
    __version__ = version("forge-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Deployer",
    "DeployConfig",
    "DeploymentRegistry",
    "TempLedger",
    "ArtifactStore",
    "CompiledOutputStore",
    "TransactionLog",
    "Synchronizer",
    "Deployment",
    "Artifact",
    "StorageSlot",
    "SyncResult",
    "InvalidDeploymentReason",
    "DeploymentError",
    "InvalidDeploymentError",
    "DeploymentDoesNotExistError",
    "ChainMismatchError",
    "ArtifactNotFoundError",
    "CompiledOutputNotFoundError",
    "TransactionLogNotFoundError",
    "StorageSlotNotFoundError",
    "LedgerError",
]
