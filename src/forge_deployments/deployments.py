"""Main API for forge-deployments library."""

import logging
from pathlib import Path
from typing import Optional

from .artifacts import ArtifactStore
from .broadcast import TransactionLog
from .compiled import CompiledOutputStore
from .config import DeployConfig
from .exceptions import ChainMismatchError, LedgerError
from .ledger import TempLedger
from .paths import get_broadcast_path, get_context_paths, get_forge_artifacts_dir
from .registry import DeploymentRegistry
from .storage import InitializedSlotReader, rpc_storage_reader
from .sync import Synchronizer
from .types import Deployment, SyncResult

_logger = logging.getLogger(__name__)


class Deployer:
    """
    A deployment run against one deployment context.

    Owns the run's registry, temp ledger and artifact store. Deploy steps
    call save() as contracts are created; sync() is called once after the
    last step.
    """

    def __init__(self, config: Optional[DeployConfig] = None):
        """
        Initialize the deployment context.

        Args:
            config: Run settings. If None, read from environment variables

        Raises:
            ChainMismatchError: If the context was created for another chain
                                and strict checking is enabled
            LedgerError: If the context directory or temp ledger cannot be created,
                or the chain id marker is corrupt
        """
        if config is None:
            config = DeployConfig.from_env()
        self.config = config

        self.deployments_dir, ledger_path, self._chain_id_path = get_context_paths(
            config.context, config.root
        )
        try:
            self.deployments_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LedgerError(
                f"Cannot create deployments directory {self.deployments_dir}: {e}"
            ) from e

        _logger.info("Connected to network with chainid %d", config.chain_id)
        _logger.info("Writing artifact deployments to %s", self.deployments_dir)
        self._check_chain_id()

        self.ledger = TempLedger(ledger_path)
        self.artifacts = ArtifactStore(self.deployments_dir)
        self.compiled = CompiledOutputStore(
            get_forge_artifacts_dir(config.forge_artifacts_dir, config.root)
        )
        self.registry = DeploymentRegistry(self.artifacts, self.ledger)

        if config.contract_addresses_path is not None:
            self.registry.load_addresses(config.contract_addresses_path)

    def _check_chain_id(self) -> None:
        chain_id = self.config.chain_id

        if not self._chain_id_path.exists():
            self._chain_id_path.write_text(str(chain_id))
            return

        text = self._chain_id_path.read_text().strip()
        try:
            recorded = int(text)
        except ValueError as e:
            raise LedgerError(
                f"Invalid chain id marker at {self._chain_id_path}: {text!r}"
            ) from e
        if recorded == chain_id:
            return

        if self.config.strict:
            raise ChainMismatchError(expected=recorded, actual=chain_id)
        _logger.warning(
            "Deployment context %s was created for chain %d, running on chain %d",
            self.config.context, recorded, chain_id,
        )

    @property
    def broadcast_path(self) -> Path:
        """Transaction log written by the deploy script for this chain."""
        return get_broadcast_path(self.config.deploy_script, self.config.chain_id, self.config.root)

    def save(self, name: str, address: str) -> Deployment:
        return self.registry.save(name, address)

    def get_address(self, name: str) -> str:
        return self.registry.get_address(name)

    def must_get_address(self, name: str) -> str:
        return self.registry.must_get_address(name)

    def has(self, name: str) -> bool:
        return self.registry.has(name)

    def get(self, name: str) -> Deployment:
        return self.registry.get(name)

    def sync(self, transaction_log: Optional[TransactionLog] = None) -> SyncResult:
        """
        Synchronize this run's deployments into artifact files.

        Call once, after the last deploy step. Every call bumps
        numDeployments for the entries it writes.

        Args:
            transaction_log: Broadcast log to sync against. If None, loaded
                             from broadcast/<script>.s.sol/<chain_id>/run-latest.json

        Returns:
            SyncResult with synced and skipped names

        Raises:
            TransactionLogNotFoundError: If no log is given and none exists on disk
        """
        if transaction_log is None:
            _logger.info("Using deployment artifact %s", self.broadcast_path)
            transaction_log = TransactionLog.from_file(self.broadcast_path)

        synchronizer = Synchronizer(self.ledger, transaction_log, self.compiled, self.artifacts)
        return synchronizer.sync()

    def load_initialized_slot(
        self, contract_name: str, is_proxy: bool = False, rpc_url: Optional[str] = None
    ) -> int:
        """
        Read a deployed contract's "_initialized" value over JSON-RPC.

        Args:
            contract_name: Contract whose storage layout defines the slot
            is_proxy: Read from "<contract_name>Proxy" instead
            rpc_url: RPC endpoint (defaults to $ETH_RPC_URL from config)

        Raises:
            ValueError: If no RPC URL is configured
        """
        if rpc_url is None:
            rpc_url = self.config.rpc_url
        if rpc_url is None:
            raise ValueError(
                "RPC URL required: set $ETH_RPC_URL environment variable or pass rpc_url"
            )

        reader = InitializedSlotReader(self.registry, self.compiled, rpc_storage_reader(rpc_url))
        return reader.load(contract_name, is_proxy)
