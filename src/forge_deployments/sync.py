"""Reconcile the temp ledger into deployment artifacts."""

import logging

from .artifacts import ArtifactStore
from .broadcast import TransactionLog
from .compiled import CompiledOutputStore
from .exceptions import CompiledOutputNotFoundError
from .ledger import TempLedger
from .types import Artifact, SyncResult

_logger = logging.getLogger(__name__)


class Synchronizer:
    """
    Turns the deployments recorded in a run into versioned artifact files.

    For every ledger entry, the creation transaction is looked up in the
    broadcast log by contract address and combined with the compiler output
    for the created contract. Entries the log knows nothing about (addresses
    seeded from an address list, for example) are skipped.

    sync() is one-shot: each call increments numDeployments for every entry
    it writes, so running it again on the same ledger versions the same
    deployments twice.
    """

    def __init__(
        self,
        ledger: TempLedger,
        transaction_log: TransactionLog,
        compiled: CompiledOutputStore,
        artifacts: ArtifactStore,
    ):
        self.ledger = ledger
        self.transaction_log = transaction_log
        self.compiled = compiled
        self.artifacts = artifacts

    def sync(self) -> SyncResult:
        """
        Write an artifact for every ledger entry, then clear the ledger.

        Returns:
            SyncResult listing synced and skipped deployment names
        """
        result = SyncResult()
        deployments = self.ledger.read_all()
        _logger.info("Syncing %d deployments", len(deployments))

        for deployment in deployments:
            creation = self.transaction_log.find_creation(deployment.address)
            if creation is None:
                _logger.warning(
                    "Deployment not found for %s: %s", deployment.name, deployment.address
                )
                result.skipped.append(deployment.name)
                continue

            _logger.info(
                "Syncing deployment %s: contract %s", deployment.name, creation.contract_name
            )
            try:
                compiled = self.compiled.get(creation.contract_name)
            except CompiledOutputNotFoundError as e:
                _logger.error("Cannot sync %s: %s", deployment.name, e)
                result.failed.append(deployment.name)
                continue

            artifact = Artifact(
                address=deployment.address,
                abi=compiled.abi,
                constructor_args=creation.arguments or [],
                bytecode=compiled.bytecode,
                deployed_bytecode=compiled.deployed_bytecode,
                devdoc=compiled.devdoc,
                userdoc=compiled.userdoc,
                metadata=compiled.metadata,
                storage_layout=compiled.storage_layout,
                receipt=self.transaction_log.receipt_for(deployment.address),
                transaction_hash=creation.hash,
            )
            written = self.artifacts.write(deployment.name, artifact)
            _logger.debug(
                "%s is at deployment %d", deployment.name, written.num_deployments
            )
            result.synced.append(deployment.name)

        self.ledger.clear()
        _logger.info(
            "Synced %d deployments, skipped %d", result.processed, result.skipped_count
        )
        return result
